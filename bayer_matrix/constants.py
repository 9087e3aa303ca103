from typing import Literal, Tuple
import numpy as np

# Element types a matrix can be generated into
ElementType = Literal['uint8', 'uint16', 'uint32', 'uint64']
ELEMENT_TYPES: Tuple[str, ...] = ('uint8', 'uint16', 'uint32', 'uint64')
DEFAULT_DTYPE = np.uint8

# Widest output bit the int64 accumulator can hold without touching the sign bit
MAX_OUTPUT_BIT: int = 62

# Matrix side used by the dithering example (values 0..255 fit a uint8 pixel)
DEFAULT_DITHER_SIZE: int = 16

# Pixel range of 8-bit grayscale images
PIXEL_LEVELS: int = 256
WHITE: int = 255
BLACK: int = 0

OUTPUT_SUFFIX: str = '-bayer'
DEFAULT_OUTPUT_EXTENSION: str = '.png'
IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.webp', '.bmp', '.gif', '.tif', '.tiff'}

ZERO_SIZE_MESSAGE = "Cannot generate a zero-size Bayer dithering matrix."
TOO_SMALL_MESSAGE = (
    "It seems that the type you're using for Bayer matrix elements "
    "is too small to hold their values."
)
