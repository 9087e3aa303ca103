from pathlib import Path
from typing import Optional, Union
from PIL import Image
import numpy as np
import numpy.typing as npt

from ..constants import DEFAULT_DITHER_SIZE, DEFAULT_OUTPUT_EXTENSION, IMAGE_EXTENSIONS, OUTPUT_SUFFIX
from ..processing.dither import apply_dithering_algorithm

def load_grayscale(path: Union[str, Path]) -> npt.NDArray[np.uint8]:
    """
    Load an image file as a 2D 8-bit grayscale array.
    """
    with Image.open(path) as img:
        return np.array(img.convert('L'), dtype=np.uint8)


def bayer_output_path(input_path: Union[str, Path], size: int) -> Path:
    """
    Pick a free output path next to the input, tagged with the matrix size.

    `photo.jpg` dithered with a 16x16 matrix becomes `photo-bayer16.jpg`,
    then `photo-bayer16-1.jpg` and so on if that name is taken. Inputs
    with an unknown extension get a PNG name.
    """
    path = Path(input_path)
    extension = path.suffix if path.suffix.lower() in IMAGE_EXTENSIONS else DEFAULT_OUTPUT_EXTENSION
    base = f"{path.stem}{OUTPUT_SUFFIX}{size}"

    candidate = path.with_name(f"{base}{extension}")
    counter = 1
    while candidate.exists():
        candidate = path.with_name(f"{base}-{counter}{extension}")
        counter += 1
    return candidate


def dither_image(
    input_path: Union[str, Path],
    size: int = DEFAULT_DITHER_SIZE,
    output_path: Optional[Union[str, Path]] = None
) -> Path:
    """
    Apply Bayer ordered dithering to an image file.

    Args:
        input_path: Path to input image
        size: Side of the square Bayer matrix (power of two). Default: 16.
        output_path: Optional output path. If None, see `bayer_output_path`.

    Returns:
        Path to the saved output image
    """
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    if output_path is None:
        output_path = bayer_output_path(input_path, size)
    else:
        output_path = Path(output_path)

    if output_path.suffix.lower() not in IMAGE_EXTENSIONS:
        raise ValueError(f"Unsupported output format: {output_path.suffix or '(none)'}")

    result = apply_dithering_algorithm(load_grayscale(input_path), size)
    Image.fromarray(result).save(output_path)
    return output_path
