import numpy as np
import numpy.typing as npt

from ...core.matrix import matrix
from .ordered import ordered_dither, scale_matrix_to_levels

def apply_dithering_algorithm(
    image_array: npt.NDArray[np.integer],
    size: int
) -> npt.NDArray[np.uint8]:
    """
    Build a size x size Bayer matrix and dither the image with it.
    """
    if size <= 0 or size & (size - 1) != 0:
        raise ValueError(f"Matrix size must be a positive power of two, got {size}")

    bayer = matrix(size, size, dtype=np.uint64)
    return ordered_dither(image_array, scale_matrix_to_levels(bayer))


__all__ = ["apply_dithering_algorithm", "ordered_dither", "scale_matrix_to_levels"]
