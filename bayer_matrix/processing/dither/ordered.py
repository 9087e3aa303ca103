import numpy as np
import numpy.typing as npt
from numba import jit, prange

from ...constants import PIXEL_LEVELS, WHITE, BLACK
from ...core.matrix import value_span

@jit(nopython=True, parallel=True)
def _ordered_dither_jit(
    img: npt.NDArray[np.integer],
    thresholds: npt.NDArray[np.integer],
    out: npt.NDArray[np.uint8]
) -> None:
    """
    Threshold every pixel against the tiled matrix.

    Rows are distributed across threads; each pixel is independent so the
    order in which they are visited does not matter.
    """
    height, width = img.shape
    mh, mw = thresholds.shape

    for y in prange(height):
        row = thresholds[y % mh]
        for x in range(width):
            if img[y, x] > row[x % mw]:
                out[y, x] = WHITE
            else:
                out[y, x] = BLACK


def scale_matrix_to_levels(
    matrix: npt.NDArray[np.integer],
    levels: int = PIXEL_LEVELS
) -> npt.NDArray[np.int64]:
    """
    Rescale raw Bayer values into the 0..levels-1 pixel range.

    Values are scaled by the span of the matrix, so rectangular matrices
    cut from a larger square stay in range. A 16x16 matrix keeps its
    values unchanged at 256 levels.
    """
    span = value_span(matrix.shape[0], matrix.shape[1])
    return (matrix.astype(np.int64) * levels) // span


def ordered_dither(
    image_array: npt.NDArray[np.integer],
    matrix: npt.NDArray[np.integer]
) -> npt.NDArray[np.uint8]:
    """
    Apply ordered dithering using a Bayer threshold matrix.

    The matrix is tiled over the image by wrapping row and column indices.
    A pixel becomes white when it is strictly brighter than its threshold.

    Args:
        image_array: Grayscale numpy array (2D).
        matrix: Threshold matrix already scaled to the pixel range.

    Returns:
        Binary dithered array (uint8) where 0 is black and 255 is white.
    """
    if image_array.ndim != 2:
        raise ValueError(f"Expected a 2D grayscale array, got shape {image_array.shape}")
    if matrix.ndim != 2 or matrix.size == 0:
        raise ValueError(f"Expected a non-empty 2D matrix, got shape {matrix.shape}")

    out = np.empty(image_array.shape, dtype=np.uint8)
    _ordered_dither_jit(
        np.ascontiguousarray(image_array),
        np.ascontiguousarray(matrix, dtype=np.int64),
        out
    )
    return out
