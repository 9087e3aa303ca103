from typing import Union
import numpy as np
import numpy.typing as npt
from numba import jit

from ..constants import DEFAULT_DTYPE, MAX_OUTPUT_BIT, ZERO_SIZE_MESSAGE, TOO_SMALL_MESSAGE
from .interleave import _compute_value_at_index_jit

DTypeLike = Union[str, type, np.dtype]


class ZeroSizeMatrixError(ValueError):
    """Raised when a matrix with zero rows or zero columns is requested."""


class ElementTypeTooSmallError(OverflowError):
    """Raised when a computed value does not fit the requested element type."""


def _ilog2(value: int) -> int:
    return value.bit_length() - 1


def index_bits_rounding_up(rows: int, cols: int) -> int:
    """
    Highest output bit needed to address a rows x cols Bayer matrix.

    Exact for square power-of-two dimensions. Other sizes are addressed as
    the enclosing power-of-two square, so their values are not a
    permutation of 0..rows*cols-1.
    """
    if rows <= 0 or cols <= 0:
        raise ZeroSizeMatrixError(ZERO_SIZE_MESSAGE)
    bits = max(_ilog2((rows << 1) - 1), _ilog2((cols << 1) - 1))
    return max((bits << 1) - 1, 0)


def value_span(rows: int, cols: int) -> int:
    """
    Number of values a rows x cols matrix is drawn from.

    Rectangular and non-power-of-two matrices take their values from the
    enclosing power-of-two square, so this can exceed rows * cols.
    """
    return 1 << (index_bits_rounding_up(rows, cols) + 1)


@jit(nopython=True)
def _fill_matrix_jit(out: npt.NDArray[np.int64], highest_output_bit: int) -> None:
    """
    Populate `out` row by row with Bayer threshold values.

    Args:
        out: Wide int64 buffer of shape (rows, cols), written in place.
        highest_output_bit: Most significant output bit for the interleaver.
    """
    rows, cols = out.shape
    for i in range(rows):
        for j in range(cols):
            out[i, j] = _compute_value_at_index_jit(i, j, highest_output_bit)


def _resolve_dtype(dtype: DTypeLike) -> np.dtype:
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise TypeError(f"Unsupported element type: {dtype!r}") from e
    if resolved.kind != 'u':
        raise TypeError(f"Element type must be an unsigned integer type, got {resolved}")
    return resolved


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ZeroSizeMatrixError(ZERO_SIZE_MESSAGE)


def matrix(
    rows: int,
    cols: int,
    dtype: DTypeLike = DEFAULT_DTYPE,
    check_range: bool = __debug__
) -> npt.NDArray[np.unsignedinteger]:
    """
    Generate a rows x cols Bayer dithering matrix.

    For power-of-two dimensions the result is a permutation of
    0..rows*cols-1 laid out in the classic recursive Bayer order.

    Args:
        rows: Number of rows (>= 1).
        cols: Number of columns (>= 1).
        dtype: Unsigned integer element type. Default: uint8.
        check_range: Verify every value fits `dtype` before narrowing.
                     Defaults to on, and off when Python runs with -O.

    Returns:
        Read-only array of shape (rows, cols) with the requested dtype.

    Raises:
        ZeroSizeMatrixError: rows or cols is zero (or negative).
        ElementTypeTooSmallError: a value does not fit `dtype` and
                                  `check_range` is enabled.
        TypeError: dimensions are not integers or `dtype` is not unsigned.
    """
    _check_dimension('rows', rows)
    _check_dimension('cols', cols)
    rows, cols = int(rows), int(cols)
    element_type = _resolve_dtype(dtype)

    highest_output_bit = index_bits_rounding_up(rows, cols)
    if highest_output_bit > MAX_OUTPUT_BIT:
        raise ValueError(f"Matrix dimensions {rows}x{cols} are too large")

    wide = np.empty((rows, cols), dtype=np.int64)
    _fill_matrix_jit(wide, highest_output_bit)

    if check_range:
        just_past_max_representable = 1 << (element_type.itemsize * 8)
        if int(wide.max()) >= just_past_max_representable:
            raise ElementTypeTooSmallError(TOO_SMALL_MESSAGE)

    # Unsigned narrowing keeps the low-order bits, i.e. value mod 2**bits
    result = wide.astype(element_type)
    result.flags.writeable = False
    return result


def threshold_map(rows: int, cols: int) -> npt.NDArray[np.float64]:
    """
    Bayer matrix normalised by its value span.

    Values lie in [0, 1) for any size.

    Args:
        rows: Number of rows (>= 1).
        cols: Number of columns (>= 1).

    Returns:
        Float array of shape (rows, cols).
    """
    raw = matrix(rows, cols, dtype=np.uint64, check_range=False)
    return raw.astype(np.float64) / float(value_span(rows, cols))
