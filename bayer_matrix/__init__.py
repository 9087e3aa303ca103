"""Bayer ordered-dithering threshold matrices of arbitrary size."""
from .core.interleave import compute_value_at_index, interleave_and_reverse_bits
from .core.matrix import (
    ElementTypeTooSmallError,
    ZeroSizeMatrixError,
    index_bits_rounding_up,
    matrix,
    threshold_map,
    value_span,
)

__all__ = [
    "compute_value_at_index",
    "interleave_and_reverse_bits",
    "index_bits_rounding_up",
    "matrix",
    "threshold_map",
    "value_span",
    "ZeroSizeMatrixError",
    "ElementTypeTooSmallError",
]
