from numba import jit

from ..constants import MAX_OUTPUT_BIT

@jit(nopython=True)
def _interleave_and_reverse_bits_jit(a: int, b: int, highest_output_bit: int) -> int:
    """
    Interleave the bits of `a` and `b` into a single bit-reversed value.

    Input bits are read from bit 0 upwards while output bits are written from
    `highest_output_bit` downwards, alternating a-bit, b-bit. Only the lower
    half of the accumulator is ever read from the inputs.
    """
    acc = 0
    bit_o = 1 << highest_output_bit
    bit_i = 1
    while True:
        if (a & bit_i) != 0:
            acc |= bit_o
        bit_o >>= 1

        if (b & bit_i) != 0:
            acc |= bit_o
        bit_o >>= 1

        if bit_o == 0:
            return acc

        bit_i <<= 1


@jit(nopython=True)
def _compute_value_at_index_jit(i: int, j: int, highest_output_bit: int) -> int:
    # https://en.wikipedia.org/wiki/Ordered_dithering#Threshold_map
    return _interleave_and_reverse_bits_jit(i ^ j, i, highest_output_bit)


def _check_arguments(a: int, b: int, highest_output_bit: int) -> None:
    if a < 0 or b < 0:
        raise ValueError(f"Indices must be non-negative, got {a} and {b}")
    if not 0 <= highest_output_bit <= MAX_OUTPUT_BIT:
        raise ValueError(
            f"highest_output_bit must be between 0 and {MAX_OUTPUT_BIT}, got {highest_output_bit}"
        )


def _input_mask(highest_output_bit: int) -> int:
    # Two output bits are written per input bit
    return (1 << ((highest_output_bit >> 1) + 1)) - 1


def interleave_and_reverse_bits(a: int, b: int, highest_output_bit: int) -> int:
    """
    Combine two integers by alternating their bits, most significant output bit first.

    Args:
        a: Value whose bits land on the even offsets below `highest_output_bit`.
        b: Value whose bits land on the odd offsets below `highest_output_bit`.
        highest_output_bit: Position (from 0) of the most significant bit written.

    Returns:
        The interleaved value, occupying at most `highest_output_bit + 1` bits.
    """
    _check_arguments(a, b, highest_output_bit)
    mask = _input_mask(highest_output_bit)
    return int(_interleave_and_reverse_bits_jit(int(a) & mask, int(b) & mask, highest_output_bit))


def compute_value_at_index(i: int, j: int, highest_output_bit: int) -> int:
    """
    Bayer threshold value of cell (i, j).

    Interleaves `i XOR j` with `i`, which reproduces the recursive Bayer
    pattern without recursion.

    Args:
        i: Row index.
        j: Column index.
        highest_output_bit: Most significant output bit, see `index_bits_rounding_up`.

    Returns:
        The raw (unnarrowed) threshold value.
    """
    _check_arguments(i, j, highest_output_bit)
    mask = _input_mask(highest_output_bit)
    return int(_compute_value_at_index_jit(int(i) & mask, int(j) & mask, highest_output_bit))
