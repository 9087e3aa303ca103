import sys
from pathlib import Path

# Add project root to path so we can import bayer_matrix
sys.path.append(str(Path(__file__).parent.parent))

import pytest
from bayer_matrix import compute_value_at_index, interleave_and_reverse_bits

def test_interleave_single_bits():
    """Test that the a-bit lands above the b-bit."""
    assert interleave_and_reverse_bits(0, 0, 1) == 0
    assert interleave_and_reverse_bits(1, 0, 1) == 2
    assert interleave_and_reverse_bits(0, 1, 1) == 1
    assert interleave_and_reverse_bits(1, 1, 1) == 3

def test_interleave_reverses_bit_order():
    """Test that low input bits end up in high output bits."""
    # a = 0b11: bit 0 -> output bit 3, bit 1 -> output bit 1
    assert interleave_and_reverse_bits(0b11, 0, 3) == 0b1010
    # b = 0b11: bit 0 -> output bit 2, bit 1 -> output bit 0
    assert interleave_and_reverse_bits(0, 0b11, 3) == 0b0101

def test_interleave_highest_bit_zero():
    """Test that a single output bit only takes a's lowest bit."""
    assert interleave_and_reverse_bits(1, 1, 0) == 1
    assert interleave_and_reverse_bits(0, 1, 0) == 0

def test_interleave_odd_width():
    """Test an odd number of output bits ends on an a-bit."""
    assert interleave_and_reverse_bits(1, 1, 2) == 0b110
    assert interleave_and_reverse_bits(2, 0, 2) == 0b001

def test_interleave_ignores_bits_beyond_width():
    """Test that input bits with no room in the output are dropped."""
    assert interleave_and_reverse_bits(0b100, 0b100, 3) == 0

def test_compute_value_at_index_matches_4x4():
    """Test individual cells of the 4x4 Bayer matrix."""
    assert compute_value_at_index(0, 0, 3) == 0
    assert compute_value_at_index(0, 1, 3) == 8
    assert compute_value_at_index(1, 0, 3) == 12
    assert compute_value_at_index(3, 3, 3) == 5
    assert compute_value_at_index(3, 0, 3) == 15

def test_compute_value_at_index_returns_python_int():
    """Test that the raw value is a plain int, not a numpy scalar."""
    assert type(compute_value_at_index(2, 1, 3)) is int

@pytest.mark.parametrize("args", [(-1, 0, 3), (0, -1, 3), (0, 0, -1), (0, 0, 63)])
def test_invalid_arguments(args):
    """Test that negative indices and out-of-range bit positions are rejected."""
    with pytest.raises(ValueError):
        compute_value_at_index(*args)
    with pytest.raises(ValueError):
        interleave_and_reverse_bits(*args)

def test_large_inputs_only_use_low_bits():
    """Test that bits the output has no room for never reach the kernel."""
    assert compute_value_at_index(2**63, 0, 3) == compute_value_at_index(0, 0, 3)
    assert compute_value_at_index(2**64 + 1, 0, 3) == 12
    assert interleave_and_reverse_bits(2**64, 1, 3) == interleave_and_reverse_bits(0, 1, 3)
    assert interleave_and_reverse_bits(2**70 + 5, 2**90, 62) == interleave_and_reverse_bits(5, 0, 62)

def test_index_wraps_with_matrix_period():
    """Test that indices one period apart land on the same 4x4 value."""
    for i in range(4):
        for j in range(4):
            assert compute_value_at_index(i + 4, j + 8, 3) == compute_value_at_index(i, j, 3)
