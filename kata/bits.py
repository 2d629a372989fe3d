"""Classic exercises on the bits of unsigned 32-bit integers."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF


def reverse_bits(n: int) -> int:
    """Reverse the order of the 32 bits of ``n``."""
    return int(format(n & _MASK32, "032b")[::-1], 2)


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n`` taken as an unsigned 32-bit value."""
    return bin(n & _MASK32).count("1")


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer from 0 to ``n``."""
    return [0] + [bin(i).count("1") for i in range(1, n + 1)]


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` below its highest set bit; values up to 0 come back unchanged."""
    if num <= 0:
        return num
    return num ^ ((1 << num.bit_length()) - 1)