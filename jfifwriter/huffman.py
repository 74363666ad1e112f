"""Huffman code tables and magnitude codewords for baseline JPEG."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import lru_cache

CODE_WORD_LIMIT = 2048
MAX_CODE_BITS = 16


@dataclass(frozen=True)
class BitCode:
    """A code of up to 16 bits, stored right-aligned in ``code``."""

    code: int
    num_bits: int

    def __post_init__(self) -> None:
        if not 0 <= self.num_bits <= MAX_CODE_BITS:
            raise ValueError(f"bit count out of range: {self.num_bits}")
        if not 0 <= self.code < (1 << self.num_bits):
            raise ValueError(f"code {self.code} does not fit in {self.num_bits} bits")


def build_huffman_table(counts: Sequence[int], values: Sequence[int]) -> dict[int, BitCode]:
    """Build canonical Huffman codes from per-length counts and symbol values."""
    if len(counts) != MAX_CODE_BITS:
        raise ValueError(f"counts must have {MAX_CODE_BITS} entries, got {len(counts)}")
    if sum(counts) != len(values):
        raise ValueError("number of values does not match the sum of counts")

    table: dict[int, BitCode] = {}
    symbols = iter(values)
    code = 0
    for num_bits, count in enumerate(counts, start=1):
        for _ in range(count):
            table[next(symbols)] = BitCode(code, num_bits)
            code += 1
        code <<= 1
    return table


@lru_cache(maxsize=2 * CODE_WORD_LIMIT)
def codeword(value: int) -> BitCode:
    """Return the JPEG magnitude encoding of a non-zero coefficient."""
    if value == 0:
        raise ValueError("zero has no magnitude codeword")
    magnitude = abs(value)
    if magnitude >= CODE_WORD_LIMIT:
        raise ValueError(f"value {value} outside +/-{CODE_WORD_LIMIT - 1}")
    num_bits = magnitude.bit_length()
    if value > 0:
        return BitCode(value, num_bits)
    return BitCode((1 << num_bits) - 1 - magnitude, num_bits)