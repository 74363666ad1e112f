"""Bit-level output buffer with JPEG byte stuffing."""

from __future__ import annotations

from collections.abc import Iterable

from .huffman import BitCode

_FLUSH_CODE = BitCode(0x7F, 7)


class BitWriter:
    """Collects JPEG output: entropy-coded bits and raw bytes."""

    def __init__(self) -> None:
        self._out = bytearray()
        self._bits = 0
        self._count = 0

    def write_bits(self, code: BitCode) -> "BitWriter":
        """Append Huffman bits; full bytes are emitted, 0xFF followed by a stuffed 0x00."""
        self._bits = (self._bits << code.num_bits) | code.code
        self._count += code.num_bits
        while self._count >= 8:
            self._count -= 8
            byte = (self._bits >> self._count) & 0xFF
            self._out.append(byte)
            if byte == 0xFF:
                self._out.append(0x00)
            self._bits &= (1 << self._count) - 1
        return self

    def write_byte(self, value: int) -> "BitWriter":
        """Write one byte directly, bypassing pending bits."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        self._out.append(value)
        return self

    def write_bytes(self, data: bytes | Iterable[int]) -> "BitWriter":
        """Write several bytes directly, bypassing pending bits."""
        if isinstance(data, int):
            raise TypeError("write_bytes expects bytes or an iterable of ints")
        self._out.extend(bytes(data))
        return self

    def add_marker(self, marker_id: int, length: int) -> "BitWriter":
        """Start a marker segment: 0xFF, the id and a big-endian 16-bit length."""
        if not 0 <= length <= 0xFFFF:
            raise ValueError(f"segment length out of range: {length}")
        self.write_byte(0xFF)
        self.write_byte(marker_id)
        self._out.extend(length.to_bytes(2, "big"))
        return self

    def flush(self) -> "BitWriter":
        """Pad pending bits with ones up to a byte boundary and emit them."""
        self.write_bits(_FLUSH_CODE)
        self._bits = 0
        self._count = 0
        return self

    def getvalue(self) -> bytes:
        """Return everything written so far (pending bits excluded)."""
        return bytes(self._out)