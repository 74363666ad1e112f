"""Baseline JPEG/JFIF encoder for 8-bit grayscale and RGB images."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence

from .bitwriter import BitWriter
from .dct import fdct_8x8, rgb_to_cb, rgb_to_cr, rgb_to_y
from .huffman import BitCode, build_huffman_table, codeword
from .tables import (
    AC_CHROMINANCE_COUNTS,
    AC_CHROMINANCE_VALUES,
    AC_LUMINANCE_COUNTS,
    AC_LUMINANCE_VALUES,
    DC_CHROMINANCE_COUNTS,
    DC_CHROMINANCE_VALUES,
    DC_LUMINANCE_COUNTS,
    DC_LUMINANCE_VALUES,
    ZIGZAG_INV,
    quantization_tables,
    scaled_quantization,
)

_JFIF_HEADER = bytes(
    (
        0xFF, 0xD8,  # SOI
        0xFF, 0xE0,  # APP0
        0, 16,
        ord("J"), ord("F"), ord("I"), ord("F"), 0,
        1, 1,  # version 1.1
        0,  # no density units
        0, 1, 0, 1,  # density 1x1
        0, 0,  # no thumbnail
    )
)
_SPECTRAL = bytes((0, 63, 0))
_MAX_DIMENSION = 0xFFFF


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(value + 0.5) if value >= 0 else int(value - 0.5)


def encode_block(
    writer: BitWriter,
    block: Sequence,
    scaled: Sequence[float],
    last_dc: int,
    huffman_dc: Mapping[int, BitCode],
    huffman_ac: Mapping[int, BitCode],
) -> int:
    """Transform, quantize and entropy-code one 8x8 block; return its DC value."""
    coefficients = [c * s for c, s in zip(fdct_8x8(block), scaled)]
    quantized = [_round(coefficients[pos]) for pos in ZIGZAG_INV]
    dc = _round(coefficients[0])
    last_nonzero = next((i for i in range(63, 0, -1) if quantized[i] != 0), 0)

    diff = dc - last_dc
    if diff == 0:
        writer.write_bits(huffman_dc[0x00])
    else:
        bits = codeword(diff)
        writer.write_bits(huffman_dc[bits.num_bits]).write_bits(bits)

    run = 0
    for value in quantized[1:last_nonzero + 1]:
        if value == 0:
            run += 1
            if run == 16:
                writer.write_bits(huffman_ac[0xF0])
                run = 0
            continue
        bits = codeword(value)
        writer.write_bits(huffman_ac[(run << 4) + bits.num_bits]).write_bits(bits)
        run = 0

    if last_nonzero < 63:
        writer.write_bits(huffman_ac[0x00])
    return dc


def _comment_bytes(comment: str | bytes) -> bytes:
    data = comment.encode("utf-8") if isinstance(comment, str) else bytes(comment)
    data = data.split(b"\x00", 1)[0]
    if b"\xff" in data:
        raise ValueError("comment must not contain the byte 0xFF")
    return data


def _pixel_bytes(pixels: bytes | Iterable[int]) -> bytes:
    if pixels is None or isinstance(pixels, int):
        raise TypeError("pixels must be bytes or an iterable of byte values")
    return bytes(pixels)


def _block_samples(data, width, height, is_rgb, with_chroma, x0, y0):
    max_x, max_y = width - 1, height - 1
    luma: list[float] = []
    cb: list[float] = []
    cr: list[float] = []
    for dy in range(8):
        row = min(y0 + dy, max_y)
        for dx in range(8):
            pos = row * width + min(x0 + dx, max_x)
            if not is_rgb:
                luma.append(data[pos] - 128.0)
                continue
            r, g, b = data[3 * pos:3 * pos + 3]
            luma.append(rgb_to_y(r, g, b) - 128.0)
            if with_chroma:
                cb.append(rgb_to_cb(r, g, b))
                cr.append(rgb_to_cr(r, g, b))
    return luma, cb, cr


def _downsampled_chroma(data, width, height, x0, y0):
    max_x, max_y = width - 1, height - 1
    cb: list[float] = []
    cr: list[float] = []
    for dy in range(8):
        top = min(y0 + 2 * dy, max_y)
        rows = (top, min(top + 1, max_y))
        for dx in range(8):
            left = min(x0 + 2 * dx, max_x)
            columns = (left, min(left + 1, max_x))
            r = g = b = 0
            for row in rows:
                for column in columns:
                    pos = 3 * (row * width + column)
                    r += data[pos]
                    g += data[pos + 1]
                    b += data[pos + 2]
            cb.append(rgb_to_cb(r, g, b) / 4)
            cr.append(rgb_to_cr(r, g, b) / 4)
    return cb, cr


def write_jpeg(
    pixels: bytes | Iterable[int],
    width: int,
    height: int,
    is_rgb: bool = True,
    quality: int = 90,
    downsample: bool = False,
    comment: str | bytes | None = None,
) -> bytes:
    """Encode pixels (row-major, RGB or grayscale, 8 bits each) as a baseline JPEG."""
    if not (0 < width <= _MAX_DIMENSION and 0 < height <= _MAX_DIMENSION):
        raise ValueError(f"invalid image size {width}x{height}")
    data = _pixel_bytes(pixels)
    num_components = 3 if is_rgb else 1
    needed = width * height * num_components
    if len(data) < needed:
        raise ValueError(f"need {needed} pixel bytes, got {len(data)}")
    if not is_rgb:
        downsample = False

    writer = BitWriter()
    writer.write_bytes(_JFIF_HEADER)

    if comment is not None:
        text = _comment_bytes(comment)
        writer.add_marker(0xFE, 2 + len(text))
        writer.write_bytes(text)

    quant_luma, quant_chroma = quantization_tables(quality)
    writer.add_marker(0xDB, 2 + num_components // 3 * 65 + 65 if is_rgb else 2 + 65)
    writer.write_byte(0x00).write_bytes(quant_luma)
    if is_rgb:
        writer.write_byte(0x01).write_bytes(quant_chroma)

    writer.add_marker(0xC0, 2 + 6 + 3 * num_components)
    writer.write_byte(0x08)
    writer.write_bytes(height.to_bytes(2, "big"))
    writer.write_bytes(width.to_bytes(2, "big"))
    writer.write_byte(num_components)
    for component in range(1, num_components + 1):
        sampling = 0x22 if component == 1 and downsample else 0x11
        writer.write_bytes((component, sampling, 0 if component == 1 else 1))

    writer.add_marker(0xC4, 2 + 208 + 208 if is_rgb else 2 + 208)
    writer.write_byte(0x00).write_bytes(DC_LUMINANCE_COUNTS).write_bytes(DC_LUMINANCE_VALUES)
    writer.write_byte(0x10).write_bytes(AC_LUMINANCE_COUNTS).write_bytes(AC_LUMINANCE_VALUES)
    huffman_luma_dc = build_huffman_table(DC_LUMINANCE_COUNTS, DC_LUMINANCE_VALUES)
    huffman_luma_ac = build_huffman_table(AC_LUMINANCE_COUNTS, AC_LUMINANCE_VALUES)
    if is_rgb:
        writer.write_byte(0x01).write_bytes(DC_CHROMINANCE_COUNTS).write_bytes(DC_CHROMINANCE_VALUES)
        writer.write_byte(0x11).write_bytes(AC_CHROMINANCE_COUNTS).write_bytes(AC_CHROMINANCE_VALUES)
        huffman_chroma_dc = build_huffman_table(DC_CHROMINANCE_COUNTS, DC_CHROMINANCE_VALUES)
        huffman_chroma_ac = build_huffman_table(AC_CHROMINANCE_COUNTS, AC_CHROMINANCE_VALUES)

    writer.add_marker(0xDA, 2 + 1 + 2 * num_components + 3)
    writer.write_byte(num_components)
    for component in range(1, num_components + 1):
        writer.write_bytes((component, 0x00 if component == 1 else 0x11))
    writer.write_bytes(_SPECTRAL)

    scaled_luma = scaled_quantization(quant_luma)
    scaled_chroma = scaled_quantization(quant_chroma)

    mcu_size = 16 if downsample else 8
    last_y = last_cb = last_cr = 0
    for mcu_y in range(0, height, mcu_size):
        for mcu_x in range(0, width, mcu_size):
            cb: list[float] = []
            cr: list[float] = []
            for block_y in range(0, mcu_size, 8):
                for block_x in range(0, mcu_size, 8):
                    luma, cb, cr = _block_samples(
                        data, width, height, is_rgb, not downsample,
                        mcu_x + block_x, mcu_y + block_y,
                    )
                    last_y = encode_block(
                        writer, luma, scaled_luma, last_y, huffman_luma_dc, huffman_luma_ac
                    )
            if not is_rgb:
                continue
            if downsample:
                cb, cr = _downsampled_chroma(data, width, height, mcu_x, mcu_y)
            last_cb = encode_block(
                writer, cb, scaled_chroma, last_cb, huffman_chroma_dc, huffman_chroma_ac
            )
            last_cr = encode_block(
                writer, cr, scaled_chroma, last_cr, huffman_chroma_dc, huffman_chroma_ac
            )

    writer.flush()
    writer.write_bytes((0xFF, 0xD9))
    return writer.getvalue()


def save_jpeg(
    path: str | os.PathLike,
    pixels: bytes | Iterable[int],
    width: int,
    height: int,
    is_rgb: bool = True,
    quality: int = 90,
    downsample: bool = False,
    comment: str | bytes | None = None,
) -> int:
    """Encode pixels and write the JPEG to ``path``; return the number of bytes written."""
    data = write_jpeg(pixels, width, height, is_rgb, quality, downsample, comment)
    with open(path, "wb") as handle:
        handle.write(data)
    return len(data)