# jfifwriter

A small baseline JPEG encoder in pure Python with no runtime dependencies.

It writes JFIF data from raw 8-bit pixels:

- grayscale (one byte per pixel) or RGB (three bytes per pixel), stored row by row
  from the top-left corner
- quality from 1 (smallest file) to 100 (best); values outside that range are clamped
- optional YCbCr 4:2:0 chroma downsampling for RGB images, which usually gives smaller
  files; it is ignored for grayscale images
- an optional comment stored in a COM segment

The quantization tables are the standard ones from Annex K of the JPEG specification,
scaled by quality the same way libjpeg scales them. The Huffman tables are the standard
Annex K tables too. Images whose size is not a multiple of the block size are padded by
repeating the last row and column.

## Installation

```
pip install jfifwriter
```

## Usage

Encode to bytes in memory:

```python
from jfifwriter.encoder import write_jpeg

width, height = 64, 32
pixels = bytes(
    channel
    for y in range(height)
    for x in range(width)
    for channel in (x * 4, y * 8, 128)
)

data = write_jpeg(pixels, width, height)          # RGB, quality 90, 4:4:4
assert data[:2] == b"\xff\xd8" and data[-2:] == b"\xff\xd9"
```

Write a file directly; `save_jpeg` returns the number of bytes written:

```python
from jfifwriter.encoder import save_jpeg

size = save_jpeg("gradient.jpg", pixels, width, height,
                 quality=75, downsample=True, comment="gradient")
```

For a grayscale image pass one byte per pixel and `is_rgb=False`.

### Arguments and errors

`write_jpeg(pixels, width, height, is_rgb=True, quality=90, downsample=False, comment=None)`

- `pixels` is `bytes` or any iterable of ints in 0..255; anything else (or `None`)
  raises `TypeError`.
- `width` and `height` must each be between 1 and 65535, and `pixels` must hold at least
  `width * height` bytes (times 3 for RGB); otherwise `ValueError` is raised.
- `comment` may be `str` (encoded as UTF-8) or `bytes`. It is cut at the first NUL byte,
  and a comment containing the byte 0xFF raises `ValueError`.

## Building blocks

The lower-level pieces can be used on their own:

- `jfifwriter.tables` — the standard tables, `quality_scale`, `quantization_tables`
  (zig-zag ordered tables for a quality) and `scaled_quantization` (quantization with the
  AAN DCT scale factors folded in)
- `jfifwriter.huffman` — `BitCode`, `build_huffman_table` (canonical codes from per-length
  counts) and `codeword` (magnitude encoding of a non-zero coefficient in ±2047)
- `jfifwriter.bitwriter` — `BitWriter`, which packs bit codes into bytes with 0xFF
  stuffing, writes raw bytes and marker headers, and returns the result via `getvalue()`
- `jfifwriter.dct` — `fdct_1d`, `fdct_8x8` (unscaled AAN forward DCT) and `rgb_to_y`,
  `rgb_to_cb`, `rgb_to_cr`
- `jfifwriter.encoder` — `encode_block`, `write_jpeg`, `save_jpeg`

## What it does not do

jfifwriter only encodes. It does not decode or read JPEG files, has no progressive,
arithmetic-coded, optimised-Huffman or 12-bit modes, does not accept alpha channels or
other pixel layouts, and provides no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```