"""Forward DCT (Arai/Agui/Nakajima) and RGB to YCbCr conversion."""

from __future__ import annotations

from collections.abc import Sequence

_SQRT_HALF_SQRT = 1.306562965  # cos(pi/8) * sqrt(2)
_INV_SQRT = 0.707106781  # 1 / sqrt(2)
_HALF_SQRT_SQRT = 0.382683432  # cos(3*pi/8)
_INV_SQRT_SQRT = 0.541196100  # cos(3*pi/8) * sqrt(2)


def fdct_1d(values: Sequence[float]) -> list[float]:
    """Unscaled one-dimensional AAN forward DCT of eight samples.

    Output k equals the plain DCT-II sum times 1 (k = 0) or 2*cos(k*pi/16).
    """
    if len(values) != 8:
        raise ValueError(f"expected 8 samples, got {len(values)}")
    v0, v1, v2, v3, v4, v5, v6, v7 = values

    add07, sub07 = v0 + v7, v0 - v7
    add16, sub16 = v1 + v6, v1 - v6
    add25, sub25 = v2 + v5, v2 - v5
    add34, sub34 = v3 + v4, v3 - v4

    add0347, sub07_34 = add07 + add34, add07 - add34
    add1256, sub16_25 = add16 + add25, add16 - add25

    out0 = add0347 + add1256
    out4 = add0347 - add1256

    z1 = (sub16_25 + sub07_34) * _INV_SQRT
    out2 = sub07_34 + z1
    out6 = sub07_34 - z1

    sub23_45 = sub25 + sub34
    sub12_56 = sub16 + sub25
    sub01_67 = sub16 + sub07

    z5 = (sub23_45 - sub01_67) * _HALF_SQRT_SQRT
    z2 = sub23_45 * _INV_SQRT_SQRT + z5
    z3 = sub12_56 * _INV_SQRT
    z4 = sub01_67 * _SQRT_HALF_SQRT + z5
    z6 = sub07 + z3
    z7 = sub07 - z3

    out1, out7 = z6 + z4, z6 - z4
    out5, out3 = z7 + z2, z7 - z2
    return [out0, out1, out2, out3, out4, out5, out6, out7]


def _flatten(block: Sequence) -> list[float]:
    values = list(block)
    if len(values) == 8:
        values = [value for row in values for value in row]
    if len(values) != 64:
        raise ValueError(f"expected an 8x8 block, got {len(values)} values")
    return values


def fdct_8x8(block: Sequence) -> list[float]:
    """Two-dimensional unscaled AAN DCT of an 8x8 block (flat or 8 rows), row-major result."""
    values = _flatten(block)
    out: list[float] = []
    for start in range(0, 64, 8):
        out.extend(fdct_1d(values[start:start + 8]))
    for column in range(8):
        out[column::8] = fdct_1d(out[column::8])
    return out


def rgb_to_y(r: float, g: float, b: float) -> float:
    """Luminance of an RGB sample."""
    return 0.299 * r + 0.587 * g + 0.114 * b


def rgb_to_cb(r: float, g: float, b: float) -> float:
    """Blue-difference chroma of an RGB sample (centred on zero)."""
    return -0.16874 * r - 0.33126 * g + 0.5 * b


def rgb_to_cr(r: float, g: float, b: float) -> float:
    """Red-difference chroma of an RGB sample (centred on zero)."""
    return 0.5 * r - 0.41869 * g - 0.08131 * b