import pytest

from jfifwriter.tables import (
    DEFAULT_QUANT_CHROMINANCE,
    DEFAULT_QUANT_LUMINANCE,
    ZIGZAG_INV,
    quality_scale,
    quantization_tables,
    scaled_quantization,
)


def test_zigzag_reordering_is_permutation():
    assert sorted(ZIGZAG_INV) == list(range(64))
    lum, chrom = quantization_tables(50)
    assert sorted(lum) == sorted(DEFAULT_QUANT_LUMINANCE)
    assert sorted(chrom) == sorted(DEFAULT_QUANT_CHROMINANCE)
    assert lum[:6] == (16, 11, 12, 14, 12, 10)


def test_quality_scale_fifty_is_identity():
    assert quality_scale(50) == 100


def test_quality_scale_clamps():
    assert quality_scale(0) == quality_scale(1)
    assert quality_scale(-7) == quality_scale(1)
    assert quality_scale(250) == quality_scale(100)


def test_quality_fifty_gives_default_tables_in_zigzag_order():
    lum, chrom = quantization_tables(50)
    assert lum == tuple(DEFAULT_QUANT_LUMINANCE[p] for p in ZIGZAG_INV)
    assert chrom == tuple(DEFAULT_QUANT_CHROMINANCE[p] for p in ZIGZAG_INV)


def test_quality_hundred_gives_all_ones():
    lum, chrom = quantization_tables(100)
    assert set(lum) == {1}
    assert set(chrom) == {1}


def test_quality_one_saturates():
    lum, chrom = quantization_tables(1)
    assert set(lum) == {255}
    assert set(chrom) == {255}


@pytest.mark.parametrize("quality", [1, 10, 49, 50, 51, 75, 90, 99, 100])
def test_tables_in_range(quality):
    for table in quantization_tables(quality):
        assert len(table) == 64
        assert all(1 <= v <= 255 for v in table)


def test_higher_quality_never_coarser():
    previous = quantization_tables(1)
    for quality in range(2, 101):
        current = quantization_tables(quality)
        for old, new in zip(previous, current):
            assert all(n <= o for n, o in zip(new, old))
        previous = current


def test_scaled_dc_entry():
    scaled = scaled_quantization([1] * 64)
    assert scaled[0] == pytest.approx(1 / 8)
    scaled = scaled_quantization([4] + [1] * 63)
    assert scaled[0] == pytest.approx(1 / 32)


def test_scaled_is_symmetric_for_flat_table():
    scaled = scaled_quantization([2] * 64)
    for row in range(8):
        for column in range(8):
            assert scaled[row * 8 + column] == pytest.approx(scaled[column * 8 + row])


def test_scaled_inversely_proportional():
    base = scaled_quantization([1] * 64)
    doubled = scaled_quantization([2] * 64)
    for a, b in zip(base, doubled):
        assert a == pytest.approx(2 * b)


def test_scaled_rejects_bad_length():
    with pytest.raises(ValueError):
        scaled_quantization([1] * 63)


def test_scaled_rejects_zero():
    with pytest.raises(ValueError):
        scaled_quantization([0] + [1] * 63)