import pytest
from hypothesis import given
from hypothesis import strategies as st

from jfifwriter.huffman import BitCode, build_huffman_table, codeword
from jfifwriter.tables import (
    AC_CHROMINANCE_COUNTS,
    AC_CHROMINANCE_VALUES,
    AC_LUMINANCE_COUNTS,
    AC_LUMINANCE_VALUES,
    DC_CHROMINANCE_COUNTS,
    DC_CHROMINANCE_VALUES,
    DC_LUMINANCE_COUNTS,
    DC_LUMINANCE_VALUES,
)

SPECS = [
    (DC_LUMINANCE_COUNTS, DC_LUMINANCE_VALUES),
    (AC_LUMINANCE_COUNTS, AC_LUMINANCE_VALUES),
    (DC_CHROMINANCE_COUNTS, DC_CHROMINANCE_VALUES),
    (AC_CHROMINANCE_COUNTS, AC_CHROMINANCE_VALUES),
]


def _as_string(bc: BitCode) -> str:
    return format(bc.code, f"0{bc.num_bits}b")


def test_dc_luminance_category_zero():
    table = build_huffman_table(DC_LUMINANCE_COUNTS, DC_LUMINANCE_VALUES)
    assert _as_string(table[0]) == "00"


def test_ac_luminance_end_of_block():
    table = build_huffman_table(AC_LUMINANCE_COUNTS, AC_LUMINANCE_VALUES)
    assert _as_string(table[0x00]) == "1010"


def test_ac_luminance_zero_run():
    table = build_huffman_table(AC_LUMINANCE_COUNTS, AC_LUMINANCE_VALUES)
    assert _as_string(table[0xF0]) == "11111111001"


@pytest.mark.parametrize("counts, values", SPECS)
def test_table_covers_all_values(counts, values):
    table = build_huffman_table(counts, values)
    assert set(table) == set(values)
    for num_bits, count in enumerate(counts, start=1):
        assert sum(1 for bc in table.values() if bc.num_bits == num_bits) == count


@pytest.mark.parametrize("counts, values", SPECS)
def test_table_is_prefix_free(counts, values):
    codes = sorted(_as_string(bc) for bc in build_huffman_table(counts, values).values())
    for shorter, longer in zip(codes, codes[1:]):
        assert not longer.startswith(shorter)


def test_build_rejects_wrong_counts_length():
    with pytest.raises(ValueError):
        build_huffman_table([1] * 15, list(range(15)))


def test_build_rejects_mismatched_values():
    with pytest.raises(ValueError):
        build_huffman_table(DC_LUMINANCE_COUNTS, DC_LUMINANCE_VALUES[:-1])


def test_bitcode_rejects_overflowing_code():
    with pytest.raises(ValueError):
        BitCode(4, 2)


@given(st.integers(min_value=1, max_value=2047))
def test_positive_codeword(value):
    bc = codeword(value)
    assert bc.code == value
    assert bc.num_bits == value.bit_length()


@given(st.integers(min_value=1, max_value=2047))
def test_negative_codeword_is_complement(value):
    positive = codeword(value)
    negative = codeword(-value)
    assert negative.num_bits == positive.num_bits
    assert negative.code + positive.code == (1 << positive.num_bits) - 1
    assert negative.code < (1 << (negative.num_bits - 1))


@pytest.mark.parametrize("value", [0, 2048, -2048, 5000])
def test_codeword_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        codeword(value)