import pytest
from hypothesis import given
from hypothesis import strategies as st

from jfifwriter.bitwriter import BitWriter
from jfifwriter.huffman import BitCode


def _unstuff(data: bytes) -> bytes:
    out = bytearray()
    skip = False
    for b in data:
        if skip:
            assert b == 0x00
            skip = False
            continue
        out.append(b)
        skip = b == 0xFF
    return bytes(out)


def test_ff_byte_is_stuffed():
    w = BitWriter()
    w.write_bits(BitCode(0xFF, 8))
    assert w.getvalue() == b"\xff\x00"


def test_marker_layout():
    w = BitWriter()
    w.add_marker(0xFE, 5)
    assert w.getvalue() == b"\xff\xfe\x00\x05"


def test_flush_pads_with_ones():
    w = BitWriter()
    w.write_bits(BitCode(0, 1))
    assert w.getvalue() == b""
    w.flush()
    assert w.getvalue() == b"\x7f"


def test_flush_on_byte_boundary_writes_nothing():
    w = BitWriter()
    w.write_bits(BitCode(0x12, 8)).flush()
    assert w.getvalue() == b"\x12"


def test_flush_of_one_bit_is_stuffed():
    w = BitWriter()
    w.write_bits(BitCode(1, 1)).flush()
    assert w.getvalue() == b"\xff\x00"


def test_raw_bytes_not_stuffed():
    w = BitWriter()
    w.write_byte(0xFF).write_bytes(b"\xff\xd9").write_bytes([1, 2])
    assert w.getvalue() == b"\xff\xff\xd9\x01\x02"


def test_write_byte_rejects_out_of_range():
    w = BitWriter()
    with pytest.raises(ValueError):
        w.write_byte(256)
    with pytest.raises(ValueError):
        w.write_byte(-1)


def test_write_bytes_rejects_int():
    with pytest.raises(TypeError):
        BitWriter().write_bytes(3)


def test_marker_rejects_long_length():
    with pytest.raises(ValueError):
        BitWriter().add_marker(0xFE, 0x10000)


@given(
    st.lists(
        st.integers(min_value=1, max_value=16).flatmap(
            lambda n: st.tuples(st.integers(min_value=0, max_value=(1 << n) - 1), st.just(n))
        ),
        max_size=40,
    )
)
def test_bits_round_trip(codes):
    w = BitWriter()
    expected = ""
    for code, n in codes:
        w.write_bits(BitCode(code, n))
        expected += format(code, f"0{n}b")
    w.flush()
    data = _unstuff(w.getvalue())
    bits = "".join(format(b, "08b") for b in data)
    assert len(bits) % 8 == 0
    assert bits.startswith(expected)
    assert set(bits[len(expected):]) <= {"1"}
    assert len(bits) - len(expected) < 8