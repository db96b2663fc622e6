from io import BytesIO

import pytest

from extraction import ByteSource, hilo, letter_offsets, read_letter_index


def test_read_byte_until_end():
    source = ByteSource(BytesIO(bytes([0x00, 0x9E, 0xFF])))
    assert source.read_byte() == 0x00
    assert source.read_byte() == 0x9E
    assert source.read_byte() == 0xFF
    assert source.read_byte() is None
    assert source.position == 3


def test_read_hilo_is_big_endian():
    source = ByteSource(BytesIO(bytes([0x27, 0x0F, 0x00, 0x05])))
    assert source.read_hilo() == 9999
    assert source.read_hilo() == 5
    assert source.position == 4


def test_read_hilo_short_raises_eof():
    source = ByteSource(BytesIO(bytes([0x27])))
    with pytest.raises(EOFError):
        source.read_hilo()


def test_skip_past_end_is_quiet():
    source = ByteSource(BytesIO(bytes(10)))
    source.skip(52)
    assert source.position == 10
    assert source.read_byte() is None


def test_skip_leaves_rest():
    source = ByteSource(BytesIO(bytes([1, 2, 3, 4])))
    source.skip(3)
    assert source.read_byte() == 4


def test_hilo():
    assert hilo(b"\x00\x34\x01\x02", 0) == 0x34
    assert hilo(b"\x00\x34\x01\x02", 2) == 0x0102


def test_read_letter_index():
    header = bytearray(52)
    header[0:2] = b"\x00\x34"  # A
    header[50:52] = b"\x01\x00"  # Z
    index = read_letter_index(ByteSource(BytesIO(bytes(header))))
    assert len(index) == 26
    assert index[0] == 0x34
    assert index[25] == 0x100
    assert letter_offsets(index) == [("A", 0x34), ("Z", 0x100)]


def test_read_letter_index_short_header():
    with pytest.raises(EOFError):
        read_letter_index(ByteSource(BytesIO(bytes(20))))
