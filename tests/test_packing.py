from io import BytesIO

import pytest

from extraction import ByteSource, read_letter_index
from packing import common_prefix_length, pack_word_table, pack_words, write_words
from words import HEADER_SIZE, load_words

ENTRIES = [
    ("a", 5),
    ("an", 5),
    ("and", 0),
    ("ant", 12),
    ("bee", 7),
    ("door", 100),
    ("doors", 100),
    ("rol", 9999),
]


def test_packs_shared_prefix():
    data = pack_words([("a", 5), ("at", 9999)])
    assert data[:2] == b"\x00\x34"
    assert data[2:HEADER_SIZE] == bytes(HEADER_SIZE - 2)
    assert data[HEADER_SIZE:] == bytes([0x00, 0x9E, 0x00, 0x05, 0x01, 0x8B, 0x27, 0x0F])


def test_round_trip():
    data = pack_words(ENTRIES)
    table = load_words(BytesIO(data))
    assert len(table) == len(ENTRIES)
    for text, number in ENTRIES:
        assert table.find_word(text) == number
    assert pack_word_table(table) == data


def test_letter_index():
    index = read_letter_index(ByteSource(BytesIO(pack_words(ENTRIES))))
    assert index[0] == HEADER_SIZE
    assert index[1] == HEADER_SIZE + 16  # four 4-byte words before "bee"
    assert index[2] == 0
    assert index[3] == HEADER_SIZE + 22
    assert index[ord("r") - ord("a")] > index[3]


def test_repeated_word_still_stores_a_character():
    data = pack_words([("go", 1), ("go", 2)])
    assert data[HEADER_SIZE + 5] == 1
    table = load_words(BytesIO(data))
    assert table.find_word("go") == 1


def test_write_words():
    out = BytesIO()
    write_words(out, ENTRIES)
    assert out.getvalue() == pack_words(ENTRIES)


def test_common_prefix_length():
    assert common_prefix_length("", "door") == 0
    assert common_prefix_length("door", "doors") == 4
    assert common_prefix_length("forearm", "forest") == 4


@pytest.mark.parametrize(
    "entries",
    [
        [("", 1)],
        [("café", 1)],
        [("a\x7fb", 1)],
        [("a\x00b", 1)],
        [("look", 70000)],
        [("look", -1)],
    ],
)
def test_unencodable_words(entries):
    with pytest.raises(ValueError):
        pack_words(entries)
