import struct

import pytest

from ntfsread.errors import InvalidUpcaseTableSize
from ntfsread.upcase import UPCASE_CHARACTER_COUNT, UPCASE_TABLE_SIZE, UpcaseTable


def _ascii_table_bytes() -> bytes:
    table = list(range(UPCASE_CHARACTER_COUNT))
    for lower, upper in zip(range(ord("a"), ord("z") + 1), range(ord("A"), ord("Z") + 1)):
        table[lower] = upper
    return struct.pack(f"<{UPCASE_CHARACTER_COUNT}H", *table)


@pytest.fixture
def table() -> UpcaseTable:
    return UpcaseTable.from_bytes(_ascii_table_bytes())


def test_lowercase_english_maps_to_uppercase(table):
    for lower, upper in zip(b"abcdefghijklmnopqrstuvwxyz", b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"):
        assert table.to_uppercase(lower) == upper


def test_characters_without_uppercase_are_kept(table):
    for character in (ord("A"), ord("$"), ord("0"), 0xFFFF):
        assert table.to_uppercase(character) == character


def test_to_uppercase_rejects_out_of_range(table):
    with pytest.raises(ValueError):
        table.to_uppercase(UPCASE_CHARACTER_COUNT)


def test_invalid_size_raises():
    with pytest.raises(InvalidUpcaseTableSize) as info:
        UpcaseTable.from_bytes(b"\x00" * 10)
    assert info.value.expected == UPCASE_TABLE_SIZE
    assert info.value.actual == 10


def test_table_size_is_128_kib():
    zero_table = UpcaseTable.from_bytes(bytes(131072))
    assert zero_table.to_uppercase(ord("a")) == 0
    with pytest.raises(InvalidUpcaseTableSize) as info:
        UpcaseTable.from_bytes(bytes(131074))
    assert info.value.expected == 131072
    assert info.value.actual == 131074


def test_compare_case_insensitive_equal(table):
    assert table.compare("many_subdirs", "MANY_SUBDIRS") == 0
    assert table.compare("$MFT", "$mft") == 0


def test_compare_orders_by_uppercase(table):
    assert table.compare("abc", "ABD") == -1
    assert table.compare("ABD", "abc") == 1
    # "a" is compared as "A", which sorts before "_".
    assert table.compare("a", "_") == -1


def test_compare_prefix_is_shorter(table):
    assert table.compare("abc", "abcd") == -1
    assert table.compare("ABCD", "abc") == 1
    assert table.compare("", "") == 0


def test_compare_accepts_utf16_bytes(table):
    raw = "file".encode("utf-16-le")
    assert table.compare(raw, "FILE") == 0
    assert table.compare("FILE", raw) == 0


def test_compare_rejects_odd_byte_length(table):
    with pytest.raises(ValueError):
        table.compare(b"\x41", "A")


def test_compare_is_antisymmetric(table):
    names = ["1", "10", "100", "2", "a", "B", "_", "zz"]
    for left in names:
        for right in names:
            assert table.compare(left, right) == -table.compare(right, left)