import struct

import pytest

from ntfsread.errors import InvalidStructuredValueSize, UnsupportedFileNamespace
from ntfsread.file_name import NtfsFileNamespace
from ntfsread.indexes import IndexEntryType, NtfsFileNameIndex
from ntfsread.types import NtfsPosition
from ntfsread.upcase import UPCASE_CHARACTER_COUNT, UpcaseTable


def file_name_bytes(name, namespace=1, attributes=0):
    encoded = name.encode("utf-16-le")
    header = struct.pack(
        "<QQQQQQQIIBB", 5, 0, 0, 0, 0, 0, 0, attributes, 0, len(encoded) // 2, namespace
    )
    return header + encoded


def ascii_upcase_table():
    table = list(range(UPCASE_CHARACTER_COUNT))
    for code in range(ord("a"), ord("z") + 1):
        table[code] = code - 32
    return UpcaseTable(table)


class ListFinder:
    """Walks a list of keys in order, as a finder over a single node would."""

    def __init__(self, keys):
        self.keys = keys
        self.results = []

    def find(self, cmp):
        for key in self.keys:
            result = cmp(key)
            self.results.append(result)
            if result == 0:
                return key
        return None


def make_keys(*names):
    return [
        NtfsFileNameIndex.parse_key(file_name_bytes(name), NtfsPosition(100))
        for name in names
    ]


def test_parse_key_round_trip():
    key = NtfsFileNameIndex.parse_key(file_name_bytes("readme.txt"), NtfsPosition(64))
    assert key.name() == "readme.txt"
    assert key.namespace() == NtfsFileNamespace.WIN32
    assert key.parent_directory_reference() == 5


def test_parse_key_accepts_memoryview():
    data = memoryview(file_name_bytes("abc"))
    assert NtfsFileNameIndex.parse_key(data, NtfsPosition(8)).name() == "abc"


def test_parse_key_too_short():
    with pytest.raises(InvalidStructuredValueSize):
        NtfsFileNameIndex.parse_key(b"\0" * 10, NtfsPosition(8))


def test_parse_key_bad_namespace():
    with pytest.raises(UnsupportedFileNamespace) as info:
        NtfsFileNameIndex.parse_key(file_name_bytes("x", namespace=9), NtfsPosition(8))
    assert info.value.actual == 9


def test_file_name_index_has_no_data():
    assert NtfsFileNameIndex.has_file_reference is True
    with pytest.raises(TypeError):
        NtfsFileNameIndex.parse_data(b"\0" * 4, NtfsPosition(8))


def test_base_type_cannot_be_instantiated():
    with pytest.raises(TypeError):
        IndexEntryType()


def test_find_is_case_insensitive():
    finder = ListFinder(make_keys("alpha", "beta", "gamma"))
    found = NtfsFileNameIndex.find(finder, ascii_upcase_table(), "BETA")
    assert found.name() == "beta"


def test_find_compares_search_name_against_key():
    finder = ListFinder(make_keys("alpha", "beta"))
    NtfsFileNameIndex.find(finder, ascii_upcase_table(), "b")
    # "b" sorts after "alpha" and before "beta".
    assert finder.results == [1, -1]


def test_find_missing_name():
    finder = ListFinder(make_keys("alpha", "beta"))
    assert NtfsFileNameIndex.find(finder, ascii_upcase_table(), "zeta") is None