import struct

import pytest

from ntfsread.errors import (
    InvalidIndexRootEntriesOffset,
    InvalidIndexRootUsedSize,
    InvalidStructuredValueSize,
)
from ntfsread.index_entry import IndexEntryFlags
from ntfsread.index_root import INDEX_ROOT_HEADER_SIZE, NtfsIndexRoot
from ntfsread.indexes import NtfsFileNameIndex
from ntfsread.types import NtfsPosition

POSITION = NtfsPosition(0x3000)


def file_name_key(name):
    encoded = name.encode("utf-16-le")
    header = struct.pack("<QQQQQQQIIBB", 5, 0, 0, 0, 0, 0, 0, 0, 0, len(name), 1)
    return header + encoded


def index_entry(key=b"", flags=0, file_reference=0):
    length = (16 + len(key) + 7) // 8 * 8
    body = struct.pack("<QHHB3x", file_reference, length, len(key), flags) + key
    return body.ljust(length, b"\0")


def build_index_root(blob, record_size=4096, flags=0, entries_offset=16, index_size=None):
    if index_size is None:
        index_size = entries_offset + len(blob)
    header = struct.pack("<IIIb3x", 0x30, 1, record_size, 1)
    node = struct.pack("<IIIB3x", entries_offset, index_size, index_size, flags)
    return header + node + blob


def sample_blob():
    return (
        index_entry(file_name_key("first"), file_reference=11)
        + index_entry(file_name_key("second"), file_reference=12)
        + index_entry(flags=IndexEntryFlags.LAST_ENTRY)
    )


def test_entries():
    root = NtfsIndexRoot.from_bytes(build_index_root(sample_blob()), POSITION)
    entries = list(root.entries(NtfsFileNameIndex))
    assert [entry.key().name() for entry in entries[:2]] == ["first", "second"]
    assert [entry.file_reference() for entry in entries[:2]] == [11, 12]
    assert entries[2].key() is None


def test_entry_positions_follow_each_other():
    root = NtfsIndexRoot.from_bytes(build_index_root(sample_blob()), POSITION)
    entries = list(root.entries(NtfsFileNameIndex))
    for previous, current in zip(entries, entries[1:]):
        assert current.position() == previous.position() + previous.index_entry_length()
    assert entries[0].position() > root.position()


def test_header_fields():
    blob = sample_blob()
    root = NtfsIndexRoot.from_bytes(build_index_root(blob, record_size=4096), POSITION)
    assert root.index_record_size() == 4096
    assert root.index_data_size() == 16 + len(blob)
    assert root.index_allocated_size() == root.index_data_size()
    assert root.position() == POSITION
    assert not root.is_large_index()


def test_large_index_flag():
    root = NtfsIndexRoot.from_bytes(build_index_root(sample_blob(), flags=1), POSITION)
    assert root.is_large_index()


def test_too_short():
    with pytest.raises(InvalidStructuredValueSize) as info:
        NtfsIndexRoot.from_bytes(b"\0" * 20, POSITION)
    assert info.value.expected == INDEX_ROOT_HEADER_SIZE
    assert info.value.actual == 20


def test_entries_offset_beyond_end():
    data = build_index_root(sample_blob(), entries_offset=1000, index_size=1000)
    with pytest.raises(InvalidIndexRootEntriesOffset) as info:
        NtfsIndexRoot.from_bytes(data, POSITION)
    assert info.value.expected == INDEX_ROOT_HEADER_SIZE + 1000
    assert info.value.actual == len(data)


def test_used_size_beyond_end():
    data = build_index_root(sample_blob(), index_size=2000)
    with pytest.raises(InvalidIndexRootUsedSize) as info:
        NtfsIndexRoot.from_bytes(data, POSITION)
    assert info.value.expected == INDEX_ROOT_HEADER_SIZE + 2000
    assert info.value.actual == len(data)