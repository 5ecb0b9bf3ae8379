"""The $INDEX_ROOT attribute holding the top-level node of an index."""

from __future__ import annotations

import struct
from typing import Iterator

from ntfsread.errors import (
    InvalidIndexRootEntriesOffset,
    InvalidIndexRootUsedSize,
    InvalidStructuredValueSize,
)
from ntfsread.index_entry import NtfsIndexEntry, node_entries
from ntfsread.index_record import INDEX_NODE_HEADER_SIZE, NODE_HEADER
from ntfsread.indexes import IndexEntryType
from ntfsread.types import NtfsPosition

INDEX_ROOT_HEADER_SIZE = 16
"""Size of all index root header fields plus some reserved bytes."""

# ty, collation_rule, index_record_size, clusters_per_index_record
_ROOT_HEADER = struct.Struct("<IIIb")

_LARGE_INDEX_FLAG = 0x01


class NtfsIndexRoot:
    """Structure of an $INDEX_ROOT attribute, which is always resident.

    Sub-nodes of a large index live in the matching $INDEX_ALLOCATION attribute.
    """

    __slots__ = (
        "_data",
        "_position",
        "_index_record_size",
        "_entries_offset",
        "_index_size",
        "_allocated_size",
        "_flags",
    )

    def __init__(self, data: bytes, position: NtfsPosition) -> None:
        data = bytes(data)
        if len(data) < INDEX_ROOT_HEADER_SIZE + INDEX_NODE_HEADER_SIZE:
            raise InvalidStructuredValueSize(
                position=position,
                ty="IndexRoot",
                expected=INDEX_ROOT_HEADER_SIZE,
                actual=len(data),
            )
        self._data = data
        self._position = position
        _ty, _collation_rule, self._index_record_size, _clusters = (
            _ROOT_HEADER.unpack_from(data)
        )
        (
            self._entries_offset,
            self._index_size,
            self._allocated_size,
            self._flags,
        ) = NODE_HEADER.unpack_from(data, INDEX_ROOT_HEADER_SIZE)
        self._validate_sizes()

    @classmethod
    def from_bytes(cls, data: bytes, position: NtfsPosition) -> NtfsIndexRoot:
        """Parse and validate an $INDEX_ROOT value."""
        return cls(data, position)

    def _entries_range(self) -> tuple[int, int]:
        start = INDEX_ROOT_HEADER_SIZE + self._entries_offset
        end = INDEX_ROOT_HEADER_SIZE + self._index_size
        return start, end

    def _validate_sizes(self) -> None:
        start, end = self._entries_range()
        size = len(self._data)
        if start >= size:
            raise InvalidIndexRootEntriesOffset(
                position=self._position, expected=start, actual=size
            )
        if end > size:
            raise InvalidIndexRootUsedSize(
                position=self._position, expected=end, actual=size
            )

    def entries(self, entry_type: type[IndexEntryType]) -> Iterator[NtfsIndexEntry]:
        """Yield the top-level entries of the B-tree in ascending key order."""
        start, end = self._entries_range()
        return node_entries(self._data[start:end], self._position + start, entry_type)

    def index_allocated_size(self) -> int:
        """Return the allocated size of this index root, in bytes."""
        return self._allocated_size

    def index_data_size(self) -> int:
        """Return the size used by index data within this index root, in bytes."""
        return self._index_size

    def index_record_size(self) -> int:
        """Return the size of a single index record of this index, in bytes."""
        return self._index_record_size

    def is_large_index(self) -> bool:
        """Return whether the index needs an extra $INDEX_ALLOCATION attribute."""
        return bool(self._flags & _LARGE_INDEX_FLAG)

    def position(self) -> NtfsPosition:
        """Return the absolute byte position of this index root."""
        return self._position

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._position}, "
            f"large={self.is_large_index()}, size={len(self._data)})"
        )