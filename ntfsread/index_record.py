"""Index records ("INDX") that hold the sub-nodes of an NTFS B-tree index."""

from __future__ import annotations

import struct
from typing import Iterator

from ntfsread.errors import (
    InvalidIndexAllocatedSize,
    InvalidIndexSignature,
    InvalidIndexUsedSize,
)
from ntfsread.index_entry import NtfsIndexEntry, node_entries
from ntfsread.indexes import IndexEntryType
from ntfsread.record import RECORD_HEADER_SIZE, Record
from ntfsread.types import NtfsPosition, Vcn

INDEX_RECORD_HEADER_SIZE = 24
"""Size of the record header plus the VCN of an index record."""

INDEX_NODE_HEADER_SIZE = 16
"""Size of all index node header fields plus some reserved bytes."""

# entries_offset, index_size, allocated_size, flags
NODE_HEADER = struct.Struct("<IIIB")

_VCN = struct.Struct("<q")
_HAS_SUBNODES_FLAG = 0x01
_SIGNATURE = b"INDX"


class NtfsIndexRecord:
    """A single, fixed-up and validated index record."""

    __slots__ = (
        "_data",
        "_position",
        "_vcn",
        "_entries_offset",
        "_index_size",
        "_allocated_size",
        "_flags",
    )

    def __init__(self, record: Record) -> None:
        data = record.data()
        minimum = INDEX_RECORD_HEADER_SIZE + NODE_HEADER.size
        if len(data) < minimum:
            raise ValueError(
                f"an index record needs at least {minimum} bytes, got {len(data)}"
            )
        self._data = data
        self._position = record.position()
        self._vcn = Vcn(_VCN.unpack_from(data, RECORD_HEADER_SIZE)[0])
        (
            self._entries_offset,
            self._index_size,
            self._allocated_size,
            self._flags,
        ) = NODE_HEADER.unpack_from(data, INDEX_RECORD_HEADER_SIZE)

    @classmethod
    def from_bytes(cls, data: bytes, position: NtfsPosition) -> NtfsIndexRecord:
        """Check the signature, apply the fixup and validate an index record."""
        record = Record(data, position)
        signature = record.signature()
        if signature != _SIGNATURE:
            raise InvalidIndexSignature(
                position=position, expected=_SIGNATURE, actual=signature
            )
        record.fixup()
        index_record = cls(record)
        index_record._validate_sizes()
        return index_record

    def _validate_sizes(self) -> None:
        record_size = len(self._data)

        total_allocated_size = INDEX_RECORD_HEADER_SIZE + self._allocated_size
        if total_allocated_size > record_size:
            raise InvalidIndexAllocatedSize(
                position=self._position,
                expected=record_size,
                actual=total_allocated_size,
            )

        total_data_size = INDEX_RECORD_HEADER_SIZE + self._index_size
        if total_data_size > total_allocated_size:
            raise InvalidIndexUsedSize(
                position=self._position,
                expected=total_allocated_size,
                actual=total_data_size,
            )

    def _entries_range(self) -> tuple[int, int]:
        start = INDEX_RECORD_HEADER_SIZE + self._entries_offset
        end = INDEX_RECORD_HEADER_SIZE + self._index_size
        return start, end

    def entries(self, entry_type: type[IndexEntryType]) -> Iterator[NtfsIndexEntry]:
        """Yield the entries of this index record in ascending key order."""
        start, end = self._entries_range()
        return node_entries(self._data[start:end], self._position + start, entry_type)

    def has_subnodes(self) -> bool:
        """Return whether this node has sub-nodes; otherwise it is a leaf."""
        return bool(self._flags & _HAS_SUBNODES_FLAG)

    def index_allocated_size(self) -> int:
        """Return the allocated size of this index record, in bytes."""
        return self._allocated_size

    def index_data_size(self) -> int:
        """Return the size used by index data within this record, in bytes."""
        return self._index_size

    def index_entries_offset(self) -> int:
        """Return the offset of the first entry, relative to the node header."""
        return self._entries_offset

    def vcn(self) -> Vcn:
        """Return the VCN this record reports for itself."""
        return self._vcn

    def position(self) -> NtfsPosition:
        """Return the absolute byte position of this index record."""
        return self._position

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vcn={self._vcn}, position={self._position}, "
            f"size={len(self._data)})"
        )