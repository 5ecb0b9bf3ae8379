"""Single entries of an NTFS B-tree index node."""

from __future__ import annotations

import enum
import struct
from typing import Any, Iterator, Optional

from ntfsread.errors import InvalidIndexEntryDataRange, InvalidIndexEntrySize
from ntfsread.indexes import IndexEntryType
from ntfsread.types import NtfsPosition, Vcn

INDEX_ENTRY_HEADER_SIZE = 16
"""Size of all index entry header fields plus some reserved bytes."""

# data_offset, data_length, padding, index_entry_length, key_length, flags
_HEADER = struct.Struct("<HHIHHB")
_FILE_REFERENCE = struct.Struct("<Q")
_VCN = struct.Struct("<q")


class IndexEntryFlags(enum.IntFlag):
    """Flags of an index entry."""

    HAS_SUBNODE = 0x01
    LAST_ENTRY = 0x02


_KNOWN_FLAGS = IndexEntryFlags.HAS_SUBNODE | IndexEntryFlags.LAST_ENTRY


class NtfsIndexEntry:
    """A single entry of an NTFS index.

    ``entry_type`` is the IndexEntryType subclass that parses the key and
    data of this entry. The raw data is trimmed to the entry's own length.
    """

    __slots__ = (
        "_data",
        "_position",
        "entry_type",
        "_data_offset",
        "_data_length",
        "_index_entry_length",
        "_key_length",
        "_flags",
    )

    def __init__(
        self, data: bytes, position: NtfsPosition, entry_type: type[IndexEntryType]
    ) -> None:
        data = bytes(data)
        if len(data) < INDEX_ENTRY_HEADER_SIZE:
            raise InvalidIndexEntrySize(
                position=position, expected=INDEX_ENTRY_HEADER_SIZE, actual=len(data)
            )
        (
            self._data_offset,
            self._data_length,
            _padding,
            self._index_entry_length,
            self._key_length,
            self._flags,
        ) = _HEADER.unpack_from(data)
        if self._index_entry_length > len(data):
            raise InvalidIndexEntrySize(
                position=position, expected=self._index_entry_length, actual=len(data)
            )
        self._data = data[: self._index_entry_length]
        self._position = position
        self.entry_type = entry_type

    def _slice(self, start: int, end: int) -> bytes:
        if end > len(self._data):
            raise InvalidIndexEntryDataRange(
                position=self._position, range=range(start, end), size=len(self._data)
            )
        return self._data[start:end]

    def _require_data(self) -> None:
        if not self.entry_type.has_data:
            raise TypeError(f"{self.entry_type.__name__} index entries carry no data")

    def flags(self) -> IndexEntryFlags:
        """Return the flags of this entry; unknown bits are dropped."""
        return IndexEntryFlags(self._flags & _KNOWN_FLAGS)

    def index_entry_length(self) -> int:
        """Return the total length of this entry, in bytes."""
        return self._index_entry_length

    def key_length(self) -> int:
        """Return the length of the key of this entry, in bytes."""
        return self._key_length

    def key(self) -> Optional[Any]:
        """Return the parsed key, or None if this entry has none.

        The last entry of a node never has a key.
        """
        if self._key_length == 0 or IndexEntryFlags.LAST_ENTRY in self.flags():
            return None
        start = INDEX_ENTRY_HEADER_SIZE
        raw = self._slice(start, start + self._key_length)
        return self.entry_type.parse_key(raw, self._position + start)

    def data(self) -> Optional[Any]:
        """Return the parsed data of this entry, or None if it has none.

        Raises TypeError for entry types that carry a file reference instead.
        """
        self._require_data()
        if self._data_offset == 0 or self._data_length == 0:
            return None
        start = self._data_offset
        raw = self._slice(start, start + self._data_length)
        return self.entry_type.parse_data(raw, self._position + start)

    def data_length(self) -> int:
        """Return the length of the data of this entry, in bytes."""
        self._require_data()
        return self._data_length

    def file_reference(self) -> int:
        """Return the raw 64-bit reference of the file this entry points to.

        Raises TypeError for entry types that carry data instead.
        """
        if not self.entry_type.has_file_reference:
            raise TypeError(
                f"{self.entry_type.__name__} index entries carry no file reference"
            )
        return _FILE_REFERENCE.unpack_from(self._data)[0]

    def subnode_vcn(self) -> Optional[Vcn]:
        """Return the VCN of the subnode of this entry, or None if it has none."""
        if IndexEntryFlags.HAS_SUBNODE not in self.flags():
            return None
        start = max(self._index_entry_length - _VCN.size, INDEX_ENTRY_HEADER_SIZE)
        raw = self._slice(start, start + _VCN.size)
        return Vcn(_VCN.unpack(raw)[0])

    def position(self) -> NtfsPosition:
        """Return the absolute byte position of this entry on the filesystem."""
        return self._position

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._position}, "
            f"length={self._index_entry_length}, flags={self.flags()!r}, "
            f"entry_type={self.entry_type.__name__})"
        )


def node_entries(
    data: bytes, position: NtfsPosition, entry_type: type[IndexEntryType]
) -> Iterator[NtfsIndexEntry]:
    """Yield the entries of one index node in ascending key order.

    Iteration stops after the entry flagged as the last one.
    """
    data = bytes(data)
    while data:
        entry = NtfsIndexEntry(data, position, entry_type)
        yield entry
        if IndexEntryFlags.LAST_ENTRY in entry.flags():
            return
        length = entry.index_entry_length()
        data = data[length:]
        position = position + length