"""Multi-sector records protected by an update sequence array."""

from __future__ import annotations

import struct

from ntfsread.errors import (
    InvalidUpdateSequenceCount,
    InvalidUpdateSequenceNumberRange,
    UpdateSequenceArrayExceedsRecordSize,
    UpdateSequenceNumberMismatch,
)
from ntfsread.types import NtfsPosition

NTFS_BLOCK_SIZE = 512
"""Size of a sector protected by one update sequence array element."""

# signature, update_sequence_offset, update_sequence_count, logfile_sequence_number
_HEADER = struct.Struct("<4sHHQ")

RECORD_HEADER_SIZE = _HEADER.size
"""Size of the header shared by all records ("FILE", "INDX", ...)."""

_U16 = struct.Struct("<H")
_UPDATE_SEQUENCE_OFFSET = 4
_UPDATE_SEQUENCE_COUNT = 6


class Record:
    """A raw record whose sector ends are protected by an update sequence number.

    ``fixup`` must be called before the record contents can be trusted.
    """

    __slots__ = ("_data", "_position")

    def __init__(self, data: bytes, position: NtfsPosition) -> None:
        if len(data) < RECORD_HEADER_SIZE:
            raise ValueError(
                f"a record needs at least {RECORD_HEADER_SIZE} bytes, got {len(data)}"
            )
        self._data = bytearray(data)
        self._position = position

    def data(self) -> bytes:
        """Return the current contents of the record."""
        return bytes(self._data)

    def position(self) -> NtfsPosition:
        """Return the absolute byte position of the record."""
        return self._position

    def __len__(self) -> int:
        return len(self._data)

    def signature(self) -> bytes:
        """Return the four signature bytes at the start of the record."""
        return bytes(self._data[:4])

    def _update_sequence_offset(self) -> int:
        return _U16.unpack_from(self._data, _UPDATE_SEQUENCE_OFFSET)[0]

    def _update_sequence_count(self) -> int:
        return _U16.unpack_from(self._data, _UPDATE_SEQUENCE_COUNT)[0]

    def update_sequence_size(self) -> int:
        """Return the size of the update sequence number plus its array, in bytes."""
        return self._update_sequence_count() * _U16.size

    def fixup(self) -> None:
        """Check every sector end against the update sequence number and restore it.

        The last two bytes of each sector are replaced by the matching element
        of the update sequence array.
        """
        size = len(self._data)
        offset = self._update_sequence_offset()
        usn_end = offset + _U16.size
        if usn_end > size:
            raise InvalidUpdateSequenceNumberRange(
                position=self._position, range=range(offset, usn_end), size=size
            )
        update_sequence_number = bytes(self._data[offset:usn_end])

        count = self._update_sequence_count()
        if count == 0:
            raise InvalidUpdateSequenceCount(
                position=self._position, update_sequence_count=count
            )
        array_count = count - 1

        array_end = offset + count * _U16.size
        sectors_end = array_count * NTFS_BLOCK_SIZE
        if array_end > size or sectors_end > size:
            raise UpdateSequenceArrayExceedsRecordSize(
                position=self._position, array_count=array_count, record_size=size
            )

        for sector, array_position in enumerate(range(usn_end, array_end, _U16.size)):
            sector_end = (sector + 1) * NTFS_BLOCK_SIZE
            sector_start = sector_end - _U16.size
            current = bytes(self._data[sector_start:sector_end])
            if current != update_sequence_number:
                raise UpdateSequenceNumberMismatch(
                    position=self._position + array_position,
                    expected=update_sequence_number,
                    actual=current,
                )
            self._data[sector_start:sector_end] = self._data[
                array_position : array_position + _U16.size
            ]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(signature={self.signature()!r}, "
            f"size={len(self)}, position={self._position})"
        )