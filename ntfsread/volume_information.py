"""The $VOLUME_INFORMATION attribute of the $Volume file."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

from ntfsread.errors import InvalidStructuredValueSize
from ntfsread.types import NtfsPosition

_DATA = struct.Struct("<QBBH")

VOLUME_INFORMATION_SIZE = _DATA.size
"""Size of all $VOLUME_INFORMATION fields."""


class NtfsVolumeFlags(enum.IntFlag):
    """Flags of an NTFS volume."""

    IS_DIRTY = 0x0001
    RESIZE_LOG_FILE = 0x0002
    UPGRADE_ON_MOUNT = 0x0004
    MOUNTED_ON_NT4 = 0x0008
    DELETE_USN_UNDERWAY = 0x0010
    REPAIR_OBJECT_ID = 0x0020
    CHKDSK_UNDERWAY = 0x4000
    MODIFIED_BY_CHKDSK = 0x8000


_KNOWN_FLAGS = 0
for _member in NtfsVolumeFlags:
    _KNOWN_FLAGS |= _member.value
del _member


@dataclass(frozen=True)
class NtfsVolumeInformation:
    """General information about the filesystem, like the NTFS version."""

    _major_version: int
    _minor_version: int
    _flags: int

    @classmethod
    def from_bytes(cls, data: bytes, position: NtfsPosition) -> NtfsVolumeInformation:
        """Parse a $VOLUME_INFORMATION value."""
        if len(data) < VOLUME_INFORMATION_SIZE:
            raise InvalidStructuredValueSize(
                position=position,
                ty="StandardInformation",
                expected=VOLUME_INFORMATION_SIZE,
                actual=len(data),
            )
        _reserved, major, minor, flags = _DATA.unpack_from(bytes(data))
        return cls(major, minor, flags)

    def flags(self) -> NtfsVolumeFlags:
        """Return the volume flags; unknown bits are dropped."""
        return NtfsVolumeFlags(self._flags & _KNOWN_FLAGS)

    def major_version(self) -> int:
        """Return the major NTFS version (3 for NTFS 3.1)."""
        return self._major_version

    def minor_version(self) -> int:
        """Return the minor NTFS version (1 for NTFS 3.1)."""
        return self._minor_version