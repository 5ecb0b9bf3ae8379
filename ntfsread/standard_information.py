"""The $STANDARD_INFORMATION attribute holding file times and file attributes."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

from ntfsread.errors import InvalidStructuredValueSize
from ntfsread.flags import NtfsFileAttributeFlags
from ntfsread.ntfstime import NtfsTime
from ntfsread.types import NtfsPosition

# creation, modification, mft record modification, access, file_attributes
_NTFS1 = struct.Struct("<QQQQI")
# maximum_versions, version, class_id, owner_id, security_id, quota_charged, usn
_NTFS3 = struct.Struct("<IIIIIQQ")

STANDARD_INFORMATION_SIZE_NTFS1 = 48
"""Size of the NTFS 1.x fields plus some reserved bytes."""

STANDARD_INFORMATION_SIZE_NTFS3 = _NTFS1.size + _NTFS3.size
"""Size of the NTFS 1.x plus the NTFS 3.x fields."""


@dataclass(frozen=True)
class _Ntfs1Data:
    creation_time: int
    modification_time: int
    mft_record_modification_time: int
    access_time: int
    file_attributes: int


@dataclass(frozen=True)
class _Ntfs3Data:
    maximum_versions: int
    version: int
    class_id: int
    owner_id: int
    security_id: int
    quota_charged: int
    usn: int


@dataclass(frozen=True)
class NtfsStandardInformation:
    """Structure of a $STANDARD_INFORMATION attribute, which is always resident.

    The fields introduced by NTFS 3.x are None when the value is too short
    to hold them.
    """

    _ntfs1: _Ntfs1Data
    _ntfs3: Optional[_Ntfs3Data]

    @classmethod
    def from_bytes(
        cls, data: bytes, position: NtfsPosition
    ) -> NtfsStandardInformation:
        """Parse a $STANDARD_INFORMATION value."""
        data = bytes(data)
        if len(data) < STANDARD_INFORMATION_SIZE_NTFS1:
            raise InvalidStructuredValueSize(
                position=position,
                ty="StandardInformation",
                expected=STANDARD_INFORMATION_SIZE_NTFS1,
                actual=len(data),
            )
        ntfs1 = _Ntfs1Data(*_NTFS1.unpack_from(data))
        ntfs3 = None
        if len(data) >= STANDARD_INFORMATION_SIZE_NTFS3:
            ntfs3 = _Ntfs3Data(*_NTFS3.unpack_from(data, _NTFS1.size))
        return cls(ntfs1, ntfs3)

    def creation_time(self) -> NtfsTime:
        """Return the time this file was created."""
        return NtfsTime(self._ntfs1.creation_time)

    def modification_time(self) -> NtfsTime:
        """Return the time this file was last modified."""
        return NtfsTime(self._ntfs1.modification_time)

    def mft_record_modification_time(self) -> NtfsTime:
        """Return the time the MFT record of this file was last modified."""
        return NtfsTime(self._ntfs1.mft_record_modification_time)

    def access_time(self) -> NtfsTime:
        """Return the time this file was last accessed."""
        return NtfsTime(self._ntfs1.access_time)

    def file_attributes(self) -> NtfsFileAttributeFlags:
        """Return the file attribute flags (Read-Only, Hidden, System, ...)."""
        return NtfsFileAttributeFlags(self._ntfs1.file_attributes)

    def maximum_versions(self) -> Optional[int]:
        """Return the maximum allowed versions; zero means versioning is disabled."""
        return None if self._ntfs3 is None else self._ntfs3.maximum_versions

    def version(self) -> Optional[int]:
        """Return the version of the file; zero if versioning is disabled."""
        return None if self._ntfs3 is None else self._ntfs3.version

    def class_id(self) -> Optional[int]:
        """Return the Class ID of the file."""
        return None if self._ntfs3 is None else self._ntfs3.class_id

    def owner_id(self) -> Optional[int]:
        """Return the Owner ID of the file."""
        return None if self._ntfs3 is None else self._ntfs3.owner_id

    def security_id(self) -> Optional[int]:
        """Return the Security ID of the file."""
        return None if self._ntfs3 is None else self._ntfs3.security_id

    def quota_charged(self) -> Optional[int]:
        """Return the quota charged by this file."""
        return None if self._ntfs3 is None else self._ntfs3.quota_charged

    def usn(self) -> Optional[int]:
        """Return the Update Sequence Number (USN) of the file."""
        return None if self._ntfs3 is None else self._ntfs3.usn