"""The $FILE_NAME attribute, also used as the key of directory indexes."""

from __future__ import annotations

import enum
import io
import struct
from dataclasses import dataclass
from typing import BinaryIO

from ntfsread.errors import (
    InvalidStructuredValueSize,
    UnsupportedFileNamespace,
    read_exact,
)
from ntfsread.flags import NtfsFileAttributeFlags
from ntfsread.ntfstime import NtfsTime
from ntfsread.types import NtfsPosition

_HEADER = struct.Struct("<QQQQQQQIIBB")

FILE_NAME_HEADER_SIZE = _HEADER.size
"""Size of all header fields of a $FILE_NAME attribute."""

FILE_NAME_MIN_SIZE = FILE_NAME_HEADER_SIZE + 2
"""The smallest $FILE_NAME attribute has a name of a single character."""

NAME_MAX_SIZE = 255 * 2
"""A name has at most 255 UTF-16 code units."""

_ATTRIBUTE_TYPE = "FileName"


class NtfsFileNamespace(enum.IntEnum):
    """Character set constraint of a file name."""

    POSIX = 0
    WIN32 = 1
    DOS = 2
    WIN32_AND_DOS = 3


@dataclass(frozen=True)
class _FileNameHeader:
    parent_directory_reference: int
    creation_time: int
    modification_time: int
    mft_record_modification_time: int
    access_time: int
    allocated_size: int
    data_size: int
    file_attributes: int
    reparse_point_tag: int
    name_length: int
    namespace: int


@dataclass(frozen=True)
class NtfsFileName:
    """Structure of a $FILE_NAME attribute.

    NTFS creates one for every hard link. The times, sizes and attributes it
    holds are only updated when the file name changes.
    """

    _header: _FileNameHeader
    _name: bytes

    @classmethod
    def from_bytes(cls, data: bytes, position: NtfsPosition) -> NtfsFileName:
        """Parse a $FILE_NAME value (or index key) held entirely in ``data``."""
        return cls.from_stream(io.BytesIO(data), position, len(data))

    @classmethod
    def from_stream(
        cls, stream: BinaryIO, position: NtfsPosition, value_length: int
    ) -> NtfsFileName:
        """Parse a $FILE_NAME value of ``value_length`` bytes from ``stream``."""
        if value_length < FILE_NAME_MIN_SIZE:
            raise InvalidStructuredValueSize(
                position=position,
                ty=_ATTRIBUTE_TYPE,
                expected=FILE_NAME_MIN_SIZE,
                actual=value_length,
            )

        header = _FileNameHeader(*_HEADER.unpack(read_exact(stream, _HEADER.size)))

        name_length = header.name_length * 2
        total_size = FILE_NAME_HEADER_SIZE + name_length
        if total_size > value_length:
            raise InvalidStructuredValueSize(
                position=position,
                ty=_ATTRIBUTE_TYPE,
                expected=value_length,
                actual=total_size,
            )

        if header.namespace not in NtfsFileNamespace._value2member_map_:
            raise UnsupportedFileNamespace(position=position, actual=header.namespace)

        name = read_exact(stream, name_length)
        return cls(header, name)

    def name(self) -> str:
        """Return the file name; unpaired surrogates are kept as they are."""
        return self._name.decode("utf-16-le", "surrogatepass")

    def name_length(self) -> int:
        """Return the length of the file name, in bytes."""
        return len(self._name)

    def namespace(self) -> NtfsFileNamespace:
        """Return the namespace of this file name."""
        return NtfsFileNamespace(self._header.namespace)

    def file_attributes(self) -> NtfsFileAttributeFlags:
        """Return the file attribute flags (Read-Only, Hidden, System, ...)."""
        return NtfsFileAttributeFlags(self._header.file_attributes)

    def is_directory(self) -> bool:
        """Return whether this file is a directory."""
        return NtfsFileAttributeFlags.IS_DIRECTORY in self.file_attributes()

    def parent_directory_reference(self) -> int:
        """Return the raw 64-bit file reference of the parent directory."""
        return self._header.parent_directory_reference

    def creation_time(self) -> NtfsTime:
        """Return the creation time stored in this record."""
        return NtfsTime(self._header.creation_time)

    def modification_time(self) -> NtfsTime:
        """Return the modification time stored in this record."""
        return NtfsTime(self._header.modification_time)

    def mft_record_modification_time(self) -> NtfsTime:
        """Return the MFT record modification time stored in this record."""
        return NtfsTime(self._header.mft_record_modification_time)

    def access_time(self) -> NtfsTime:
        """Return the last access time stored in this record."""
        return NtfsTime(self._header.access_time)

    def allocated_size(self) -> int:
        """Return the allocated size of the unnamed $DATA attribute, in bytes."""
        return self._header.allocated_size

    def data_size(self) -> int:
        """Return the used size of the unnamed $DATA attribute, in bytes."""
        return self._header.data_size