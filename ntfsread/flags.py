"""File attribute flags shared by $STANDARD_INFORMATION and $FILE_NAME."""

from __future__ import annotations

import enum


class NtfsFileAttributeFlags(enum.IntFlag):
    """Flags a user can set for a file (Read-Only, Hidden, System, Archive, etc.).

    Constructing a value silently drops bits that have no defined flag.
    """

    READ_ONLY = 0x0001
    HIDDEN = 0x0002
    SYSTEM = 0x0004
    ARCHIVE = 0x0020
    DEVICE = 0x0040
    NORMAL = 0x0080
    TEMPORARY = 0x0100
    SPARSE_FILE = 0x0200
    REPARSE_POINT = 0x0400
    COMPRESSED = 0x0800
    OFFLINE = 0x1000
    NOT_CONTENT_INDEXED = 0x2000
    ENCRYPTED = 0x4000
    IS_DIRECTORY = 0x1000_0000

    @classmethod
    def _missing_(cls, value):
        known = 0
        for member in cls.__members__.values():
            known |= member.value
        return super()._missing_(value & known)

    def __str__(self) -> str:
        return " | ".join(
            name
            for name, member in type(self).__members__.items()
            if member.value and self.value & member.value == member.value
        )