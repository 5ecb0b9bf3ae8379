"""Kinds of NTFS indexes and how to parse their entry keys and data."""

from __future__ import annotations

import abc
from typing import Any, Callable, ClassVar, Optional, Protocol

from ntfsread.file_name import NtfsFileName
from ntfsread.types import NtfsPosition
from ntfsread.upcase import UpcaseTable


class _Finder(Protocol):
    def find(self, cmp: Callable[[Any], int]) -> Optional[Any]:
        ...


class IndexEntryType(abc.ABC):
    """Describes the key and the data of the entries of one kind of index.

    An index entry either carries extra data (``has_data``) or a file
    reference (``has_file_reference``), never both.
    """

    has_data: ClassVar[bool] = False
    has_file_reference: ClassVar[bool] = False

    @classmethod
    @abc.abstractmethod
    def parse_key(cls, data: bytes, position: NtfsPosition) -> Any:
        """Parse the key stored in an index entry."""

    @classmethod
    def parse_data(cls, data: bytes, position: NtfsPosition) -> Any:
        """Parse the data stored in an index entry."""
        raise TypeError(f"{cls.__name__} index entries carry no data")


class NtfsFileNameIndex(IndexEntryType):
    """File name indexes, commonly known as directories."""

    has_file_reference = True

    @classmethod
    def parse_key(cls, data: bytes, position: NtfsPosition) -> NtfsFileName:
        """Parse the $FILE_NAME structure that serves as the key."""
        return NtfsFileName.from_bytes(bytes(data), position)

    @classmethod
    def find(cls, finder: _Finder, upcase_table: UpcaseTable, name: str) -> Any:
        """Find a file by name, compared case-insensitively via the $UpCase table.

        Returns whatever ``finder.find`` returns for the matching entry,
        or None if there is no such file.
        """
        return finder.find(
            lambda file_name: upcase_table.compare(name, file_name.name())
        )