"""The $ATTRIBUTE_LIST attribute referencing attributes stored in other File Records."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Iterator

from ntfsread.errors import InvalidStructuredValueSize
from ntfsread.types import NtfsPosition, Vcn

# ty, list_entry_length, name_length, name_offset, lowest_vcn,
# base_file_reference, instance
_HEADER = struct.Struct("<IHBBqQH")

ATTRIBUTE_LIST_ENTRY_HEADER_SIZE = _HEADER.size
"""Size of all attribute list entry header fields."""

NAME_MAX_SIZE = 255 * 2
"""A name has at most 255 UTF-16 code units."""


@dataclass(frozen=True)
class NtfsAttributeListEntry:
    """A single entry of an $ATTRIBUTE_LIST attribute."""

    _ty: int
    _list_entry_length: int
    _lowest_vcn: Vcn
    _base_file_reference: int
    _instance: int
    _name: bytes
    _position: NtfsPosition

    @classmethod
    def from_bytes(cls, data: bytes, position: NtfsPosition) -> NtfsAttributeListEntry:
        """Parse the entry at the start of ``data``; the name follows the header."""
        data = bytes(data)
        if len(data) < ATTRIBUTE_LIST_ENTRY_HEADER_SIZE:
            raise EOFError("failed to fill whole buffer")
        (
            ty,
            list_entry_length,
            name_length,
            _name_offset,
            lowest_vcn,
            base_file_reference,
            instance,
        ) = _HEADER.unpack_from(data)

        name_size = name_length * 2
        total_size = ATTRIBUTE_LIST_ENTRY_HEADER_SIZE + name_size
        if total_size > list_entry_length:
            raise InvalidStructuredValueSize(
                position=position,
                ty="AttributeList",
                expected=list_entry_length,
                actual=total_size,
            )
        if len(data) < total_size:
            raise EOFError("failed to fill whole buffer")

        name = data[ATTRIBUTE_LIST_ENTRY_HEADER_SIZE:total_size]
        return cls(
            ty,
            list_entry_length,
            Vcn(lowest_vcn),
            base_file_reference,
            instance,
            name,
            position,
        )

    def base_file_reference(self) -> int:
        """Return the raw 64-bit reference of the File Record holding the attribute."""
        return self._base_file_reference

    def instance(self) -> int:
        """Return the instance number, unique within a single File Record."""
        return self._instance

    def list_entry_length(self) -> int:
        """Return the length of this entry, in bytes."""
        return self._list_entry_length

    def lowest_vcn(self) -> Vcn:
        """Return the offset of this attribute's value data as a VCN."""
        return self._lowest_vcn

    def name(self) -> str:
        """Return the attribute name; unpaired surrogates are kept as they are."""
        return self._name.decode("utf-16-le", "surrogatepass")

    def name_length(self) -> int:
        """Return the length of the attribute name, in bytes."""
        return len(self._name)

    def position(self) -> NtfsPosition:
        """Return the absolute byte position of this entry."""
        return self._position

    def ty(self) -> int:
        """Return the raw type code of the attribute described by this entry."""
        return self._ty


class NtfsAttributeList:
    """The value of an $ATTRIBUTE_LIST attribute.

    ``data`` is the complete attribute value and ``position`` the absolute
    byte position where it starts.
    """

    __slots__ = ("_data", "_position")

    def __init__(self, data: bytes, position: NtfsPosition = NtfsPosition()) -> None:
        self._data = bytes(data)
        self._position = position

    def entries(self) -> Iterator[NtfsAttributeListEntry]:
        """Yield every entry of this attribute list in stored order.

        Iteration ends without the entry whose length runs past the value.
        """
        data = self._data
        position = self._position
        while data:
            entry = NtfsAttributeListEntry.from_bytes(data, position)
            length = entry.list_entry_length()
            if length > len(data):
                return
            yield entry
            data = data[length:]
            position = position + length

    def position(self) -> NtfsPosition:
        """Return the absolute byte position of this attribute value."""
        return self._position

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._position}, size={len(self)})"