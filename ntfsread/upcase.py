"""Case-insensitive comparison of UTF-16 names using the $UpCase table."""

from __future__ import annotations

import struct
from itertools import zip_longest
from typing import Iterable, Sequence, Union

from ntfsread.errors import InvalidUpcaseTableSize

UPCASE_CHARACTER_COUNT = 65536
"""One uppercase character for each character of the Basic Multilingual Plane."""

UPCASE_TABLE_SIZE = UPCASE_CHARACTER_COUNT * 2
"""Size of the table on disk, in bytes (128 KiB)."""

Text = Union[str, bytes, bytearray, memoryview]


def _code_units(text: Text) -> tuple[int, ...]:
    """Return the UTF-16 code units of a str or of little-endian UTF-16 bytes."""
    if isinstance(text, str):
        raw = text.encode("utf-16-le", "surrogatepass")
    else:
        raw = bytes(text)
    if len(raw) % 2:
        raise ValueError(f"UTF-16 data must have an even length, got {len(raw)} bytes")
    return struct.unpack(f"<{len(raw) // 2}H", raw)


class UpcaseTable:
    """Table mapping every UCS-2 character to its uppercase variant.

    NTFS stores this table in the $UpCase file. It differs slightly between
    Windows versions, so it must always be taken from the filesystem itself.
    """

    __slots__ = ("_uppercase_characters",)

    def __init__(self, uppercase_characters: Iterable[int]) -> None:
        characters = tuple(uppercase_characters)
        if len(characters) != UPCASE_CHARACTER_COUNT:
            raise InvalidUpcaseTableSize(
                expected=UPCASE_TABLE_SIZE, actual=len(characters) * 2
            )
        if any(not 0 <= character <= 0xFFFF for character in characters):
            raise ValueError("upcase table entries must be 16-bit code units")
        self._uppercase_characters: Sequence[int] = characters

    @classmethod
    def from_bytes(cls, data: bytes) -> UpcaseTable:
        """Build the table from the raw little-endian contents of $UpCase."""
        if len(data) != UPCASE_TABLE_SIZE:
            raise InvalidUpcaseTableSize(expected=UPCASE_TABLE_SIZE, actual=len(data))
        return cls(struct.unpack(f"<{UPCASE_CHARACTER_COUNT}H", data))

    def to_uppercase(self, character: int) -> int:
        """Return the uppercase variant of a UCS-2 code unit.

        A character without an uppercase equivalent is returned as it is.
        """
        if not 0 <= character < UPCASE_CHARACTER_COUNT:
            raise ValueError(f"not a UCS-2 code unit: {character}")
        return self._uppercase_characters[character]

    def compare(self, left: Text, right: Text) -> int:
        """Compare two names case-insensitively.

        Each name is a str or little-endian UTF-16 bytes. Returns -1, 0 or 1
        as ``left`` sorts before, equal to or after ``right``.
        """
        table = self._uppercase_characters
        for this_unit, other_unit in zip_longest(_code_units(left), _code_units(right)):
            if other_unit is None:
                return 1
            if this_unit is None:
                return -1
            this_upper = table[this_unit]
            other_upper = table[other_unit]
            if this_upper != other_upper:
                return -1 if this_upper < other_upper else 1
        return 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({UPCASE_CHARACTER_COUNT} characters)"