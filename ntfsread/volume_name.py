"""The $VOLUME_NAME attribute holding the label of an NTFS volume."""

from __future__ import annotations

from dataclasses import dataclass

from ntfsread.errors import InvalidStructuredValueSize
from ntfsread.types import NtfsPosition

VOLUME_NAME_MAX_SIZE = 128 * 2
"""A volume name has at most 128 UTF-16 code units (256 bytes)."""


@dataclass(frozen=True)
class NtfsVolumeName:
    """The user-defined name (label) of an NTFS volume."""

    _name: bytes

    @classmethod
    def from_bytes(cls, data: bytes, position: NtfsPosition) -> NtfsVolumeName:
        """Parse a $VOLUME_NAME value."""
        if len(data) > VOLUME_NAME_MAX_SIZE:
            raise InvalidStructuredValueSize(
                position=position,
                ty="VolumeName",
                expected=VOLUME_NAME_MAX_SIZE,
                actual=len(data),
            )
        return cls(bytes(data))

    def name(self) -> str:
        """Return the volume name; unpaired surrogates are kept as they are."""
        return self._name.decode("utf-16-le", "surrogatepass")

    def name_length(self) -> int:
        """Return the length of the volume name, in bytes."""
        return len(self._name)