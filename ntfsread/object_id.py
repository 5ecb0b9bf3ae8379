"""The $OBJECT_ID attribute holding globally unique identifiers of a file."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from ntfsread.errors import InvalidStructuredValueSize
from ntfsread.types import NtfsPosition

GUID_SIZE = 16
"""Size of a GUID on disk, in bytes."""


@dataclass(frozen=True)
class NtfsObjectId:
    """Structure of an $OBJECT_ID attribute, which is always resident.

    Each GUID is stored in the Windows little-endian layout and returned as
    a ``uuid.UUID``. The three optional GUIDs are None when the value is too
    short to hold them.
    """

    _object_id: uuid.UUID
    _birth_volume_id: Optional[uuid.UUID]
    _birth_object_id: Optional[uuid.UUID]
    _domain_id: Optional[uuid.UUID]

    @classmethod
    def from_bytes(cls, data: bytes, position: NtfsPosition) -> NtfsObjectId:
        """Parse an $OBJECT_ID value."""
        data = bytes(data)
        if len(data) < GUID_SIZE:
            raise InvalidStructuredValueSize(
                position=position,
                ty="ObjectId",
                expected=GUID_SIZE,
                actual=len(data),
            )

        def guid(index: int) -> Optional[uuid.UUID]:
            start = index * GUID_SIZE
            if len(data) < start + GUID_SIZE:
                return None
            return uuid.UUID(bytes_le=data[start : start + GUID_SIZE])

        object_id = guid(0)
        assert object_id is not None
        return cls(object_id, guid(1), guid(2), guid(3))

    def object_id(self) -> uuid.UUID:
        """Return the Object ID, a globally unique identifier of the file."""
        return self._object_id

    def birth_volume_id(self) -> Optional[uuid.UUID]:
        """Return the Object ID of the $Volume file where this file was created."""
        return self._birth_volume_id

    def birth_object_id(self) -> Optional[uuid.UUID]:
        """Return the first Object ID ever assigned to this file."""
        return self._birth_object_id

    def domain_id(self) -> Optional[uuid.UUID]:
        """Return the Domain ID of this file."""
        return self._domain_id