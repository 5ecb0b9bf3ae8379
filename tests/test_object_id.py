import uuid

import pytest

from ntfsread.errors import InvalidStructuredValueSize
from ntfsread.object_id import NtfsObjectId
from ntfsread.types import NtfsPosition

POSITION = NtfsPosition(512)
GUIDS = [bytes(range(i * 16, i * 16 + 16)) for i in range(4)]


def test_object_id_only():
    object_id = NtfsObjectId.from_bytes(GUIDS[0], POSITION)
    assert object_id.object_id().bytes_le == GUIDS[0]
    assert object_id.birth_volume_id() is None
    assert object_id.birth_object_id() is None
    assert object_id.domain_id() is None


def test_all_guids():
    object_id = NtfsObjectId.from_bytes(b"".join(GUIDS), POSITION)
    assert object_id.object_id() == uuid.UUID(bytes_le=GUIDS[0])
    assert object_id.birth_volume_id() == uuid.UUID(bytes_le=GUIDS[1])
    assert object_id.birth_object_id() == uuid.UUID(bytes_le=GUIDS[2])
    assert object_id.domain_id() == uuid.UUID(bytes_le=GUIDS[3])


def test_partial_guid_is_ignored():
    object_id = NtfsObjectId.from_bytes(b"".join(GUIDS[:2]) + GUIDS[2][:15], POSITION)
    assert object_id.birth_volume_id() == uuid.UUID(bytes_le=GUIDS[1])
    assert object_id.birth_object_id() is None


def test_little_endian_layout():
    data = bytes.fromhex("33221100554477668899aabbccddeeff")
    object_id = NtfsObjectId.from_bytes(data, POSITION)
    assert str(object_id.object_id()) == "00112233-4455-6677-8899-aabbccddeeff"


def test_too_short_value_raises():
    with pytest.raises(InvalidStructuredValueSize) as excinfo:
        NtfsObjectId.from_bytes(bytes(15), POSITION)
    assert excinfo.value.expected == 16
    assert excinfo.value.actual == 15