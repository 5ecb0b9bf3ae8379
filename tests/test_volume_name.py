import pytest

from ntfsread.errors import InvalidStructuredValueSize
from ntfsread.volume_name import VOLUME_NAME_MAX_SIZE, NtfsVolumeName

POSITION = None


def position():
    from ntfsread.types import NtfsPosition

    return NtfsPosition(0x4000)


def test_label():
    volume_name = NtfsVolumeName.from_bytes("mylabel".encode("utf-16-le"), position())
    assert volume_name.name_length() == 14
    assert volume_name.name() == "mylabel"


def test_empty_label():
    volume_name = NtfsVolumeName.from_bytes(b"", position())
    assert volume_name.name() == ""
    assert volume_name.name_length() == 0


def test_longest_label_round_trips():
    label = "x" * 128
    volume_name = NtfsVolumeName.from_bytes(label.encode("utf-16-le"), position())
    assert volume_name.name() == label
    assert volume_name.name_length() == VOLUME_NAME_MAX_SIZE


def test_label_too_long():
    data = ("y" * 129).encode("utf-16-le")
    with pytest.raises(InvalidStructuredValueSize) as info:
        NtfsVolumeName.from_bytes(data, position())
    assert info.value.expected == 256
    assert info.value.actual == len(data)
    assert info.value.ty == "VolumeName"