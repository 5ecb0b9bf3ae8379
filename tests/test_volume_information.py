import struct

import pytest

from ntfsread.errors import InvalidStructuredValueSize
from ntfsread.types import NtfsPosition
from ntfsread.volume_information import NtfsVolumeFlags, NtfsVolumeInformation


def volume_info_bytes(major, minor, flags):
    return struct.pack("<QBBH", 0, major, minor, flags)


def test_version():
    info = NtfsVolumeInformation.from_bytes(
        volume_info_bytes(3, 1, 0), NtfsPosition(4096)
    )
    assert info.major_version() == 3
    assert info.minor_version() == 1
    assert info.flags() == NtfsVolumeFlags(0)


def test_flags():
    raw = NtfsVolumeFlags.IS_DIRTY | NtfsVolumeFlags.MODIFIED_BY_CHKDSK
    info = NtfsVolumeInformation.from_bytes(
        volume_info_bytes(3, 1, raw), NtfsPosition(4096)
    )
    assert info.flags() == raw
    assert NtfsVolumeFlags.IS_DIRTY in info.flags()
    assert NtfsVolumeFlags.CHKDSK_UNDERWAY not in info.flags()


def test_unknown_flag_bits_are_dropped():
    info = NtfsVolumeInformation.from_bytes(
        volume_info_bytes(3, 1, NtfsVolumeFlags.IS_DIRTY | 0x0100), NtfsPosition(4096)
    )
    assert info.flags() == NtfsVolumeFlags.IS_DIRTY


def test_trailing_bytes_are_ignored():
    data = volume_info_bytes(3, 0, 0) + b"\xff" * 8
    info = NtfsVolumeInformation.from_bytes(data, NtfsPosition(4096))
    assert (info.major_version(), info.minor_version()) == (3, 0)


def test_too_short():
    data = volume_info_bytes(3, 1, 0)[:-1]
    with pytest.raises(InvalidStructuredValueSize) as info:
        NtfsVolumeInformation.from_bytes(data, NtfsPosition(4096))
    assert info.value.expected == len(data) + 1
    assert info.value.actual == len(data)
    assert info.value.position == NtfsPosition(4096)