"""NTFS timestamps: 100-nanosecond intervals since 1601-01-01 UTC."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ntfsread.errors import InvalidTime
from ntfsread.types import U64_MAX

EPOCH_DIFFERENCE_IN_INTERVALS = 116_444_736_000_000_000
"""Intervals between the NTFS epoch (1601-01-01) and the Unix epoch (1970-01-01)."""

INTERVALS_PER_SECOND = 10_000_000

_NT_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True, order=True)
class NtfsTime:
    """An NTFS timestamp, counting 100-nanosecond intervals since 1601-01-01."""

    nt_timestamp: int

    def __post_init__(self) -> None:
        if not 0 <= self.nt_timestamp <= U64_MAX:
            raise ValueError(f"NT timestamp out of range: {self.nt_timestamp}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> NtfsTime:
        """Convert a datetime; a naive datetime is taken as UTC.

        Raises InvalidTime if the datetime lies before 1601-01-01 UTC.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        delta = dt - _NT_EPOCH
        intervals = (
            (delta.days * 86_400 + delta.seconds) * INTERVALS_PER_SECOND
            + delta.microseconds * 10
        )
        if not 0 <= intervals <= U64_MAX:
            raise InvalidTime()
        return cls(intervals)

    def to_datetime(self) -> datetime:
        """Return this timestamp as an aware UTC datetime.

        Sub-microsecond intervals are dropped. Raises OverflowError for
        timestamps beyond the range of datetime.
        """
        return _NT_EPOCH + timedelta(microseconds=self.nt_timestamp // 10)

    @classmethod
    def now(cls) -> NtfsTime:
        """Return the current system time as an NTFS timestamp."""
        nanos = time.time_ns()
        if nanos < 0:
            raise InvalidTime()
        return cls(nanos // 100 + EPOCH_DIFFERENCE_IN_INTERVALS)