"""Byte positions and cluster numbers on an NTFS filesystem."""

from __future__ import annotations

import functools
from dataclasses import dataclass

from ntfsread.errors import LcnTooBig, VcnTooBig

U64_MAX = 2**64 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

_NONE_STR = "<NONE>"


@functools.total_ordering
@dataclass(frozen=True)
class NtfsPosition:
    """An absolute nonzero byte position on the filesystem.

    ``value`` is None when no valid position can be given; a position of 0
    is stored as None. A missing position sorts before every valid one.
    """

    value: int | None = None

    def __post_init__(self) -> None:
        if self.value is None:
            return
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"position out of range: {self.value}")
        if self.value == 0:
            object.__setattr__(self, "value", None)

    def __add__(self, other: int) -> NtfsPosition:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        if not 0 <= other <= U64_MAX:
            raise ValueError(f"offset out of range: {other}")
        if self.value is None:
            return self
        return NtfsPosition((self.value + other) & U64_MAX)

    def _sort_key(self) -> tuple[bool, int]:
        return (self.value is not None, self.value or 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NtfsPosition):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return _NONE_STR if self.value is None else str(self.value)

    def __format__(self, spec: str) -> str:
        if self.value is None:
            return _NONE_STR
        return format(self.value, spec)


@dataclass(frozen=True, order=True)
class Lcn:
    """A Logical Cluster Number: an absolute cluster index into the filesystem."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"LCN out of range: {self.value}")

    def checked_add(self, vcn: Vcn) -> Lcn | None:
        """Add a VCN to this LCN, returning None on overflow or underflow."""
        result = self.value + vcn.value
        if 0 <= result <= U64_MAX:
            return Lcn(result)
        return None

    def position(self, cluster_size: int) -> NtfsPosition:
        """Return the absolute byte position of this LCN for the given cluster size."""
        byte_position = self.value * cluster_size
        if byte_position > U64_MAX:
            raise LcnTooBig(lcn=self)
        return NtfsPosition(byte_position)

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)


@dataclass(frozen=True, order=True)
class Vcn:
    """A Virtual Cluster Number: a cluster index relative to an LCN or attribute value."""

    value: int

    def __post_init__(self) -> None:
        if not I64_MIN <= self.value <= I64_MAX:
            raise ValueError(f"VCN out of range: {self.value}")

    def offset(self, cluster_size: int) -> int:
        """Return this VCN as a byte offset for the given cluster size."""
        byte_offset = self.value * cluster_size
        if not I64_MIN <= byte_offset <= I64_MAX:
            raise VcnTooBig(vcn=self)
        return byte_offset

    def __str__(self) -> str:
        return str(self.value)

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)