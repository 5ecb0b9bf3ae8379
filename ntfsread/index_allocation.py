"""The $INDEX_ALLOCATION attribute holding the sub-nodes of an NTFS B-tree index."""

from __future__ import annotations

from typing import Iterator

from ntfsread.errors import VcnMismatchInIndexAllocation, VcnOutOfBoundsInIndexAllocation
from ntfsread.index_record import NtfsIndexRecord
from ntfsread.types import NtfsPosition, Vcn


class NtfsIndexAllocation:
    """The value of an $INDEX_ALLOCATION attribute.

    ``data`` is the complete attribute value, ``cluster_size`` the cluster size
    of the filesystem (used to turn VCNs into byte offsets) and ``position``
    the absolute byte position where the value starts.
    """

    __slots__ = ("_data", "_cluster_size", "_position")

    def __init__(
        self,
        data: bytes,
        cluster_size: int,
        position: NtfsPosition = NtfsPosition(),
    ) -> None:
        if cluster_size <= 0:
            raise ValueError(f"cluster size must be positive, got {cluster_size}")
        self._data = bytes(data)
        self._cluster_size = cluster_size
        self._position = position

    def __len__(self) -> int:
        return len(self._data)

    def position(self) -> NtfsPosition:
        """Return the absolute byte position of this attribute value."""
        return self._position

    def _record_at(self, offset: int, index_record_size: int) -> NtfsIndexRecord:
        raw = self._data[offset : offset + index_record_size]
        if len(raw) < index_record_size:
            raise EOFError("failed to fill whole buffer")
        return NtfsIndexRecord.from_bytes(raw, self._position + offset)

    @staticmethod
    def _check_record_size(index_record_size: int) -> None:
        if index_record_size <= 0:
            raise ValueError(
                f"index record size must be positive, got {index_record_size}"
            )

    def record_from_vcn(self, index_record_size: int, vcn: Vcn) -> NtfsIndexRecord:
        """Return the fixed-up and validated index record located at ``vcn``.

        The VCN stored in the record must match the requested one.
        """
        self._check_record_size(index_record_size)
        offset = vcn.offset(self._cluster_size)
        if not 0 <= offset < len(self._data):
            raise VcnOutOfBoundsInIndexAllocation(position=self._position, vcn=vcn)

        record = self._record_at(offset, index_record_size)
        if record.vcn() != vcn:
            raise VcnMismatchInIndexAllocation(
                position=self._position, expected=vcn, actual=record.vcn()
            )
        return record

    def records(self, index_record_size: int) -> Iterator[NtfsIndexRecord]:
        """Yield every index record of this attribute, each fixed up and validated."""
        self._check_record_size(index_record_size)
        return (
            self._record_at(offset, index_record_size)
            for offset in range(0, len(self._data), index_record_size)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(position={self._position}, "
            f"size={len(self._data)}, cluster_size={self._cluster_size})"
        )