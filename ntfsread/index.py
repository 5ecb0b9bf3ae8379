"""Traversal and lookup of complete NTFS B-tree indexes."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from ntfsread.errors import MissingIndexAllocation
from ntfsread.index_allocation import NtfsIndexAllocation
from ntfsread.index_entry import IndexEntryFlags, NtfsIndexEntry
from ntfsread.index_record import NtfsIndexRecord
from ntfsread.index_root import NtfsIndexRoot
from ntfsread.indexes import IndexEntryType, NtfsFileNameIndex
from ntfsread.types import Vcn


class NtfsIndex:
    """An index made of an $INDEX_ROOT and, for large indexes, an $INDEX_ALLOCATION.

    ``entry_type`` selects how entry keys and data are parsed; it defaults to
    file name indexes (directories).
    """

    __slots__ = ("_index_root", "_index_allocation", "entry_type")

    def __init__(
        self,
        index_root: NtfsIndexRoot,
        index_allocation: Optional[NtfsIndexAllocation] = None,
        entry_type: type[IndexEntryType] = NtfsFileNameIndex,
    ) -> None:
        if index_allocation is None and index_root.is_large_index():
            raise MissingIndexAllocation(position=index_root.position())
        self._index_root = index_root
        self._index_allocation = index_allocation
        self.entry_type = entry_type

    def _root_entries(self) -> Iterator[NtfsIndexEntry]:
        return self._index_root.entries(self.entry_type)

    def _subnode_entries(self, vcn: Vcn) -> Iterator[NtfsIndexEntry]:
        if self._index_allocation is None:
            raise MissingIndexAllocation(position=self._index_root.position())
        record: NtfsIndexRecord = self._index_allocation.record_from_vcn(
            self._index_root.index_record_size(), vcn
        )
        return record.entries(self.entry_type)

    def entries(self) -> NtfsIndexEntries:
        """Return an iterator performing an in-order traversal of this index."""
        return NtfsIndexEntries(self)

    def finder(self) -> NtfsIndexFinder:
        """Return a helper to efficiently find an entry in this index."""
        return NtfsIndexFinder(self)


class NtfsIndexEntries:
    """Iterator over all entries of an index, in ascending key order."""

    __slots__ = ("_index", "_iterators", "_following_entries")

    def __init__(self, index: NtfsIndex) -> None:
        self._index = index
        self._iterators: list[Iterator[NtfsIndexEntry]] = [index._root_entries()]
        # One slot per subnode level: the entry that owns the subnode, if it
        # still has to be returned once the subnode has been iterated.
        self._following_entries: list[Optional[NtfsIndexEntry]] = []

    def __iter__(self) -> NtfsIndexEntries:
        return self

    def __next__(self) -> NtfsIndexEntry:
        while self._iterators:
            entry = next(self._iterators[-1], None)
            if entry is None:
                self._iterators.pop()
                if self._following_entries:
                    following = self._following_entries.pop()
                    if following is not None:
                        return following
                continue

            is_last_entry = IndexEntryFlags.LAST_ENTRY in entry.flags()
            subnode_vcn = entry.subnode_vcn()
            if subnode_vcn is not None:
                self._iterators.append(self._index._subnode_entries(subnode_vcn))
                self._following_entries.append(None if is_last_entry else entry)
            elif not is_last_entry:
                return entry
        raise StopIteration


class NtfsIndexFinder:
    """Finds single entries of an index by descending its B-tree."""

    __slots__ = ("_index",)

    def __init__(self, index: NtfsIndex) -> None:
        self._index = index

    def find(self, cmp: Callable[[Any], int]) -> Optional[NtfsIndexEntry]:
        """Return the entry whose key ``cmp`` reports as equal, or None.

        ``cmp`` receives a parsed key and returns a negative number if the
        wanted entry sorts before it, zero on a match and a positive number
        if it sorts after it.
        """
        entries = self._index._root_entries()
        while True:
            entry = next(entries, None)
            if entry is None:
                return None

            key = entry.key()
            if key is not None:
                ordering = cmp(key)
                if ordering == 0:
                    return entry
                if ordering > 0:
                    continue

            subnode_vcn = entry.subnode_vcn()
            if subnode_vcn is None:
                return None
            entries = self._index._subnode_entries(subnode_vcn)