"""Exceptions raised for malformed NTFS structures, and a strict stream reader."""

from __future__ import annotations

from typing import Any, BinaryIO, ClassVar


class NtfsError(Exception):
    """Base class of every error raised for invalid or unsupported NTFS data.

    Subclasses declare their fields in ``_fields``. The fields may be passed
    positionally or by keyword and are stored as attributes of the same name.
    """

    _fields: ClassVar[tuple[str, ...]] = ()
    _template: ClassVar[str] = "NTFS error"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        name = type(self).__name__
        if len(args) > len(self._fields):
            raise TypeError(
                f"{name} takes at most {len(self._fields)} positional arguments"
            )
        values = dict(zip(self._fields, args))
        for key, value in kwargs.items():
            if key not in self._fields:
                raise TypeError(f"{name} got an unexpected keyword argument {key!r}")
            if key in values:
                raise TypeError(f"{name} got multiple values for argument {key!r}")
            values[key] = value
        missing = [field for field in self._fields if field not in values]
        if missing:
            raise TypeError(f"{name} is missing arguments: {', '.join(missing)}")
        for key in self._fields:
            setattr(self, key, values[key])
        super().__init__(self._template.format(**values))


class InvalidStructuredValueSize(NtfsError):
    _fields = ("position", "ty", "expected", "actual")
    _template = (
        "The {ty} structured value at byte position {position:#x} has an invalid "
        "size (expected {expected} bytes, got {actual} bytes)"
    )


class InvalidIndexEntrySize(NtfsError):
    _fields = ("position", "expected", "actual")
    _template = (
        "The index entry at byte position {position:#x} should have a size of "
        "{expected} bytes, but only {actual} bytes are available"
    )


class InvalidIndexEntryDataRange(NtfsError):
    _fields = ("position", "range", "size")
    _template = (
        "The index entry at byte position {position:#x} references the data range "
        "{range}, which exceeds its size of {size} bytes"
    )


class InvalidIndexSignature(NtfsError):
    _fields = ("position", "expected", "actual")
    _template = (
        "The index record at byte position {position:#x} should have signature "
        "{expected!r}, but it has {actual!r}"
    )


class InvalidIndexAllocatedSize(NtfsError):
    _fields = ("position", "expected", "actual")
    _template = (
        "The index record at byte position {position:#x} allocates {actual} bytes, "
        "but at most {expected} bytes are allowed"
    )


class InvalidIndexUsedSize(NtfsError):
    _fields = ("position", "expected", "actual")
    _template = (
        "The index record at byte position {position:#x} uses {actual} bytes, "
        "but only {expected} bytes are allocated"
    )


class InvalidIndexRootEntriesOffset(NtfsError):
    _fields = ("position", "expected", "actual")
    _template = (
        "The index root at byte position {position:#x} places its entries at offset "
        "{expected}, but the index root is only {actual} bytes long"
    )


class InvalidIndexRootUsedSize(NtfsError):
    _fields = ("position", "expected", "actual")
    _template = (
        "The index root at byte position {position:#x} uses {expected} bytes, "
        "but it is only {actual} bytes long"
    )


class MissingIndexAllocation(NtfsError):
    _fields = ("position",)
    _template = (
        "The index root at byte position {position:#x} describes a large index, "
        "but no matching index allocation attribute is available"
    )


class UpdateSequenceArrayExceedsRecordSize(NtfsError):
    _fields = ("position", "array_count", "record_size")
    _template = (
        "The update sequence array of the record at byte position {position:#x} "
        "with {array_count} elements exceeds the record size of {record_size} bytes"
    )


class UpdateSequenceNumberMismatch(NtfsError):
    _fields = ("position", "expected", "actual")
    _template = (
        "The update sequence number at byte position {position:#x} should be "
        "{expected!r}, but it is {actual!r}"
    )


class InvalidUpdateSequenceCount(NtfsError):
    _fields = ("position", "update_sequence_count")
    _template = (
        "The record at byte position {position:#x} has an invalid update sequence "
        "count of {update_sequence_count}"
    )


class InvalidUpdateSequenceNumberRange(NtfsError):
    _fields = ("position", "range", "size")
    _template = (
        "The update sequence number range {range} of the record at byte position "
        "{position:#x} exceeds the record size of {size} bytes"
    )


class UnsupportedFileNamespace(NtfsError):
    _fields = ("position", "actual")
    _template = (
        "The file name at byte position {position:#x} has the unsupported "
        "namespace {actual}"
    )


class VcnOutOfBoundsInIndexAllocation(NtfsError):
    _fields = ("position", "vcn")
    _template = (
        "The VCN {vcn} is outside the index allocation at byte position {position:#x}"
    )


class VcnMismatchInIndexAllocation(NtfsError):
    _fields = ("position", "expected", "actual")
    _template = (
        "The index record read from the index allocation at byte position "
        "{position:#x} has VCN {actual}, but VCN {expected} was requested"
    )


class LcnTooBig(NtfsError):
    _fields = ("lcn",)
    _template = "The LCN {lcn} is too big to be turned into a byte position"


class VcnTooBig(NtfsError):
    _fields = ("vcn",)
    _template = "The VCN {vcn} is too big to be turned into a byte offset"


class InvalidTime(NtfsError):
    _template = "The given time cannot be represented as an NTFS timestamp"


class InvalidUpcaseTableSize(NtfsError):
    _fields = ("expected", "actual")
    _template = (
        "The upcase table should have a size of {expected} bytes, "
        "but it has {actual} bytes"
    )


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``stream``.

    Short reads are retried and interrupted reads are repeated.
    Raises EOFError if the stream ends before ``size`` bytes were read.
    """
    if size < 0:
        raise ValueError(f"cannot read a negative number of bytes: {size}")
    buffer = bytearray()
    while len(buffer) < size:
        try:
            chunk = stream.read(size - len(buffer))
        except InterruptedError:
            continue
        if not chunk:
            break
        buffer += chunk
    if len(buffer) < size:
        raise EOFError("failed to fill whole buffer")
    return bytes(buffer)