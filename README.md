# ntfsread

`ntfsread` decodes NTFS on-disk structures from bytes you have already read
from a volume. It uses only the standard library.

## What it covers

| Module | Contents |
| --- | --- |
| `ntfsread.types` | `NtfsPosition` (absolute byte position, `None` when unknown), `Lcn`, `Vcn` |
| `ntfsread.ntfstime` | `NtfsTime`: `from_datetime`, `to_datetime`, `now`, the raw `nt_timestamp` |
| `ntfsread.record` | `Record`: multi-sector records with the update sequence `fixup` |
| `ntfsread.index_root` | `NtfsIndexRoot`: the `$INDEX_ROOT` value |
| `ntfsread.index_allocation` | `NtfsIndexAllocation`: the `$INDEX_ALLOCATION` value, `record_from_vcn`, `records` |
| `ntfsread.index_record` | `NtfsIndexRecord`: one validated `INDX` record |
| `ntfsread.index_entry` | `NtfsIndexEntry`, `IndexEntryFlags`, `node_entries` |
| `ntfsread.index` | `NtfsIndex` with in-order iteration (`entries`) and lookup (`finder`) |
| `ntfsread.indexes` | `IndexEntryType` and `NtfsFileNameIndex` (directory indexes) |
| `ntfsread.upcase` | `UpcaseTable`: case-insensitive comparison via the `$UpCase` data |
| `ntfsread.file_name` | `NtfsFileName`, `NtfsFileNamespace` |
| `ntfsread.standard_information` | `NtfsStandardInformation` |
| `ntfsread.object_id` | `NtfsObjectId` (GUIDs returned as `uuid.UUID`) |
| `ntfsread.volume_information` | `NtfsVolumeInformation`, `NtfsVolumeFlags` |
| `ntfsread.volume_name` | `NtfsVolumeName` |
| `ntfsread.attribute_list` | `NtfsAttributeList`, `NtfsAttributeListEntry` |
| `ntfsread.flags` | `NtfsFileAttributeFlags` |
| `ntfsread.errors` | `NtfsError` and its subclasses, `read_exact` |

Invalid structures raise a subclass of `ntfsread.errors.NtfsError`. Each one
keeps its details (such as `position`, `expected` and `actual`) as attributes.
Data that ends too early raises `EOFError`.

## What it does not do

The package does not open a volume or a disk image. It does not parse the boot
sector, walk the Master File Table, look up files by record number, or follow
data runs of non-resident attributes. You hand it the bytes of an attribute
value or record, together with its position, and it decodes them. File
references and attribute type codes come back as raw integers.

## Installation

```
pip install ntfsread
```

## Examples

Decode a `$FILE_NAME` value:

```python
from ntfsread.file_name import NtfsFileName
from ntfsread.types import NtfsPosition

file_name = NtfsFileName.from_bytes(value_bytes, NtfsPosition(0x4000))
print(file_name.name(), file_name.is_directory())
print(file_name.creation_time().to_datetime())
```

Build a directory index from its `$INDEX_ROOT` value and, for large indexes,
its `$INDEX_ALLOCATION` value:

```python
from ntfsread.index import NtfsIndex
from ntfsread.index_allocation import NtfsIndexAllocation
from ntfsread.index_root import NtfsIndexRoot
from ntfsread.types import NtfsPosition

root = NtfsIndexRoot.from_bytes(index_root_bytes, NtfsPosition(root_offset))
allocation = NtfsIndexAllocation(index_allocation_bytes, cluster_size=4096)
index = NtfsIndex(root, allocation)
```

Walk every entry of the index in key order:

```python
for entry in index.entries():
    print(entry.key().name())
```

Look up a name. It is compared case-insensitively through the volume's upcase
table; the result is the matching `NtfsIndexEntry`, or `None`:

```python
from ntfsread.indexes import NtfsFileNameIndex
from ntfsread.upcase import UpcaseTable

upcase_table = UpcaseTable.from_bytes(upcase_bytes)
entry = NtfsFileNameIndex.find(index.finder(), upcase_table, "many_subdirs")
if entry is not None:
    print(entry.file_reference())
```

Convert timestamps. A naive `datetime` is treated as UTC. A time before
1601-01-01 raises `InvalidTime`:

```python
from datetime import datetime, timezone
from ntfsread.ntfstime import NtfsTime

stamp = NtfsTime.from_datetime(datetime(2013, 1, 5, 18, 15, tzinfo=timezone.utc))
print(stamp.nt_timestamp, stamp.to_datetime())
```

## Running the tests

```
pip install -e .[test]
pytest
```