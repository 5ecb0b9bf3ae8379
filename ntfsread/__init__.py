"""Decoders for NTFS records, B-tree indexes and attribute values held in bytes."""

__version__ = "0.4.0"

__all__ = [
    "attribute_list",
    "errors",
    "file_name",
    "flags",
    "index",
    "index_allocation",
    "index_entry",
    "index_record",
    "index_root",
    "indexes",
    "ntfstime",
    "object_id",
    "record",
    "standard_information",
    "types",
    "upcase",
    "volume_information",
    "volume_name",
]