from ntfsread.flags import NtfsFileAttributeFlags


def test_documented_values():
    assert NtfsFileAttributeFlags(0x0001) == NtfsFileAttributeFlags.READ_ONLY
    assert NtfsFileAttributeFlags(0x1000_0000) == NtfsFileAttributeFlags.IS_DIRECTORY


def test_str_joins_names_in_declaration_order():
    flags = NtfsFileAttributeFlags(0x0002 | 0x0001)
    assert str(flags) == "READ_ONLY | HIDDEN"


def test_str_of_single_flag():
    assert str(NtfsFileAttributeFlags(0x1000_0000)) == "IS_DIRECTORY"


def test_str_of_no_flags_is_empty():
    assert str(NtfsFileAttributeFlags(0)) == ""


def test_unknown_bits_are_dropped():
    flags = NtfsFileAttributeFlags(0x8000_0001)
    assert flags == NtfsFileAttributeFlags.READ_ONLY
    assert str(flags) == "READ_ONLY"


def test_round_trip_through_int():
    flags = NtfsFileAttributeFlags.ARCHIVE | NtfsFileAttributeFlags.COMPRESSED
    assert NtfsFileAttributeFlags(int(flags)) == flags


def test_membership():
    flags = NtfsFileAttributeFlags(
        int(NtfsFileAttributeFlags.SYSTEM | NtfsFileAttributeFlags.IS_DIRECTORY)
    )
    assert NtfsFileAttributeFlags.IS_DIRECTORY in flags
    assert NtfsFileAttributeFlags.HIDDEN not in flags