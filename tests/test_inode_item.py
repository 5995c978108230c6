import pytest
from hypothesis import given
from hypothesis import strategies as st

from btrfs_diskformat.binary import LayoutError
from btrfs_diskformat.inode_item import InodeFlags, InodeItem
from btrfs_diskformat.time import Time

u64 = st.integers(0, 2**64 - 1)
u32 = st.integers(0, 2**32 - 1)
times = st.builds(
    Time, timestamp=st.integers(-(2**63), 2**63 - 1), nanoseconds=st.integers(0, 999_999_999)
)

inodes = st.builds(
    InodeItem,
    generation=u64,
    transid=u64,
    size=u64,
    nbytes=u64,
    nlink=u32,
    uid=u32,
    gid=u32,
    mode=u32,
    flags=u64,
    sequence=u64,
    atime=times,
    ctime=times,
    mtime=times,
    otime=times,
)


@given(inodes)
def test_round_trip(inode):
    data = inode.to_bytes()
    assert len(data) == 160
    assert InodeItem.from_bytes(data) == inode


def test_otime_is_last():
    otime = Time(timestamp=1_700_000_000, nanoseconds=42)
    assert InodeItem(otime=otime).to_bytes()[-12:] == otime.to_bytes()


def test_unused_wrong_length():
    with pytest.raises(LayoutError):
        InodeItem(_unused=(0, 0)).to_bytes()


def test_flag_values():
    assert InodeFlags.NO_DATA_SUM == 0x1
    assert InodeFlags.COMPRESS == 0x800
    assert InodeFlags(0x3) == InodeFlags.NO_DATA_SUM | InodeFlags.NO_DATA_COW


def test_flags_round_trip_through_item():
    flags = InodeFlags.IMMUTABLE | InodeFlags.NO_ATIME
    item = InodeItem.from_bytes(InodeItem(flags=flags).to_bytes())
    assert InodeFlags(item.flags) == flags
    assert InodeFlags.APPEND not in InodeFlags(item.flags)