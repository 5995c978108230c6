import pytest
from hypothesis import given
from hypothesis import strategies as st

from btrfs_diskformat.binary import LayoutError
from btrfs_diskformat.dev_item import DevItem

u64 = st.integers(0, 2**64 - 1)
u32 = st.integers(0, 2**32 - 1)
uuids = st.binary(min_size=16, max_size=16)

items = st.builds(
    DevItem,
    devid=u64,
    total_bytes=u64,
    bytes_used=u64,
    io_align=u32,
    io_width=u32,
    sector_size=u32,
    dev_type=u64,
    generation=u64,
    start_offset=u64,
    dev_group=u32,
    seek_speed=st.integers(0, 100),
    bandwith=st.integers(0, 100),
    uuid=uuids,
    fsid=uuids,
)


@given(items)
def test_round_trip(item):
    data = item.to_bytes()
    assert len(data) == 98
    assert DevItem.from_bytes(data) == item


def test_uuids_at_end():
    uuid = bytes(range(16))
    fsid = bytes(range(16, 32))
    data = DevItem(uuid=uuid, fsid=fsid).to_bytes()
    assert data[-32:] == uuid + fsid


def test_seek_speed_out_of_range():
    with pytest.raises(LayoutError):
        DevItem(seek_speed=256).to_bytes()


def test_devid_first():
    item = DevItem(devid=0x0102030405060708)
    assert DevItem.from_bytes(item.to_bytes()[:8] + b"\0" * 90).devid == item.devid