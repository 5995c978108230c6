import pytest
from hypothesis import given
from hypothesis import strategies as st

from btrfs_diskformat.binary import LayoutError
from btrfs_diskformat.dev import DevExtent

u64 = st.integers(0, 2**64 - 1)

extents = st.builds(
    DevExtent,
    chunk_tree=u64,
    chunk_objectid=u64,
    chunk_offset=u64,
    length=u64,
    chunk_tree_uuid=st.binary(min_size=16, max_size=16),
)


@given(extents)
def test_round_trip(extent):
    data = extent.to_bytes()
    assert len(data) == 48
    assert DevExtent.from_bytes(data) == extent


def test_uuid_is_last():
    uuid = bytes(range(100, 116))
    assert DevExtent(chunk_tree_uuid=uuid).to_bytes()[-16:] == uuid


def test_uuid_wrong_length():
    with pytest.raises(LayoutError):
        DevExtent(chunk_tree_uuid=b"\0" * 15).to_bytes()


def test_negative_length_rejected():
    with pytest.raises(LayoutError):
        DevExtent(length=-1).to_bytes()