import struct

import pytest
from hypothesis import given
from hypothesis import strategies as st

from btrfs_diskformat.binary import LayoutError
from btrfs_diskformat.extent_data_ref import ExtentDataRef
from btrfs_diskformat.extent_inline_ref import (
    ExtentInlineExtentDataRef,
    ExtentInlineRefFull,
    ExtentInlineRefHeader,
    ExtentInlineRefSharedDataTail,
    ExtentInlineRefType,
    ExtentInlineSharedBlockRef,
    ExtentInlineSharedDataRef,
    ExtentInlineTreeBlockRef,
)
from btrfs_diskformat.shared_data_ref import SharedDataRef

u64 = st.integers(min_value=0, max_value=2**64 - 1)
u32 = st.integers(min_value=0, max_value=2**32 - 1)


def _full(ref_type, payload):
    return ExtentInlineRefFull.from_bytes(
        bytes([ref_type]) + payload + b"\0" * (28 - len(payload))
    )


def test_ref_type_values():
    assert ExtentInlineRefType(176) is ExtentInlineRefType.TREE_BLOCK_REF
    assert ExtentInlineRefType(182) is ExtentInlineRefType.SHARED_BLOCK_REF
    assert ExtentInlineRefType(178) is ExtentInlineRefType.EXTENT_DATA_REF
    assert ExtentInlineRefType(184) is ExtentInlineRefType.SHARED_DATA_REF


def test_header_wire_bytes():
    header = ExtentInlineRefHeader(ExtentInlineRefType.SHARED_BLOCK_REF, 0x1122)
    data = header.to_bytes()
    assert len(data) == ExtentInlineRefHeader.SIZE
    assert data == bytes([182]) + struct.pack("<Q", 0x1122)
    assert ExtentInlineRefHeader.from_bytes(data) == header


def test_header_rejects_unknown_type():
    with pytest.raises(LayoutError):
        ExtentInlineRefHeader.from_bytes(bytes([1]) + b"\0" * 8)


def test_full_requires_exact_size():
    with pytest.raises(LayoutError):
        ExtentInlineRefFull.from_bytes(b"\xb0" + b"\0" * 27)


@given(u64)
def test_tree_block_ref(offset):
    full = _full(176, struct.pack("<Q", offset))
    assert full.offset() == offset
    assert full.extent_data_ref() is None
    assert full.shared_data_tail() is None
    assert full.as_tree_block_ref() == ExtentInlineTreeBlockRef(offset=offset)
    assert full.as_shared_block_ref() is None
    assert full.as_extent_data_ref() is None
    assert full.as_shared_data_ref() is None


@given(u64)
def test_shared_block_ref(offset):
    full = _full(182, struct.pack("<Q", offset))
    assert full.offset() == offset
    assert full.as_shared_block_ref().offset == offset
    assert full.as_tree_block_ref() is None
    assert full.shared_data_tail() is None


@given(u64, u64, u64, u32)
def test_extent_data_ref(root, objectid, offset, count):
    ref = ExtentDataRef(root, objectid, offset, count)
    full = _full(178, ref.to_bytes())
    assert full.offset() is None
    assert full.extent_data_ref() == ref
    assert full.as_extent_data_ref().extent_data_ref == ref
    assert full.as_tree_block_ref() is None
    assert full.shared_data_tail() is None


@given(u64, u32)
def test_shared_data_ref(offset, count):
    tail = ExtentInlineRefSharedDataTail(offset, SharedDataRef(count))
    full = _full(184, tail.to_bytes())
    assert full.offset() == offset
    assert full.shared_data_tail() == tail
    assert full.as_shared_data_ref().shared_data_tail == tail
    assert full.extent_data_ref() is None
    assert full.as_shared_block_ref() is None


def test_typed_ref_sizes_match_bytes():
    assert len(ExtentInlineTreeBlockRef(offset=5).to_bytes()) == 9
    assert len(ExtentInlineSharedBlockRef(offset=5).to_bytes()) == 9
    assert len(ExtentInlineExtentDataRef().to_bytes()) == 29
    assert len(ExtentInlineSharedDataRef().to_bytes()) == 13


def test_typed_ref_rejects_wrong_type():
    with pytest.raises(LayoutError):
        ExtentInlineTreeBlockRef(ref_type=ExtentInlineRefType.SHARED_BLOCK_REF)
    with pytest.raises(LayoutError):
        ExtentInlineSharedBlockRef.from_bytes(bytes([176]) + b"\0" * 8)
    with pytest.raises(LayoutError):
        ExtentInlineSharedDataRef.from_bytes(bytes([178]) + b"\0" * 12)


@given(u64)
def test_typed_ref_round_trip(offset):
    ref = ExtentInlineTreeBlockRef(offset=offset)
    data = ref.to_bytes()
    assert data[0] == 176
    assert ExtentInlineTreeBlockRef.from_bytes(data) == ref
    assert ExtentInlineRefHeader.from_bytes(data).offset == offset