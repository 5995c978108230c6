"""Inline extent back references stored inside extent and metadata items."""

import enum
from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct, LayoutError
from .extent_data_ref import ExtentDataRef
from .shared_data_ref import SharedDataRef

_TAIL_SIZE = ExtentDataRef.SIZE
_OFFSET_SIZE = 8


class ExtentInlineRefType(enum.IntEnum):
    """The kind of an inline extent back reference."""

    TREE_BLOCK_REF = 176
    """Indirect reference for a tree block; offset is the allocating root's object ID."""

    SHARED_BLOCK_REF = 182
    """Shared reference for a tree block; offset is the parent node's byte offset."""

    EXTENT_DATA_REF = 178
    """Indirect reference for a data extent; an ExtentDataRef overlaps the offset."""

    SHARED_DATA_REF = 184
    """Shared reference for a data extent; a SharedDataRef follows the offset."""


@dataclass(frozen=True)
class ExtentInlineRefHeader(DiskStruct):
    """The header of an inline extent back reference.

    The meaning of ``offset`` depends on ``ref_type``.
    """

    SIZE: ClassVar[int] = 9

    ref_type: Annotated[ExtentInlineRefType, "B"] = ExtentInlineRefType.TREE_BLOCK_REF
    offset: Annotated[int, "Q"] = 0


@dataclass(frozen=True)
class ExtentInlineRefSharedDataTail(DiskStruct):
    """The part of a shared data reference that follows its type byte."""

    SIZE: ClassVar[int] = 12

    offset: Annotated[int, "Q"] = 0
    shared_data_ref: SharedDataRef = SharedDataRef()


class _TypedRef(DiskStruct):
    """A reference whose type byte is fixed to one value."""

    _REQUIRED_TYPE: ClassVar[ExtentInlineRefType]

    def __post_init__(self) -> None:
        if self.ref_type != self._REQUIRED_TYPE:
            raise LayoutError(
                f"{type(self).__name__} requires type {self._REQUIRED_TYPE.name}, "
                f"got {self.ref_type!r}"
            )


@dataclass(frozen=True)
class ExtentInlineTreeBlockRef(_TypedRef):
    """An inline reference known to be a tree block reference."""

    SIZE: ClassVar[int] = 9
    _REQUIRED_TYPE: ClassVar[ExtentInlineRefType] = ExtentInlineRefType.TREE_BLOCK_REF

    ref_type: Annotated[ExtentInlineRefType, "B"] = ExtentInlineRefType.TREE_BLOCK_REF
    offset: Annotated[int, "Q"] = 0


@dataclass(frozen=True)
class ExtentInlineSharedBlockRef(_TypedRef):
    """An inline reference known to be a shared block reference."""

    SIZE: ClassVar[int] = 9
    _REQUIRED_TYPE: ClassVar[ExtentInlineRefType] = ExtentInlineRefType.SHARED_BLOCK_REF

    ref_type: Annotated[ExtentInlineRefType, "B"] = ExtentInlineRefType.SHARED_BLOCK_REF
    offset: Annotated[int, "Q"] = 0


@dataclass(frozen=True)
class ExtentInlineExtentDataRef(_TypedRef):
    """An inline reference known to be an extent data reference."""

    SIZE: ClassVar[int] = 29
    _REQUIRED_TYPE: ClassVar[ExtentInlineRefType] = ExtentInlineRefType.EXTENT_DATA_REF

    ref_type: Annotated[ExtentInlineRefType, "B"] = ExtentInlineRefType.EXTENT_DATA_REF
    extent_data_ref: ExtentDataRef = ExtentDataRef()


@dataclass(frozen=True)
class ExtentInlineSharedDataRef(_TypedRef):
    """An inline reference known to be a shared data reference."""

    SIZE: ClassVar[int] = 13
    _REQUIRED_TYPE: ClassVar[ExtentInlineRefType] = ExtentInlineRefType.SHARED_DATA_REF

    ref_type: Annotated[ExtentInlineRefType, "B"] = ExtentInlineRefType.SHARED_DATA_REF
    shared_data_tail: ExtentInlineRefSharedDataTail = ExtentInlineRefSharedDataTail()


@dataclass(frozen=True)
class ExtentInlineRefFull(DiskStruct):
    """An inline reference of any type, read in full.

    ``tail`` holds the raw bytes after the type byte, large enough for the
    largest kind of reference; the accessors interpret it by ``ref_type``.
    """

    SIZE: ClassVar[int] = 29

    ref_type: Annotated[ExtentInlineRefType, "B"] = ExtentInlineRefType.TREE_BLOCK_REF
    tail: Annotated[bytes, _TAIL_SIZE] = b"\0" * _TAIL_SIZE

    def offset(self):
        """Return the offset field if this type has one, else ``None``."""
        if self.ref_type in (
            ExtentInlineRefType.TREE_BLOCK_REF,
            ExtentInlineRefType.SHARED_BLOCK_REF,
            ExtentInlineRefType.SHARED_DATA_REF,
        ):
            return int.from_bytes(self.tail[:_OFFSET_SIZE], "little")
        return None

    def extent_data_ref(self):
        """Return the extent data reference for an extent data reference, else ``None``."""
        if self.ref_type == ExtentInlineRefType.EXTENT_DATA_REF:
            return ExtentDataRef.from_bytes(self.tail)
        return None

    def shared_data_tail(self):
        """Return the shared data tail for a shared data reference, else ``None``."""
        if self.ref_type == ExtentInlineRefType.SHARED_DATA_REF:
            return ExtentInlineRefSharedDataTail.from_prefix(self.tail)[0]
        return None

    def _as(self, cls):
        if self.ref_type == cls._REQUIRED_TYPE:
            return cls.from_prefix(self.to_bytes())[0]
        return None

    def as_tree_block_ref(self):
        """View as a tree block reference, or ``None`` for another type."""
        return self._as(ExtentInlineTreeBlockRef)

    def as_shared_block_ref(self):
        """View as a shared block reference, or ``None`` for another type."""
        return self._as(ExtentInlineSharedBlockRef)

    def as_extent_data_ref(self):
        """View as an extent data reference, or ``None`` for another type."""
        return self._as(ExtentInlineExtentDataRef)

    def as_shared_data_ref(self):
        """View as a shared data reference, or ``None`` for another type."""
        return self._as(ExtentInlineSharedDataRef)