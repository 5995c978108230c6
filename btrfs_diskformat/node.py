"""Tree node headers, key pointers and leaf items."""

import enum
from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct, UuidBytes
from .constants import CSUM_SIZE, UUID_SIZE
from .key import Key


class BackrefRevision(enum.IntEnum):
    """The back reference revision of a node."""

    OLD = 0
    MIXED = 1


@dataclass(frozen=True)
class Header(DiskStruct):
    """The data stored at the start of every node."""

    SIZE: ClassVar[int] = 101

    csum: Annotated[bytes, CSUM_SIZE] = b"\0" * CSUM_SIZE
    fs_uuid: UuidBytes = b"\0" * UUID_SIZE
    logical_address: Annotated[int, "Q"] = 0
    flags: Annotated[bytes, 7] = b"\0" * 7
    backref_rev: Annotated[BackrefRevision, "B"] = BackrefRevision.OLD
    chunk_tree_uuid: UuidBytes = b"\0" * UUID_SIZE
    generation: Annotated[int, "Q"] = 0
    tree_id: Annotated[int, "Q"] = 0
    num_items: Annotated[int, "I"] = 0
    level: Annotated[int, "B"] = 0


@dataclass(frozen=True)
class KeyPointer(DiskStruct):
    """A child pointer following the header of an internal node."""

    SIZE: ClassVar[int] = 33

    key: Key = Key()
    block_pointer: Annotated[int, "Q"] = 0
    generation: Annotated[int, "Q"] = 0


@dataclass(frozen=True)
class Item(DiskStruct):
    """An item following the header of a leaf node.

    ``offset`` is relative to the end of the header.
    """

    SIZE: ClassVar[int] = 25

    key: Key = Key()
    offset: Annotated[int, "I"] = 0
    size: Annotated[int, "I"] = 0