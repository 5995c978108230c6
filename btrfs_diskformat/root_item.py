"""Root items describing the roots of b-trees."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct, UuidBytes
from .constants import UUID_SIZE
from .inode_item import InodeItem
from .key import Key
from .time import Time


@dataclass(frozen=True)
class RootItem(DiskStruct):
    """Defines the location and parameters of the root of a b-tree.

    The fields after ``generation_v2`` are valid only when it equals ``generation``.
    """

    SIZE: ClassVar[int] = 439

    inode: InodeItem = InodeItem()
    generation: Annotated[int, "Q"] = 0
    root_dirid: Annotated[int, "Q"] = 0
    bytenr: Annotated[int, "Q"] = 0
    byte_limit: Annotated[int, "Q"] = 0
    bytes_used: Annotated[int, "Q"] = 0
    last_snapshot: Annotated[int, "Q"] = 0
    flags: Annotated[int, "Q"] = 0
    refs: Annotated[int, "I"] = 0
    drop_progress: Key = Key()
    drop_level: Annotated[int, "B"] = 0
    level: Annotated[int, "B"] = 0
    generation_v2: Annotated[int, "Q"] = 0
    uuid: UuidBytes = b"\0" * UUID_SIZE
    parent_uuid: UuidBytes = b"\0" * UUID_SIZE
    received_uuid: UuidBytes = b"\0" * UUID_SIZE
    ctransid: Annotated[int, "Q"] = 0
    otransid: Annotated[int, "Q"] = 0
    stransid: Annotated[int, "Q"] = 0
    rtransid: Annotated[int, "Q"] = 0
    ctime: Time = Time()
    otime: Time = Time()
    stime: Time = Time()
    rtime: Time = Time()
    _unused: Annotated[tuple[int, ...], ("Q", 8)] = (0,) * 8