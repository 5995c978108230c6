"""Inode items and inode flags."""

import enum
from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct
from .time import Time


@dataclass(frozen=True)
class InodeItem(DiskStruct):
    """Traditional inode data and attributes."""

    SIZE: ClassVar[int] = 160

    generation: Annotated[int, "Q"] = 0
    transid: Annotated[int, "Q"] = 0
    size: Annotated[int, "Q"] = 0
    nbytes: Annotated[int, "Q"] = 0
    block_group: Annotated[int, "Q"] = 0
    nlink: Annotated[int, "I"] = 0
    uid: Annotated[int, "I"] = 0
    gid: Annotated[int, "I"] = 0
    mode: Annotated[int, "I"] = 0
    rdev: Annotated[int, "Q"] = 0
    flags: Annotated[int, "Q"] = 0
    sequence: Annotated[int, "Q"] = 0
    _unused: Annotated[tuple[int, ...], ("Q", 4)] = (0, 0, 0, 0)
    atime: Time = Time()
    ctime: Time = Time()
    mtime: Time = Time()
    otime: Time = Time()


class InodeFlags(enum.IntFlag):
    """Flags stored in :attr:`InodeItem.flags`."""

    NO_DATA_SUM = 0x1
    NO_DATA_COW = 0x2
    READ_ONLY = 0x4
    NO_COMPRESS = 0x8
    PREALLOC = 0x10
    SYNC = 0x20
    IMMUTABLE = 0x40
    APPEND = 0x80
    NO_DUMP = 0x100
    NO_ATIME = 0x200
    DIR_SYNC = 0x400
    COMPRESS = 0x800