"""Block group items and their allocation and replication flags."""

import enum
from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct


@dataclass(frozen=True)
class BlockGroupItem(DiskStruct):
    """Defines the location, properties and usage of a block group."""

    SIZE: ClassVar[int] = 24

    used: Annotated[int, "Q"] = 0
    chunk_objectid: Annotated[int, "Q"] = 0
    flags: Annotated[int, "Q"] = 0


class AllocationType(enum.IntFlag):
    """The type of storage a block group allows.

    Data and metadata may be mixed in one group; system chunks may not.
    """

    DATA = 0x1
    SYSTEM = 0x2
    METADATA = 0x4


class ReplicationPolicy(enum.IntFlag):
    """The replication policy a block group implements; at most one is set."""

    RAID0 = 0x8
    RAID1 = 0x10
    DUP = 0x20
    RAID10 = 0x40
    RAID5 = 0x80
    RAID6 = 0x100
    RAID1C3 = 0x200
    RAID1C4 = 0x400