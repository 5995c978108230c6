"""Device items describing whole block devices."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct, UuidBytes
from .constants import UUID_SIZE


@dataclass(frozen=True)
class DevItem(DiskStruct):
    """Represents a complete block device."""

    SIZE: ClassVar[int] = 98

    devid: Annotated[int, "Q"] = 0
    total_bytes: Annotated[int, "Q"] = 0
    bytes_used: Annotated[int, "Q"] = 0
    io_align: Annotated[int, "I"] = 0
    io_width: Annotated[int, "I"] = 0
    sector_size: Annotated[int, "I"] = 0
    dev_type: Annotated[int, "Q"] = 0
    generation: Annotated[int, "Q"] = 0
    start_offset: Annotated[int, "Q"] = 0
    dev_group: Annotated[int, "I"] = 0
    seek_speed: Annotated[int, "B"] = 0
    bandwith: Annotated[int, "B"] = 0
    uuid: UuidBytes = b"\0" * UUID_SIZE
    fsid: UuidBytes = b"\0" * UUID_SIZE