"""Device extents."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct, UuidBytes
from .constants import UUID_SIZE


@dataclass(frozen=True)
class DevExtent(DiskStruct):
    """Maps a physical extent on one backing device to a chunk."""

    SIZE: ClassVar[int] = 48

    chunk_tree: Annotated[int, "Q"] = 0
    chunk_objectid: Annotated[int, "Q"] = 0
    chunk_offset: Annotated[int, "Q"] = 0
    length: Annotated[int, "Q"] = 0
    chunk_tree_uuid: UuidBytes = b"\0" * UUID_SIZE