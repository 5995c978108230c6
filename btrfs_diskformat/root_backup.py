"""Backup copies of tree root pointers kept in the superblock."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct


@dataclass(frozen=True)
class RootBackup(DiskStruct):
    """A snapshot of the main tree roots, used for recovery."""

    SIZE: ClassVar[int] = 168

    tree_root: Annotated[int, "Q"] = 0
    tree_root_gen: Annotated[int, "Q"] = 0
    chunk_root: Annotated[int, "Q"] = 0
    chunk_root_gen: Annotated[int, "Q"] = 0
    extent_root: Annotated[int, "Q"] = 0
    extent_root_gen: Annotated[int, "Q"] = 0
    fs_root: Annotated[int, "Q"] = 0
    fs_root_gen: Annotated[int, "Q"] = 0
    dev_root: Annotated[int, "Q"] = 0
    dev_root_gen: Annotated[int, "Q"] = 0
    csum_root: Annotated[int, "Q"] = 0
    csum_root_gen: Annotated[int, "Q"] = 0
    total_bytes: Annotated[int, "Q"] = 0
    bytes_used: Annotated[int, "Q"] = 0
    num_devices: Annotated[int, "Q"] = 0
    _unused_u64s: Annotated[tuple[int, ...], ("Q", 4)] = (0, 0, 0, 0)
    tree_root_level: Annotated[int, "B"] = 0
    chunk_root_level: Annotated[int, "B"] = 0
    extent_root_level: Annotated[int, "B"] = 0
    fs_root_level: Annotated[int, "B"] = 0
    dev_root_level: Annotated[int, "B"] = 0
    csum_root_level: Annotated[int, "B"] = 0
    _unused_u8s: Annotated[bytes, 10] = b"\0" * 10