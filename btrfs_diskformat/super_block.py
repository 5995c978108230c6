"""The superblock and checksum types."""

import enum
from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct
from .constants import (
    CSUM_SIZE,
    FSID_SIZE,
    LABEL_SIZE,
    MAX_SYSTEM_CHUNK_ARRAY_SIZE,
    NUM_BACKUP_ROOTS,
)
from .dev_item import DevItem
from .root_backup import RootBackup


class ChecksumType(enum.IntEnum):
    """The hashing algorithm used for checksumming."""

    CRC32C = 0
    XXHASH64 = 1
    SHA256 = 2
    BLAKE2B = 3


@dataclass(frozen=True)
class SuperBlock(DiskStruct):
    """The superblock, which must be valid for the filesystem to be mounted.

    The primary copy lives at ``PRIMARY_SUPERBLOCK_ADDR``; further copies at
    ``SUPERBLOCK_ADDRS`` where the device is large enough. ``magic`` must equal
    ``MAGIC`` and ``label`` holds a NUL-terminated UTF-8 string.
    """

    SIZE: ClassVar[int] = 4096

    csum: Annotated[bytes, CSUM_SIZE] = b"\0" * CSUM_SIZE
    fsid: Annotated[bytes, FSID_SIZE] = b"\0" * FSID_SIZE
    bytenr: Annotated[int, "Q"] = 0
    flags: Annotated[int, "Q"] = 0
    magic: Annotated[int, "Q"] = 0
    generation: Annotated[int, "Q"] = 0
    root: Annotated[int, "Q"] = 0
    chunk_root: Annotated[int, "Q"] = 0
    log_root: Annotated[int, "Q"] = 0
    log_root_transid: Annotated[int, "Q"] = 0
    total_bytes: Annotated[int, "Q"] = 0
    bytes_used: Annotated[int, "Q"] = 0
    root_dir_objectid: Annotated[int, "Q"] = 0
    num_devices: Annotated[int, "Q"] = 0
    sectorsize: Annotated[int, "I"] = 0
    nodesize: Annotated[int, "I"] = 0
    leafsize: Annotated[int, "I"] = 0
    stripesize: Annotated[int, "I"] = 0
    sys_chunk_array_size: Annotated[int, "I"] = 0
    chunk_root_generation: Annotated[int, "Q"] = 0
    compat_flags: Annotated[int, "Q"] = 0
    compat_ro_flags: Annotated[int, "Q"] = 0
    incompat_flags: Annotated[int, "Q"] = 0
    csum_type: Annotated[ChecksumType, "H"] = ChecksumType.CRC32C
    root_level: Annotated[int, "B"] = 0
    chunk_root_level: Annotated[int, "B"] = 0
    log_root_level: Annotated[int, "B"] = 0
    dev_item: DevItem = DevItem()
    label: Annotated[bytes, LABEL_SIZE] = b"\0" * LABEL_SIZE
    cache_generation: Annotated[int, "Q"] = 0
    uuid_tree_generation: Annotated[int, "Q"] = 0
    _reserved: Annotated[tuple[int, ...], ("Q", 30)] = (0,) * 30
    sys_chunk_array: Annotated[bytes, MAX_SYSTEM_CHUNK_ARRAY_SIZE] = (
        b"\0" * MAX_SYSTEM_CHUNK_ARRAY_SIZE
    )
    super_roots: Annotated[tuple[RootBackup, ...], (RootBackup, NUM_BACKUP_ROOTS)] = (
        (RootBackup(),) * NUM_BACKUP_ROOTS
    )
    _unused1: Annotated[bytes, 565] = b"\0" * 565