"""Snake-case names for the structures and flag values, as used in btrfs documentation."""

from .block_group_item import AllocationType, BlockGroupItem, ReplicationPolicy
from .chunk import Chunk, Stripe
from .dev import DevExtent
from .dev_item import DevItem
from .extent_data_ref import ExtentDataRef
from .extent_inline_ref import ExtentInlineRefHeader, ExtentInlineRefType
from .inode_item import InodeFlags, InodeItem
from .key import Key
from .node import Header
from .root_backup import RootBackup
from .root_item import RootItem
from .root_ref import RootRef
from .shared_data_ref import SharedDataRef
from .super_block import ChecksumType, SuperBlock
from .time import Time

# chunk
btrfs_chunk = Chunk
btrfs_stripe = Stripe

# core
btrfs_dev_item = DevItem
btrfs_inode_item = InodeItem
btrfs_disk_key = Key
btrfs_header = Header
btrfs_root_backup = RootBackup
btrfs_root_item = RootItem
btrfs_root_ref = RootRef
btrfs_super_block = SuperBlock
btrfs_timespec = Time

BTRFS_CSUM_TYPE_CRC32 = int(ChecksumType.CRC32C)
BTRFS_CSUM_TYPE_XXHASH = int(ChecksumType.XXHASH64)
BTRFS_CSUM_TYPE_SHA256 = int(ChecksumType.SHA256)
BTRFS_CSUM_TYPE_BLAKE2 = int(ChecksumType.BLAKE2B)

BTRFS_INODE_NODATASUM = int(InodeFlags.NO_DATA_SUM)
BTRFS_INODE_NODATACOW = int(InodeFlags.NO_DATA_COW)
BTRFS_INODE_READONLY = int(InodeFlags.READ_ONLY)
BTRFS_INODE_NOCOMPRESS = int(InodeFlags.NO_COMPRESS)
BTRFS_INODE_PREALLOC = int(InodeFlags.PREALLOC)
BTRFS_INODE_SYNC = int(InodeFlags.SYNC)
BTRFS_INODE_IMMUTABLE = int(InodeFlags.IMMUTABLE)
BTRFS_INODE_APPEND = int(InodeFlags.APPEND)
BTRFS_INODE_NODUMP = int(InodeFlags.NO_DUMP)
BTRFS_INODE_NOATIME = int(InodeFlags.NO_ATIME)
BTRFS_INODE_DIRSYNC = int(InodeFlags.DIR_SYNC)
BTRFS_INODE_COMPRESS = int(InodeFlags.COMPRESS)

# dev
btrfs_dev_extent = DevExtent

# extent
btrfs_block_group_item = BlockGroupItem
btrfs_extent_data_ref = ExtentDataRef
btrfs_extent_inline_ref = ExtentInlineRefHeader
btrfs_shared_data_ref = SharedDataRef

BTRFS_BLOCK_GROUP_DATA = int(AllocationType.DATA)
BTRFS_BLOCK_GROUP_SYSTEM = int(AllocationType.SYSTEM)
BTRFS_BLOCK_GROUP_METADATA = int(AllocationType.METADATA)
BTRFS_BLOCK_GROUP_RAID0 = int(ReplicationPolicy.RAID0)
BTRFS_BLOCK_GROUP_RAID1 = int(ReplicationPolicy.RAID1)
BTRFS_BLOCK_GROUP_DUP = int(ReplicationPolicy.DUP)
BTRFS_BLOCK_GROUP_RAID10 = int(ReplicationPolicy.RAID10)
BTRFS_BLOCK_GROUP_RAID5 = int(ReplicationPolicy.RAID5)
BTRFS_BLOCK_GROUP_RAID6 = int(ReplicationPolicy.RAID6)
BTRFS_BLOCK_GROUP_RAID1C3 = int(ReplicationPolicy.RAID1C3)
BTRFS_BLOCK_GROUP_RAID1C4 = int(ReplicationPolicy.RAID1C4)

BTRFS_TREE_BLOCK_REF_KEY = int(ExtentInlineRefType.TREE_BLOCK_REF)
BTRFS_SHARED_BLOCK_REF_KEY = int(ExtentInlineRefType.SHARED_BLOCK_REF)
BTRFS_EXTENT_DATA_REF_KEY = int(ExtentInlineRefType.EXTENT_DATA_REF)
BTRFS_SHARED_DATA_REF_KEY = int(ExtentInlineRefType.SHARED_DATA_REF)