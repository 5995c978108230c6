# btrfs-diskformat

Python classes for the on-disk structures of the btrfs filesystem. Each
structure decodes from and encodes to the packed little-endian layout that
btrfs writes. You can use them to read a superblock, decode tree node
headers, or inspect chunk and extent items from a disk image.

The package has no runtime dependencies.

## Installation

```
pip install btrfs-diskformat
```

## Reading the primary superblock

```python
from btrfs_diskformat.constants import MAGIC, PRIMARY_SUPERBLOCK_ADDR
from btrfs_diskformat.super_block import SuperBlock

with open("disk.img", "rb") as image:
    image.seek(PRIMARY_SUPERBLOCK_ADDR)
    sb = SuperBlock.from_bytes(image.read(SuperBlock.SIZE))

assert sb.magic == MAGIC
print(sb.csum_type, sb.generation, sb.nodesize)
print(sb.label.split(b"\0", 1)[0].decode())
```

## Working with structures

Every fixed-size structure is a frozen dataclass that derives from
`DiskStruct` in `btrfs_diskformat.binary`. Each one has a `SIZE` class
attribute that gives its length on disk, and it offers these methods:

- `from_bytes(data)` decodes a buffer that is exactly `SIZE` bytes long.
- `from_prefix(data)` decodes the start of a longer buffer. It returns the
  structure and the bytes that remain.
- `to_bytes()` encodes the structure back to its on-disk layout.

Every field defaults to zero, or to all-zero bytes, or to the zero-valued
enum member. To build a modified copy, use `dataclasses.replace`. Raw byte
fields such as UUIDs, checksums and the label stay as `bytes`. Fixed arrays
become tuples. Enum fields decode to their `IntEnum` members.

`LayoutError` is a subclass of `ValueError`. It is raised in these cases:

- a buffer has the wrong length;
- an enum field holds a value that has no defined member;
- a value does not fit its field when encoding, for example an integer out of
  range or a byte string of the wrong length.

## Structures

| Module | Classes |
| --- | --- |
| `time` | `Time` |
| `key` | `Key` |
| `node` | `Header`, `KeyPointer`, `Item`, `BackrefRevision` |
| `chunk` | `Chunk`, `ChunkDynamic`, `Stripe` |
| `dev` | `DevExtent` |
| `dev_item` | `DevItem` |
| `inode_item` | `InodeItem`, `InodeFlags` |
| `root_backup` | `RootBackup` |
| `root_item` | `RootItem` |
| `root_ref` | `RootRef` |
| `super_block` | `SuperBlock`, `ChecksumType` |
| `block_group_item` | `BlockGroupItem`, `AllocationType`, `ReplicationPolicy` |
| `extent_data_ref` | `ExtentDataRef` |
| `shared_data_ref` | `SharedDataRef` |
| `extent_inline_ref` | `ExtentInlineRefType`, `ExtentInlineRefHeader`, `ExtentInlineRefSharedDataTail`, `ExtentInlineRefFull`, `ExtentInlineTreeBlockRef`, `ExtentInlineSharedBlockRef`, `ExtentInlineExtentDataRef`, `ExtentInlineSharedDataRef` |

`InodeFlags`, `AllocationType` and `ReplicationPolicy` are `IntFlag` types,
so you can test a decoded flags field with them directly.

`btrfs_diskformat.constants` holds the following:

- the superblock addresses (`PRIMARY_SUPERBLOCK_ADDR`, `SUPERBLOCK_ADDRS`);
- `MAGIC`;
- the field sizes, for example `CSUM_SIZE` and `UUID_SIZE`.

`btrfs_diskformat.aliases` provides the snake-case names used in the btrfs
documentation. Examples are `btrfs_super_block`, `btrfs_disk_key`,
`BTRFS_CSUM_TYPE_CRC32` and `BTRFS_BLOCK_GROUP_RAID1`.

## Chunks and their stripes

A chunk item is a fixed 48-byte header followed by `num_stripes` stripes of
32 bytes each:

```python
from btrfs_diskformat.chunk import Chunk, ChunkDynamic

chunk, rest = ChunkDynamic.from_prefix_with_elems(item_data, num_stripes)
for stripe in chunk.stripe:
    print(stripe.devid, stripe.offset, stripe.dev_uuid.hex())
```

If you have already decoded the fixed part as a `Chunk`, call
`chunk.into_dynamic(following, num_stripes)` with the bytes that follow it.
`ChunkDynamic.to_bytes()` encodes the header and all of the stripes.

## Inline extent references

`ExtentInlineRefFull` decodes an inline back reference whose type is not
known in advance. It reads 29 bytes: the type byte, then a tail large enough
for the largest kind of reference. It has these accessors:

- `offset()`
- `extent_data_ref()`
- `shared_data_tail()`
- `as_tree_block_ref()`
- `as_shared_block_ref()`
- `as_extent_data_ref()`
- `as_shared_data_ref()`

Each accessor returns `None` when the reference is of another type. The typed
reference classes also refuse to be built with a mismatched `ref_type`.

## What this package does not do

This package only describes structures. It does not do any of the following:

- open block devices;
- verify or compute checksums;
- choose between superblock copies;
- walk b-trees;
- resolve logical addresses to physical ones.

Those steps are left to code built on top of these classes.

## Running the tests

```
pip install -e ".[test]"
pytest
```