"""Fixed addresses, sizes and magic numbers of the btrfs on-disk format."""

PRIMARY_SUPERBLOCK_ADDR = 0x10000
SUPERBLOCK_ADDRS = (PRIMARY_SUPERBLOCK_ADDR, 0x4000000, 0x4000000000)

# "_BHRfS_M" read as a little-endian integer.
MAGIC = 0x4D5F53665248425F

CSUM_SIZE = 32
FSID_SIZE = 16
LABEL_SIZE = 256
UUID_SIZE = 16
MAX_SYSTEM_CHUNK_ARRAY_SIZE = 2048
NUM_BACKUP_ROOTS = 4