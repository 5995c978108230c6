"""Decode and encode the on-disk structures of the btrfs filesystem."""

__version__ = "0.5.1"