"""Chunk items and the stripes that back them."""

import dataclasses
from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct, LayoutError, UuidBytes
from .constants import UUID_SIZE


@dataclass(frozen=True)
class Stripe(DiskStruct):
    """A piece of backing device storage that composes a chunk."""

    SIZE: ClassVar[int] = 32

    devid: Annotated[int, "Q"] = 0
    offset: Annotated[int, "Q"] = 0
    dev_uuid: UuidBytes = b"\0" * UUID_SIZE


@dataclass(frozen=True)
class Chunk(DiskStruct):
    """Maps a logical byte range to stripes on backing devices (fixed-size part)."""

    SIZE: ClassVar[int] = 48

    length: Annotated[int, "Q"] = 0
    owner: Annotated[int, "Q"] = 0
    stripe_len: Annotated[int, "Q"] = 0
    chunk_type: Annotated[int, "Q"] = 0
    io_align: Annotated[int, "I"] = 0
    io_width: Annotated[int, "I"] = 0
    sector_size: Annotated[int, "I"] = 0
    num_stripes: Annotated[int, "H"] = 0
    sub_stripes: Annotated[int, "H"] = 0

    def into_dynamic(self, following, num_stripes):
        """Combine this chunk with the bytes after it into a :class:`ChunkDynamic`."""
        combined = self.to_bytes() + bytes(following)
        return ChunkDynamic.from_prefix_with_elems(combined, num_stripes)[0]


_HEADER_FIELDS = tuple(f.name for f in dataclasses.fields(Chunk))


@dataclass(frozen=True)
class ChunkDynamic:
    """A chunk item together with the stripes that follow it."""

    length: int = 0
    owner: int = 0
    stripe_len: int = 0
    chunk_type: int = 0
    io_align: int = 0
    io_width: int = 0
    sector_size: int = 0
    num_stripes: int = 0
    sub_stripes: int = 0
    stripe: tuple[Stripe, ...] = ()

    @classmethod
    def from_prefix_with_elems(cls, data, num_stripes):
        """Decode a chunk and ``num_stripes`` stripes from the start of ``data``.

        Returns the chunk and the remaining bytes.
        """
        if num_stripes < 0:
            raise LayoutError(f"stripe count must not be negative, got {num_stripes}")
        data = bytes(data)
        needed = Chunk.SIZE + num_stripes * Stripe.SIZE
        if len(data) < needed:
            raise LayoutError(
                f"a chunk with {num_stripes} stripes needs {needed} bytes, got {len(data)}"
            )
        header, rest = Chunk.from_prefix(data)
        stripes = []
        for _ in range(num_stripes):
            stripe, rest = Stripe.from_prefix(rest)
            stripes.append(stripe)
        fields = {name: getattr(header, name) for name in _HEADER_FIELDS}
        return cls(**fields, stripe=tuple(stripes)), rest

    def _header(self) -> Chunk:
        return Chunk(**{name: getattr(self, name) for name in _HEADER_FIELDS})

    def to_bytes(self) -> bytes:
        """Encode the chunk followed by its stripes."""
        for stripe in self.stripe:
            if not isinstance(stripe, Stripe):
                raise LayoutError(f"expected Stripe, got {type(stripe).__name__}")
        return self._header().to_bytes() + b"".join(s.to_bytes() for s in self.stripe)