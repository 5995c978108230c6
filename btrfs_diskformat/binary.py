"""Encoding and decoding of packed, little-endian on-disk structures.

A structure is a frozen dataclass deriving from :class:`DiskStruct`. Each field
describes its layout through an ``Annotated`` hint:

* a ``struct`` format character such as ``"Q"`` for a little-endian scalar
  (an ``enum`` base type turns the scalar into that enum);
* an ``int`` for a run of raw bytes of that length;
* a ``DiskStruct`` subclass, or a plain hint of one, for a nested structure;
* a ``(spec, count)`` tuple for a fixed-length array.
"""

import dataclasses
import enum
import functools
import struct
from typing import Annotated, Any, ClassVar, NamedTuple, get_args, get_origin

from .constants import UUID_SIZE


class LayoutError(ValueError):
    """Bytes do not match an on-disk layout, or a value does not fit one."""


UuidBytes = Annotated[bytes, UUID_SIZE]
"""A UUID stored inline as raw bytes."""


class _Scalar:
    def __init__(self, fmt: str) -> None:
        try:
            self._struct = struct.Struct("<" + fmt)
        except struct.error as exc:
            raise LayoutError(f"bad scalar format {fmt!r}") from exc
        self.size = self._struct.size

    def decode(self, data: bytes) -> Any:
        return self._struct.unpack(data)[0]

    def encode(self, value: Any) -> bytes:
        try:
            return self._struct.pack(value)
        except struct.error as exc:
            raise LayoutError(
                f"{value!r} does not fit scalar format {self._struct.format!r}"
            ) from exc


class _Raw:
    def __init__(self, size: int) -> None:
        self.size = size

    def decode(self, data: bytes) -> bytes:
        return bytes(data)

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise LayoutError(f"expected {self.size} raw bytes, got {type(value).__name__}")
        value = bytes(value)
        if len(value) != self.size:
            raise LayoutError(f"expected {self.size} raw bytes, got {len(value)}")
        return value


class _EnumScalar:
    def __init__(self, enum_cls: type[enum.Enum], scalar: _Scalar) -> None:
        self.enum_cls = enum_cls
        self.scalar = scalar
        self.size = scalar.size

    def decode(self, data: bytes) -> enum.Enum:
        raw = self.scalar.decode(data)
        try:
            return self.enum_cls(raw)
        except ValueError as exc:
            raise LayoutError(f"{raw} is not a valid {self.enum_cls.__name__}") from exc

    def encode(self, value: Any) -> bytes:
        try:
            member = self.enum_cls(value)
        except ValueError as exc:
            raise LayoutError(f"{value!r} is not a valid {self.enum_cls.__name__}") from exc
        return self.scalar.encode(member.value)


class _Nested:
    def __init__(self, cls: type["DiskStruct"]) -> None:
        self.cls = cls

    @property
    def size(self) -> int:
        return _layout(self.cls).size

    def decode(self, data: bytes) -> "DiskStruct":
        return self.cls.from_bytes(data)

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, self.cls):
            raise LayoutError(f"expected {self.cls.__name__}, got {type(value).__name__}")
        return value.to_bytes()


class _Array:
    def __init__(self, item: Any, count: int) -> None:
        self.item = item
        self.count = count

    @property
    def size(self) -> int:
        return self.item.size * self.count

    def decode(self, data: bytes) -> tuple:
        step = self.item.size
        return tuple(self.item.decode(data[start:start + step]) for start in range(0, self.size, step))

    def encode(self, value: Any) -> bytes:
        try:
            items = tuple(value)
        except TypeError as exc:
            raise LayoutError(f"expected a sequence of {self.count} items") from exc
        if len(items) != self.count:
            raise LayoutError(f"expected {self.count} items, got {len(items)}")
        return b"".join(self.item.encode(item) for item in items)


def _codec_from_spec(spec: Any, base: Any = None) -> Any:
    if isinstance(spec, str):
        scalar = _Scalar(spec)
        if isinstance(base, type) and issubclass(base, enum.Enum):
            return _EnumScalar(base, scalar)
        return scalar
    if isinstance(spec, int) and not isinstance(spec, bool):
        return _Raw(spec)
    if isinstance(spec, type) and issubclass(spec, DiskStruct):
        return _Nested(spec)
    if isinstance(spec, tuple) and len(spec) == 2:
        item, count = spec
        return _Array(_codec_from_spec(item), count)
    raise LayoutError(f"unknown layout spec {spec!r}")


def _codec_for(hint: Any) -> Any:
    if isinstance(hint, str):
        raise LayoutError(f"field hint {hint!r} is a string; layouts need evaluated hints")
    if get_origin(hint) is Annotated:
        base, spec = get_args(hint)[:2]
        return _codec_from_spec(spec, base)
    if isinstance(hint, type) and issubclass(hint, DiskStruct):
        return _Nested(hint)
    raise LayoutError(f"no on-disk layout for {hint!r}")


class _Layout(NamedTuple):
    fields: tuple
    size: int


@functools.lru_cache(maxsize=None)
def _layout(cls: type) -> _Layout:
    fields = tuple((f.name, _codec_for(f.type)) for f in dataclasses.fields(cls))
    size = sum(codec.size for _, codec in fields)
    declared = getattr(cls, "SIZE", None)
    if declared is not None and declared != size:
        raise LayoutError(f"{cls.__name__} declares {declared} bytes but its fields take {size}")
    return _Layout(fields, size)


class DiskStruct:
    """Base for fixed-size, packed, little-endian on-disk structures."""

    SIZE: ClassVar[int]

    @classmethod
    def from_bytes(cls, data):
        """Decode a structure from exactly its size in bytes."""
        layout = _layout(cls)
        data = bytes(data)
        if len(data) != layout.size:
            raise LayoutError(
                f"{cls.__name__} needs exactly {layout.size} bytes, got {len(data)}"
            )
        values = {}
        position = 0
        for name, codec in layout.fields:
            values[name] = codec.decode(data[position:position + codec.size])
            position += codec.size
        return cls(**values)

    @classmethod
    def from_prefix(cls, data):
        """Decode a structure from the start of ``data``; return it and the remaining bytes."""
        size = _layout(cls).size
        data = bytes(data)
        if len(data) < size:
            raise LayoutError(f"{cls.__name__} needs at least {size} bytes, got {len(data)}")
        return cls.from_bytes(data[:size]), data[size:]

    def to_bytes(self) -> bytes:
        """Encode the structure into its on-disk bytes."""
        return b"".join(
            codec.encode(getattr(self, name)) for name, codec in _layout(type(self)).fields
        )