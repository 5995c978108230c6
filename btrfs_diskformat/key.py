"""Keys that locate items in trees."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct


@dataclass(frozen=True)
class Key(DiskStruct):
    """A key used to describe and locate any item in any tree."""

    SIZE: ClassVar[int] = 17

    objectid: Annotated[int, "Q"] = 0
    key_type: Annotated[int, "B"] = 0
    offset: Annotated[int, "Q"] = 0