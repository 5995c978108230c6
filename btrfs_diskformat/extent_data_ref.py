"""Indirect back references for file data extents."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct


@dataclass(frozen=True)
class ExtentDataRef(DiskStruct):
    """An indirect back reference for a file data extent."""

    SIZE: ClassVar[int] = 28

    root: Annotated[int, "Q"] = 0
    objectid: Annotated[int, "Q"] = 0
    offset: Annotated[int, "Q"] = 0
    count: Annotated[int, "I"] = 0