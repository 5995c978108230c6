"""Reference counts of shared back references for file data extents."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct


@dataclass(frozen=True)
class SharedDataRef(DiskStruct):
    """The reference count following a shared data inline reference header."""

    SIZE: ClassVar[int] = 4

    count: Annotated[int, "I"] = 0