"""On-disk timestamps."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct


@dataclass(frozen=True, order=True)
class Time(DiskStruct):
    """A timestamp: Unix seconds plus nanoseconds past that second."""

    SIZE: ClassVar[int] = 12

    timestamp: Annotated[int, "q"] = 0
    nanoseconds: Annotated[int, "I"] = 0