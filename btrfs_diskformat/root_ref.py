"""References to subvolume tree roots."""

from dataclasses import dataclass
from typing import Annotated, ClassVar

from .binary import DiskStruct


@dataclass(frozen=True)
class RootRef(DiskStruct):
    """A forward or backward reference to a subvolume tree root.

    The name of the tree, ``name_len`` bytes long, follows the structure.
    """

    SIZE: ClassVar[int] = 18

    dirid: Annotated[int, "Q"] = 0
    sequence: Annotated[int, "Q"] = 0
    name_len: Annotated[int, "H"] = 0