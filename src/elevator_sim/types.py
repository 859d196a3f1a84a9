from __future__ import annotations

from enum import IntEnum
from typing import NewType

Floor = int
CarId = NewType("CarId", int)
PersonId = NewType("PersonId", int)


class Direction(IntEnum):
    """Hall call direction, +1 for up and -1 for down."""

    UP = 1
    DOWN = -1
