from __future__ import annotations

from enum import Enum


class MilkType(str, Enum):
    COW = "cow"
    BUFFALO = "buffalo"
