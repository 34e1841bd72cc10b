"""Miscellaneous brewing ingredients such as yeast, finings, herbs and spices."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from brewcalc.quantity import Quantity


class MiscType(str, Enum):
    """The kinds of miscellaneous ingredient."""

    YEAST = "Yeast"
    FINING = "Fining"
    HERB = "Herb"
    SPICE = "Spice"
    FLAVOR = "Flavor"
    ADDITIVE = "Additive"
    OTHER = "Other"


@dataclass
class Misc:
    """A miscellaneous ingredient: name, quantity, type and notes."""

    name: str = "Generic"
    quantity: Quantity = field(default_factory=Quantity)
    type: str = MiscType.OTHER.value
    notes: str = ""

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Misc):
            return NotImplemented
        return self.name < other.name


def type_names() -> List[str]:
    """Return the names of all ingredient types, in display order."""
    return [kind.value for kind in MiscType]