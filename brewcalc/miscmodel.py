"""A table of miscellaneous ingredients for editing in a recipe."""

from __future__ import annotations

import dataclasses
from enum import Enum, IntEnum
from typing import Any, Callable, List, Mapping, MutableSequence, Optional

from brewcalc.misc import Misc
from brewcalc.quantity import Quantity, Unit


class MiscColumn(IntEnum):
    """Columns of the ingredient table."""

    NAME = 0
    QUANTITY = 1
    TYPE = 2
    NOTES = 3


class Role(Enum):
    """What a cell value is wanted for."""

    DISPLAY = "display"
    EDIT = "edit"
    ALIGNMENT = "alignment"


_HEADERS = {
    MiscColumn.NAME: "Misc",
    MiscColumn.QUANTITY: "Quantity",
    MiscColumn.TYPE: "Type",
    MiscColumn.NOTES: "Notes",
}

_LEFT_ALIGNED = {MiscColumn.NAME, MiscColumn.TYPE, MiscColumn.NOTES}


def _column(column: Any) -> Optional[MiscColumn]:
    try:
        return MiscColumn(column)
    except ValueError:
        return None


def _clone(misc: Misc) -> Misc:
    quantity = misc.quantity
    return dataclasses.replace(
        misc, quantity=type(quantity)(quantity.amount, quantity.unit)
    )


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _number(value: float) -> str:
    return format(value, ".6g")


class MiscTable:
    """Editable rows of miscellaneous ingredients backed by a list.

    ``catalog`` maps ingredient names to their database entries, ``default_unit``
    is the unit quantities are edited in and ``confirm`` is asked before a row
    is deleted.  Callables in ``on_modified`` are called after every change.
    """

    def __init__(
        self,
        items: MutableSequence[Misc],
        catalog: Mapping[str, Misc],
        default_unit: Unit,
        confirm: Callable[[], bool] = lambda: True,
    ) -> None:
        self.items = items
        self.catalog = catalog
        self.default_unit = default_unit
        self.confirm = confirm
        self.on_modified: List[Callable[[], None]] = []
        self._deleting = False

    def _modified(self) -> None:
        for listener in self.on_modified:
            listener()

    def _valid_row(self, row: int) -> bool:
        return 0 <= row < len(self.items)

    def row_count(self) -> int:
        return len(self.items)

    def column_count(self) -> int:
        return len(MiscColumn)

    def data(self, row: int, column: int, role: Role = Role.DISPLAY) -> Any:
        """Return the value of a cell for ``role``, or None if there is none."""
        col = _column(column)
        if col is None or not self._valid_row(row):
            return None
        misc = self.items[row]

        if role is Role.DISPLAY:
            if col is MiscColumn.NAME:
                return misc.name
            if col is MiscColumn.QUANTITY:
                return misc.quantity.to_string(3)
            if col is MiscColumn.TYPE:
                return misc.type
            return misc.notes

        if role is Role.EDIT:
            if col is MiscColumn.NAME:
                return misc.name
            if col is MiscColumn.QUANTITY:
                return misc.quantity.amount_in(self.default_unit)
            if col is MiscColumn.TYPE:
                return misc.type
            return misc.notes

        if role is Role.ALIGNMENT:
            return "left" if col in _LEFT_ALIGNED else "right"

        return None

    def set_data(self, row: int, column: int, value: Any) -> bool:
        """Store an edited cell value; return whether the table changed.

        An empty name asks for confirmation and deletes the row.
        """
        col = _column(column)
        if col is None or not self._valid_row(row):
            return False

        misc = _clone(self.items[row])

        if col is MiscColumn.NAME:
            name = "" if value is None else str(value)
            if not name:
                if self._deleting:
                    return False
                self._deleting = True
                try:
                    if self.confirm():
                        del self.items[row]
                        self._modified()
                        return True
                    return False
                finally:
                    self._deleting = False

            if name == self.items[row].name:
                return False

            misc.name = name
            entry = self.catalog.get(name)
            if entry is not None:
                misc.type = entry.type
                misc.notes = entry.notes

        elif col is MiscColumn.QUANTITY:
            misc.quantity = Quantity(_to_float(value), self.default_unit)

        elif col is MiscColumn.TYPE:
            misc.type = "" if value is None else str(value)

        else:
            misc.notes = "" if value is None else str(value)

        self.items[row] = misc
        self._modified()
        return True

    def insert_row(self, row: int) -> int:
        """Insert a generic ingredient at ``row`` (appending if out of range)."""
        if row < 0 or row > len(self.items):
            row = len(self.items)
        template = self.catalog.get("Generic")
        misc = _clone(template) if template is not None else Misc()
        self.items.insert(row, misc)
        self._modified()
        return row

    def remove_row(self, row: int) -> bool:
        """Remove ``row`` after confirmation; return whether it was removed."""
        if not self._valid_row(row):
            return False
        if not self.confirm():
            return False
        del self.items[row]
        self._modified()
        return True

    def header(self, column: int) -> Optional[str]:
        col = _column(column)
        return None if col is None else _HEADERS[col]

    def sort(self, column: int, descending: bool = False) -> None:
        """Reorder the rows by the text of ``column``."""
        col = _column(column)

        def field(misc: Misc) -> str:
            if col is MiscColumn.NAME:
                return misc.name
            if col is MiscColumn.QUANTITY:
                return _number(misc.quantity.amount).rjust(8, "0")
            if col is MiscColumn.TYPE:
                return misc.type
            return misc.notes

        ordered = sorted(self.items, key=lambda misc: (field(misc), misc.name))
        if descending:
            ordered.reverse()
        self.items[:] = ordered