"""Editor descriptions for the cells of the miscellaneous ingredient table."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional

from brewcalc.misc import type_names
from brewcalc.miscmodel import MiscColumn, MiscTable, Role


class EditorKind(Enum):
    """The kind of input control used to edit a cell."""

    COMBO = "combo"
    DOUBLE_SPIN = "double_spin"
    LINE_EDIT = "line_edit"


@dataclass(frozen=True)
class EditorSpec:
    """How a cell is to be edited: the control and its settings."""

    kind: EditorKind
    editable: bool = True
    items: List[str] = field(default_factory=list)
    decimals: int = 0
    minimum: float = 0.0
    maximum: float = 0.0
    step: float = 0.0
    suffix: str = ""


def _column(column: Any) -> Optional[MiscColumn]:
    try:
        return MiscColumn(column)
    except ValueError:
        return None


def editor_spec(
    column: int,
    blank: bool,
    catalog_names: Iterable[str],
    unit_symbol: str,
) -> Optional[EditorSpec]:
    """Describe the editor for ``column``, or None if the cell is not editable.

    On a ``blank`` row only the name and type can be edited.
    """
    col = _column(column)
    if col is MiscColumn.NAME:
        return EditorSpec(
            kind=EditorKind.COMBO,
            editable=True,
            items=[""] + list(catalog_names),
        )
    if col is MiscColumn.QUANTITY:
        if blank:
            return None
        return EditorSpec(
            kind=EditorKind.DOUBLE_SPIN,
            decimals=3,
            minimum=0.0,
            maximum=1000.0,
            step=0.25,
            suffix=" " + unit_symbol,
        )
    if col is MiscColumn.TYPE:
        return EditorSpec(kind=EditorKind.COMBO, editable=False, items=type_names())
    if col is MiscColumn.NOTES:
        if blank:
            return None
        return EditorSpec(kind=EditorKind.LINE_EDIT)
    return None


def editor_value(table: MiscTable, row: int, column: int) -> Any:
    """Return the value an editor for the cell starts with."""
    col = _column(column)
    value = table.data(row, column, Role.EDIT)
    if col is None or value is None:
        return value
    if col is MiscColumn.QUANTITY:
        return float(value)
    return str(value)


def commit_editor(table: MiscTable, row: int, column: int, value: Any) -> bool:
    """Write an editor's value back to the table; return whether it changed."""
    col = _column(column)
    if col is None:
        return False
    if col is MiscColumn.QUANTITY:
        try:
            amount = float(value)
        except (TypeError, ValueError):
            amount = 0.0
        return table.set_data(row, column, amount)
    text = "" if value is None else str(value)
    return table.set_data(row, column, text)