"""Columns of the candidate-move table."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from rboard.analyze import Analysis


class ColumnKind(enum.Enum):
    """What a column shows; the value is its header text."""

    ORDER = "order"
    MOVE = "move"
    VISITS = "visits"
    WINRATE = "winrate"
    PV = "pv"
    PV_VISITS = "pv visits"


_WIDTHS = {ColumnKind.PV: 400.0}
_DEFAULT_WIDTH = 80.0


def _format_float(value: float) -> str:
    """Format a float as its shortest exact decimal, without exponent or trailing zeros."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass
class Column:
    """A table column and its width in pixels."""

    kind: ColumnKind
    width: float = _DEFAULT_WIDTH
    resize_offset: Optional[float] = None

    @classmethod
    def of(cls, kind: ColumnKind) -> "Column":
        return cls(kind, _WIDTHS.get(kind, _DEFAULT_WIDTH))

    def header(self) -> str:
        return self.kind.value

    def cell(self, row_index: int, row: Analysis) -> str:
        """Return the text shown for ``row`` at position ``row_index``."""
        if self.kind is ColumnKind.ORDER:
            return str(row_index)
        if self.kind is ColumnKind.MOVE:
            return row.move
        if self.kind is ColumnKind.VISITS:
            return str(row.visits)
        if self.kind is ColumnKind.WINRATE:
            return _format_float(row.winrate)
        if self.kind is ColumnKind.PV:
            return " ".join(row.pv)
        return str(row.pv_visits)


def default_columns() -> list[Column]:
    return [Column.of(kind) for kind in ColumnKind]


def table_rows(analyses: Iterable[Analysis]) -> list[list[str]]:
    """Return the cell texts of every analysis under the default columns."""
    columns = default_columns()
    return [[column.cell(index, row) for column in columns] for index, row in enumerate(analyses)]