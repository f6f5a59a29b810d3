"""
wifi_survey/projections.py

Read-only views of a RoomList:
- table_rows(): cell text per room for the rooms table
- signal_chart() / speed_chart(): grouped-bar data for the charts tab

These functions never touch the records they are given; projecting the
same snapshot twice gives equal results.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from wifi_survey.fields import FIELD_LABELS
from wifi_survey.models import RoomRecord

_LOG = logging.getLogger(__name__)

ACTIONS_COLUMN = "actions"
EMPTY_CELL = "-"
EMPTY_TABLE_MESSAGE = "Nenhum cômodo cadastrado"

SIGNAL_DOMAIN: Tuple[float, float] = (-90.0, 0.0)

COLOR_24 = "#8884d8"
COLOR_5 = "#82ca9d"


# ---------------------------------------------------------------------- Table


@dataclass(frozen=True)
class ColumnSpec:
    key: str
    header: str
    width: Optional[int] = None


ROOM_COLUMNS: Tuple[ColumnSpec, ...] = (
    ColumnSpec("room", FIELD_LABELS["room"]),
    ColumnSpec("signal_level_24", FIELD_LABELS["signal_level_24"]),
    ColumnSpec("signal_level_5", FIELD_LABELS["signal_level_5"]),
    ColumnSpec("speed_24", FIELD_LABELS["speed_24"]),
    ColumnSpec("speed_5", FIELD_LABELS["speed_5"]),
    ColumnSpec("interference", FIELD_LABELS["interference"], width=160),
    ColumnSpec(ACTIONS_COLUMN, "", width=48),
)


@dataclass(frozen=True)
class TableRow:
    id: str
    cells: Tuple[str, ...]


def table_rows(
    records: Iterable[RoomRecord], columns: Sequence[ColumnSpec] = ROOM_COLUMNS
) -> List[TableRow]:
    rows: List[TableRow] = []
    for record in records:
        cells = []
        for col in columns:
            if col.key == ACTIONS_COLUMN:
                cells.append("")
                continue
            text = record.value(col.key)
            cells.append(text if text else EMPTY_CELL)
        rows.append(TableRow(id=record.id, cells=tuple(cells)))
    return rows


# ---------------------------------------------------------------------- Charts


@dataclass(frozen=True)
class BarSeries:
    key: str
    name: str
    color: str
    values: Tuple[Optional[float], ...]


@dataclass(frozen=True)
class ChartData:
    categories: Tuple[str, ...]
    series: Tuple[BarSeries, ...]
    domain: Optional[Tuple[float, float]] = None

    @property
    def is_empty(self) -> bool:
        return not self.categories


def parse_number(text: str) -> Optional[float]:
    """Float value of a measurement cell, or None if blank / not a number."""
    if not text:
        return None
    try:
        return float(text.replace(",", "."))
    except ValueError:
        return None


def _chart(
    records: Iterable[RoomRecord],
    keys: Tuple[str, str],
    domain: Optional[Tuple[float, float]],
) -> ChartData:
    rooms = list(records)
    colors = (COLOR_24, COLOR_5)
    series = tuple(
        BarSeries(
            key=key,
            name=FIELD_LABELS[key],
            color=color,
            values=tuple(parse_number(r.value(key)) for r in rooms),
        )
        for key, color in zip(keys, colors)
    )
    return ChartData(categories=tuple(r.room for r in rooms), series=series, domain=domain)


def signal_chart(records: Iterable[RoomRecord]) -> ChartData:
    return _chart(records, ("signal_level_24", "signal_level_5"), SIGNAL_DOMAIN)


def speed_chart(records: Iterable[RoomRecord]) -> ChartData:
    return _chart(records, ("speed_24", "speed_5"), None)


def value_range(chart: ChartData) -> Tuple[float, float]:
    """
    Y-axis range for ``chart``.

    A fixed domain wins. Otherwise the range spans the data and always
    includes zero (bars grow from the zero line).
    """
    if chart.domain is not None:
        return chart.domain

    values = [v for s in chart.series for v in s.values if v is not None]
    low = min([0.0] + values)
    high = max([0.0] + values)
    if low == high:
        high = low + 1.0
    _LOG.debug("auto range for %d values: %s..%s", len(values), low, high)
    return low, high
