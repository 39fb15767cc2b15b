"""Geometry of the board canvas: layout, hit testing and the shapes to paint."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from rboard.analyze import Analysis
from rboard.chessboard import BLACK, Color, Pieces, parse_vertex

Point = tuple[float, float]


def _rgba8(r: int, g: int, b: int, a: float = 1.0) -> Color:
    return Color(r / 255, g / 255, b / 255, a)


BACKGROUND = _rgba8(247, 238, 214)
GRID_COLOR = BLACK
LABEL_COLOR = BLACK
HOVER_FILL = Color(0.9, 0.9, 0.9)
HOVER_STROKE = Color(0.5, 0.0, 0.5)
BEST_FILL = _rgba8(25, 118, 210, 0.7)
GOOD_FILL = _rgba8(187, 222, 251, 0.5)
OTHER_FILL = _rgba8(255, 205, 210, 0.3)
CANDIDATE_STROKE = _rgba8(241, 9, 9, 1.0)

GOOD_WINRATE = 0.7
SHOWN_WINRATE = 0.5

_SKIPPED_COLUMN = ord("I") - ord("A")
_LABEL_WIDTHS = {"i": 0.2, "I": 0.2, "J": 0.2, "m": 0.7, "w": 0.7, "M": 0.7}
_DEFAULT_LABEL_WIDTH = 0.5


@dataclass(frozen=True)
class Line:
    """A straight stroke from ``start`` to ``end``."""

    start: Point
    end: Point
    color: Color
    width: float


@dataclass(frozen=True)
class Circle:
    """A filled circle with an outline."""

    center: Point
    radius: float
    fill: Color
    stroke: Color
    stroke_width: float


@dataclass(frozen=True)
class Label:
    """Text whose top-left corner sits at ``position``."""

    text: str
    position: Point
    size: float
    color: Color


Shape = Union[Line, Circle, Label]


@dataclass(frozen=True)
class BoardLayout:
    """Cell size and offsets of a board drawn inside a canvas."""

    count_x: int
    count_y: int
    size: float
    x_padding: float
    y_padding: float

    def cell_at(self, x: float, y: float) -> Optional[tuple[int, int]]:
        """Return the (column, row) under the canvas point, or None outside the grid."""
        if self.size <= 0:
            return None
        column = math.floor((x - self.x_padding) / self.size)
        row = math.floor((y - self.y_padding) / self.size)
        if 0 <= column < self.count_x and 0 <= row < self.count_y:
            return (column, row)
        return None

    def cell_center(self, column: float, row: float) -> Point:
        """Return the canvas point at the centre of a cell."""
        half = self.size / 2
        return (
            self.x_padding + column * self.size + half,
            self.y_padding + row * self.size + half,
        )


def compute_layout(count: tuple[int, int], width: float, height: float) -> BoardLayout:
    """Fit a grid of ``count`` cells into a canvas, leaving one cell for labels."""
    count_x, count_y = count
    size = min((width - 5) / (count_x + 1), (height - 5) / (count_y + 1))
    x_padding = (width - size * count_x) / 2 + size / 2
    y_padding = (height - size * count_y) / 2 + size / 2
    return BoardLayout(count_x, count_y, size, x_padding, y_padding)


def column_labels(count_x: int) -> list[str]:
    """Return the GTP column letters, which skip ``I``."""
    labels = []
    for column in range(count_x):
        shifted = column + 1 if column >= _SKIPPED_COLUMN else column
        labels.append(chr(ord("A") + shifted))
    return labels


def row_labels(count_y: int) -> list[str]:
    """Return row numbers from 1 upwards, single digits padded to two characters."""
    return [f"{number:>2}" for number in range(1, count_y + 1)]


def _grid(layout: BoardLayout) -> list[Line]:
    size = layout.size
    right = layout.x_padding + layout.count_x * size
    bottom = layout.y_padding + layout.count_y * size
    lines = []
    for i in range(layout.count_x + 1):
        x = layout.x_padding + i * size
        lines.append(Line((x, layout.y_padding), (x, bottom), GRID_COLOR, 1.0))
    for i in range(layout.count_y + 1):
        y = layout.y_padding + i * size
        lines.append(Line((layout.x_padding, y), (right, y), GRID_COLOR, 1.0))
    return lines


def _labels(layout: BoardLayout) -> list[Label]:
    size = layout.size
    text_size = size * 0.8
    labels = []
    for column, text in enumerate(column_labels(layout.count_x)):
        label_width = _LABEL_WIDTHS.get(text, _DEFAULT_LABEL_WIDTH)
        position = (
            layout.x_padding + column * size + size * (1 - label_width) / 2,
            layout.y_padding - size,
        )
        labels.append(Label(text, position, text_size, LABEL_COLOR))
    for index, text in enumerate(row_labels(layout.count_y)):
        position = (
            layout.x_padding - size,
            layout.y_padding + (layout.count_y - 1 - index) * size,
        )
        labels.append(Label(text, position, text_size, LABEL_COLOR))
    return labels


def _winrate_label(center: Point, size: float, winrate: float) -> Label:
    x, y = center
    return Label(
        f"{winrate * 100:.2f}%",
        (x - size * 0.4, y - size * 0.15),
        size * 0.25,
        LABEL_COLOR,
    )


def _candidates(layout: BoardLayout, analyses: Iterable[Analysis]) -> list[Shape]:
    shapes: list[Shape] = []
    radius = layout.size / 2
    for rank, analysis in enumerate(analyses):
        vertex = parse_vertex(analysis.move, layout.count_x, layout.count_y, True)
        if vertex is None:
            continue
        center = layout.cell_center(*vertex)
        if rank == 0:
            fill, labelled = BEST_FILL, True
        elif analysis.winrate > GOOD_WINRATE:
            fill, labelled = GOOD_FILL, True
        else:
            fill, labelled = OTHER_FILL, analysis.winrate > SHOWN_WINRATE
        shapes.append(Circle(center, radius, fill, CANDIDATE_STROKE, 2.0))
        if labelled:
            shapes.append(_winrate_label(center, layout.size, analysis.winrate))
    return shapes


def draw(
    count: tuple[int, int],
    pieces: Pieces,
    analyses: Iterable[Analysis],
    width: float,
    height: float,
    cursor: Optional[Point],
) -> list[Shape]:
    """Return the shapes of the board in painting order, over a ``BACKGROUND`` fill.

    ``cursor`` is the mouse position relative to the canvas, or None.
    """
    layout = compute_layout(count, width, height)
    shapes: list[Shape] = [*_grid(layout), *_labels(layout)]

    if cursor is not None:
        cell = layout.cell_at(*cursor)
        if cell is not None:
            center = layout.cell_center(*cell)
            shapes.append(Circle(center, layout.size / 2 * 0.8, HOVER_FILL, HOVER_STROKE, 2.0))

    for x, column in enumerate(pieces):
        for y, piece in enumerate(column):
            if piece is None:
                continue
            fill, outline = piece
            center = layout.cell_center(x, y)
            shapes.append(Circle(center, layout.size / 2 * 0.9, fill, outline, 2.0))

    shapes.extend(_candidates(layout, analyses))
    return shapes


def click(
    count: tuple[int, int], width: float, height: float, x: float, y: float
) -> Optional[tuple[int, int]]:
    """Return the cell a left click at canvas point (x, y) plays, or None."""
    return compute_layout(count, width, height).cell_at(x, y)