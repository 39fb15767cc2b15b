"""Rules for the games the board can host, and GTP vertex helpers."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class Player(enum.Enum):
    """The side to move; the value is the GTP colour letter."""

    BLACK = "B"
    WHITE = "W"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0.0 to 1.0."""

    r: float
    g: float
    b: float
    a: float = 1.0


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)

Piece = tuple[Color, Color]
Pieces = list[list[Optional[Piece]]]

_PIECE_COLORS: dict[Player, Piece] = {
    Player.BLACK: (BLACK, WHITE),
    Player.WHITE: (WHITE, BLACK),
}

# GTP column letters skip "I".
_SKIPPED_COLUMN = ord("I") - ord("A")

_DIRECTIONS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))


def _opponent(player: Player) -> Player:
    return Player.WHITE if player is Player.BLACK else Player.BLACK


def _empty_grid(width: int, height: int) -> list[list[Optional[Player]]]:
    return [[None] * height for _ in range(width)]


def _pieces(grid: list[list[Optional[Player]]]) -> Pieces:
    return [[_PIECE_COLORS[cell] if cell is not None else None for cell in column] for column in grid]


def _play_command(player: Player, x: int, y: int, height: int) -> str:
    column = x + 1 if x >= _SKIPPED_COLUMN else x
    return f"play {player.value} {chr(ord('A') + column)}{height - y}"


class Chessboard(ABC):
    """Common interface of every board: size, stones, moves and turn."""

    @abstractmethod
    def length(self) -> tuple[int, int]:
        """Return the board size as (width, height)."""

    @abstractmethod
    def pieces(self) -> Pieces:
        """Return the stones indexed [x][y]; each is (fill, outline) or None."""

    @abstractmethod
    def go(self, x: int, y: int) -> Optional[str]:
        """Play at (x, y); return the GTP play command, or None if illegal."""

    @abstractmethod
    def new_board(self) -> None:
        """Clear the board and give the move to black."""

    @abstractmethod
    def player(self) -> Player:
        """Return the player to move."""


class Gomoku(Chessboard):
    """Free-style gomoku on a 15 by 15 board."""

    SIZE = 15

    def __init__(self) -> None:
        self._grid = _empty_grid(self.SIZE, self.SIZE)
        self._current = Player.BLACK

    def length(self) -> tuple[int, int]:
        return (self.SIZE, self.SIZE)

    def pieces(self) -> Pieces:
        return _pieces(self._grid)

    def go(self, x: int, y: int) -> Optional[str]:
        if not (0 <= x < self.SIZE and 0 <= y < self.SIZE):
            return None
        if self._grid[x][y] is not None:
            return None
        player = self._current
        self._grid[x][y] = player
        self._current = _opponent(player)
        return _play_command(player, x, y, self.SIZE)

    def new_board(self) -> None:
        self._grid = _empty_grid(self.SIZE, self.SIZE)
        self._current = Player.BLACK

    def player(self) -> Player:
        return self._current


class _Cell(enum.Enum):
    PIECE = enum.auto()
    EMPTY = enum.auto()
    OUTSIDE = enum.auto()


class Zhenqi(Chessboard):
    """An 8 by 8 board where each new stone pushes its neighbours one step away."""

    def __init__(self) -> None:
        self._width = 8
        self._height = 8
        self._grid = _empty_grid(self._width, self._height)
        self._current = Player.BLACK

    def _cell(self, x: int, y: int) -> _Cell:
        if not (0 <= x < self._width and 0 <= y < self._height):
            return _Cell.OUTSIDE
        return _Cell.EMPTY if self._grid[x][y] is None else _Cell.PIECE

    def length(self) -> tuple[int, int]:
        return (self._width, self._height)

    def pieces(self) -> Pieces:
        return _pieces(self._grid)

    def go(self, x: int, y: int) -> Optional[str]:
        if self._cell(x, y) is not _Cell.EMPTY:
            return None
        player = self._current
        self._grid[x][y] = player
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self._cell(nx, ny) is not _Cell.PIECE:
                continue
            beyond = self._cell(nx + dx, ny + dy)
            if beyond is _Cell.EMPTY:
                self._grid[nx + dx][ny + dy] = self._grid[nx][ny]
                self._grid[nx][ny] = None
            elif beyond is _Cell.OUTSIDE:
                self._grid[nx][ny] = None
        self._current = _opponent(player)
        return _play_command(player, x, y, self._height)

    def new_board(self) -> None:
        self._grid = _empty_grid(self._width, self._height)
        self._current = Player.BLACK

    def player(self) -> Player:
        return self._current


def get_chessboard(name: str) -> Chessboard:
    """Create the board registered under ``name``; unknown names give gomoku."""
    if name == "zhenqi":
        return Zhenqi()
    return Gomoku()


def all_board_names() -> list[tuple[str, str]]:
    """Return (display name, identifier) for every available board."""
    return [
        ("Gomoku 15 * 15", "gomoku"),
        ("Zhenqi 8 * 8", "zhenqi"),
    ]


def parse_vertex(vertex: str, width: int, height: int, skip_i: bool) -> Optional[tuple[int, int]]:
    """Turn a GTP vertex such as ``B8`` into board coordinates (x, height - row).

    Returns None for ``pass``, for malformed vertices and for rows above ``height``.
    """
    if vertex == "pass" or len(vertex) < 2:
        return None
    x = ord(vertex[0]) - ord("A")
    if x < 0:
        return None
    if skip_i and x >= _SKIPPED_COLUMN:
        x -= 1
    digits = []
    for char in vertex[1:]:
        if char not in "0123456789":
            break
        digits.append(char)
    if not digits:
        return None
    row = int("".join(digits))
    if row > height:
        return None
    return (x, height - row)