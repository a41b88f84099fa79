"""Text renderer for the terminal front end."""

from __future__ import annotations

from collections.abc import Iterable

from raychess.core.enums import Side
from raychess.core.piece import Piece
from raychess.core.types import BOARD_SIZE, Coordinate

_RESET = "\u001b[0m"
_SIDE_COLORS: dict[Side, str] = {
    Side.WHITE: "\u001b[37m",
    Side.BLACK: "\u001b[38;5;247m",
}
RED = "\u001b[31m"
_EMPTY_CELL = "  "


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap *text* in an ANSI colour sequence when *enabled*."""
    return f"{color}{text}{_RESET}" if enabled else text


class TerminalRenderer:
    """Draws a board snapshot as an 8x8 text grid.

    Row ``y`` is printed as ``"{y}|"`` followed by one two-letter cell per
    column, each closed by ``"|"``.  Rows are printed from ``y == 0``
    downwards, under a header of column numbers.
    """

    __slots__ = ("_use_color",)

    def __init__(self, use_color: bool = True) -> None:
        self._use_color = use_color

    def cell(self, piece: Piece | None) -> str:
        if piece is None:
            return _EMPTY_CELL
        return colorize(piece.name, _SIDE_COLORS[piece.side], self._use_color)

    def render(self, slots: Iterable[Piece | None]) -> str:
        by_position = {p.position: p for p in slots if p is not None}
        lines = ["  " + "  ".join(str(x) for x in range(BOARD_SIZE))]
        for y in range(BOARD_SIZE):
            cells = (self.cell(by_position.get(Coordinate(x, y))) for x in range(BOARD_SIZE))
            lines.append(f"{y}|" + "".join(f"{c}|" for c in cells))
        return "\n".join(lines)
