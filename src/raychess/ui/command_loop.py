"""Interactive terminal command loop.

Reads two coordinates per turn (``"x y"``, e.g. ``"4 1"`` then ``"4 3"``),
forwards them to the engine and reports the outcome on the next redraw.
Typing ``exit`` at either prompt asks for confirmation first.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from raychess.core.errors import MissingKingError, NoSuchPieceError
from raychess.core.piece import Piece
from raychess.core.types import Coordinate, parse_coordinate
from raychess.game.interfaces import IGameEngine
from raychess.settings import AppSettings
from raychess.ui.i18n import t
from raychess.ui.terminal import RED, TerminalRenderer, colorize

_LOGGER = logging.getLogger(__name__)

_EXIT_COMMAND = "exit"
_CLEAR_LINES = "\n" * 11

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ExitRequested(Exception):
    """The player confirmed they want to leave the game."""


class CommandLoop:
    """Drives a game from text input.

    Args:
        engine: Game being played.
        snapshot: ``() -> slots`` returning the pieces to draw.
        settings: Colour / screen-clearing preferences.
        input_fn: Prompt reader, ``input`` by default.
        output_fn: Line writer, ``print`` by default.
    """

    def __init__(
        self,
        engine: IGameEngine,
        snapshot: Callable[[], Iterable[Piece | None]],
        settings: AppSettings | None = None,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self._engine = engine
        self._snapshot = snapshot
        self._settings = settings or AppSettings()
        self._renderer = TerminalRenderer(self._settings.use_color)
        self._input = input_fn
        self._output = output_fn
        self._message = ""

    @property
    def message(self) -> str:
        """Message shown under the board on the next redraw."""
        return self._message

    # ── Public API ───────────────────────────────────────────────────────

    def run(self) -> int:
        """Play until checkmate or a confirmed exit. Returns an exit code."""
        try:
            while self.step():
                pass
        except ExitRequested:
            _LOGGER.debug("Player left the game")
        return 0

    def step(self) -> bool:
        """Draw the board and play one turn. False once the game is over.

        Raises:
            ExitRequested: The player confirmed ``exit``.
        """
        self._draw()
        if self._engine.checkmate:
            winner = t().side_name(self._engine.turn.opposite)
            self._output(self._error_text(t().msg_checkmate))
            self._output(t().msg_wins.format(side=winner))
            return False

        if self._message:
            self._output(self._message)
            self._message = ""
        self._output(t().turn.format(side=t().side_name(self._engine.turn)))

        try:
            source = self._ask(t().prompt_select)
            target = self._ask(t().prompt_target)
        except ValueError:
            self._message = self._error_text(t().msg_invalid)
            return True
        self._message = self.submit(source, target)
        return True

    def submit(self, source: Coordinate, target: Coordinate) -> str:
        """Forward one move to the engine; returns the message to show."""
        try:
            applied = self._engine.move_piece(source, target)
        except MissingKingError as exc:
            _LOGGER.error("Board has no %s king", exc.side)
            return self._error_text(t().msg_no_king.format(side=t().side_name(exc.side)))
        except NoSuchPieceError:
            return self._error_text(t().msg_no_piece)
        if not applied:
            return self._error_text(t().msg_illegal)
        if self._engine.in_check and not self._engine.checkmate:
            return self._error_text(t().msg_check)
        return ""

    # ── Internal helpers ─────────────────────────────────────────────────

    def _draw(self) -> None:
        if self._settings.clear_screen:
            self._output(_CLEAR_LINES)
        self._output(self._renderer.render(self._snapshot()))

    def _ask(self, prompt: str) -> Coordinate:
        answer = self._read(prompt)
        while answer.strip().lower() == _EXIT_COMMAND:
            if t().is_yes(self._read(t().confirm_exit)):
                raise ExitRequested
            answer = self._read(prompt)
        return parse_coordinate(answer)

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            raise ExitRequested from None

    def _error_text(self, text: str) -> str:
        return colorize(text, RED, self._settings.use_color)
