"""BoardWindow — a minimal Qt board for click-to-move play."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from raychess.core.errors import NoSuchPieceError
from raychess.core.move_generator import LegalMoves
from raychess.core.types import BOARD_SIZE, Coordinate, all_coordinates
from raychess.game.engine import GameEngine
from raychess.settings import AppSettings
from raychess.ui.i18n import t

_LOGGER = logging.getLogger(__name__)

_LIGHT = "#f0d9b5"
_DARK = "#b58863"
_SELECTED = "#f6f669"
_MOVE = "#aad576"
_ATTACK = "#e06c75"


class BoardWindow(QWidget):
    """Square buttons drawn from the engine's board.

    Clicking a piece of the side to move selects it and highlights its
    legal moves and attacks; clicking a second square submits the move.
    """

    TILE = 64  # px per square

    def __init__(
        self,
        engine: GameEngine,
        settings: AppSettings | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._settings = settings or AppSettings()
        self._selected: Coordinate | None = None
        self._legal: LegalMoves | None = None
        self._buttons: dict[Coordinate, QPushButton] = {}

        self._status = QLabel(self)
        self._new_game_btn = QPushButton(self)
        self._new_game_btn.clicked.connect(self.new_game)

        self._build_ui()
        self.refresh()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def selected(self) -> Coordinate | None:
        return self._selected

    @property
    def status_text(self) -> str:
        return self._status.text()

    def square_button(self, position: Coordinate) -> QPushButton:
        return self._buttons[position]

    def new_game(self) -> None:
        self._engine.new_game()
        self._clear_selection()
        self.refresh()

    def click_square(self, position: Coordinate) -> None:
        """Select, reselect, deselect or move, depending on state."""
        if self._engine.checkmate:
            return
        piece = self._engine.board.piece_at(position)

        if self._selected is None or position == self._selected:
            if self._selected is None and piece is not None:
                self._select(position)
            else:
                self._clear_selection()
        elif piece is not None and piece.side == self._engine.turn:
            self._select(position)
        else:
            applied = self._engine.move_piece(self._selected, position)
            _LOGGER.debug("Move %s -> %s applied=%s", self._selected, position, applied)
            self._clear_selection()
        self.refresh()

    def refresh(self) -> None:
        """Redraw pieces, highlights and the status line."""
        board = self._engine.board
        for position, button in self._buttons.items():
            piece = board.piece_at(position)
            button.setText(piece.symbol if piece is not None else "")
            button.setStyleSheet(f"background-color: {self._square_color(position)};")

        strings = t()
        if self._engine.checkmate:
            winner = strings.side_name(self._engine.state.winner)
            text = f"{strings.msg_checkmate} {strings.msg_wins.format(side=winner)}"
        elif self._engine.in_check:
            text = strings.status_in_check.format(side=strings.side_name(self._engine.turn))
        else:
            text = strings.turn.format(side=strings.side_name(self._engine.turn))
        self._status.setText(text)
        self._new_game_btn.setText(strings.btn_new_game)
        self.setWindowTitle(strings.window_title)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _build_ui(self) -> None:
        grid = QGridLayout()
        grid.setSpacing(0)
        font = QFont()
        font.setPointSize(self.TILE // 2)
        for position in all_coordinates():
            button = QPushButton(self)
            button.setFixedSize(self.TILE, self.TILE)
            button.setFont(font)
            button.clicked.connect(lambda _checked=False, p=position: self.click_square(p))
            # Row 7 at the top, as seen from White's side.
            grid.addWidget(button, BOARD_SIZE - 1 - position.y, position.x)
            self._buttons[position] = button

        footer = QHBoxLayout()
        footer.addWidget(self._status, 1)
        footer.addWidget(self._new_game_btn, 0, Qt.AlignmentFlag.AlignRight)

        layout = QVBoxLayout(self)
        layout.addLayout(grid)
        layout.addLayout(footer)

    def _select(self, position: Coordinate) -> None:
        try:
            legal = self._engine.get_legal_moves(position)
        except NoSuchPieceError:
            self._clear_selection()
            return
        self._selected = position
        self._legal = legal if self._settings.show_legal_moves else None

    def _clear_selection(self) -> None:
        self._selected = None
        self._legal = None

    def _square_color(self, position: Coordinate) -> str:
        if position == self._selected:
            return _SELECTED
        if self._legal is not None:
            if position in self._legal.attacks:
                return _ATTACK
            if position in self._legal.moves:
                return _MOVE
        return _DARK if (position.x + position.y) % 2 == 0 else _LIGHT
