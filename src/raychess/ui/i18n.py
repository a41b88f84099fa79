"""Internationalisation strings for the raychess front ends.

Usage::

    from raychess.ui.i18n import t, set_language

    set_language("Russian")
    print(t().msg_checkmate)          # "Мат!"
    print(t().turn.format(side=t().side_name(Side.WHITE)))
"""

from __future__ import annotations

from dataclasses import dataclass

from raychess.core.enums import Side


@dataclass(frozen=True)
class Strings:
    # ── Sides ────────────────────────────────────────────────────────────
    side_white: str
    side_black: str

    # ── Command loop ─────────────────────────────────────────────────────
    turn: str  # "{side}'s turn"
    prompt_select: str
    prompt_target: str
    confirm_exit: str
    confirm_yes: str  # accepted answers, lower case, comma separated

    msg_illegal: str
    msg_no_piece: str
    msg_no_king: str  # "{side} has no king!"
    msg_invalid: str
    msg_check: str
    msg_checkmate: str
    msg_wins: str  # "{side} wins."

    # ── Board window ─────────────────────────────────────────────────────
    window_title: str
    btn_new_game: str
    status_in_check: str  # "{side} is in check"

    def side_name(self, side: Side) -> str:
        return self.side_white if side is Side.WHITE else self.side_black

    def is_yes(self, answer: str) -> bool:
        return answer.strip().lower() in self.confirm_yes.split(",")


_EN = Strings(
    side_white="White",
    side_black="Black",
    turn="{side}'s turn",
    prompt_select="Select a piece > ",
    prompt_target="Where to move to > ",
    confirm_exit="Are you sure? (y/n) > ",
    confirm_yes="y,yes",
    msg_illegal="You can't do that here",
    msg_no_piece="There is no piece there!",
    msg_no_king="{side} has no king!",
    msg_invalid="Invalid entry!",
    msg_check="Check!",
    msg_checkmate="Checkmate!",
    msg_wins="{side} wins.",
    window_title="raychess",
    btn_new_game="New game",
    status_in_check="{side} is in check",
)

_RU = Strings(
    side_white="Белые",
    side_black="Чёрные",
    turn="Ход: {side}",
    prompt_select="Выберите фигуру > ",
    prompt_target="Куда пойти > ",
    confirm_exit="Вы уверены? (д/н) > ",
    confirm_yes="д,да,y,yes",
    msg_illegal="Так ходить нельзя",
    msg_no_piece="Там нет фигуры!",
    msg_no_king="{side}: нет короля!",
    msg_invalid="Неверный ввод!",
    msg_check="Шах!",
    msg_checkmate="Мат!",
    msg_wins="{side} побеждают.",
    window_title="raychess",
    btn_new_game="Новая игра",
    status_in_check="{side}: шах",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
