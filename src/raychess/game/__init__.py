"""Game management layer — engine, state machine, events.

Quick start::

    from raychess.core import Coordinate
    from raychess.game import GameEngine

    engine = GameEngine()
    engine.move_piece(Coordinate(4, 1), Coordinate(4, 3))
"""

from raychess.game.engine import GameEngine, GameEvents
from raychess.game.interfaces import GamePhase, IGameEngine
from raychess.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameEngine",
    # Concrete
    "GameEngine",
    "GameEvents",
    "GameState",
]
