"""Minimax with alpha and beta pruning.

The engine searches the full game tree below a position and returns the move that is
optimal assuming the opponent plays optimally. Positions are supplied by the host
through the `Position` interface; the engine never builds or modifies them."""

from ._move import Move
from ._position import Position
from ._outcome import Outcome, LOSS, TIE, WIN
from ._config import Config
from ._statistics import Statistics
from ._minimax import choose, evaluate, search


__all__ = [
    "Move",
    "Position",
    "Outcome",
    "LOSS",
    "TIE",
    "WIN",
    "Config",
    "Statistics",
    "choose",
    "evaluate",
    "search",
]
