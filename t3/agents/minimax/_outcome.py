from typing import NamedTuple, Optional

from ._move import Move


LOSS = -1
"""Score of a position lost by the maximizing side."""

TIE = 0
"""Score of a tied position."""

WIN = 1
"""Score of a position won by the maximizing side."""


class Outcome(NamedTuple):
    """Result of searching a position."""

    score: int
    """Minimax score, one of `LOSS`, `TIE` or `WIN`."""

    move: Optional[Move]
    """Best move found, `None` if the searched position was terminal."""
