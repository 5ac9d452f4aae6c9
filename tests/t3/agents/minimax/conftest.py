import pytest

from positions import TicTacTotal, reachable


@pytest.fixture
def endgame() -> TicTacTotal:
    """Odd side to move with four empty squares."""
    return TicTacTotal(
        [
            [5, 0, 2],
            [0, 4, 0],
            [1, 0, 6],
        ]
    )


@pytest.fixture
def endgame_positions(endgame):
    return list(reachable(endgame))
