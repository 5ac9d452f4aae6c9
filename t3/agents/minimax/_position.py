import abc
from typing import Mapping

from ._move import Move


class Position(abc.ABC):
    """Snapshot of the board together with the side to move.

    Positions are owned by the host. The search only queries them, it never creates or
    modifies one. A position is terminal if it is a win or a tie, otherwise it is open
    and must offer at least one transition."""

    @abc.abstractmethod
    def is_win(self) -> bool:
        """Returns:
            bool: True if the side that just moved completed a winning configuration.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def is_tie(self) -> bool:
        """Returns:
            bool: True if there is no winner and no legal move left.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def transitions(self) -> Mapping[Move, "Position"]:
        """Computes all legal moves of this position.

        Returns:
            Mapping[Move, Position]: Legal moves mapped to the positions they lead to.
                Non-empty whenever the position is open.
        """
        raise NotImplementedError

    def is_terminal(self) -> bool:
        """Returns:
            bool: True if the position is a win or a tie.
        """
        return self.is_win() or self.is_tie()
