import math
from typing import Iterable, Optional, Tuple

from t3.utils.pylogging import get_logger

from ._config import Config
from ._move import Move
from ._outcome import LOSS, TIE, WIN, Outcome
from ._position import Position
from ._statistics import Statistics


logger = get_logger(__name__)


def evaluate(position: Position, maximizing: bool) -> int:
    """Scores a terminal position.

    Args:
        position (Position): Terminal position.
        maximizing (bool): True if the maximizing side is to move in the position.

    Raises:
        ValueError: If the position is open.

    Returns:
        int: `LOSS` if the position is won and the maximizing side is to move, `WIN` if
            it is won and the minimizing side is to move, `TIE` if it is tied.
    """
    if position.is_win():
        # The winner is the side that just moved, not the side to move.
        return LOSS if maximizing else WIN
    if position.is_tie():
        return TIE
    raise ValueError("Cannot evaluate an open position.")


def _transitions(position: Position, config: Config) -> Iterable[Tuple[Move, Position]]:
    transitions = position.transitions()
    if len(transitions) == 0:
        raise RuntimeError(f"Open position {position!r} offers no transitions.")
    if config.sort_transitions:
        return sorted(transitions.items(), key=lambda transition: transition[0])
    return transitions.items()


def search(
    maximizing: bool,
    alpha: float,
    beta: float,
    position: Position,
    config: Optional[Config] = None,
    statistics: Optional[Statistics] = None,
) -> Outcome:
    """Runs the minimax search with alpha-beta pruning.

    Moves are visited in ascending order. A move whose resulting position is a win is
    returned at once, so that an immediate win is always preferred over a delayed one.
    Otherwise the first move reaching the best score is kept.

    Args:
        maximizing (bool): True if the side to move is the maximizing side.
        alpha (float): Score the maximizing side is already guaranteed.
        beta (float): Score the minimizing side is already guaranteed.
        position (Position): Position to search.
        config (Config, optional): Search configuration. Defaults to `Config()`.
        statistics (Statistics, optional): If given, search counters are added to it.

    Raises:
        RuntimeError: If an open position offers no transitions.

    Returns:
        Outcome: Score of the position and the best move. The move is `None` if the
            position is terminal.
    """
    if config is None:
        config = Config()
    if statistics is None:
        statistics = Statistics()
    statistics.positions += 1

    if position.is_terminal():
        statistics.terminals += 1
        return Outcome(evaluate(position, maximizing), None)

    best: Optional[Outcome] = None
    for move, next_position in _transitions(position, config):
        if next_position.is_win():
            statistics.immediate_wins += 1
            return Outcome(WIN if maximizing else LOSS, move)

        score = search(not maximizing, alpha, beta, next_position, config, statistics).score
        if best is None:
            best = Outcome(score, move)
        elif maximizing and score > best.score:
            best = Outcome(score, move)
        elif not maximizing and score < best.score:
            best = Outcome(score, move)

        if maximizing:
            alpha = max(alpha, best.score)
        else:
            beta = min(beta, best.score)

        if config.prune and beta <= alpha:
            statistics.cutoffs += 1
            break

    return best


def choose(
    position: Position,
    config: Optional[Config] = None,
    statistics: Optional[Statistics] = None,
) -> Move:
    """Chooses the optimal move of the side to move, assuming optimal play from the
    opponent.

    Ties between equally scored moves are broken by column, then row, then move number,
    in ascending order. A move winning immediately is always taken over a delayed win.

    Args:
        position (Position): Open position in which a move is to be made.
        config (Config, optional): Search configuration. Defaults to `Config()`.
        statistics (Statistics, optional): If given, search counters are added to it.

    Raises:
        ValueError: If the position is terminal.
        RuntimeError: If an open position reachable from `position` offers no
            transitions.

    Returns:
        Move: Optimal move.
    """
    if position.is_terminal():
        raise ValueError("Cannot choose a move from a terminal position.")
    if config is None:
        config = Config()
    if statistics is None:
        statistics = Statistics()
    if not config.prune:
        logger.debug("Pruning disabled, searching the full game tree.")

    outcome = search(True, -math.inf, math.inf, position, config, statistics)
    logger.debug("Chose %s with score %d. %s", outcome.move, outcome.score, statistics)
    return outcome.move
