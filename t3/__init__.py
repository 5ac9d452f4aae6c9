"""Decision engine for the game of Tic-Tac-Total."""

from . import utils, agents


__all__ = ["agents", "utils"]
