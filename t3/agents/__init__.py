"""Module containing implementations of game playing agents."""

from . import minimax


__all__ = ["minimax"]
