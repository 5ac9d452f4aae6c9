from typing import NamedTuple


class Move(NamedTuple):
    """Placement of a number on the board.

    Moves compare as tuples, i.e. ascending by column, then row, then move number. This
    is the order in which the search visits moves, and hence the order used to break
    ties between equally scored moves."""

    column: int
    """Column index."""

    row: int
    """Row index."""

    number: int
    """Move number. Only used for ordering, never for legality."""
