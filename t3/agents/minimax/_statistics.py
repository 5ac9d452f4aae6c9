class Statistics:
    """Counters collected during a search."""

    def __init__(self) -> None:
        self.positions = 0
        """Number of positions visited."""

        self.terminals = 0
        """Number of terminal positions scored."""

        self.immediate_wins = 0
        """Number of times a search level stopped at a move winning immediately."""

        self.cutoffs = 0
        """Number of times a search level reached the alpha-beta cutoff."""

    def reset(self):
        """Sets all counters to zero."""
        self.positions = 0
        self.terminals = 0
        self.immediate_wins = 0
        self.cutoffs = 0

    def __repr__(self) -> str:
        return (
            f"Statistics(positions={self.positions}, terminals={self.terminals}, "
            f"immediate_wins={self.immediate_wins}, cutoffs={self.cutoffs})"
        )
