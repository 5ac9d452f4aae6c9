class Config:
    """Search configuration."""

    def __init__(self) -> None:
        self.prune: bool = True
        """If True, alpha-beta pruning skips moves that cannot change the decision. If
        False, every reachable position is searched. Both settings return the same
        move and score."""

        self.sort_transitions: bool = True
        """If True, transitions are visited in ascending move order no matter the order
        in which the position reports them. If False, the position's own iteration
        order is used and is expected to already be ascending."""
