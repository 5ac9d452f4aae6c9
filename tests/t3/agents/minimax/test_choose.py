import logging

import pytest

import t3.agents.minimax as minimax

from positions import Scripted, TicTacTotal, game_value


def _unpruned() -> minimax.Config:
    config = minimax.Config()
    config.prune = False
    return config


def test_immediate_win_example():
    # Playing (0, 1) lets the opponent win on the next move, (2, 0) wins at once.
    position = Scripted.open(
        (0, 1, 1, Scripted.open((2, 0, 2, Scripted.won()))),
        (2, 0, 1, Scripted.won()),
    )
    assert minimax.choose(position) == minimax.Move(2, 0, 1)


def test_immediate_win_on_board():
    position = TicTacTotal(
        [
            [4, 4, 0],
            [0, 2, 2],
            [3, 1, 2],
        ]
    )
    assert minimax.choose(position) == minimax.Move(2, 0, 5)


def test_immediate_win_preferred(endgame_positions):
    for position in endgame_positions:
        transitions = position.transitions()
        if any(p.is_win() for p in transitions.values()):
            assert transitions[minimax.choose(position)].is_win()


def test_optimal(endgame_positions):
    for position in endgame_positions:
        move = minimax.choose(position)
        assert game_value(position.transitions()[move], False) == game_value(position, True)


def test_tie_break(endgame_positions):
    for position in endgame_positions:
        transitions = position.transitions()
        if any(p.is_win() for p in transitions.values()):
            continue
        best = game_value(position, True)
        expected = min(m for m, p in transitions.items() if game_value(p, False) == best)
        assert minimax.choose(position) == expected


def test_pruning_equivalence(endgame_positions):
    for position in endgame_positions:
        assert minimax.choose(position) == minimax.choose(position, _unpruned())


def test_deterministic(endgame):
    moves = {minimax.choose(endgame) for _ in range(5)}
    assert len(moves) == 1


def test_terminal_position():
    with pytest.raises(ValueError):
        minimax.choose(Scripted.won())
    with pytest.raises(ValueError):
        minimax.choose(Scripted.tied())
    with pytest.raises(ValueError):
        minimax.choose(TicTacTotal([[6, 4, 3], [0, 0, 0], [0, 0, 0]]))


def test_no_transitions():
    with pytest.raises(RuntimeError):
        minimax.choose(Scripted.open())


def test_statistics(endgame):
    statistics = minimax.Statistics()
    minimax.choose(endgame, statistics=statistics)
    assert statistics.positions > 0
    assert statistics.immediate_wins > 0


def test_logs_decision(caplog):
    position = Scripted.open((0, 0, 1, Scripted.tied()))
    with caplog.at_level(logging.DEBUG, logger="t3.agents.minimax"):
        minimax.choose(position, _unpruned())
    messages = [record.getMessage() for record in caplog.records]
    assert any("Pruning disabled" in message for message in messages)
    assert any(message.startswith("Chose Move(column=0, row=0, number=1)") for message in messages)
