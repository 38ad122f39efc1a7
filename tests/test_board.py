"""Unit tests for win/draw evaluation and board helpers."""

import itertools

import pytest

from xobot.board import (
    EMPTY,
    WINNING_LINES,
    count_threats,
    evaluate_outcome,
    new_board,
    place,
    score_board,
)


def _board(text):
    return [EMPTY if c == "." else c for c in text]


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", ["X", "O"])
def test_every_line_is_detected_in_any_fill_order(line, player):
    for order in itertools.permutations(line):
        board = new_board()
        for cell in order:
            board = place(board, cell, player)
        outcome = evaluate_outcome(board)
        assert outcome.winner == player
        assert outcome.pattern == line
        assert not outcome.drawn


def test_full_board_without_line_is_draw():
    outcome = evaluate_outcome(_board("XOXXOOOXX"))
    assert outcome.drawn
    assert outcome.winner is None
    assert not outcome.in_progress


def test_partial_board_is_in_progress():
    outcome = evaluate_outcome(_board("XO..X...."))
    assert outcome.in_progress
    assert outcome.status == "playing"


def test_win_on_last_cell_is_not_a_draw():
    outcome = evaluate_outcome(_board("XOXOXOOXX"))
    assert outcome.winner == "X"
    assert outcome.pattern == (0, 4, 8)


def test_score_board_signs():
    assert score_board(_board("XXX.OO...")) == 10
    assert score_board(_board("XX.OOOX..")) == -10
    assert score_board(_board("XO.......")) == 0


def test_place_returns_copy():
    board = new_board()
    child = place(board, 4, "X")
    assert board[4] == EMPTY
    assert child[4] == "X"
    with pytest.raises(ValueError):
        place(child, 4, "O")


def test_count_threats():
    board = _board("X...O....")
    # X at 2 makes 0,1,2 a two-with-a-gap line; 2,5,8 and 2,4,6 are not.
    assert count_threats(board, 2, "X") == 1
    # X at 8 lines up with 0 on the diagonal, but O holds the centre.
    assert count_threats(board, 8, "X") == 0
    assert count_threats(_board("XX..O...."), 2, "X") == 10
    assert count_threats(board, 0, "O") == 0
