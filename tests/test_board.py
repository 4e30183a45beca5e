"""Board value semantics, move legality and the Manhattan heuristic."""

from __future__ import annotations

import random

import numpy as np
import pytest

from npuzzle.domains.board import Board, Direction, DIRECTIONS, InvalidBoard
from npuzzle.domains.scramble import make_unsolvable_variant, scramble
from npuzzle.heuristics.linear_conflict import linear_conflict
from npuzzle.heuristics.manhattan import manhattan


# -- helpers ------------------------------------------------------------------


def _sample_boards(size: int, count: int = 30) -> list[Board]:
    rng = random.Random(size * 1000 + count)
    boards = [Board.goal(size)]
    for _ in range(count):
        boards.append(scramble(size, rng.randint(1, 40), rng.randint(0, 10**6)).board)
    return boards


_BOARDS = _sample_boards(3) + _sample_boards(4)


# -- construction -------------------------------------------------------------


def test_goal_is_sorted_with_blank_first() -> None:
    assert Board.goal(3).cells == tuple(range(9))
    assert Board.goal(4).cells == tuple(range(16))
    assert Board.goal(3).zero_position() == 0


def test_size_is_inferred() -> None:
    assert Board([1, 4, 2, 3, 0, 5, 6, 7, 8]).size == 3
    assert Board(range(16)).size == 4


@pytest.mark.parametrize(
    "cells, size",
    [
        ([1, 2, 3, 4, 5, 6, 7, 8, 8], 3),   # duplicate, no blank
        ([0, 1, 2, 3, 4, 5, 6, 7], 3),      # too short
        ([0, 1, 2, 3, 4, 5, 6, 7, 9], 3),   # out of range
        ([0, 1, 2, 3], None),               # 2x2 unsupported
        (list(range(25)), None),            # 5x5 unsupported
        (list(range(9)), 4),                # length mismatch
        ([0, 1.0, 2, 3, 4, 5, 6, 7, 8], 3),  # float cell
        ([0, True, 2, 3, 4, 5, 6, 7, 8], 3), # bool cell
        (list("012345678"), 3),             # str cells
    ],
    ids=["duplicate", "short", "range", "2x2", "5x5", "mismatch", "float", "bool", "str"],
)
def test_invalid_board_fails_fast(cells, size) -> None:
    with pytest.raises(InvalidBoard):
        Board(cells, size)


def test_integral_cells_become_plain_ints() -> None:
    b = Board(np.arange(9))
    assert b.cells == tuple(range(9))
    assert all(type(c) is int for c in b.cells)
    assert b == Board.goal(3)


def test_invalid_board_is_a_value_error() -> None:
    assert issubclass(InvalidBoard, ValueError)


def test_equality_and_hash_follow_cells() -> None:
    a = Board([1, 4, 2, 3, 0, 5, 6, 7, 8])
    b = Board((1, 4, 2, 3, 0, 5, 6, 7, 8))
    c = Board([4, 1, 2, 3, 0, 5, 6, 7, 8])
    assert a == b and hash(a) == hash(b)
    assert a != c
    assert len({a, b, c}) == 2


# -- moves --------------------------------------------------------------------


def test_illegal_moves_at_edges() -> None:
    goal = Board.goal(3)  # blank top-left
    assert goal.apply_move(Direction.LEFT) is None
    assert goal.apply_move(Direction.UP) is None
    assert goal.legal_moves() == [Direction.RIGHT, Direction.DOWN]

    corner = Board([1, 2, 3, 4, 5, 6, 7, 8, 0])  # blank bottom-right
    assert corner.apply_move(Direction.RIGHT) is None
    assert corner.apply_move(Direction.DOWN) is None


def test_apply_move_swaps_blank_and_leaves_original() -> None:
    b = Board([1, 4, 2, 3, 0, 5, 6, 7, 8])
    up = b.apply_move(Direction.UP)
    assert up is not None
    assert up.cells == (1, 0, 2, 3, 4, 5, 6, 7, 8)
    assert up.zero_position() == 1
    assert b.cells == (1, 4, 2, 3, 0, 5, 6, 7, 8)
    assert up.apply_move(Direction.LEFT).is_goal()


def test_apply_move_accepts_direction_names() -> None:
    b = Board([1, 4, 2, 3, 0, 5, 6, 7, 8])
    assert b.apply_move("up") == b.apply_move(Direction.UP)


@pytest.mark.parametrize("board", _BOARDS, ids=repr)
def test_move_round_trip(board: Board) -> None:
    for d in DIRECTIONS:
        moved = board.apply_move(d)
        if moved is None:
            continue
        assert moved.apply_move(d.opposite) == board


def test_replay_rejects_illegal_move() -> None:
    with pytest.raises(ValueError):
        Board.goal(3).replay([Direction.UP])


# -- heuristic ----------------------------------------------------------------


@pytest.mark.parametrize("board", _BOARDS, ids=repr)
def test_manhattan_zero_iff_goal(board: Board) -> None:
    assert (board.manhattan_distance_to_goal() == 0) == board.is_goal()


@pytest.mark.parametrize("board", _BOARDS, ids=repr)
def test_manhattan_changes_by_one_per_move(board: Board) -> None:
    h = manhattan(board)
    for d in board.legal_moves():
        assert abs(manhattan(board.apply_move(d)) - h) == 1


def test_manhattan_known_value() -> None:
    # tiles 1 and 3 one step from home
    assert Board([1, 0, 2, 3, 4, 5, 6, 7, 8]).manhattan_distance_to_goal() == 1
    assert Board([1, 4, 2, 3, 0, 5, 6, 7, 8]).manhattan_distance_to_goal() == 2


@pytest.mark.parametrize("board", _BOARDS, ids=repr)
def test_linear_conflict_dominates_manhattan(board: Board) -> None:
    lc = linear_conflict(board)
    assert lc >= manhattan(board)
    assert (lc == 0) == board.is_goal()


def test_linear_conflict_counts_row_swap() -> None:
    # 2 and 1 swapped in their goal row
    b = Board([0, 2, 1, 3, 4, 5, 6, 7, 8])
    assert manhattan(b) == 2
    assert linear_conflict(b) == 4


@pytest.mark.parametrize(
    "cells, expected, distance",
    [
        ([2, 7, 0, 5, 4, 3, 8, 1, 6], 24, 26),
        ([8, 7, 6, 5, 4, 0, 2, 1, 3], 27, 27),
    ],
    ids=["reversed-row-and-column", "reversed-column"],
)
def test_linear_conflict_reversed_line_stays_admissible(cells, expected, distance) -> None:
    # a reversed line of three costs two tiles leaving it, not three pairs
    b = Board(cells)
    assert linear_conflict(b) == expected
    assert linear_conflict(b) <= distance


def test_linear_conflict_reversed_fifteen_row() -> None:
    # row 1 reversed: 7 6 5 4
    b = Board([0, 1, 2, 3, 7, 6, 5, 4, 8, 9, 10, 11, 12, 13, 14, 15])
    assert manhattan(b) == 8
    assert linear_conflict(b) == 8 + 2 * 3


@pytest.mark.slow
def test_linear_conflict_never_exceeds_true_distance() -> None:
    # breadth-first from the goal over every reachable 8-puzzle board
    goal = Board.goal(3)
    dist = {goal: 0}
    layer = [goal]
    while layer:
        nxt = []
        for b in layer:
            for d in b.legal_moves():
                c = b.apply_move(d)
                if c not in dist:
                    dist[c] = dist[b] + 1
                    nxt.append(c)
        layer = nxt
    assert len(dist) == 181440
    over = [(b, linear_conflict(b), g) for b, g in dist.items() if linear_conflict(b) > g]
    assert over == []


# -- solvability --------------------------------------------------------------


@pytest.mark.parametrize("board", _BOARDS, ids=repr)
def test_parity_of_scrambles_and_variants(board: Board) -> None:
    assert board.is_solvable()
    assert not make_unsolvable_variant(board).is_solvable()


def test_str_renders_grid() -> None:
    assert str(Board([1, 4, 2, 3, 0, 5, 6, 7, 8])) == "1 4 2\n3 . 5\n6 7 8"
