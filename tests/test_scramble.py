"""Scramble helpers used to build test puzzles."""

from __future__ import annotations

import random

import pytest

from npuzzle.domains.board import Board, Direction
from npuzzle.domains.scramble import (
    inverse_path, make_unsolvable_variant, random_walk, scramble, solvable_from_path,
)

U, D, L, R = Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT


def test_inverse_path_reverses_and_flips() -> None:
    assert inverse_path([U, U, R]) == (L, D, D)
    assert inverse_path([]) == ()


@pytest.mark.parametrize("size, steps, seed", [(3, 0, 1), (3, 15, 2), (4, 30, 3)])
def test_scramble_inverse_solves(size: int, steps: int, seed: int) -> None:
    sc = scramble(size, steps, seed)
    assert len(sc.walk) == steps
    assert sc.upper_bound == steps
    assert Board.goal(size).replay(sc.walk) == sc.board
    assert sc.board.replay(sc.inverse).is_goal()


def test_scramble_is_seeded() -> None:
    assert scramble(3, 20, 99) == scramble(3, 20, 99)


def test_random_walk_never_backtracks() -> None:
    _, walk = random_walk(3, 200, random.Random(5))
    for prev, nxt in zip(walk, walk[1:]):
        assert nxt != prev.opposite


def test_solvable_from_path_is_solved_by_path() -> None:
    path = [U, U, R, D, R, D, L, L, U, U]
    root = solvable_from_path(path, 3)
    assert not root.is_goal()
    assert root.replay(path).is_goal()


def test_unsolvable_variant_keeps_blank() -> None:
    b = Board([1, 4, 2, 3, 0, 5, 6, 7, 8])
    v = make_unsolvable_variant(b)
    assert v.cells == (4, 1, 2, 3, 0, 5, 6, 7, 8)
    assert v.zero_position() == b.zero_position()
    assert b.is_solvable() and not v.is_solvable()
