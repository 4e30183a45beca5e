from npuzzle.domains.board import Board


def manhattan(b: Board) -> int:
    return b.manhattan_distance_to_goal()
