#!/usr/bin/env python3
from __future__ import annotations
import argparse, sys
from typing import Any, Dict, List, Optional

from npuzzle.domains.board import Board, InvalidBoard
from npuzzle.domains.scramble import scramble
from npuzzle.heuristics.registry import HEURISTICS
from npuzzle.search.engine import Strategy, parse_strategy, solve
from npuzzle.search.graph_search import SearchConfig


class ProgressPrinter:
    """Observer that keeps one carriage-return status line up to date."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def __call__(self, event: str, counters: Dict[str, Any]) -> None:
        if event == "progress":
            self.stream.write(f"\rnodes visited: {counters['visited']}")
        elif event == "round":
            label = "IDA* max cost" if counters["algorithm"] == "IDA*" else "cutoff"
            self.stream.write(f"\r{label}: {counters['bound']}")
        elif event == "done":
            self.stream.write("\n")
        self.stream.flush()


def size_of(args) -> int:
    if args.size is not None:
        return args.size
    return 4 if args.domain == "p15" else 3


def start_board(args) -> Board:
    n = size_of(args)
    if args.cells:
        return Board(args.cells, n)
    sc = scramble(n, args.depth, args.seed)
    print(f"scramble ({len(sc.walk)} steps, seed={args.seed}): {' '.join(d.value for d in sc.walk)}")
    return sc.board


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Solve one N-puzzle with one or all search strategies.")
    p.add_argument("--algo", nargs="+", default=["all"],
                   help="Strategies to run (names or rdfs/dfs/bfs/ucs/a/iddfs/ida), or 'all'")
    p.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    p.add_argument("--size", type=int, choices=[3, 4], default=None)
    p.add_argument("--cells", type=int, nargs="+", default=None, help="Explicit start cells, row-major, 0 = blank")
    p.add_argument("--depth", type=int, default=20, help="Random-walk length of the scramble")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    p.add_argument("--timeout_sec", type=float, default=None, help="Per-strategy wall time")
    p.add_argument("--max_recursion", type=int, default=500)
    p.add_argument("--max_cutoff", type=int, default=None)
    p.add_argument("--shuffle", action="store_true", help="Randomise child order (seeded by --seed)")
    p.add_argument("--quiet", action="store_true", help="No progress line")
    args = p.parse_args(argv)

    try:
        board = start_board(args)
    except InvalidBoard as e:
        p.error(str(e))
    print(board)

    if args.algo == ["all"]:
        algos = list(Strategy)
    else:
        try:
            algos = [parse_strategy(a) for a in args.algo]
        except ValueError as e:
            p.error(str(e))

    config = SearchConfig(
        timeout_sec=args.timeout_sec,
        max_recursion_depth=args.max_recursion,
        max_cutoff=args.max_cutoff,
        shuffle=args.shuffle,
        seed=args.seed,
        heuristic=args.heuristic,
        progress=None if args.quiet else ProgressPrinter(),
    )
    for algo in algos:
        print(algo.value)
        res = solve(board, algo, config)
        print(res.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
