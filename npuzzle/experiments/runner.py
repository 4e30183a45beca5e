from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from npuzzle.domains.board import Board
from npuzzle.domains.scramble import make_unsolvable_variant, scramble
from npuzzle.heuristics.registry import HEURISTICS
from npuzzle.search.engine import Strategy, parse_strategy, solve
from npuzzle.search.graph_search import SearchConfig

HEADER = [
    "algorithm", "heuristic", "size", "depth", "seed",
    "termination", "g", "upper_bound",
    "visited", "frontier_remaining", "expanded", "generated",
    "peak_open", "peak_recursion", "bound_final", "rounds",
    "time_sec", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    board: Board
    upper_bound: int


def generate(size: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """Random-walk scrambles; the walk length bounds the optimal solution from above."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            sc = scramble(size, d, seed)
            out.append(Instance(seed=seed, depth=d, board=sc.board, upper_bound=sc.upper_bound))
            seed += 1
    return out


def run_instances(insts: Iterable[Instance], algos: List[Strategy], config: SearchConfig,
                  include_unsolvable: bool = False) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for inst in insts:
        variants = [(inst.board, 1)]
        if include_unsolvable:
            variants.append((make_unsolvable_variant(inst.board), 0))
        for board, solvable_flag in variants:
            for algo in algos:
                res = solve(board, algo, config)
                row = res.as_row()
                row.update({
                    "heuristic": config.heuristic,
                    "size": board.size,
                    "depth": inst.depth,
                    "seed": inst.seed,
                    "upper_bound": inst.upper_bound if solvable_flag else "",
                    "solvable": solvable_flag,
                })
                rows.append(row)
    return rows


def write_csv(path: Path, rows: List[Dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER, extrasaction="ignore")
        w.writeheader()
        for row in rows:
            w.writerow(row)


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="N-puzzle search strategy comparison runner")
    ap.add_argument("--algo", nargs="+", default=["bfs", "ucs", "a", "iddfs", "ida"],
                    help="Strategies to compare, or 'all'")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--timeout_sec", type=float, default=10.0, help="Per-instance wall time")
    ap.add_argument("--max_recursion", type=int, default=500)
    ap.add_argument("--max_cutoff", type=int, default=None)
    ap.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run parity-flipped variants (use a timeout or max_cutoff)")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    size = 4 if args.domain == "p15" else 3
    if args.algo == ["all"]:
        algos = list(Strategy)
    else:
        algos = [parse_strategy(a) for a in args.algo]

    config = SearchConfig(
        timeout_sec=args.timeout_sec,
        max_recursion_depth=args.max_recursion,
        max_cutoff=args.max_cutoff,
        heuristic=args.heuristic,
    )
    insts = generate(size, args.depths, args.per_depth, args.start_seed)
    rows = run_instances(insts, algos, config, include_unsolvable=args.include_unsolvable)
    write_csv(args.out, rows)
    print(f"Wrote {args.out} ({len(insts)} instances, {len(rows)} rows)")


if __name__ == "__main__":
    main()
