#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("Informed + BFS, Manhattan", "python -m npuzzle.experiments.runner --depths 4 8 12 16 --per_depth 10 --heuristic manhattan --algo bfs ucs a ida --out results/manhattan.csv")
    run("Informed, linear conflict", "python -m npuzzle.experiments.runner --depths 4 8 12 16 --per_depth 10 --heuristic linear_conflict --algo a ida --out results/linear_conflict.csv")
    run("Depth-first family", "python -m npuzzle.experiments.runner --depths 4 8 12 --per_depth 10 --algo rdfs dfs iddfs --timeout_sec 10 --out results/depth_first.csv")
    run("Unsolvable variants", "python -m npuzzle.experiments.runner --depths 6 --per_depth 3 --algo bfs a iddfs ida --include_unsolvable --timeout_sec 5 --max_cutoff 40 --out results/unsolvable.csv")
    run("Summary", "python -m npuzzle.experiments.summarize results/manhattan.csv results/linear_conflict.csv results/depth_first.csv results/unsolvable.csv --out report/summary.md")
    run("Plots", "python -m npuzzle.experiments.plot results/manhattan.csv results/linear_conflict.csv --save results/plots --log")

if __name__ == "__main__":
    main()
