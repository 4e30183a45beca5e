#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List, Optional

import pandas as pd

METRICS = ("time_sec", "expanded", "visited", "g")


def load(files: List[Path]) -> pd.DataFrame:
    dfs = []
    for p in files:
        df = pd.read_csv(p)
        need = {"algorithm", "depth", "time_sec", "termination"}
        if not need.issubset(df.columns):
            print(f"Skipping {p}: missing columns {sorted(need - set(df.columns))}")
            continue
        df["file"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame(columns=["file", "algorithm", "depth", "termination", *METRICS])
    df = pd.concat(dfs, ignore_index=True)
    if "solvable" not in df.columns:
        df["solvable"] = 1
    df["termination"] = df["termination"].fillna("ok")
    return df


def per_depth_means(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std per (algorithm, depth) over solved, solvable rows."""
    ok = df[(df["termination"] == "ok") & (df["solvable"] == 1)]
    if ok.empty:
        return pd.DataFrame()
    g = (ok.groupby(["algorithm", "depth"])
           .agg(time_mean=("time_sec", "mean"),
                time_std=("time_sec", "std"),
                expanded_mean=("expanded", "mean"),
                visited_mean=("visited", "mean"),
                g_mean=("g", "mean"),
                n=("time_sec", "count"))
           .reset_index()
           .fillna({"time_std": 0.0}))
    return g.sort_values(["depth", "algorithm"]).reset_index(drop=True)


def termination_counts(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame()
    return pd.crosstab(df["algorithm"], df["termination"])


def path_length_gaps(df: pd.DataFrame) -> pd.DataFrame:
    """Solved rows whose path is longer than the shortest found for the same instance."""
    ok = df[df["termination"] == "ok"].copy()
    if ok.empty:
        return ok
    keys = ["file", "depth", "seed", "solvable"]
    ok["best_g"] = ok.groupby(keys)["g"].transform("min")
    gaps = ok[ok["g"] > ok["best_g"]]
    return gaps[keys + ["algorithm", "g", "best_g"]].reset_index(drop=True)


def write_summary_md(path: Path, df: pd.DataFrame) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    means = per_depth_means(df)
    counts = termination_counts(df)
    gaps = path_length_gaps(df)

    with open(path, "w", encoding="utf-8") as f:
        f.write("# Search strategy summary\n\n")
        f.write("This file was auto-generated from runner CSVs.\n\n")

        f.write("## Solved instances (mean per depth)\n\n")
        if means.empty:
            f.write("_No solved rows._\n\n")
        else:
            f.write("| depth | algorithm | time mean±std (s) | expanded mean | visited mean | path length mean | n |\n")
            f.write("|---:|:---|---:|---:|---:|---:|---:|\n")
            for r in means.itertuples(index=False):
                f.write(f"| {r.depth} | {r.algorithm} | {r.time_mean:.6f}±{r.time_std:.6f} | "
                        f"{r.expanded_mean:.1f} | {r.visited_mean:.1f} | {r.g_mean:.2f} | {r.n} |\n")
            f.write("\n")

        f.write("## Termination by algorithm\n\n")
        if counts.empty:
            f.write("_No rows._\n\n")
        else:
            cols = list(counts.columns)
            f.write("| algorithm | " + " | ".join(cols) + " |\n")
            f.write("|:---|" + "---:|" * len(cols) + "\n")
            for algo, row in counts.iterrows():
                f.write(f"| {algo} | " + " | ".join(str(int(row[c])) for c in cols) + " |\n")
            f.write("\n")

        f.write("## Non-shortest paths\n\n")
        if gaps.empty:
            f.write("Every solved row matched the shortest path found for its instance.\n")
        else:
            f.write("| depth | seed | algorithm | path length | shortest |\n|---:|---:|:---|---:|---:|\n")
            for r in gaps.itertuples(index=False):
                f.write(f"| {r.depth} | {r.seed} | {r.algorithm} | {int(r.g)} | {int(r.best_g)} |\n")
    print(f"Wrote {path}")


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs per algorithm and depth.")
    ap.add_argument("files", nargs="+", type=Path, help="CSV files from runner.py")
    ap.add_argument("--out", type=Path, default=Path("report/summary.md"))
    args = ap.parse_args(argv)

    df = load(args.files)
    write_summary_md(args.out, df)

    counts = termination_counts(df)
    if not counts.empty:
        print("\n== Termination counts ==")
        print(counts.to_string())


if __name__ == "__main__":
    main()
