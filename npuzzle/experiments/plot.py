#!/usr/bin/env python3
from __future__ import annotations
import argparse, os
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from npuzzle.experiments.summarize import load

MARKERS = ("o", "^", "s", "D", "v", "P", "X")


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def agg_curves(df: pd.DataFrame, metric: str) -> pd.DataFrame:
    ok = df[(df["termination"] == "ok") & (df["solvable"] == 1)]
    if ok.empty or metric not in ok.columns:
        return pd.DataFrame(columns=["algorithm", "depth", "mean", "sem", "n"])
    g = (ok.groupby(["algorithm", "depth"], as_index=False)
           .agg(mean=(metric, "mean"), sem=(metric, sem), n=(metric, "count")))
    return g.sort_values(["algorithm", "depth"]).reset_index(drop=True)


def plot_metric(ax, df: pd.DataFrame, metric: str, log: bool = False):
    curves = agg_curves(df, metric)
    for i, (algo, part) in enumerate(curves.groupby("algorithm")):
        ax.errorbar(part["depth"], part["mean"], yerr=part["sem"], label=algo,
                    marker=MARKERS[i % len(MARKERS)], capsize=3, lw=1.5)
    if log:
        ax.set_yscale("log")
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± SEM)")
    ax.grid(True, alpha=0.25, ls=":")
    if len(curves):
        ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Directory to save plots")
    ap.add_argument("--log", action="store_true", help="Log-scale y axis")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        return

    base = "combo" if len(args.csv) > 1 else args.csv[0].stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["time_sec", "expanded", "g"]):
        plot_metric(ax, df, metric, log=args.log and metric != "g")
    plt.tight_layout()
    save_fig(fig, args.save, f"{base}_combined")
    plt.close(fig)

    for metric in ["time_sec", "expanded", "visited", "peak_open"]:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric, log=args.log)
        plt.tight_layout()
        save_fig(fig, args.save, f"{base}_{metric}")
        plt.close(fig)

    if args.show:
        plt.show()


if __name__ == "__main__":
    main()
