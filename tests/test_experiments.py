"""Runner CSV, pandas summary, plots and the solve CLI on tiny inputs."""

from __future__ import annotations

import csv
from pathlib import Path

import pandas as pd
import pytest

from npuzzle.experiments import plot, runner, solve as solve_cli, summarize
from npuzzle.search.engine import Strategy
from npuzzle.search.graph_search import SearchConfig


@pytest.fixture(scope="module")
def small_csv(tmp_path_factory) -> Path:
    tmp_path = tmp_path_factory.mktemp("runner")
    insts = runner.generate(3, [2, 6], per_depth=1, start_seed=0)
    rows = runner.run_instances(
        insts,
        [Strategy.BREADTH_FIRST, Strategy.A_STAR, Strategy.ITERATIVE_DEEPENING_DFS],
        SearchConfig(timeout_sec=1.0),
        include_unsolvable=True,
    )
    out = tmp_path / "results" / "small.csv"
    runner.write_csv(out, rows)
    return out


def test_runner_writes_expected_rows(small_csv: Path) -> None:
    out = small_csv
    with out.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == runner.HEADER
    # 2 instances x (solvable + unsolvable) x 3 strategies
    assert len(rows) == 12
    solved = [r for r in rows if r["solvable"] == "1"]
    assert all(r["termination"] == "ok" for r in solved)
    # IDDFS may overshoot the walk length
    assert all(int(r["g"]) <= int(r["upper_bound"]) for r in solved if r["algorithm"] != "IDDFS")
    unsolved = [r for r in rows if r["solvable"] == "0"]
    assert all(r["termination"] != "ok" for r in unsolved)


def test_generate_is_seeded() -> None:
    a = runner.generate(3, [5], per_depth=3, start_seed=7)
    b = runner.generate(3, [5], per_depth=3, start_seed=7)
    assert [i.board for i in a] == [i.board for i in b]
    assert [i.seed for i in a] == [7, 8, 9]


def test_summary_tables(small_csv: Path, tmp_path: Path) -> None:
    out = small_csv
    df = summarize.load([out])
    means = summarize.per_depth_means(df)
    assert set(means["algorithm"]) == {"BFS", "A*", "IDDFS"}
    assert set(means["depth"]) == {2, 6}
    counts = summarize.termination_counts(df)
    assert "ok" in counts.columns
    assert counts.loc["BFS", "ok"] == 2

    md = tmp_path / "summary.md"
    summarize.write_summary_md(md, df)
    text = md.read_text(encoding="utf-8")
    assert text.startswith("# Search strategy summary")
    assert "| depth | algorithm |" in text


def test_path_length_gaps_flags_longer_paths() -> None:
    df = pd.DataFrame({
        "file": ["x.csv"] * 3,
        "algorithm": ["BFS", "IDDFS", "A*"],
        "depth": [6, 6, 6],
        "seed": [1, 1, 1],
        "solvable": [1, 1, 1],
        "termination": ["ok", "ok", "ok"],
        "g": [4, 8, 4],
    })
    gaps = summarize.path_length_gaps(df)
    assert list(gaps["algorithm"]) == ["IDDFS"]
    assert int(gaps["best_g"].iloc[0]) == 4


def test_plot_saves_pngs(small_csv: Path, tmp_path: Path) -> None:
    out = small_csv
    save = tmp_path / "plots"
    plot.main([str(out), "--save", str(save)])
    assert (save / "small_combined.png").exists()
    assert (save / "small_expanded.png").exists()


def test_solve_cli_prints_report(capsys) -> None:
    code = solve_cli.main(["--cells", "1", "4", "2", "3", "0", "5", "6", "7", "8",
                           "--algo", "bfs", "ida", "--quiet"])
    assert code == 0
    out = capsys.readouterr().out
    assert "breadth_first" in out
    assert "iterative_deepening_a_star" in out
    assert "path (2 moves): up left" in out
