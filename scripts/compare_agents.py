"""Compare RandomAgent vs HeuristicAgent over many headless games.

Usage:
    python scripts/compare_agents.py [--runs N] [--max-turns N]
"""

from __future__ import annotations

import argparse
import time

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from crawler.config import GameConfig
from crawler.sim.play_agents.heuristic_agent import HeuristicAgent
from crawler.sim.play_agents.random_agent import RandomAgent
from crawler.sim.runner import BatchRunner


def run_comparison(n_runs: int = 200, max_turns: int = 2000) -> None:
    config = GameConfig(max_turns=max_turns)

    results = {}
    for label, agent_class in [("RandomAgent", RandomAgent), ("HeuristicAgent", HeuristicAgent)]:
        print(f"\nRunning {n_runs} games with {label}...")
        runner = BatchRunner(agent_class=agent_class, config=config)
        t0 = time.time()
        telemetry = runner.run_batch(n_runs=n_runs, base_seed=0)
        elapsed = time.time() - t0

        floors = np.array([r.floors_reached for r in telemetry])
        levels = np.array([r.final_level for r in telemetry])
        kills = np.array([r.total_kills for r in telemetry])
        turns = np.array([r.turns for r in telemetry])
        deaths = sum(1 for r in telemetry if r.final_result == "death")

        results[label] = {
            "floors": floors,
            "levels": levels,
            "kills": kills,
            "turns": turns,
            "deaths": deaths,
            "elapsed": elapsed,
        }

        print(f"  Time: {elapsed:.1f}s ({elapsed/n_runs*1000:.0f}ms/game)")
        print(f"  Deaths: {deaths}/{n_runs}")
        print(f"  Avg floor: {floors.mean():.2f} (median {np.median(floors):.0f}, max {floors.max()})")
        print(f"  Avg level: {levels.mean():.2f}")
        print(f"  Avg kills: {kills.mean():.1f}")

    generate_charts(results, n_runs)


def generate_charts(results: dict, n_runs: int) -> None:
    fig, axes = plt.subplots(2, 2, figsize=(14, 10))
    fig.suptitle(f"RandomAgent vs HeuristicAgent - {n_runs} games", fontsize=16, fontweight="bold")

    colors = {"RandomAgent": "#e74c3c", "HeuristicAgent": "#2ecc71"}
    labels = list(results.keys())

    for ax, key, title in [
        (axes[0, 0], "floors", "Floor Reached"),
        (axes[0, 1], "levels", "Final Level"),
        (axes[1, 0], "kills", "Kills Per Game"),
    ]:
        top = max(results[l][key].max() for l in labels)
        bins = np.arange(-0.5, top + 1.5, 1)
        for label in labels:
            values = results[label][key]
            ax.hist(values, bins=bins, alpha=0.6, label=f"{label} (avg={values.mean():.1f})",
                    color=colors[label], edgecolor="black", linewidth=0.3)
        ax.set_xlabel(title)
        ax.set_ylabel("Count")
        ax.set_title(f"{title} Distribution")
        ax.legend()

    ax = axes[1, 1]
    ax.axis("off")
    row_labels = ["Deaths", "Avg Floor", "Max Floor", "Avg Level", "Avg Turns", "Time (s)"]
    table_data = []
    for metric in row_labels:
        row = []
        for label in labels:
            r = results[label]
            if metric == "Deaths":
                row.append(f'{r["deaths"]}/{n_runs}')
            elif metric == "Avg Floor":
                row.append(f'{r["floors"].mean():.2f}')
            elif metric == "Max Floor":
                row.append(f'{r["floors"].max()}')
            elif metric == "Avg Level":
                row.append(f'{r["levels"].mean():.2f}')
            elif metric == "Avg Turns":
                row.append(f'{r["turns"].mean():.0f}')
            elif metric == "Time (s)":
                row.append(f'{r["elapsed"]:.1f}')
        table_data.append(row)

    table = ax.table(
        cellText=table_data,
        rowLabels=row_labels,
        colLabels=labels,
        cellLoc="center",
        loc="center",
    )
    table.auto_set_font_size(False)
    table.set_fontsize(11)
    table.scale(1.0, 1.6)

    for j, label in enumerate(labels):
        table[0, j].set_facecolor(colors[label])
        table[0, j].set_text_props(color="white", fontweight="bold")

    plt.tight_layout()
    out_path = "agent_comparison.png"
    plt.savefig(out_path, dpi=150, bbox_inches="tight")
    print(f"\nChart saved to {out_path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--runs", type=int, default=200, help="Number of games per agent")
    parser.add_argument("--max-turns", type=int, default=2000, help="Turn cap per game")
    args = parser.parse_args()
    run_comparison(args.runs, args.max_turns)
