from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_results(summary: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked win/draw/loss bars per agent. Returns the saved file, if any."""
    cols = ["wins", "draws", "losses"]
    if "name" not in summary.columns or any(col not in summary.columns for col in cols):
        return None

    fig, ax = plt.subplots(figsize=(6, 4))
    bottom = pd.Series(0, index=summary.index, dtype=float)
    for col, color in zip(cols, ("tab:green", "tab:gray", "tab:red")):
        values = summary[col].astype(float)
        ax.bar(summary["name"].astype(str), values, bottom=bottom, label=col, color=color)
        bottom = bottom + values

    ax.set_title("League results")
    ax.set_xlabel("agent")
    ax.set_ylabel("games")
    ax.legend()

    if show:
        plt.show()
        return None

    _ensure_dir(outdir)
    path = outdir / "league_results.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path
