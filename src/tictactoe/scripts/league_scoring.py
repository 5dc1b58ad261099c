from __future__ import annotations

import math

import pandas as pd

RESULTS = ("W", "D", "L")
POINTS = {"W": 1.0, "D": 0.5, "L": 0.0}


def wilson_lcb(p: float, n: int, z: float) -> float:
    if n <= 0:
        return 0.0
    p = max(0.0, min(1.0, p))
    z2 = z * z
    denom = 1.0 + (z2 / n)
    center = p + (z2 / (2.0 * n))
    rad = z * math.sqrt(max(0.0, (p * (1.0 - p) + (z2 / (4.0 * n))) / n))
    return max(0.0, (center - rad) / denom)


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def summarize(df: pd.DataFrame, z: float = 1.28) -> pd.DataFrame:
    """Collapse per-game rows into one row per agent, best ppg first."""
    _require_cols(df, ["name", "result", "points", "moves", "time_ms"])

    wdl = (
        pd.crosstab(df["name"], df["result"])
        .reindex(columns=list(RESULTS), fill_value=0)
        .rename(columns={"W": "wins", "D": "draws", "L": "losses"})
    )
    totals = df.groupby("name")[["points", "moves", "time_ms"]].sum()

    out = wdl.join(totals)
    out.columns.name = None
    out.insert(0, "games", out[["wins", "draws", "losses"]].sum(axis=1))
    out["ppg"] = out["points"] / out["games"]
    out["strength_wilson_lcb"] = [
        wilson_lcb(p, int(n), z) for p, n in zip(out["ppg"], out["games"])
    ]
    out["avg_ms_per_move"] = (out["time_ms"] / out["moves"].where(out["moves"] > 0)).fillna(0.0)

    out = out.sort_values(["ppg", "avg_ms_per_move"], ascending=[False, True])
    return out.reset_index()
