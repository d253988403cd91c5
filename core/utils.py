from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def excel_round(x, decimals: int = 2):
    """
    Excel ROUND: half away from zero (vectorized).

    Finite values too large to scale by 10**decimals are returned unchanged.
    """
    m = 10 ** decimals
    x = np.asarray(x, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = np.abs(x) * m
        rounded = np.sign(x) * (np.floor(scaled + 0.5) / m)
    return np.where(np.isfinite(scaled), rounded, x)


def round_value(x: float, decimals: int = 2) -> float:
    """Scalar excel_round returning a plain Python float."""
    return float(excel_round(x, decimals))
