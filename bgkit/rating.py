"""Elo rating differences derived from game results."""

from __future__ import annotations

import math

from bgkit.wdl import WDL


def elo_from_wdl(wdl: WDL) -> float:
    """The Elo difference implied by `wdl`, which need not be normalized."""
    total = wdl.sum()
    if total == 0:
        return math.nan
    score = (wdl.value() / total + 1.0) / 2.0
    if math.isnan(score):
        return math.nan
    if score <= 0.0:
        return -math.inf
    if score >= 1.0:
        return math.inf
    elo = -400.0 * math.log10(1.0 / score - 1.0)
    # avoid returning negative zero
    return elo + 0.0