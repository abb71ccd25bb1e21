# sampler.py - inverse-CDF draw of one character from a finalized distribution

from __future__ import annotations
from typing import Optional

from .char_data import CharDistribution

# returned when there is nothing to sample from
FALLBACK_CHAR = " "


def sample(dist: Optional[CharDistribution], r: float) -> str:
    """
    Return the char of the first record whose cumulative probability is
    strictly greater than `r` (a draw in [0, 1)).

    If rounding leaves every cp <= r, the last record's char is returned.
    Missing, empty or unfinalized distributions give FALLBACK_CHAR.
    Never raises.
    """
    if dist is None or not dist.is_finalized:
        return FALLBACK_CHAR

    last = FALLBACK_CHAR
    for rec in dist:
        last = rec.chr
        if rec.cp is not None and rec.cp > r:
            return rec.chr
    return last
