"""
Threshold bands
───────────────
Every detector turns its raw statistic into an AI-likelihood through a short,
ordered table of (bound, score) pairs. The first bound the value satisfies
wins; the fallback covers everything past the last bound. Tables are ordered
from the most AI-indicative band to the most human one.
"""


def score_below(value: float, bands: tuple, fallback: float) -> float:
    """First band whose bound is strictly greater than value."""
    for bound, score in bands:
        if value < bound:
            return score
    return fallback


def score_above(value: float, bands: tuple, fallback: float) -> float:
    """First band whose bound is strictly less than value."""
    for bound, score in bands:
        if value > bound:
            return score
    return fallback
