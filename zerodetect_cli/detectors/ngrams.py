"""
N-gram Signature & Repetition Engine
────────────────────────────────────
Two views on how word sequences repeat:

1. N-gram signature
   Blend of a bigram-entropy indicator (60%) and a trigram repetition
   indicator (40%). Low bigram entropy and recurring three-word phrases are
   both marks of templated generation.

2. Repetition signature
   Share of distinct bigrams and trigrams that occur more than once,
   weighted 0.6 / 0.4. Catches stock phrases the model keeps reusing.
"""

from collections import Counter

from zerodetect_cli.detectors.bands import score_above
from zerodetect_cli.detectors.statistical import shannon_entropy

BIGRAM_ENTROPY_LIMIT = 8.2
TRIGRAM_REPETITION_LIMIT = 0.08

REPETITION_BANDS = ((0.10, 0.95), (0.06, 0.75), (0.03, 0.50))
REPETITION_FLOOR = 0.25


def ngrams(tokens: list, n: int) -> list:
    return [" ".join(tokens[i:i + n]) for i in range(len(tokens) - n + 1)]


def repeated_ratio(grams: list) -> float:
    """Fraction of distinct n-grams seen more than once."""
    counts = Counter(grams)
    if not counts:
        return 0.0
    return sum(1 for c in counts.values() if c > 1) / len(counts)


def analyze_ngram_signature(tokens: list) -> dict:
    if len(tokens) < 3:
        return {
            "value": 0.5,
            "score": 0.5,
            "bigram_entropy": 0.0,
            "trigram_repetition": 0.0,
            "reason": "Too few words for n-gram analysis",
        }

    bigram_entropy = shannon_entropy(ngrams(tokens, 2))
    trigram_repetition = repeated_ratio(ngrams(tokens, 3))

    entropy_indicator = 1.0 if bigram_entropy < BIGRAM_ENTROPY_LIMIT else 0.0
    repetition_indicator = 0.8 if trigram_repetition > TRIGRAM_REPETITION_LIMIT else 0.2
    score = entropy_indicator * 0.6 + repetition_indicator * 0.4

    reasons = []
    if entropy_indicator:
        reasons.append(f"Low bigram entropy ({bigram_entropy:.2f} bits)")
    if trigram_repetition > TRIGRAM_REPETITION_LIMIT:
        reasons.append(f"Recurring three-word phrases ({trigram_repetition:.0%} of trigrams)")

    return {
        "value": score,
        "score": score,
        "bigram_entropy": bigram_entropy,
        "trigram_repetition": trigram_repetition,
        "reason": "; ".join(reasons) if reasons else "Diverse word transitions",
    }


def analyze_repetition(tokens: list) -> dict:
    if len(tokens) < 6:
        return {"value": 0.0, "score": 0.35, "reason": "Too few words for repetition analysis"}

    rate = repeated_ratio(ngrams(tokens, 2)) * 0.6 + repeated_ratio(ngrams(tokens, 3)) * 0.4
    score = score_above(rate, REPETITION_BANDS, REPETITION_FLOOR)

    if score >= 0.75:
        reason = f"Heavy phrase reuse (repetition rate {rate:.3f})"
    elif score >= 0.50:
        reason = f"Some repeated phrasing (repetition rate {rate:.3f})"
    else:
        reason = f"Little phrase reuse (repetition rate {rate:.3f})"
    return {"value": rate, "score": score, "reason": reason}
