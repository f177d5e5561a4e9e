"""
Sentence Rhythm (Burstiness) Engine
───────────────────────────────────
Scores each sentence with a cheap predictability proxy, then measures how much
that proxy swings from sentence to sentence.

Human writers alternate: a long winding sentence, then a short one. Model
output tends to hold one steady register, so the per-sentence values barely
move. Low spread = AI.

The proxy is not a language-model perplexity. It averages a small table of
common-word probabilities and maps the result onto a 2.0-6.0 range.
"""

import statistics

from zerodetect_cli.detectors.bands import score_below
from zerodetect_cli.detectors.lexicon import (
    COMMON_WORD_PROBABILITY,
    DISCOURSE_STARTER,
    UNLISTED_WORD_PROBABILITY,
)
from zerodetect_cli.detectors.tokenizer import tokenize

STARTER_BONUS = 0.05

BURSTINESS_BANDS = ((0.35, 0.95), (0.6, 0.75), (0.9, 0.55), (1.2, 0.35))
BURSTINESS_FLOOR = 0.15


def sentence_perplexity(sentence: str) -> float:
    words = tokenize(sentence)
    if not words:
        return 0.0

    predictability = sum(
        COMMON_WORD_PROBABILITY.get(w, UNLISTED_WORD_PROBABILITY) for w in words
    ) / len(words)
    bonus = STARTER_BONUS if DISCOURSE_STARTER.match(sentence.strip()) else 0.0

    return 2.0 + (1.0 - (predictability + bonus)) * 4.0


def sentence_perplexities(sentences: list) -> list:
    return [sentence_perplexity(s) for s in sentences]


def average_perplexity(perplexities: list) -> float:
    return statistics.fmean(perplexities) if perplexities else 0.0


def burstiness(perplexities: list) -> float:
    """Population standard deviation; fewer than two sentences have no spread."""
    if len(perplexities) < 2:
        return 0.0
    return statistics.pstdev(perplexities)


def analyze_burstiness(perplexities: list) -> dict:
    value = burstiness(perplexities)
    score = score_below(value, BURSTINESS_BANDS, BURSTINESS_FLOOR)

    if len(perplexities) < 2:
        reason = "Single sentence, no rhythm to measure"
    elif score >= 0.75:
        reason = f"Flat sentence rhythm (burstiness {value:.3f}), uniform predictability"
    elif score >= 0.35:
        reason = f"Some variation in sentence rhythm (burstiness {value:.3f})"
    else:
        reason = f"Bursty sentence rhythm (burstiness {value:.3f}), human-like variation"
    return {"value": value, "score": score, "reason": reason}
