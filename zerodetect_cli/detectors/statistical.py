"""
Vocabulary Distribution Engine
──────────────────────────────
Three signals computed straight from the word-frequency table:

1. Entropy
   Shannon entropy (bits) of the token distribution. Language models favour
   a narrower, more predictable vocabulary, so low entropy reads as AI.

2. Lexical richness
   Type/token ratio. Repeating the same words over and over (low ratio) is
   the machine pattern; human prose wanders.

3. Stopword balance
   Share of tokens that are function words. Very sparse function words
   (dense, noun-heavy prose) and very heavy ones both lean AI; the middle
   of the range is where human writing tends to sit.
"""

import math
from collections import Counter

from zerodetect_cli.detectors.bands import score_below
from zerodetect_cli.detectors.lexicon import STOP_WORDS

ENTROPY_BANDS = ((3.5, 1.0), (3.8, 0.85), (4.2, 0.60), (4.5, 0.30), (5.5, 0.10))
ENTROPY_FLOOR = 0.02

LEXICAL_BANDS = ((0.40, 0.95), (0.48, 0.75), (0.56, 0.55), (0.65, 0.35))
LEXICAL_FLOOR = 0.15

STOPWORD_BANDS = ((0.35, 0.80), (0.45, 0.60), (0.55, 0.40), (0.65, 0.50))
STOPWORD_CEILING = 0.70


def shannon_entropy(items: list) -> float:
    """Entropy in bits of the frequency distribution of items."""
    if not items:
        return 0.0
    total = len(items)
    entropy = 0.0
    for count in Counter(items).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def analyze_entropy(tokens: list) -> dict:
    entropy = shannon_entropy(tokens)
    score = score_below(entropy, ENTROPY_BANDS, ENTROPY_FLOOR)

    if score >= 0.85:
        reason = f"Very low word entropy ({entropy:.2f} bits), narrow predictable vocabulary"
    elif score >= 0.30:
        reason = f"Moderate word entropy ({entropy:.2f} bits)"
    else:
        reason = f"High word entropy ({entropy:.2f} bits), varied vocabulary"
    return {"value": entropy, "score": score, "reason": reason}


def analyze_lexical_richness(tokens: list) -> dict:
    if not tokens:
        return {"value": 0.0, "score": 0.5, "reason": "No words to measure vocabulary richness"}

    ttr = len(set(tokens)) / len(tokens)
    score = score_below(ttr, LEXICAL_BANDS, LEXICAL_FLOOR)

    if score >= 0.75:
        reason = f"Repetitive vocabulary (type/token ratio {ttr:.2f})"
    elif score >= 0.35:
        reason = f"Average vocabulary variety (type/token ratio {ttr:.2f})"
    else:
        reason = f"Rich, varied vocabulary (type/token ratio {ttr:.2f})"
    return {"value": ttr, "score": score, "reason": reason}


def analyze_stopwords(tokens: list) -> dict:
    if not tokens:
        return {"value": 0.0, "score": 0.5, "reason": "No words to measure function-word balance"}

    ratio = sum(1 for t in tokens if t in STOP_WORDS) / len(tokens)
    score = score_below(ratio, STOPWORD_BANDS, STOPWORD_CEILING)

    if ratio < 0.35:
        reason = f"Sparse function words ({ratio:.0%}), dense information-heavy phrasing"
    elif ratio >= 0.65:
        reason = f"Function-word heavy ({ratio:.0%}), padded formulaic phrasing"
    else:
        reason = f"Natural function-word balance ({ratio:.0%})"
    return {"value": ratio, "score": score, "reason": reason}
