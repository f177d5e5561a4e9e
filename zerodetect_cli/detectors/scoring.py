import math

# Order here is the display order of the signal cards
SIGNAL_WEIGHTS = {
    "entropy":     0.25,
    "burstiness":  0.20,
    "ngram":       0.15,
    "semantic":    0.10,
    "lexical":     0.10,
    "repetition":  0.10,
    "readability": 0.05,
    "stopwords":   0.05,
}

CONFIDENCE_LABELS = ("Very Low", "Low", "Medium", "High", "Very High")


class ScoreAggregator:
    """
    8-Signal Score Aggregator
    ─────────────────────────
    Signals and weights:
      entropy     (0.25): Shannon entropy of the word distribution
      burstiness  (0.20): spread of per-sentence perplexity proxy
      ngram       (0.15): bigram entropy + trigram repetition blend
      semantic    (0.10): connective/formal marker consistency
      lexical     (0.10): type/token ratio
      repetition  (0.10): repeated bigram/trigram share
      readability (0.05): Flesch Reading Ease
      stopwords   (0.05): function-word ratio

    Confidence is NOT derived from the weighted sum. It is a separate
    agreement score over four raw statistics, with its own weights and
    thresholds (the burstiness cut-offs there differ from the ones in
    rhythm.py and are kept that way).
    """

    def __init__(self):
        self.weights = dict(SIGNAL_WEIGHTS)

    def weighted_sum(self, scores: dict) -> float:
        return sum(scores[key] * weight for key, weight in self.weights.items())

    def compute(self, scores: dict) -> int:
        """Percentage 0-100, rounded half up."""
        total = min(max(self.weighted_sum(scores), 0.0), 1.0)
        return int(math.floor(total * 100 + 0.5))

    def confidence(
        self,
        burstiness: float,
        perplexity: float,
        ngram_score: float,
        semantic_score: float,
    ) -> str:
        if burstiness < 0.7:
            burstiness_indicator = 1.0
        elif burstiness < 1.0:
            burstiness_indicator = 0.5
        else:
            burstiness_indicator = 0.0

        if perplexity < 3.5:
            perplexity_indicator = 1.0
        elif perplexity < 4.0:
            perplexity_indicator = 0.5
        else:
            perplexity_indicator = 0.0

        if ngram_score > 0.65:
            ngram_indicator = 1.0
        elif ngram_score > 0.50:
            ngram_indicator = 0.5
        else:
            ngram_indicator = 0.0

        if semantic_score > 0.55:
            semantic_indicator = 1.0
        elif semantic_score > 0.40:
            semantic_indicator = 0.5
        else:
            semantic_indicator = 0.0

        agreement = (
            burstiness_indicator * 0.30 +
            ngram_indicator      * 0.15 +
            semantic_indicator   * 0.10 +
            perplexity_indicator * 0.45
        )

        if agreement >= 0.85:
            return CONFIDENCE_LABELS[4]
        if agreement >= 0.70:
            return CONFIDENCE_LABELS[3]
        if agreement >= 0.50:
            return CONFIDENCE_LABELS[2]
        if agreement >= 0.30:
            return CONFIDENCE_LABELS[1]
        return CONFIDENCE_LABELS[0]
