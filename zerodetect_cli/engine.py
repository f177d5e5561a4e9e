"""
Scoring pipeline: validate, tokenize, run the eight detectors, aggregate,
assemble. Pure and stateless; every call rebuilds its own frequency tables.
"""

import logging

from zerodetect_cli.detectors.ngrams import analyze_ngram_signature, analyze_repetition
from zerodetect_cli.detectors.readability import analyze_readability
from zerodetect_cli.detectors.report import AnalysisReport, assemble_report
from zerodetect_cli.detectors.rhythm import (
    analyze_burstiness,
    average_perplexity,
    sentence_perplexities,
)
from zerodetect_cli.detectors.scoring import ScoreAggregator
from zerodetect_cli.detectors.semantic import analyze_semantic_flow
from zerodetect_cli.detectors.statistical import (
    analyze_entropy,
    analyze_lexical_richness,
    analyze_stopwords,
)
from zerodetect_cli.detectors.tokenizer import split_sentences, tokenize

LOGGER = logging.getLogger(__name__)

MIN_TEXT_LENGTH = 50


class TextValidationError(ValueError):
    """Input rejected before any signal is computed."""


class EmptyTextError(TextValidationError):
    def __init__(self):
        super().__init__("Please enter some text to analyze.")


class TextTooShortError(TextValidationError):
    def __init__(self, length: int, minimum: int = MIN_TEXT_LENGTH):
        self.length = length
        self.minimum = minimum
        super().__init__(f"Text must be at least {minimum} characters. Current: {length}")


def validate_text(text: str) -> str:
    """Return the stripped text, or raise if it is empty or too short."""
    stripped = (text or "").strip()
    if not stripped:
        raise EmptyTextError()
    if len(stripped) < MIN_TEXT_LENGTH:
        raise TextTooShortError(len(stripped))
    return stripped


def detect_ai_text(text: str) -> AnalysisReport:
    try:
        text = validate_text(text)
    except TextValidationError as exc:
        LOGGER.debug("Rejected input: %s", exc)
        raise

    tokens = tokenize(text)
    sentences = split_sentences(text)
    perplexities = sentence_perplexities(sentences)
    avg_perplexity = average_perplexity(perplexities)

    results = {
        "entropy":     analyze_entropy(tokens),
        "burstiness":  analyze_burstiness(perplexities),
        "ngram":       analyze_ngram_signature(tokens),
        "semantic":    analyze_semantic_flow(text, sentences),
        "lexical":     analyze_lexical_richness(tokens),
        "repetition":  analyze_repetition(tokens),
        "readability": analyze_readability(tokens, sentences),
        "stopwords":   analyze_stopwords(tokens),
    }
    for key, res in results.items():
        LOGGER.debug("%s: value=%.4f score=%.2f", key, res["value"], res["score"])

    aggregator = ScoreAggregator()
    percentage = aggregator.compute({key: res["score"] for key, res in results.items()})
    confidence = aggregator.confidence(
        results["burstiness"]["value"],
        avg_perplexity,
        results["ngram"]["score"],
        results["semantic"]["value"],
    )
    LOGGER.info(
        "Scored %d words / %d sentences: %d%% AI (confidence %s)",
        len(tokens), len(sentences), percentage, confidence,
    )

    return assemble_report(
        text,
        tokens,
        sentences,
        results,
        percentage,
        confidence,
        perplexities,
        avg_perplexity,
    )
