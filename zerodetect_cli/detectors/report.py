from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Optional

from zerodetect_cli.detectors.lexicon import PUNCTUATION
from zerodetect_cli.detectors.scoring import SIGNAL_WEIGHTS

# key -> (display name, card description); order follows SIGNAL_WEIGHTS
SIGNAL_INFO = {
    "entropy": (
        "Entropy",
        "Shannon entropy of the word distribution. Low entropy means a narrow, predictable vocabulary.",
    ),
    "burstiness": (
        "Burstiness",
        "Variation of sentence-level predictability. Humans mix simple and complex sentences.",
    ),
    "ngram": (
        "N-gram",
        "Bigram entropy blended with trigram repetition. Templated text reuses word transitions.",
    ),
    "semantic": (
        "Semantic",
        "Share of sentences linked by transitions, qualifiers and formal markers.",
    ),
    "lexical": (
        "Lexical",
        "Type/token ratio. Low ratios point to a repetitive vocabulary.",
    ),
    "repetition": (
        "Repetition",
        "Share of two- and three-word phrases that occur more than once.",
    ),
    "readability": (
        "Readability",
        "Flesch Reading Ease. Dense, formal prose scores low.",
    ),
    "stopwords": (
        "Stopwords",
        "Share of common function words. Human prose sits in a middle range.",
    ),
}


@dataclass(frozen=True)
class SignalRecord:
    """One detector's contribution to the final score."""

    key: str
    name: str
    weight: float
    value: float
    score: float
    description: str
    reason: str


@dataclass(frozen=True)
class TextDetails:
    """Descriptive counts shown next to the score."""

    chars: int
    words: int
    unique_words: int
    avg_word_length: float
    avg_sentence_length: float
    punctuation_diversity: float


@dataclass(frozen=True)
class AnalysisReport:
    """Immutable result of one analysis."""

    percentage: int
    confidence: str
    signals: tuple[SignalRecord, ...]
    details: TextDetails
    average_perplexity: float
    sentence_perplexities: tuple[float, ...]

    def signal(self, key: str) -> Optional[SignalRecord]:
        for record in self.signals:
            if record.key == key:
                return record
        return None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["signals"] = [asdict(s) for s in self.signals]
        data["sentence_perplexities"] = list(self.sentence_perplexities)
        return data


def punctuation_diversity(text: str) -> float:
    marks = PUNCTUATION.findall(text)
    if not marks:
        return 0.0
    return len(set(marks)) / len(marks)


def build_details(text: str, tokens: list, sentences: list) -> TextDetails:
    words = len(text.split())
    non_space = len(re.sub(r"\s", "", text))
    return TextDetails(
        chars=len(text),
        words=words,
        unique_words=len(set(tokens)),
        avg_word_length=non_space / words if words else 0.0,
        avg_sentence_length=words / len(sentences) if sentences else 0.0,
        punctuation_diversity=punctuation_diversity(text),
    )


def assemble_report(
    text: str,
    tokens: list,
    sentences: list,
    results: dict,
    percentage: int,
    confidence: str,
    perplexities: list,
    average_perplexity: float,
) -> AnalysisReport:
    """Package per-signal result dicts (keyed like SIGNAL_WEIGHTS) into a report."""
    signals = []
    for key, weight in SIGNAL_WEIGHTS.items():
        name, description = SIGNAL_INFO[key]
        res = results[key]
        signals.append(
            SignalRecord(
                key=key,
                name=name,
                weight=weight,
                value=res["value"],
                score=res["score"],
                description=description,
                reason=res.get("reason", ""),
            )
        )

    return AnalysisReport(
        percentage=percentage,
        confidence=confidence,
        signals=tuple(signals),
        details=build_details(text, tokens, sentences),
        average_perplexity=average_perplexity,
        sentence_perplexities=tuple(perplexities),
    )
