"""
Semantic Flow Consistency Engine
────────────────────────────────
Counts the sentences that carry a transition ("moreover"), a qualifier
("significant"), a formal reporting verb ("demonstrates") or, in longer
sentences, a passive auxiliary.

The Core Insight:
  Generated prose strings nearly every sentence together with connective
  tissue. When most sentences carry a marker the ratio is kept as-is;
  otherwise it is damped heavily.

  Human classroom and academic writing uses the same vocabulary, so text
  full of instructional or academic markers gets a flat reduction before
  the score leaves this module.
"""

from zerodetect_cli.detectors.lexicon import (
    ACADEMIC_MARKERS,
    FORMAL_PATTERNS,
    INSTRUCTIONAL_MARKERS,
    PASSIVE_MARKERS,
    QUALIFIERS,
    TRANSITIONS,
)

PASSIVE_MIN_LENGTH = 20
CONSISTENT_RATIO = 0.60
INSTRUCTIONAL_PENALTY = 0.35
ACADEMIC_PENALTY = 0.20


def _has_marker(sentence: str) -> bool:
    lower = sentence.lower()
    if any(t in lower for t in TRANSITIONS):
        return True
    if any(q in lower for q in QUALIFIERS):
        return True
    if any(f in lower for f in FORMAL_PATTERNS):
        return True
    return len(lower) > PASSIVE_MIN_LENGTH and any(p in lower for p in PASSIVE_MARKERS)


def semantic_consistency(sentences: list) -> float:
    if len(sentences) < 2:
        return 0.5

    ratio = sum(1 for s in sentences if _has_marker(s)) / len(sentences)
    if ratio > CONSISTENT_RATIO:
        return min(1.0, ratio)
    return ratio * 0.3


def academic_penalty(text: str) -> float:
    """Reduction for formal human writing (lesson plans, essays, papers)."""
    lower = text.lower()
    if sum(1 for m in INSTRUCTIONAL_MARKERS if m in lower) >= 2:
        return INSTRUCTIONAL_PENALTY
    if sum(1 for m in ACADEMIC_MARKERS if m in lower) >= 2:
        return ACADEMIC_PENALTY
    return 0.0


def analyze_semantic_flow(text: str, sentences: list) -> dict:
    consistency = semantic_consistency(sentences)
    penalty = academic_penalty(text)
    score = max(0.0, consistency - penalty)

    if len(sentences) < 2:
        reason = "Single sentence, flow consistency undetermined"
    elif consistency > CONSISTENT_RATIO:
        reason = f"Connective markers in most sentences ({consistency:.0%})"
    else:
        reason = "Loose, uneven sentence linking"
    if penalty == INSTRUCTIONAL_PENALTY:
        reason += "; instructional context discount applied"
    elif penalty == ACADEMIC_PENALTY:
        reason += "; academic context discount applied"

    return {"value": consistency, "score": score, "penalty": penalty, "reason": reason}
