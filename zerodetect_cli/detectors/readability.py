import re

from zerodetect_cli.detectors.bands import score_below

_VOWEL_GROUP = re.compile(r"[aeiouy]+")

FLESCH_BANDS = ((40, 0.80), (55, 0.60), (70, 0.45), (85, 0.35))
FLESCH_FLOOR = 0.20


def count_syllables(word: str) -> int:
    """Vowel groups after dropping a trailing silent e; every word has at least one."""
    word = word.lower()
    if word.endswith("e"):
        word = word[:-1]
    return max(1, len(_VOWEL_GROUP.findall(word)))


def flesch_reading_ease(tokens: list, sentences: list) -> float:
    syllables = sum(count_syllables(t) for t in tokens)
    return (
        206.835
        - 1.015 * (len(tokens) / len(sentences))
        - 84.6 * (syllables / len(tokens))
    )


def analyze_readability(tokens: list, sentences: list) -> dict:
    # Dense, hard-to-read prose leans AI; breezy prose leans human
    if not tokens or not sentences:
        return {"value": 0.0, "score": 0.5, "reason": "No words or sentences to grade"}

    flesch = flesch_reading_ease(tokens, sentences)
    score = score_below(flesch, FLESCH_BANDS, FLESCH_FLOOR)

    if flesch < 40:
        reason = f"Difficult, dense prose (Flesch {flesch:.1f})"
    elif flesch < 70:
        reason = f"Standard readability (Flesch {flesch:.1f})"
    else:
        reason = f"Easy, conversational prose (Flesch {flesch:.1f})"
    return {"value": flesch, "score": score, "reason": reason}
