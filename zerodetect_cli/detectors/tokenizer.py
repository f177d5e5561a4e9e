import re

# ASCII word class, matching the browser engine's \b\w+\b
_WORD = re.compile(r"\b\w+\b", re.ASCII)
_SENTENCE_BREAK = re.compile(r"[.!?]+")


def tokenize(text: str) -> list:
    """Lowercase word tokens in order of appearance. Duplicates are kept."""
    return _WORD.findall(text.lower())


def split_sentences(text: str) -> list:
    """Split on runs of . ! ? and drop pieces that are empty once stripped."""
    return [s.strip() for s in _SENTENCE_BREAK.split(text) if s.strip()]
