"""
Read-only word tables shared by every detector.

Everything here is built once at import time and never mutated: frozensets,
tuples and a MappingProxyType, so analyses running side by side can share them.
"""

import re
from types import MappingProxyType

# Closed list of high-frequency function words
STOP_WORDS = frozenset([
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their",
    "what", "so", "up", "out", "if", "about", "who", "get", "which", "go",
    "me", "when", "make", "can", "like", "time", "no", "just", "him", "know",
    "take", "people", "into", "year", "your", "good", "some", "could", "them",
    "see", "other", "than", "then", "now", "look", "only", "come", "its", "over",
    "think", "also", "back", "after", "use", "two", "how", "our", "work",
    "first", "well", "way", "even", "new", "want", "because", "any", "these",
    "give", "day", "most", "us", "is", "was", "are", "been", "being", "has",
    "had", "does", "did", "having", "am", "such", "both", "each", "few",
    "more", "many", "much", "several", "through", "during", "before",
])

# Rough unigram probabilities used by the per-sentence perplexity proxy
COMMON_WORD_PROBABILITY = MappingProxyType({
    "the": 0.20, "a": 0.15, "and": 0.15, "to": 0.12, "of": 0.12,
    "in": 0.12, "is": 0.10, "that": 0.10, "for": 0.10, "it": 0.10,
    "with": 0.09, "as": 0.08, "on": 0.08, "be": 0.08, "have": 0.08,
})
UNLISTED_WORD_PROBABILITY = 0.02

# Matched case-sensitively against the stripped sentence
DISCOURSE_STARTER = re.compile(r"^(this|the|in|our|by|as|for|through)\s")

TRANSITIONS = (
    "however", "therefore", "moreover", "furthermore",
    "additionally", "consequently", "thus", "hence",
)
QUALIFIERS = (
    "significant", "important", "notable", "remarkable",
    "evident", "clear", "obvious", "essential",
)
PASSIVE_MARKERS = ("is", "are", "was", "were", "be", "been", "being")
FORMAL_PATTERNS = (
    "provides", "demonstrates", "indicates", "suggests",
    "shows", "reveals", "presents",
)

# Context markers that pull the semantic score back down for human
# classroom and academic prose
INSTRUCTIONAL_MARKERS = (
    "explain", "example", "demonstrate", "show", "evidence",
    "support", "claim", "topic", "sentence", "paragraph",
    "continue", "pattern", "relationship", "instruction",
    "write", "essay", "learn", "teaching", "student",
)
ACADEMIC_MARKERS = (
    "moreover", "furthermore", "however", "thus", "therefore",
    "significant", "important", "relevant", "appropriate",
)

PUNCTUATION = re.compile(r"[!?.;:,\-—–]")
