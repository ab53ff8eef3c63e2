"""
Query normalization: abbreviation expansion, tokenization, stop-word removal.
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, List

ABBREVIATIONS: Dict[str, str] = {
    "cdw": "collision damage waiver",
    "scdw": "super collision damage waiver",
    "tp": "theft protection",
    "pai": "personal accident insurance",
    "ldw": "loss damage waiver",
    "gps": "navigation device",
    "suv": "sport utility vehicle",
    "mpv": "multi purpose vehicle",
    "ev": "electric vehicle",
    "roi": "return on investment",
    "sla": "service level agreement",
    "eta": "estimated time arrival",
    "asap": "as soon as possible",
    "id": "identification",
    "dl": "driver license",
}

STOP_WORDS: FrozenSet[str] = frozenset({
    "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "shall",
    "should", "may", "might", "must", "can", "could", "to", "of", "in",
    "for", "on", "with", "at", "by", "from", "as", "into", "about", "like",
    "through", "after", "over", "between", "out", "up", "down", "if", "or",
    "and", "but", "not", "no", "nor", "so", "yet", "it", "its", "this",
    "that", "these", "those", "i", "me", "my", "we", "our", "you", "your",
    "he", "she", "they", "them", "their", "what", "which", "who", "whom",
    "how", "when", "where", "why", "am", "just", "also", "very", "much",
    "more", "most", "some", "any", "all", "each", "every", "both", "few",
    "than", "too", "other", "please", "tell", "know", "need", "want", "get",
    "got", "help",
})

_ABBREVIATION_PATTERNS = [
    (re.compile(rf"\b{re.escape(abbr)}\b", re.ASCII), f"{abbr} {expansion}")
    for abbr, expansion in ABBREVIATIONS.items()
]

# Hyphenated terms ("full-to-full", "cross-border") stay whole.
_DELIMITERS = re.compile(r"[\s,;:.!?()\[\]{}\"'`/\\|]+")


def rewrite_query(query: str) -> str:
    """Lowercase the query and append expansions after known abbreviations."""
    q = query.lower().strip()
    for pattern, replacement in _ABBREVIATION_PATTERNS:
        q = pattern.sub(replacement, q)
    return q


def tokenize(text: str) -> List[str]:
    """Split text into lowercase terms, dropping single characters and stop words."""
    return [
        tok
        for tok in _DELIMITERS.split(text.lower())
        if len(tok) > 1 and tok not in STOP_WORDS
    ]


def bigrams(tokens: List[str]) -> List[str]:
    """Adjacent token pairs joined by a space."""
    return [f"{tokens[i]} {tokens[i + 1]}" for i in range(len(tokens) - 1)]
