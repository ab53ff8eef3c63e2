"""
TF-IDF corpus index over knowledge notes, rebuilt per retrieval call.
"""

from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from .documents import Document
from .normalizer import tokenize

logger = logging.getLogger(__name__)

TITLE_REPEAT = 3
KEYWORDS_REPEAT = 4
CONTENT_REPEAT = 1
CATEGORY_REPEAT = 2


@dataclass
class DocumentTerms:
    """Normalized term frequencies for one document, in first-occurrence order."""

    document_id: str
    term_frequency: Dict[str, float]


@dataclass
class CorpusIndex:
    """Per-document term frequencies plus corpus-wide smoothed IDF."""

    docs: List[DocumentTerms]
    idf: Dict[str, float]
    _by_id: Dict[str, DocumentTerms] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._by_id = {}
        for doc in self.docs:
            # First occurrence wins for duplicate ids.
            self._by_id.setdefault(doc.document_id, doc)

    def terms_for(self, document_id: str) -> DocumentTerms | None:
        return self._by_id.get(document_id)


def weighted_text(document: Document) -> str:
    """Concatenate fields with repetition so title and keyword hits outweigh body text."""
    parts: List[str] = []
    parts.extend([document.title] * TITLE_REPEAT)
    parts.extend([" ".join(document.keywords)] * KEYWORDS_REPEAT)
    parts.extend([document.content] * CONTENT_REPEAT)
    parts.extend([document.category] * CATEGORY_REPEAT)
    return " ".join(parts)


def term_frequencies(text: str) -> Dict[str, float]:
    """Term count divided by total token count; keys keep first-occurrence order."""
    terms = tokenize(text)
    counts = Counter(terms)
    total = len(terms) or 1
    return {term: count / total for term, count in counts.items()}


def smoothed_idf(n_docs: int, doc_freq: int) -> float:
    """ln((N + 1) / (1 + df)) + 1, always positive."""
    return math.log((n_docs + 1) / (1 + doc_freq)) + 1


def build_corpus_index(documents: Sequence[Document]) -> CorpusIndex:
    """Build term frequencies for every document and IDF for every corpus term."""
    docs = [
        DocumentTerms(document_id=d.id, term_frequency=term_frequencies(weighted_text(d)))
        for d in documents
    ]

    doc_freq: Counter[str] = Counter()
    for doc in docs:
        doc_freq.update(doc.term_frequency.keys())

    idf = {term: smoothed_idf(len(docs), df) for term, df in doc_freq.items()}
    logger.debug("Built corpus index: %s docs, %s terms", len(docs), len(idf))
    return CorpusIndex(docs=docs, idf=idf)
