"""
Ranked retrieval of knowledge notes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from .confidence import Confidence, confidence_for_scores, result_confidence
from .config import RetrievalConfig
from .documents import Document, load_documents
from .scoring import FUZZY_MAX_DIST, parse_query, score_note
from .tfidf import build_corpus_index

logger = logging.getLogger(__name__)


@dataclass
class ScoredDocument:
    """A retrieved note with its relevance score and confidence band."""

    document: Document
    score: float
    confidence: Confidence = Confidence.LOW


class Retriever(Protocol):
    """Protocol for retrieval implementations."""

    documents: List[Document]
    config: RetrievalConfig

    def search(self, query: str, top_k: int | None = None) -> List[ScoredDocument]:
        """
        Search for notes matching the query.

        Args:
            query: Staff question
            top_k: Number of results to return

        Returns:
            List of ScoredDocument objects sorted by score (descending)
        """
        ...


def retrieve_notes(
    query: str,
    documents: Sequence[Document],
    top_n: int = 3,
    *,
    max_dist: int = FUZZY_MAX_DIST,
) -> List[ScoredDocument]:
    """
    Score every document against the query and return the top_n matches.

    The corpus index is built from ``documents`` on every call. Documents
    scoring 0 are dropped; ties keep input order.
    """
    corpus = build_corpus_index(documents)
    parsed = parse_query(query)

    scored: List[ScoredDocument] = []
    for doc in documents:
        s = score_note(parsed, doc, corpus, max_dist=max_dist)
        if s > 0:
            scored.append(ScoredDocument(document=doc, score=s))

    # Stable sort: ties keep input order.
    scored.sort(key=lambda r: r.score, reverse=True)
    scored = scored[: max(top_n, 0)]

    overall = confidence_for_scores([r.score for r in scored])
    for rank, r in enumerate(scored):
        r.confidence = result_confidence(r.score, rank, overall)

    logger.debug(
        "Retrieved %s of %s notes for %r (confidence=%s)",
        len(scored),
        len(documents),
        query,
        overall.value,
    )
    return scored


@dataclass
class KnowledgeRetriever:
    """Retriever over an in-memory note list; the index is rebuilt on each search."""

    documents: List[Document]
    config: RetrievalConfig = field(default_factory=RetrievalConfig)

    @classmethod
    def from_config(cls, config: RetrievalConfig | None = None) -> "KnowledgeRetriever":
        """Load notes from ``config.knowledge_path``."""
        if config is None:
            config = RetrievalConfig.from_env()
        return cls(documents=load_documents(config.knowledge_path), config=config)

    def search(self, query: str, top_k: int | None = None) -> List[ScoredDocument]:
        if top_k is None:
            top_k = self.config.top_n
        return retrieve_notes(
            query,
            self.documents,
            top_k,
            max_dist=self.config.fuzzy_max_distance,
        )
