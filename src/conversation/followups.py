"""
Follow-up question suggestions from matched notes.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from src.retrieval.documents import Document, documents_by_id
from src.retrieval.retriever import ScoredDocument

MAX_FOLLOWUPS = 3
QUERY_PREFIX_CHARS = 10

CATEGORY_FOLLOWUPS: Dict[str, Tuple[str, ...]] = {
    "billing": (
        "What discounts can I offer?",
        "How do I process a refund?",
        "What is the cancellation policy?",
    ),
    "operations": (
        "How do I handle a damage report?",
        "What is the accident procedure?",
        "How does the cleaning fee work?",
    ),
    "sales": (
        "How do I upsell insurance?",
        "What are the loyalty program tiers?",
        "How do I check fleet availability?",
    ),
    "safety": (
        "What is the damage inspection procedure?",
        "How do I contact emergency services?",
    ),
    "compliance": (
        "What documents do I need to verify?",
        "What is the minimum age requirement?",
    ),
}


def generate_followups(
    query: str,
    matched: Sequence[ScoredDocument],
    all_documents: Sequence[Document],
    limit: int = MAX_FOLLOWUPS,
) -> List[str]:
    """
    Suggest up to ``limit`` follow-up questions.

    Related notes not already matched come first ("What about ...?"), then
    canned questions for each matched category. Canned questions containing
    the first ten characters of the query are treated as repeats and dropped.
    """
    matched_ids = {r.document.id for r in matched}
    by_id = documents_by_id(all_documents)
    candidates: List[str] = []

    for r in matched:
        for rel_id in r.document.related_document_ids:
            if rel_id in matched_ids:
                continue
            rel = by_id.get(rel_id)
            if rel is not None:
                candidates.append(f"What about {rel.title.lower()}?")

    prefix = query.lower()[:QUERY_PREFIX_CHARS]
    categories = dict.fromkeys(r.document.category for r in matched)
    for category in categories:
        for suggestion in CATEGORY_FOLLOWUPS.get(category, ()):
            if prefix not in suggestion.lower():
                candidates.append(suggestion)

    return list(dict.fromkeys(candidates))[:limit]
