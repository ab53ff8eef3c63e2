"""
Typeahead suggestions: note titles, recent searches, canned questions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from src.retrieval.documents import Document

SuggestionType = Literal["note", "recent", "intent"]

MIN_PREFIX_LENGTH = 2

COMMON_QUERIES = (
    "What is the late return policy?",
    "How much is the deposit?",
    "Cross-border rental rules",
    "Fuel policy and charges",
    "Insurance packages available",
    "Customer verification checklist",
    "Damage inspection procedure",
    "Cancellation and refund policy",
    "Child seat and accessories",
    "Loyalty program benefits",
    "Mileage limits and overage",
    "Cleaning fee policy",
    "No-show policy",
    "Accident response procedure",
    "Fleet availability check",
    "Pricing and discounts",
    "One-way rental options",
    "Age requirements",
    "Payment methods accepted",
    "Upsell insurance script",
)


@dataclass
class Suggestion:
    type: SuggestionType
    text: str
    id: Optional[str] = None


def get_auto_suggestions(
    prefix: str,
    documents: Sequence[Document],
    recent_searches: Sequence[str] = (),
    limit: int = 8,
) -> List[Suggestion]:
    """Case-insensitive substring matches: note titles, then recent searches, then canned queries."""
    p = prefix.lower().strip()
    if len(p) < MIN_PREFIX_LENGTH:
        return []

    results: List[Suggestion] = []
    for doc in documents:
        if p in doc.title.lower():
            results.append(Suggestion(type="note", text=doc.title, id=doc.id))

    for s in recent_searches:
        if p in s.lower():
            results.append(Suggestion(type="recent", text=s))

    for cq in COMMON_QUERIES:
        if p in cq.lower() and not any(r.text == cq for r in results):
            results.append(Suggestion(type="intent", text=cq))

    return results[:limit]
