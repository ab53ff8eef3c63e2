"""
Relevance scoring: TF-IDF plus keyword, bigram, title, content and category boosts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .documents import Document
from .fuzzy import fuzzy_match
from .normalizer import bigrams, rewrite_query, tokenize
from .synonyms import expand_with_synonyms
from .tfidf import CorpusIndex, DocumentTerms

TFIDF_SCALE = 10.0
FUZZY_TFIDF_SCALE = 5.0
FUZZY_MAX_DIST = 2
MIN_FUZZY_TOKEN_LENGTH = 4

KEYWORD_EXACT_BOOST = 10.0
KEYWORD_PARTIAL_BOOST = 4.0
KEYWORD_FUZZY_BOOST = 2.0
BIGRAM_BOOST = 8.0
TITLE_EXACT_BOOST = 6.0
TITLE_FUZZY_BOOST = 3.0
CONTENT_FULL_HITS = 3
CONTENT_EXTRA_HIT_BOOST = 0.5
CATEGORY_BOOST = 3.0


@dataclass
class ParsedQuery:
    """Derived forms of a raw query used by every scoring signal."""

    raw: str
    rewritten: str
    tokens: List[str]
    expanded: List[str]
    bigrams: List[str]


def parse_query(query: str) -> ParsedQuery:
    rewritten = rewrite_query(query)
    tokens = tokenize(rewritten)
    return ParsedQuery(
        raw=query,
        rewritten=rewritten,
        tokens=tokens,
        expanded=expand_with_synonyms(tokens),
        bigrams=bigrams(tokens),
    )


def _tfidf_score(q: ParsedQuery, doc: DocumentTerms, corpus: CorpusIndex, max_dist: int) -> float:
    score = 0.0
    tf_map = doc.term_frequency
    for term in q.expanded:
        tf = tf_map.get(term, 0.0)
        if tf:
            score += tf * corpus.idf.get(term, 1.0) * TFIDF_SCALE
            continue
        if len(term) < MIN_FUZZY_TOKEN_LENGTH:
            continue
        # First fuzzy hit in term order wins; one credit per missing term.
        for doc_term, doc_tf in tf_map.items():
            if fuzzy_match(term, doc_term, max_dist):
                score += doc_tf * corpus.idf.get(doc_term, 1.0) * FUZZY_TFIDF_SCALE
                break
    return score


def _keyword_score(q: ParsedQuery, document: Document, max_dist: int) -> float:
    score = 0.0
    for kw in document.keywords:
        kw_lower = kw.lower()
        if not kw_lower:
            continue
        if kw_lower in q.rewritten:
            score += KEYWORD_EXACT_BOOST
            continue
        for token in q.expanded:
            if token in kw_lower or kw_lower in token:
                score += KEYWORD_PARTIAL_BOOST
            elif len(token) >= MIN_FUZZY_TOKEN_LENGTH and fuzzy_match(token, kw_lower, max_dist):
                score += KEYWORD_FUZZY_BOOST
    return score


def _bigram_score(q: ParsedQuery, document: Document) -> float:
    score = 0.0
    for bg in q.bigrams:
        for kw in document.keywords:
            kw_lower = kw.lower()
            if kw_lower and (bg in kw_lower or kw_lower in bg):
                score += BIGRAM_BOOST
    return score


def _title_score(q: ParsedQuery, document: Document, max_dist: int) -> float:
    score = 0.0
    title_tokens = tokenize(document.title)
    for token in q.expanded:
        for tt in title_tokens:
            if tt == token:
                score += TITLE_EXACT_BOOST
            elif len(token) >= MIN_FUZZY_TOKEN_LENGTH and fuzzy_match(token, tt, max_dist):
                score += TITLE_FUZZY_BOOST
    return score


def _content_score(q: ParsedQuery, document: Document) -> float:
    content_lower = document.content.lower()
    hits = sum(1 for token in q.expanded if token in content_lower)
    return min(hits, CONTENT_FULL_HITS) + max(0, hits - CONTENT_FULL_HITS) * CONTENT_EXTRA_HIT_BOOST


def _category_score(q: ParsedQuery, document: Document) -> float:
    category = document.category.lower()
    if category and category in q.rewritten:
        return CATEGORY_BOOST
    return 0.0


def score_note(
    query: str | ParsedQuery,
    document: Document,
    corpus: CorpusIndex | None = None,
    max_dist: int = FUZZY_MAX_DIST,
) -> float:
    """
    Score one document against a query.

    Args:
        query: Raw query text, or an already parsed query.
        document: Candidate knowledge note.
        corpus: Index built from the full candidate set; without it the
            TF-IDF signal is skipped and only the heuristic boosts apply.
        max_dist: Edit-distance tolerance for every fuzzy signal.

    Returns:
        Non-negative score; 0.0 means no signal matched.
    """
    q = query if isinstance(query, ParsedQuery) else parse_query(query)
    score = 0.0

    if corpus is not None:
        doc_terms = corpus.terms_for(document.id)
        if doc_terms is not None:
            score += _tfidf_score(q, doc_terms, corpus, max_dist)

    score += _keyword_score(q, document, max_dist)
    score += _bigram_score(q, document)
    score += _title_score(q, document, max_dist)
    score += _content_score(q, document)
    score += _category_score(q, document)
    return score
