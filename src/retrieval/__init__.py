"""
Knowledge-note retrieval module.

Provides lexical retrieval over a small curated knowledge base:
- Query normalization, abbreviation and synonym expansion
- Levenshtein fuzzy matching
- TF-IDF corpus index rebuilt per call
- Heuristic boost scoring and confidence banding
- Intent labelling for analytics
"""

from .confidence import Confidence, get_confidence
from .config import RetrievalConfig
from .documents import Document, DocumentLoadError, DocumentRecord, documents_by_id, load_documents
from .fuzzy import fuzzy_match, levenshtein
from .intent import detect_intent
from .normalizer import bigrams, rewrite_query, tokenize
from .retriever import KnowledgeRetriever, Retriever, ScoredDocument, retrieve_notes
from .scoring import ParsedQuery, parse_query, score_note
from .synonyms import expand_with_synonyms
from .tfidf import CorpusIndex, DocumentTerms, build_corpus_index

__all__ = [
    "Confidence",
    "get_confidence",
    "RetrievalConfig",
    "Document",
    "DocumentLoadError",
    "DocumentRecord",
    "documents_by_id",
    "load_documents",
    "fuzzy_match",
    "levenshtein",
    "detect_intent",
    "bigrams",
    "rewrite_query",
    "tokenize",
    "KnowledgeRetriever",
    "Retriever",
    "ScoredDocument",
    "retrieve_notes",
    "ParsedQuery",
    "parse_query",
    "score_note",
    "expand_with_synonyms",
    "CorpusIndex",
    "DocumentTerms",
    "build_corpus_index",
]
