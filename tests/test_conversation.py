"""
Tests for context folding, follow-up suggestions, typeahead, and the knowledge assistant.
"""

from __future__ import annotations

import pytest

from src.conversation import (
    AssistantReply,
    ConversationMemory,
    ConversationTurn,
    KnowledgeAssistant,
    Suggestion,
    build_contextual_query,
    generate_followups,
    get_auto_suggestions,
)
from src.retrieval import (
    Confidence,
    Document,
    KnowledgeRetriever,
    RetrievalConfig,
    ScoredDocument,
    documents_by_id,
    load_documents,
)


@pytest.fixture(scope="module")
def seed_notes() -> list[Document]:
    return load_documents()


@pytest.fixture
def assistant(seed_notes: list[Document]) -> KnowledgeAssistant:
    return KnowledgeAssistant(KnowledgeRetriever(documents=seed_notes, config=RetrievalConfig()))


def _matched(notes: list[Document], *ids: str) -> list[ScoredDocument]:
    by_id = documents_by_id(notes)
    return [ScoredDocument(document=by_id[i], score=20.0) for i in ids]


def _turn(role: str, content: str) -> ConversationTurn:
    return ConversationTurn(role=role, content=content, timestamp="2025-02-01T10:00:00Z")


# --- Context folding ---


def test_contextual_query_empty_history_unchanged():
    assert build_contextual_query("and fuel?", []) == "and fuel?"


def test_contextual_query_long_message_unchanged():
    history = [_turn("user", "What is the deposit?")]
    msg = "what happens if the customer is late"
    assert build_contextual_query(msg, history) == msg


def test_contextual_query_folds_user_turns_oldest_first():
    history = [
        _turn("user", "What is the fuel policy?"),
        _turn("assistant", "Full-to-Full."),
        _turn("user", "deposit rules"),
    ]
    assert (
        build_contextual_query("and fuel?", history)
        == "What is the fuel policy? deposit rules and fuel?"
    )


def test_contextual_query_respects_max_turns():
    history = [_turn("user", "first"), _turn("user", "second"), _turn("user", "third")]
    assert build_contextual_query("and then?", history, max_turns=1) == "third and then?"


def test_contextual_query_ignores_assistant_turns():
    history = [_turn("assistant", "Hello! How can I help?"), _turn("system", "welcome")]
    assert build_contextual_query("fuel?", history) == "fuel?"


def test_memory_add_and_trim():
    mem = ConversationMemory(max_turns=2)
    assert mem.get_history() == []
    mem.add_turn("user", "Q1")
    mem.add_turn("assistant", "A1")
    mem.add_turn("user", "Q2")
    hist = mem.get_history()
    assert len(mem) == 2
    assert [t.content for t in hist] == ["A1", "Q2"]
    assert hist[1].timestamp
    assert [t.content for t in mem.get_history(last_n=1)] == ["Q2"]
    assert mem.get_history(last_n=0) == []


def test_memory_clear():
    mem = ConversationMemory()
    mem.add_turn("user", "Q", timestamp="t0")
    mem.clear()
    assert mem.get_history() == []


# --- Follow-ups ---


def test_followups_from_related_notes(seed_notes: list[Document]):
    followups = generate_followups("fuel policy", _matched(seed_notes, "fuel-policy"), seed_notes)
    assert followups == [
        "What about mileage / kilometre allowance?",
        "What about cleaning & condition fee schedule?",
        "What about late return policy?",
    ]


def test_followups_skip_already_matched_and_unknown_related():
    a = Document(
        id="a", title="A", category="none", keywords=(), content="",
        related_document_ids=("b", "ghost"),
    )
    b = Document(id="b", title="B", category="none", keywords=(), content="")
    matched = [ScoredDocument(document=a, score=10.0), ScoredDocument(document=b, score=9.0)]
    assert generate_followups("anything", matched, [a, b]) == []


def test_followups_from_category_filters_query_prefix():
    doc = Document(id="price", title="Pricing", category="billing", keywords=(), content="")
    followups = generate_followups(
        "What discounts are there", [ScoredDocument(document=doc, score=15.0)], [doc]
    )
    assert followups == ["How do I process a refund?", "What is the cancellation policy?"]


def test_followups_deduplicated_and_capped(seed_notes: list[Document]):
    matched = _matched(seed_notes, "deposit-rules", "pricing-exception", "cancellation-policy")
    followups = generate_followups("zzz", matched, seed_notes)
    assert len(followups) == 3
    assert len(set(followups)) == 3


def test_followups_empty_query_drops_category_suggestions():
    doc = Document(id="price", title="Pricing", category="billing", keywords=(), content="")
    assert generate_followups("", [ScoredDocument(document=doc, score=15.0)], [doc]) == []


def test_followups_no_matches():
    assert generate_followups("fuel", [], []) == []


# --- Auto-suggest ---


def test_auto_suggest_short_prefix(seed_notes: list[Document]):
    assert get_auto_suggestions("f", seed_notes) == []
    assert get_auto_suggestions(" f ", seed_notes) == []
    assert get_auto_suggestions("", seed_notes) == []


def test_auto_suggest_priority_order(seed_notes: list[Document]):
    results = get_auto_suggestions("FUEL", seed_notes, ["fuel charge dispute"])
    assert results == [
        Suggestion(type="note", text="Fuel Policy", id="fuel-policy"),
        Suggestion(type="recent", text="fuel charge dispute"),
        Suggestion(type="intent", text="Fuel policy and charges"),
    ]


def test_auto_suggest_skips_intent_already_listed(seed_notes: list[Document]):
    results = get_auto_suggestions("fuel", seed_notes, ["Fuel policy and charges"])
    assert [r.type for r in results] == ["note", "recent"]


def test_auto_suggest_limit(seed_notes: list[Document]):
    results = get_auto_suggestions("po", seed_notes, limit=3)
    assert len(results) == 3
    assert all(r.type == "note" and r.id for r in results)


# --- Knowledge assistant ---


def test_assistant_answer(assistant: KnowledgeAssistant):
    reply = assistant.answer("fuel policy refueling")
    assert isinstance(reply, AssistantReply)
    assert reply.results[0].document.id == "fuel-policy"
    assert reply.contextual_query == "fuel policy refueling"
    assert reply.intent == "fuel"
    assert reply.confidence in (Confidence.HIGH, Confidence.MEDIUM, Confidence.LOW)
    assert 0 < len(reply.followups) <= 3


def test_assistant_folds_history(assistant: KnowledgeAssistant):
    history = [_turn("user", "What is the deposit for a luxury car?")]
    reply = assistant.answer("and debit cards?", history)
    assert reply.contextual_query == "What is the deposit for a luxury car? and debit cards?"
    assert "deposit-rules" in [r.document.id for r in reply.results]


def test_assistant_no_match(assistant: KnowledgeAssistant):
    reply = assistant.answer("qqqqzzzzxxxx wwwwyyyyjjjj")
    assert reply.results == []
    assert reply.confidence == Confidence.LOW
    assert reply.followups == []
    assert reply.intent == "general"


def test_assistant_uses_memory(seed_notes: list[Document]):
    mem = ConversationMemory()
    assistant = KnowledgeAssistant(KnowledgeRetriever(documents=seed_notes), memory=mem)
    assistant.answer("What is the fuel policy?")
    reply = assistant.answer("and diesel?")
    assert reply.contextual_query == "What is the fuel policy? and diesel?"
    assert len(mem) == 2


def test_assistant_suggest(seed_notes: list[Document]):
    config = RetrievalConfig(suggest_limit=2)
    assistant = KnowledgeAssistant(KnowledgeRetriever(documents=seed_notes, config=config))
    assert len(assistant.suggest("policy")) == 2
    assert assistant.suggest("p") == []


class _FixedRetriever:
    """Returns preset results and records the queries it was asked."""

    def __init__(self, documents: list[Document], results: list[ScoredDocument]):
        self.documents = documents
        self.config = RetrievalConfig(top_n=1)
        self.results = results
        self.queries: list[tuple[str, int | None]] = []

    def search(self, query: str, top_k: int | None = None) -> list[ScoredDocument]:
        self.queries.append((query, top_k))
        return self.results[:top_k]


def test_assistant_accepts_any_retriever(seed_notes: list[Document]):
    retriever = _FixedRetriever(seed_notes, _matched(seed_notes, "fuel-policy", "deposit-rules"))
    reply = KnowledgeAssistant(retriever).answer("what is the fuel policy?")
    assert retriever.queries == [("what is the fuel policy?", 1)]
    assert [r.document.id for r in reply.results] == ["fuel-policy"]
    assert reply.confidence == Confidence.MEDIUM
