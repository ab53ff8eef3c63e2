"""
Knowledge assistant: context folding, retrieval, follow-ups and intent for one chat message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from src.retrieval.confidence import Confidence, get_confidence
from src.retrieval.config import RetrievalConfig
from src.retrieval.intent import detect_intent
from src.retrieval.retriever import Retriever, ScoredDocument

from .context import ConversationMemory, ConversationTurn, build_contextual_query
from .followups import generate_followups
from .suggest import Suggestion, get_auto_suggestions

logger = logging.getLogger(__name__)


@dataclass
class AssistantReply:
    """Ranked notes and suggestions for the presentation layer to render."""

    query: str
    contextual_query: str
    results: List[ScoredDocument]
    confidence: Confidence
    followups: List[str] = field(default_factory=list)
    intent: str = "general"


class KnowledgeAssistant:
    """Answers staff questions from the knowledge base; one retrieval per message."""

    def __init__(
        self,
        retriever: Retriever,
        config: Optional[RetrievalConfig] = None,
        memory: Optional[ConversationMemory] = None,
    ):
        self.retriever = retriever
        self.config = config or retriever.config
        self.memory = memory

    def answer(
        self,
        message: str,
        history: Optional[Sequence[ConversationTurn]] = None,
    ) -> AssistantReply:
        """Fold recent user turns into short follow-ups, retrieve, and suggest next questions."""
        if history is None:
            history = self.memory.get_history() if self.memory is not None else []

        contextual = build_contextual_query(
            message, history, max_turns=self.config.context_max_turns
        )
        results = self.retriever.search(contextual, self.config.top_n)
        confidence = get_confidence(results)
        followups = generate_followups(
            message,
            results,
            self.retriever.documents,
            limit=self.config.followup_limit,
        )
        intent = detect_intent(message)

        if not results:
            logger.info("No knowledge notes matched %r (intent=%s)", message, intent)

        if self.memory is not None:
            self.memory.add_turn("user", message)

        return AssistantReply(
            query=message,
            contextual_query=contextual,
            results=results,
            confidence=confidence,
            followups=followups,
            intent=intent,
        )

    def suggest(self, prefix: str, recent_searches: Sequence[str] = ()) -> List[Suggestion]:
        """Typeahead suggestions for a partially typed question."""
        return get_auto_suggestions(
            prefix,
            self.retriever.documents,
            recent_searches,
            limit=self.config.suggest_limit,
        )
