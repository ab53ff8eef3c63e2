"""
Conversation layer: context folding, follow-up suggestions, typeahead, and the knowledge assistant.
"""

from .assistant import AssistantReply, KnowledgeAssistant
from .context import ConversationMemory, ConversationTurn, build_contextual_query
from .followups import generate_followups
from .suggest import Suggestion, get_auto_suggestions

__all__ = [
    "AssistantReply",
    "KnowledgeAssistant",
    "ConversationMemory",
    "ConversationTurn",
    "build_contextual_query",
    "generate_followups",
    "Suggestion",
    "get_auto_suggestions",
]
