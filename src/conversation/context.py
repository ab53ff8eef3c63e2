"""
Conversation turns and context folding for short follow-up questions.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence

logger = logging.getLogger(__name__)

Role = Literal["user", "assistant", "system"]

SHORT_MESSAGE_WORDS = 5
_WHITESPACE = re.compile(r"\s+")


@dataclass
class ConversationTurn:
    """Single chat message."""

    role: Role
    content: str
    timestamp: str = ""


def _word_count(message: str) -> int:
    # Leading or trailing whitespace counts as an empty word.
    return len(_WHITESPACE.split(message))


def build_contextual_query(
    current_message: str,
    history: Sequence[ConversationTurn],
    max_turns: int = 3,
) -> str:
    """
    Prefix a short message with the last few user turns.

    Messages longer than five words, or with no prior user turns, are
    returned unchanged. Assistant and system turns are never folded in.
    """
    if not history:
        return current_message
    if _word_count(current_message) > SHORT_MESSAGE_WORDS:
        return current_message

    recent = [t.content for t in history if t.role == "user"][-max_turns:]
    if not recent:
        return current_message

    folded = " ".join(recent + [current_message])
    logger.debug("Folded %s user turns into follow-up %r", len(recent), current_message)
    return folded


class ConversationMemory:
    """In-memory list of turns for one chat session; oldest dropped past max_turns."""

    def __init__(self, max_turns: int = 20):
        self._turns: List[ConversationTurn] = []
        self.max_turns = max_turns

    def add_turn(self, role: Role, content: str, timestamp: Optional[str] = None) -> None:
        if timestamp is None:
            timestamp = dt.datetime.now(dt.timezone.utc).isoformat()
        self._turns.append(ConversationTurn(role=role, content=content, timestamp=timestamp))
        if len(self._turns) > self.max_turns:
            self._turns = self._turns[-self.max_turns :]

    def get_history(self, last_n: int | None = None) -> List[ConversationTurn]:
        if last_n is None:
            return list(self._turns)
        if last_n <= 0:
            return []
        return self._turns[-last_n:]

    def clear(self) -> None:
        self._turns.clear()

    def __len__(self) -> int:
        return len(self._turns)
