"""
Configuration for knowledge-note retrieval.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from .documents import KNOWLEDGE_PATH, ROOT

_env_file = ROOT / ".env"
if _env_file.exists():
    load_dotenv(_env_file)


@dataclass
class RetrievalConfig:
    """Configuration for retrieval and suggestion limits."""

    top_n: int = 3
    fuzzy_max_distance: int = 2
    context_max_turns: int = 3
    suggest_limit: int = 8
    followup_limit: int = 3
    knowledge_path: Path = field(default=KNOWLEDGE_PATH)

    @classmethod
    def from_env(cls) -> "RetrievalConfig":
        """Build a config from RETRIEVAL_* environment variables."""
        return cls(
            top_n=int(os.getenv("RETRIEVAL_TOP_N", "3")),
            fuzzy_max_distance=int(os.getenv("RETRIEVAL_FUZZY_MAX_DISTANCE", "2")),
            context_max_turns=int(os.getenv("RETRIEVAL_CONTEXT_MAX_TURNS", "3")),
            suggest_limit=int(os.getenv("RETRIEVAL_SUGGEST_LIMIT", "8")),
            followup_limit=int(os.getenv("RETRIEVAL_FOLLOWUP_LIMIT", "3")),
            knowledge_path=Path(os.getenv("KNOWLEDGE_NOTES_PATH", str(KNOWLEDGE_PATH))),
        )
