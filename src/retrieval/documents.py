"""
Knowledge-base document records and JSONL loading.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError

ROOT = Path(__file__).resolve().parents[2]
KNOWLEDGE_PATH = ROOT / "data" / "knowledge_notes.jsonl"

logger = logging.getLogger(__name__)


class DocumentLoadError(ValueError):
    """Raised when a knowledge-base record cannot be parsed or validated."""


@dataclasses.dataclass(frozen=True)
class Document:
    """A single policy or procedure note eligible for retrieval."""

    id: str
    title: str
    category: str
    keywords: Tuple[str, ...]
    content: str
    updated_at: str = ""
    related_document_ids: Tuple[str, ...] = ()


class DocumentRecord(BaseModel):
    """Validated shape of one knowledge-base record as supplied by the admin store."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    category: str = ""
    keywords: List[str] = Field(default_factory=list)
    content: str = ""
    updated_at: str = Field(
        default="",
        validation_alias=AliasChoices("updated_at", "updatedAt"),
    )
    related_document_ids: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices(
            "related_document_ids", "relatedDocumentIds", "relatedNotes"
        ),
    )

    def to_document(self) -> Document:
        return Document(
            id=self.id,
            title=self.title,
            category=self.category,
            keywords=tuple(self.keywords),
            content=self.content,
            updated_at=self.updated_at,
            related_document_ids=tuple(self.related_document_ids),
        )


def load_documents(path: Path | None = None) -> List[Document]:
    """Load knowledge notes from a JSONL file, one record per line."""
    if path is None:
        path = KNOWLEDGE_PATH
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"knowledge base not found at {path}")

    documents: List[Document] = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                record = DocumentRecord.model_validate(json.loads(line))
            except (json.JSONDecodeError, ValidationError) as e:
                logger.warning("Invalid knowledge record at %s:%s: %s", path, lineno, e)
                raise DocumentLoadError(f"{path}:{lineno}: {e}") from e
            documents.append(record.to_document())
    logger.debug("Loaded %s knowledge notes from %s", len(documents), path)
    return documents


def documents_by_id(documents: Iterable[Document]) -> Dict[str, Document]:
    """Map document id to document; the first of any duplicate ids wins."""
    by_id: Dict[str, Document] = {}
    for d in documents:
        by_id.setdefault(d.id, d)
    return by_id
