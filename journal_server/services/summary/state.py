from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class JournalEntry:
    """Snapshot of a stored journal entry as seen by the summary pipeline."""

    title: str
    mood: str
    description: str
    created_at: datetime


@dataclass(frozen=True)
class MoodShare:
    mood: str
    count: int
    percentage: int


@dataclass(frozen=True)
class JournalDigest:
    """Compact view of a user's journal used to build the inference prompt."""

    total_count: int
    recent_entries: Tuple[JournalEntry, ...] = field(default_factory=tuple)
    mood_distribution: Tuple[MoodShare, ...] = field(default_factory=tuple)


class SummarySource(str, Enum):
    MODEL = "model"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class SummaryResult:
    text: str
    generated_at: datetime
    source: SummarySource


__all__ = [
    "JournalDigest",
    "JournalEntry",
    "MoodShare",
    "SummaryResult",
    "SummarySource",
]
