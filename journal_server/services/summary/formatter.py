"""Turn raw journal entries into the digest text embedded in inference prompts."""

from __future__ import annotations

import math
from typing import Dict, List, Sequence, Tuple

from ...utils import format_display_date
from .state import JournalDigest, JournalEntry, MoodShare

RECENT_WINDOW = 5
CONTENT_PREVIEW_LIMIT = 200
ELLIPSIS = "..."


def recent_window(entries: Sequence[JournalEntry]) -> Tuple[JournalEntry, ...]:
    """Last entries in storage order, oldest of the slice first."""

    return tuple(entries[-RECENT_WINDOW:])


def count_moods(entries: Sequence[JournalEntry]) -> Dict[str, int]:
    """Case-insensitive mood counts, keyed in first-occurrence order."""

    counts: Dict[str, int] = {}
    for entry in entries:
        mood = entry.mood.lower()
        counts[mood] = counts.get(mood, 0) + 1
    return counts


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_digest(entries: Sequence[JournalEntry]) -> JournalDigest:
    if not entries:
        raise ValueError("a digest needs at least one journal entry")

    total = len(entries)
    counts = count_moods(entries)
    # sorted() is stable, so equal counts keep first-occurrence order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    distribution = tuple(
        MoodShare(mood=mood, count=count, percentage=_round_half_up(count / total * 100))
        for mood, count in ranked
    )
    return JournalDigest(
        total_count=total,
        recent_entries=recent_window(entries),
        mood_distribution=distribution,
    )


def preview_content(description: str) -> str:
    if len(description) > CONTENT_PREVIEW_LIMIT:
        return description[:CONTENT_PREVIEW_LIMIT] + ELLIPSIS
    return description


def render_digest(digest: JournalDigest, *, timezone_name: str = "UTC") -> str:
    recent = digest.recent_entries
    lines: List[str] = [
        f"Total journal entries: {digest.total_count}",
        "",
        f"Recent journal entries (most recent {len(recent)}):",
    ]
    for position, entry in enumerate(recent, start=1):
        lines.extend(
            [
                "",
                f"Entry {position} ({format_display_date(entry.created_at, timezone_name)}):",
                f"Title: {entry.title}",
                f"Mood: {entry.mood}",
                f"Content: {preview_content(entry.description)}",
            ]
        )

    lines.extend(["", "Mood distribution:"])
    for share in digest.mood_distribution:
        lines.append(f"- {share.mood}: {share.count} entries ({share.percentage}%)")
    return "\n".join(lines) + "\n"


__all__ = [
    "CONTENT_PREVIEW_LIMIT",
    "RECENT_WINDOW",
    "build_digest",
    "count_moods",
    "preview_content",
    "recent_window",
    "render_digest",
]
