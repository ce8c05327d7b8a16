"""Offline heuristic summary used when the inference server is unavailable.

Everything here is a pure function of the entries passed in: no I/O, no clock,
no randomness. Ties (most frequent mood, theme ranking) resolve to whichever
value was seen first while scanning the entries in storage order.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, List, Optional, Sequence, Tuple

from ...utils import format_display_date
from .formatter import count_moods, recent_window
from .state import JournalEntry

THEME_LIMIT = 5
MIN_THEME_LENGTH = 5
STOP_WORDS = frozenset({"about", "after", "again", "their", "there", "these", "those", "would", "could"})
RECOMMENDATION = "Recommendation: Continue journaling regularly to track your emotional patterns and growth."

_TOKEN_SPLIT = re.compile(r"\W+", re.ASCII)


def most_frequent_mood(counts: Dict[str, int]) -> Optional[Tuple[str, int]]:
    best: Optional[Tuple[str, int]] = None
    for mood, count in counts.items():
        if best is None or count > best[1]:
            best = (mood, count)
    return best


def extract_themes(descriptions: Sequence[str], limit: int = THEME_LIMIT) -> List[str]:
    text = " ".join(descriptions).lower()
    words = [
        word
        for word in _TOKEN_SPLIT.split(text)
        if len(word) >= MIN_THEME_LENGTH and word not in STOP_WORDS
    ]
    # Counter keeps insertion order and most_common() sorts stably
    return [word for word, _ in Counter(words).most_common(limit)]


def build_fallback_summary(entries: Sequence[JournalEntry], *, timezone_name: str = "UTC") -> str:
    if not entries:
        raise ValueError("a fallback summary needs at least one journal entry")

    total = len(entries)
    recent = recent_window(entries)
    mode = most_frequent_mood(count_moods(entries))
    last_date = format_display_date(recent[-1].created_at, timezone_name)

    lines: List[str] = [f"Based on your {total} journal entries:", ""]
    if mode is not None:
        mood, count = mode
        lines.append(f'- Your most frequent mood is "{mood}" ({count} entries)')
    lines.append(f"- You've journaled {total} times")
    lines.append(f"- Your most recent entry was on {last_date}")
    lines.extend(["", "Recent themes in your entries:"])

    themes = extract_themes([entry.description for entry in recent])
    if themes:
        lines.append(f"- Common themes: {', '.join(themes)}")

    lines.extend(["", RECOMMENDATION])
    return "\n".join(lines)


__all__ = [
    "RECOMMENDATION",
    "STOP_WORDS",
    "build_fallback_summary",
    "extract_themes",
    "most_frequent_mood",
]
