"""Insight summary pipeline: digest, prompt, inference, heuristic fallback."""

from functools import lru_cache

from ...config import get_settings
from ...ollama_client import OllamaClient
from .fallback import build_fallback_summary
from .formatter import build_digest, render_digest
from .prompt_builder import build_insight_prompt
from .service import NO_ENTRIES_MESSAGE, SummaryService
from .state import JournalDigest, JournalEntry, MoodShare, SummaryResult, SummarySource


@lru_cache(maxsize=1)
def get_summary_service() -> SummaryService:
    from ..journals import get_journal_store

    settings = get_settings()
    return SummaryService(
        get_journal_store(),
        OllamaClient(settings.ollama_config),
        timezone_name=settings.display_timezone,
    )


__all__ = [
    "NO_ENTRIES_MESSAGE",
    "JournalDigest",
    "JournalEntry",
    "MoodShare",
    "SummaryResult",
    "SummarySource",
    "SummaryService",
    "build_digest",
    "build_fallback_summary",
    "build_insight_prompt",
    "get_summary_service",
    "render_digest",
]
