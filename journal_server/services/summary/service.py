from __future__ import annotations

from typing import List, Optional, Protocol

from ...logging_config import logger
from ...ollama_client import InferenceResult, InferenceSuccess
from ...utils import utc_now
from .fallback import build_fallback_summary
from .formatter import build_digest, render_digest
from .prompt_builder import build_insight_prompt
from .state import JournalEntry, SummaryResult, SummarySource

NO_ENTRIES_MESSAGE = "You haven't written any journal entries yet. Start journaling to see insights!"


class JournalSource(Protocol):
    def fetch_entries(self, user_id: int) -> List[JournalEntry]:
        ...


class InferenceBackend(Protocol):
    async def generate(self, prompt: str) -> InferenceResult:
        ...


class SummaryService:
    """Fetch a user's journal, ask the model for insights, fall back to heuristics."""

    def __init__(
        self,
        journals: JournalSource,
        inference: InferenceBackend,
        *,
        timezone_name: str = "UTC",
    ):
        self._journals = journals
        self._inference = inference
        self._timezone_name = timezone_name

    async def generate(self, user_id: int, query: Optional[str] = None) -> SummaryResult:
        entries = self._journals.fetch_entries(user_id)
        if not entries:
            return self._result(NO_ENTRIES_MESSAGE, SummarySource.FALLBACK)

        digest = build_digest(entries)
        prompt = build_insight_prompt(
            render_digest(digest, timezone_name=self._timezone_name),
            query,
        )

        logger.info(
            "insight summary started",
            extra={"user_id": user_id, "entries": len(entries), "has_query": bool((query or "").strip())},
        )

        outcome = await self._inference.generate(prompt)
        if isinstance(outcome, InferenceSuccess):
            return self._result(outcome.text, SummarySource.MODEL)

        logger.info(
            "insight summary using fallback",
            extra={"user_id": user_id, "reason": outcome.reason},
        )
        fallback = build_fallback_summary(entries, timezone_name=self._timezone_name)
        return self._result(fallback, SummarySource.FALLBACK)

    @staticmethod
    def _result(text: str, source: SummarySource) -> SummaryResult:
        return SummaryResult(text=text, generated_at=utc_now(), source=source)


__all__ = ["NO_ENTRIES_MESSAGE", "SummaryService"]
