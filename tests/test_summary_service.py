"""Tests for the insight summary orchestration."""

import asyncio
from datetime import timezone
from typing import List
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from journal_server.ollama_client import InferenceFailure, InferenceSuccess, OllamaClient, OllamaConfig
from journal_server.services.summary import (
    NO_ENTRIES_MESSAGE,
    JournalEntry,
    SummarySource,
    SummaryService,
    build_fallback_summary,
)

from .conftest import garden_entries


class StaticJournals:
    def __init__(self, entries: List[JournalEntry]):
        self.entries = entries
        self.calls: List[int] = []

    def fetch_entries(self, user_id: int) -> List[JournalEntry]:
        self.calls.append(user_id)
        return list(self.entries)


def _inference(result) -> MagicMock:
    backend = MagicMock()
    backend.generate = AsyncMock(return_value=result)
    return backend


def test_no_entries_short_circuits_pipeline():
    journals = StaticJournals([])
    inference = _inference(InferenceSuccess(text="unused"))
    service = SummaryService(journals, inference)

    with patch("journal_server.services.summary.service.build_digest") as digest, patch(
        "journal_server.services.summary.service.build_insight_prompt"
    ) as prompt:
        result = asyncio.run(service.generate(7))

    assert result.text == "You haven't written any journal entries yet. Start journaling to see insights!"
    assert result.text == NO_ENTRIES_MESSAGE
    assert result.source is SummarySource.FALLBACK
    assert journals.calls == [7]
    digest.assert_not_called()
    prompt.assert_not_called()
    inference.generate.assert_not_called()


def test_model_completion_is_returned_verbatim():
    inference = _inference(InferenceSuccess(text="X"))
    service = SummaryService(StaticJournals(garden_entries()), inference)

    with patch("journal_server.services.summary.service.build_fallback_summary") as fallback:
        result = asyncio.run(service.generate(1))

    assert result.text == "X"
    assert result.source is SummarySource.MODEL
    assert result.generated_at.tzinfo is not None
    fallback.assert_not_called()
    inference.generate.assert_awaited_once()


def test_prompt_carries_digest_and_query():
    inference = _inference(InferenceSuccess(text="answer"))
    service = SummaryService(StaticJournals(garden_entries()), inference)

    asyncio.run(service.generate(1, "How was my week?"))

    prompt = inference.generate.await_args.args[0]
    assert "Total journal entries: 4" in prompt
    assert "- happy: 3 entries (75%)" in prompt
    assert 'The user is asking: "How was my week?"' in prompt


def test_inference_failure_falls_back_to_heuristic_summary():
    entries = garden_entries()
    service = SummaryService(StaticJournals(entries), _inference(InferenceFailure(reason="down")))

    result = asyncio.run(service.generate(1))

    assert result.source is SummarySource.FALLBACK
    assert result.text == build_fallback_summary(entries)
    assert 'Your most frequent mood is "happy" (3 entries)' in result.text
    assert "Based on your 4 journal entries:" in result.text


def test_fallback_is_idempotent_across_calls():
    service = SummaryService(StaticJournals(garden_entries()), _inference(InferenceFailure(reason="down")))

    first = asyncio.run(service.generate(1))
    second = asyncio.run(service.generate(1))

    assert first.text == second.text
    assert first.generated_at <= second.generated_at


def test_unreachable_server_end_to_end_uses_fallback():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = OllamaClient(OllamaConfig(), transport=httpx.MockTransport(refuse))
    service = SummaryService(StaticJournals(garden_entries()), client)

    result = asyncio.run(service.generate(1))

    assert result.source is SummarySource.FALLBACK
    assert result.text.startswith("Based on your 4 journal entries:")
    assert result.generated_at.tzinfo == timezone.utc
