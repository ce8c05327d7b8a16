from __future__ import annotations

from textwrap import dedent
from typing import Optional

_FRAMING = (
    "You are a helpful AI assistant analyzing personal journal entries. "
    "Your task is to provide insightful analysis of these journal entries."
)

_DEFAULT_ANALYSIS = dedent(
    """
    Please analyze these journal entries and provide insights about:
    1. Emotional patterns and mood trends
    2. Common themes or topics
    3. Any notable observations
    4. Gentle suggestions for reflection or improvement

    Keep your response conversational, empathetic, and focused on the journal content. Format your response in a clear, readable way.
    """
).strip()


def _question_block(query: str) -> str:
    return (
        f'The user is asking: "{query}"\n\n'
        "Please provide a thoughtful response to this question based on the journal data. "
        "Be empathetic, insightful, and helpful."
    )


def build_insight_prompt(digest_text: str, query: Optional[str] = None) -> str:
    """Combine the digest with either the user's question or the default analysis brief."""

    instructions = _question_block(query) if query else _DEFAULT_ANALYSIS
    return (
        f"{_FRAMING}\n\n"
        "Here's a summary of the journal data:\n"
        f"{digest_text}\n\n"
        f"{instructions}"
    )


__all__ = ["build_insight_prompt"]
