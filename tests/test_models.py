"""Tests for request body parsing."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from journal_server.models import JournalPayload


class TestJournalPayload:
    def test_numbers_become_text_without_touching_input(self):
        body = {"title": "t", "mood": 7, "description": "d", "userId": 3}

        payload = JournalPayload.model_validate(body)

        assert payload.mood == "7"
        assert payload.user_id == "3"
        assert body == {"title": "t", "mood": 7, "description": "d", "userId": 3}

    @pytest.mark.parametrize("value", [["a"], {"a": 1}])
    def test_structured_values_are_not_stringified(self, value):
        with pytest.raises(PydanticValidationError):
            JournalPayload.model_validate({"title": value, "mood": "m", "description": "d", "userId": 1})

    def test_blank_user_id_is_incomplete(self):
        payload = JournalPayload.model_validate({"title": "t", "mood": "m", "description": "d", "userId": " "})

        assert not payload.is_complete()
