from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SummaryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str
    last_updated: datetime = Field(alias="lastUpdated")
