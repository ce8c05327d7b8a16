from __future__ import annotations

from typing import List

from pydantic import BaseModel


class HealthResponse(BaseModel):
    ok: bool
    service: str
    version: str
    database: str


class RootResponse(BaseModel):
    status: str
    service: str
    version: str
    inference_model: str
    endpoints: List[str]
