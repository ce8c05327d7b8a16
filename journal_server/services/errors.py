"""Errors that service code surfaces to the HTTP layer."""

from __future__ import annotations


class ValidationError(ValueError):
    """Required input is missing or malformed; maps to HTTP 400."""


class StoreError(RuntimeError):
    """The database could not complete a read or write; maps to HTTP 500."""


__all__ = ["StoreError", "ValidationError"]
