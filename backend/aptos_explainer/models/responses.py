"""Schemas wrapping the transaction API responses."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class RecentTransactionsResponse(BaseModel):
    """Hashes of the latest committed transactions."""

    hashes: List[str]
    count: int = Field(default=0, ge=0)


__all__ = ["RecentTransactionsResponse"]
