"""Endpoints that fetch and explain Aptos transactions."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException, Query
from fastapi.concurrency import run_in_threadpool

from aptos_explainer.ingest.transaction_fetcher import explain_transaction, fetch_recent_transactions
from aptos_explainer.interpreter import parse_aptos_transaction
from aptos_explainer.models import RecentTransactionsResponse, TransactionExplanation
from aptos_explainer.utils.hashes import normalize_tx_hash

LOGGER = logging.getLogger(__name__)

NOT_FOUND_DETAIL = "Transaction not found or invalid hash"

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("/recent", response_model=RecentTransactionsResponse)
async def list_recent_transactions(limit: int = Query(default=10, ge=1, le=100)) -> RecentTransactionsResponse:
    """Return hashes of the most recent transactions on the network."""
    try:
        hashes = await run_in_threadpool(fetch_recent_transactions, limit)
    except (RuntimeError, ValueError) as exc:
        LOGGER.error("Failed to fetch recent transactions: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return RecentTransactionsResponse(hashes=hashes, count=len(hashes))


@router.post("/explain", response_model=TransactionExplanation)
def explain_raw_transaction(raw: Dict[str, Any] = Body(...)) -> TransactionExplanation:
    """Interpret a raw transaction record supplied by the caller."""
    return parse_aptos_transaction(raw)


@router.get("/{tx_hash}", response_model=TransactionExplanation)
async def get_transaction(tx_hash: str) -> TransactionExplanation:
    """Fetch a transaction by hash and return its explanation."""
    try:
        normalized_hash = normalize_tx_hash(tx_hash)
    except ValueError as exc:
        LOGGER.warning("Validation error for transaction hash %s: %s", tx_hash, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    try:
        explanation = await run_in_threadpool(explain_transaction, normalized_hash)
    except ValueError as exc:
        LOGGER.info("Transaction %s not found: %s", normalized_hash, exc)
        raise HTTPException(status_code=404, detail=NOT_FOUND_DETAIL) from exc
    except RuntimeError as exc:
        LOGGER.error("Failed to explain transaction %s: %s", normalized_hash, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return explanation


__all__ = ["router"]
