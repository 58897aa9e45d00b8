"""Utilities for retrieving raw Aptos transactions from a fullnode REST API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import requests

from aptos_explainer.client.node_client import get_node_url, get_session, get_timeout
from aptos_explainer.interpreter import parse_aptos_transaction
from aptos_explainer.models import TransactionExplanation

LOGGER = logging.getLogger(__name__)


def _get_json(path: str, params: Dict[str, Any] | None = None) -> Any:
    """Issue a GET against the fullnode and return the decoded JSON body."""
    url = f"{get_node_url()}{path}"

    try:
        response = get_session().get(url, params=params, timeout=get_timeout())
    except requests.RequestException as exc:
        LOGGER.exception("Network error calling Aptos node: %s", exc)
        raise RuntimeError("Failed to reach the Aptos node") from exc

    if response.status_code in (400, 404):
        detail = _error_message(response)
        LOGGER.info("Aptos node rejected %s (%d): %s", path, response.status_code, detail)
        raise ValueError(detail)

    try:
        response.raise_for_status()
        return response.json()
    except requests.RequestException as exc:
        LOGGER.error("Aptos node returned HTTP %s for %s", response.status_code, path)
        raise RuntimeError(f"Aptos node error: HTTP {response.status_code}") from exc
    except ValueError as exc:
        LOGGER.error("Aptos node returned a non-JSON body for %s", path)
        raise RuntimeError("Unexpected Aptos node response format") from exc


def _error_message(response) -> str:
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return "Transaction not found or invalid hash"


def fetch_transaction_details(tx_hash: str) -> Dict[str, Any]:
    """Fetch the raw transaction record for ``tx_hash``."""
    LOGGER.info("Requesting transaction %s from Aptos node", tx_hash)
    payload = _get_json(f"/transactions/by_hash/{tx_hash}")

    if not isinstance(payload, dict):
        LOGGER.error("Unexpected transaction payload for %s: %r", tx_hash, payload)
        raise RuntimeError("Unexpected Aptos node response format")

    return payload


def fetch_recent_transactions(limit: int = 10) -> List[str]:
    """Return the hashes of the latest ``limit`` committed transactions."""
    payload = _get_json("/transactions", params={"limit": limit})

    if not isinstance(payload, list):
        LOGGER.error("Unexpected recent transactions payload: %r", payload)
        raise RuntimeError("Unexpected Aptos node response format")

    hashes = [item["hash"] for item in payload if isinstance(item, dict) and item.get("hash")]
    LOGGER.info("Fetched %d recent transaction hashes", len(hashes))
    return hashes


def explain_transaction(tx_hash: str) -> TransactionExplanation:
    """Fetch a transaction and interpret it in one pass."""
    raw = fetch_transaction_details(tx_hash)
    explanation = parse_aptos_transaction(raw)
    LOGGER.info(
        "Explained transaction %s as %s (%d transfers, %d balance changes)",
        tx_hash,
        explanation.transaction_type.value,
        len(explanation.token_transfers),
        len(explanation.balance_changes),
    )
    return explanation


__all__ = ["fetch_transaction_details", "fetch_recent_transactions", "explain_transaction"]
