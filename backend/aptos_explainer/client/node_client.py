"""Utility helpers for managing the shared Aptos fullnode HTTP session."""

import logging
import os
from typing import Optional

import requests
from dotenv import load_dotenv

load_dotenv()

LOGGER = logging.getLogger(__name__)

DEFAULT_NODE_URL = "https://fullnode.mainnet.aptoslabs.com/v1"
DEFAULT_TIMEOUT = 30.0

_SESSION: Optional[requests.Session] = None


def get_node_url() -> str:
    """Return the fullnode REST base URL without a trailing slash."""
    return (os.getenv("APTOS_NODE_URL") or DEFAULT_NODE_URL).rstrip("/")


def get_timeout() -> float:
    raw = os.getenv("APTOS_REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return max(1.0, float(raw))
    except ValueError:
        LOGGER.warning("Ignoring invalid APTOS_REQUEST_TIMEOUT=%r", raw)
        return DEFAULT_TIMEOUT


def _build_session() -> requests.Session:
    """Create a session carrying the headers every fullnode request needs."""
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})

    api_key = os.getenv("APTOS_API_KEY")
    if api_key:
        session.headers["Authorization"] = f"Bearer {api_key}"

    LOGGER.info("Initializing Aptos node session for %s", get_node_url())
    return session


def get_session() -> requests.Session:
    """Return the shared session, creating it if needed."""
    global _SESSION

    if _SESSION is None:
        _SESSION = _build_session()

    return _SESSION


def close_session() -> None:
    """Close the shared session if it has been initialized."""
    global _SESSION

    if _SESSION is not None:
        LOGGER.info("Closing Aptos node session")
        _SESSION.close()
        _SESSION = None


__all__ = ["get_session", "close_session", "get_node_url", "get_timeout"]
