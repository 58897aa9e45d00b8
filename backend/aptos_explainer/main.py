"""FastAPI entry point for the Aptos transaction explainer service."""

from __future__ import annotations

import logging
import os
from typing import Dict, List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aptos_explainer.api import api_router
from aptos_explainer.client.node_client import close_session


LOGGER = logging.getLogger(__name__)

logging.basicConfig(level=logging.INFO)

app = FastAPI(
	title="Aptos Transaction Explainer",
	version="1.0.0",
	description="Fetches Aptos transactions by hash and explains them in plain language.",
)

default_cors: List[str] = [
	"http://localhost:3000",
	"http://127.0.0.1:3000",
]

env_origins = os.getenv("CORS_ALLOW_ORIGINS")
if env_origins:
	allowed_origins = [origin.strip() for origin in env_origins.split(",") if origin.strip()]
	if not allowed_origins:
		allowed_origins = default_cors
else:
	allowed_origins = default_cors

app.add_middleware(
	CORSMiddleware,
	allow_origins=allowed_origins,
	allow_credentials=False,
	allow_methods=["*"],
	allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
def healthcheck() -> Dict[str, str]:
	"""Basic readiness probe."""
	return {"status": "ok"}


@app.on_event("shutdown")
def shutdown_event() -> None:
	"""Release the shared fullnode session when the service stops."""
	close_session()
