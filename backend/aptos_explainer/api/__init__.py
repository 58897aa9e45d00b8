"""API route definitions for the Aptos transaction explainer."""

from fastapi import APIRouter

from .transactions import router as transactions_router


api_router = APIRouter()
api_router.include_router(transactions_router)


__all__ = ["api_router"]
