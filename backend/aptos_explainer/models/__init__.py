"""Pydantic data models exposed by the Aptos transaction explainer."""

from .explanation import (
	AccountChange,
	BalanceChange,
	FunctionCall,
	TokenInfo,
	TokenTransfer,
	TransactionExplanation,
	TransactionType,
)
from .responses import RecentTransactionsResponse

__all__ = [
	"AccountChange",
	"BalanceChange",
	"FunctionCall",
	"TokenInfo",
	"TokenTransfer",
	"TransactionExplanation",
	"TransactionType",
	"RecentTransactionsResponse",
]
