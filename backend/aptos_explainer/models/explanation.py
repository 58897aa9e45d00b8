"""Pydantic models describing an interpreted Aptos transaction."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TransactionType(str, Enum):
    """Transaction category assigned by the interpreter."""

    SWAP = "SWAP"
    TRANSFER = "TRANSFER"
    STAKE = "STAKE"
    NFT = "NFT"
    DEFI = "DEFI"
    UNKNOWN = "unknown"

    # Reserved: no classification rule produces these yet.
    UNSTAKE = "unstake"
    CREATE_ACCOUNT = "create_account"
    CLOSE_ACCOUNT = "close_account"
    NFT_MINT = "nft_mint"
    NFT_TRANSFER = "nft_transfer"
    PROGRAM_DEPLOY = "program_deploy"
    BURN = "burn"
    LIQUIDITY = "LIQUIDITY"
    GOVERNANCE = "GOVERNANCE"


class ExplanationModel(BaseModel):
    """Immutable base with camelCase JSON aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class TokenInfo(ExplanationModel):
    name: str
    symbol: str
    decimals: int = Field(8, ge=0)


class AccountChange(ExplanationModel):
    """A state write recorded against an account."""

    account: str
    change_type: Literal["created", "modified", "deleted"] = "modified"
    balance: float = 0
    sequence_number: Optional[int] = None
    description: str


class FunctionCall(ExplanationModel):
    """The entry function invoked by the transaction payload."""

    module: str = Field(..., description="Module identifier in address::module form")
    function: str
    arguments: List[Any] = Field(default_factory=list)
    type_arguments: List[str] = Field(default_factory=list)
    description: str
    protocol: Optional[str] = None


class TokenTransfer(ExplanationModel):
    """A coin or fungible-asset movement, scaled to whole token units."""

    from_address: str = Field("unknown", alias="from")
    to_address: str = Field("unknown", alias="to")
    amount: float
    token_type: str
    token_name: Optional[str] = None
    token_symbol: Optional[str] = None
    decimals: int = 8
    description: str


class BalanceChange(ExplanationModel):
    """Net effect of a transaction on one account."""

    account: str
    pre_balance: float
    post_balance: float
    change: float
    change_type: Literal["increase", "decrease"]
    usd_value: str
    token_type: str


class TransactionExplanation(ExplanationModel):
    """Human-readable interpretation of a single Aptos transaction."""

    hash: Optional[str] = None
    success: bool = False
    summary: str
    timestamp: Optional[int] = Field(None, description="Milliseconds since epoch")
    gas_used: int = 0
    gas_unit_price: int = 0
    gas_fee: float = Field(0.0, description="Fee in APT")
    version: int = 0
    block_height: Optional[int] = None
    sender: Optional[str] = None
    account_changes: List[AccountChange] = Field(default_factory=list)
    function_calls: List[FunctionCall] = Field(default_factory=list)
    token_transfers: List[TokenTransfer] = Field(default_factory=list)
    transaction_type: TransactionType = TransactionType.UNKNOWN
    error: Optional[str] = None
    balance_changes: List[BalanceChange] = Field(default_factory=list)
    educational_content: List[str] = Field(default_factory=list)


__all__ = [
    "TransactionType",
    "TokenInfo",
    "AccountChange",
    "FunctionCall",
    "TokenTransfer",
    "BalanceChange",
    "TransactionExplanation",
]
