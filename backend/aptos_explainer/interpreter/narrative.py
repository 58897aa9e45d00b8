"""Plain-language summary and educational notes for an interpreted transaction."""

from __future__ import annotations

from typing import Dict, List

from aptos_explainer.models import BalanceChange, FunctionCall, TokenTransfer, TransactionType
from aptos_explainer.utils.formatting import calculate_usd_amount

NATIVE_COIN_MODULE = "aptos_coin"

TYPE_ADVISORIES: Dict[TransactionType, str] = {
    TransactionType.SWAP: (
        "💡 Token swaps on Aptos are executed through decentralized exchanges like Liquidswap or "
        "PancakeSwap. These platforms use automated market makers (AMMs) to provide liquidity and "
        "determine exchange rates with Move's parallel execution for faster processing."
    ),
    TransactionType.TRANSFER: (
        "💡 Aptos transfers are extremely fast and efficient, leveraging Move's resource-oriented "
        "programming model. The parallel execution engine allows multiple transfers to be processed "
        "simultaneously, reducing congestion and fees."
    ),
    TransactionType.STAKE: (
        "💡 Staking on Aptos helps secure the network while earning rewards. The Move language "
        "ensures type safety and prevents common staking vulnerabilities. Validators process "
        "transactions and maintain the blockchain."
    ),
    TransactionType.NFT: (
        "💡 NFTs on Aptos use the Aptos Token standard, which is more flexible and efficient than "
        "traditional NFT standards. Move's resource model ensures NFTs are treated as first-class "
        "citizens with strong ownership guarantees."
    ),
    TransactionType.DEFI: (
        "💡 Aptos DeFi protocols like Aries Markets and Liquidswap leverage Move's safety features "
        "and parallel execution. The resource-oriented model prevents common DeFi exploits like "
        "reentrancy attacks."
    ),
}

PORTFOLIO_INCREASED = (
    "💰 Your portfolio value increased from this transaction. This could be from trading profits, "
    "staking rewards, or receiving tokens."
)
PORTFOLIO_DECREASED = (
    "📉 Your portfolio value decreased from this transaction. This is normal for trades, fees, or "
    "when sending tokens to others."
)
NATIVE_COIN_ADVISORY = (
    "⚡ Aptos uses the Move language for smart contracts, which provides better security through "
    "formal verification and prevents common blockchain vulnerabilities like reentrancy attacks."
)
TRANSFER_ADVISORY = (
    "🔄 Token transfers on Aptos use the Aptos Coin standard, which is built on Move's resource "
    "model. This ensures type safety and prevents common token-related bugs."
)
CLOSING_ADVISORY = (
    "🚀 Aptos's Move language and parallel execution engine enable high throughput (up to 100,000 "
    "TPS) while maintaining security. The resource-oriented programming model ensures assets are "
    "handled safely."
)


def generate_summary(
    transaction_type: TransactionType,
    function_calls: List[FunctionCall],
    token_transfers: List[TokenTransfer],
) -> str:
    if transaction_type is TransactionType.SWAP:
        return f"Token swap transaction involving {len(token_transfers)} token transfers"
    if transaction_type is TransactionType.TRANSFER:
        return f"Token transfer transaction moving {len(token_transfers)} different tokens"
    if transaction_type is TransactionType.STAKE:
        return "Staking transaction delegating tokens to validators"
    if transaction_type is TransactionType.NFT:
        return "NFT transaction involving token minting or transfer"
    if transaction_type is TransactionType.DEFI:
        return "DeFi transaction involving liquidity or lending operations"
    return f"Aptos transaction with {len(function_calls)} function calls"


def portfolio_delta_usd(balance_changes: List[BalanceChange]) -> float:
    """Sum of signed USD values across all balance changes."""
    total = 0.0
    for change in balance_changes:
        value = calculate_usd_amount(change.token_type, abs(change.change))
        total += value if change.change_type == "increase" else -value
    return total


def generate_educational_content(
    transaction_type: TransactionType,
    function_calls: List[FunctionCall],
    token_transfers: List[TokenTransfer],
    balance_changes: List[BalanceChange],
) -> List[str]:
    """Build the advisory notes in their fixed display order."""
    content: List[str] = []

    advisory = TYPE_ADVISORIES.get(transaction_type)
    if advisory:
        content.append(advisory)

    if balance_changes:
        total_value = portfolio_delta_usd(balance_changes)
        if total_value > 0:
            content.append(PORTFOLIO_INCREASED)
        elif total_value < 0:
            content.append(PORTFOLIO_DECREASED)

    if any(NATIVE_COIN_MODULE in call.module for call in function_calls):
        content.append(NATIVE_COIN_ADVISORY)

    if token_transfers:
        content.append(TRANSFER_ADVISORY)

    content.append(CLOSING_ADVISORY)
    return content


__all__ = ["generate_summary", "generate_educational_content", "portfolio_delta_usd"]
