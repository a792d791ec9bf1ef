"""Utilities for resolving account and transaction references to IDs."""

from barakainvest.domain.account import AccountService
from barakainvest.domain.errors import (
    ConflictError,
    NotFoundError,
    ambiguous_account,
    transaction_not_found,
)
from barakainvest.domain.transaction import TransactionService

MIN_PREFIX_LENGTH = 4


def resolve_account(account_service: AccountService, account: str) -> str:
    """Resolve an account reference to an account ID.

    The reference may be a full account ID, a unique ID prefix of at least
    four characters, or a unique bank name (case-insensitive).

    Args:
        account_service: AccountService instance
        account: Account reference

    Returns:
        Account ID

    Raises:
        NotFoundError: If nothing matches
        ConflictError: If the reference matches more than one account
    """
    reference = account.strip()
    if account_service.get_account(reference) is not None:
        return reference

    accounts = account_service.list_accounts()
    if len(reference) >= MIN_PREFIX_LENGTH:
        by_prefix = [acc for acc in accounts if acc.id.startswith(reference)]
        if len(by_prefix) == 1:
            return by_prefix[0].id
        if len(by_prefix) > 1:
            raise ConflictError(ambiguous_account(reference, len(by_prefix)))

    by_bank = account_service.find_accounts_by_bank(reference)
    if len(by_bank) == 1:
        return by_bank[0].id
    if len(by_bank) > 1:
        raise ConflictError(ambiguous_account(reference, len(by_bank)))

    raise NotFoundError(f"Account '{account}' not found")


def resolve_transaction(transaction_service: TransactionService, transaction: str) -> str:
    """Resolve a full transaction ID or a unique ID prefix to a transaction ID.

    Raises:
        NotFoundError: If nothing matches
        ConflictError: If the prefix matches more than one transaction
    """
    reference = transaction.strip()
    if transaction_service.get_transaction(reference) is not None:
        return reference

    matches = []
    if len(reference) >= MIN_PREFIX_LENGTH:
        matches = [
            txn.id for txn in transaction_service.list_transactions() if txn.id.startswith(reference)
        ]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise ConflictError(
            f"Transaction reference '{reference}' matches {len(matches)} transactions; use the full ID"
        )
    raise NotFoundError(transaction_not_found(reference))
