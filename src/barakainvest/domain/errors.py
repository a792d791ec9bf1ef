"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as ambiguous references."""


def account_not_found(account_id: str) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def transaction_not_found(transaction_id: str) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def ambiguous_account(reference: str, count: int) -> str:
    """Return message when an account reference matches several accounts."""
    return f"Account reference '{reference}' matches {count} accounts; use the account ID"


def negative_amount(field_name: str, value: Decimal) -> str:
    """Return message for a negative deposit, withdrawal or capital."""
    return f"{field_name} cannot be negative (got {value})"


def empty_import(path: str) -> str:
    """Return message for an interchange file without any usable rows."""
    return (
        f"Could not find any valid investment data in '{path}'. "
        "Ensure the file has the ---ACCOUNTS--- and ---TRANSACTIONS--- sections."
    )
