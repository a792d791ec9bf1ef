"""CLI helpers for account and transaction resolution."""

from __future__ import annotations

import click
from barakainvest.cli.error_handling import handle_domain_error
from barakainvest.domain.account import AccountService
from barakainvest.domain.transaction import TransactionService
from barakainvest.utils.reference_resolver import resolve_account, resolve_transaction


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, account: str
) -> str:
    """Resolve an account reference, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return resolve_account(account_service, account)
    except ValueError as exc:
        handle_domain_error(ctx, exc)


def resolve_transaction_or_exit(
    ctx: click.Context, transaction_service: TransactionService, transaction: str
) -> str:
    """Resolve a transaction reference, or exit with a CLI error."""
    try:
        return resolve_transaction(transaction_service, transaction)
    except ValueError as exc:
        handle_domain_error(ctx, exc)
