"""Chain healing: rebuild an account's derived transaction fields.

Any insert, edit or delete inside an account's history can change the previous
balance of every later statement, so the whole chain is replayed from the
account's initial capital instead of being patched.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from barakainvest.domain.entities import Account, HealResult, Transaction
from barakainvest.domain.profit import ZERO, classify

logger = logging.getLogger(__name__)


def find_account(accounts: Iterable[Account], account_id: str) -> Optional[Account]:
    """Return the account with ``account_id`` or None."""
    for account in accounts:
        if account.id == account_id:
            return account
    return None


def sort_chain(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Order a chain by date. Equal dates keep their relative input order."""
    return sorted(transactions, key=lambda txn: txn.date)


def replay_chain(
    chain: Iterable[Transaction], opening_balance
) -> list[Transaction]:
    """Recompute derived fields of an already ordered chain."""
    running_balance = opening_balance
    healed = []
    for txn in chain:
        stats = classify(
            running_balance, txn.current_balance, txn.user_deposit, txn.withdrawal
        )
        healed.append(
            replace(
                txn,
                previous_balance=running_balance,
                calculated_profit=stats.profit_amount,
                profit_percentage=stats.profit_percentage,
                type=stats.type,
            )
        )
        running_balance = txn.current_balance
    return healed


def heal_transaction_chain(
    transactions: Iterable[Transaction],
    account_id: str,
    accounts: Iterable[Account],
) -> HealResult:
    """Heal one account's chain.

    Args:
        transactions: All transactions, every account mixed
        account_id: Account whose chain is rebuilt
        accounts: All accounts

    Returns:
        HealResult with the other accounts' transactions first (untouched, in
        input order) followed by the healed chain, and the accounts with only
        the target's ``current_balance`` updated.

        A missing account returns the inputs unchanged. Callers that need to
        tell the two cases apart must check membership before calling.
    """
    transactions = tuple(transactions)
    accounts = tuple(accounts)

    account = find_account(accounts, account_id)
    if account is None:
        logger.debug("Skipping heal: account %s not found", account_id)
        return HealResult(transactions=transactions, accounts=accounts)

    others = [txn for txn in transactions if txn.account_id != account_id]
    chain = sort_chain(txn for txn in transactions if txn.account_id == account_id)

    opening_balance = account.initial_capital if account.initial_capital is not None else ZERO
    healed_chain = replay_chain(chain, opening_balance)

    final_balance = healed_chain[-1].current_balance if healed_chain else opening_balance
    updated_accounts = tuple(
        replace(acc, current_balance=final_balance) if acc.id == account_id else acc
        for acc in accounts
    )

    logger.debug(
        "Healed account %s: %d transactions, balance %s",
        account_id,
        len(healed_chain),
        final_balance,
    )
    return HealResult(
        transactions=tuple(others) + tuple(healed_chain),
        accounts=updated_accounts,
    )
