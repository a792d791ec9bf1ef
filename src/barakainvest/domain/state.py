"""Portfolio application state and its reducer.

The whole portfolio is one immutable ``PortfolioState``. Every user action is
a small action object, and ``reduce_state`` turns ``(state, action)`` into the
next state. Chain healing happens inside the reduction; persistence does not.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Union

from barakainvest.domain.entities import Account, Transaction
from barakainvest.domain.healing import heal_transaction_chain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PortfolioState:
    """All accounts and transactions of the current session."""

    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()

    def account_ids(self) -> set[str]:
        return {acc.id for acc in self.accounts}

    def get_account(self, account_id: str):
        for acc in self.accounts:
            if acc.id == account_id:
                return acc
        return None

    def get_transaction(self, transaction_id: str):
        for txn in self.transactions:
            if txn.id == transaction_id:
                return txn
        return None


@dataclass(frozen=True)
class AddAccount:
    account: Account


@dataclass(frozen=True)
class DeleteAccount:
    account_id: str


@dataclass(frozen=True)
class SaveTransaction:
    """Insert a transaction, or replace the one with the same id."""

    transaction: Transaction


@dataclass(frozen=True)
class DeleteTransaction:
    transaction_id: str


@dataclass(frozen=True)
class ImportData:
    accounts: tuple[Account, ...]
    transactions: tuple[Transaction, ...]


@dataclass(frozen=True)
class ResetData:
    pass


Action = Union[
    AddAccount, DeleteAccount, SaveTransaction, DeleteTransaction, ImportData, ResetData
]


def heal_accounts(state: PortfolioState, account_ids: Iterable[str]) -> PortfolioState:
    """Heal each listed account's chain in turn."""
    transactions, accounts = state.transactions, state.accounts
    for account_id in dict.fromkeys(account_ids):
        result = heal_transaction_chain(transactions, account_id, accounts)
        transactions, accounts = result.transactions, result.accounts
    return PortfolioState(accounts=accounts, transactions=transactions)


def _add_account(state: PortfolioState, action: AddAccount) -> PortfolioState:
    if action.account.id in state.account_ids():
        logger.warning("Account %s already exists; ignoring", action.account.id)
        return state
    account = replace(action.account, current_balance=action.account.initial_capital)
    return replace(state, accounts=state.accounts + (account,))


def _delete_account(state: PortfolioState, action: DeleteAccount) -> PortfolioState:
    return PortfolioState(
        accounts=tuple(acc for acc in state.accounts if acc.id != action.account_id),
        transactions=tuple(
            txn for txn in state.transactions if txn.account_id != action.account_id
        ),
    )


def _save_transaction(state: PortfolioState, action: SaveTransaction) -> PortfolioState:
    txn = action.transaction
    if txn.account_id not in state.account_ids():
        logger.warning("Ignoring transaction %s: unknown account %s", txn.id, txn.account_id)
        return state
    existing = state.get_transaction(txn.id)
    if existing is None:
        transactions = state.transactions + (txn,)
        affected = [txn.account_id]
    else:
        transactions = tuple(txn if t.id == txn.id else t for t in state.transactions)
        affected = [txn.account_id, existing.account_id]
    return heal_accounts(replace(state, transactions=transactions), affected)


def _delete_transaction(state: PortfolioState, action: DeleteTransaction) -> PortfolioState:
    existing = state.get_transaction(action.transaction_id)
    if existing is None:
        return state
    transactions = tuple(t for t in state.transactions if t.id != action.transaction_id)
    return heal_accounts(replace(state, transactions=transactions), [existing.account_id])


def _import_data(state: PortfolioState, action: ImportData) -> PortfolioState:
    if not action.accounts:
        return state

    known_accounts = state.account_ids()
    new_accounts = []
    for acc in action.accounts:
        if acc.id and acc.id not in known_accounts:
            new_accounts.append(acc)
            known_accounts.add(acc.id)

    known_transactions = {t.id for t in state.transactions}
    new_transactions = []
    for txn in action.transactions:
        if not txn.id or txn.id in known_transactions:
            continue
        if txn.account_id not in known_accounts:
            logger.debug("Dropping imported transaction %s: unknown account", txn.id)
            continue
        new_transactions.append(txn)
        known_transactions.add(txn.id)

    merged = PortfolioState(
        accounts=state.accounts + tuple(new_accounts),
        transactions=state.transactions + tuple(new_transactions),
    )
    affected = [acc.id for acc in new_accounts] + [t.account_id for t in new_transactions]
    return heal_accounts(merged, affected)


_REDUCERS = {
    AddAccount: _add_account,
    DeleteAccount: _delete_account,
    SaveTransaction: _save_transaction,
    DeleteTransaction: _delete_transaction,
    ImportData: _import_data,
    ResetData: lambda state, action: PortfolioState(),
}


def reduce_state(state: PortfolioState, action: Action) -> PortfolioState:
    """Return the state that results from applying ``action`` to ``state``."""
    try:
        reducer = _REDUCERS[type(action)]
    except KeyError:
        raise TypeError(f"Unsupported action: {action!r}") from None
    return reducer(state, action)
