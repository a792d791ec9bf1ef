"""Tests for the portfolio state reducer."""

from datetime import date
from decimal import Decimal

import pytest

from barakainvest.domain.entities import TransactionType
from barakainvest.domain.state import (
    AddAccount,
    DeleteAccount,
    DeleteTransaction,
    ImportData,
    PortfolioState,
    ResetData,
    SaveTransaction,
    reduce_state,
)

from conftest import make_account, make_transaction


@pytest.fixture
def state():
    """State with one account and two healed entries."""
    initial = reduce_state(PortfolioState(), AddAccount(make_account("a", "1000")))
    initial = reduce_state(
        initial, SaveTransaction(make_transaction("t1", "a", date(2024, 1, 31), "1100"))
    )
    return reduce_state(
        initial, SaveTransaction(make_transaction("t2", "a", date(2024, 2, 29), "1150"))
    )


def test_add_account_sets_balance_to_capital():
    account = make_account("a", "1000", current_balance=Decimal("1"))
    new_state = reduce_state(PortfolioState(), AddAccount(account))
    assert new_state.accounts[0].current_balance == Decimal("1000")


def test_add_duplicate_account_is_ignored(state):
    duplicate = make_account("a", "5", bank_name="Other")
    assert reduce_state(state, AddAccount(duplicate)) is state


def test_save_transaction_heals(state):
    assert state.get_transaction("t2").previous_balance == Decimal("1100")
    assert state.get_transaction("t2").calculated_profit == Decimal("50")
    assert state.get_account("a").current_balance == Decimal("1150")


def test_save_backdated_transaction_reheals_later_entries(state):
    backdated = make_transaction("t0", "a", date(2024, 1, 15), "1020")
    new_state = reduce_state(state, SaveTransaction(backdated))

    assert new_state.get_transaction("t0").calculated_profit == Decimal("20")
    assert new_state.get_transaction("t1").previous_balance == Decimal("1020")
    assert new_state.get_transaction("t1").calculated_profit == Decimal("80")


def test_save_existing_id_replaces(state):
    edited = make_transaction("t1", "a", date(2024, 1, 31), "1050")
    new_state = reduce_state(state, SaveTransaction(edited))

    assert len(new_state.transactions) == 2
    assert new_state.get_transaction("t1").current_balance == Decimal("1050")
    assert new_state.get_transaction("t2").calculated_profit == Decimal("100")


def test_moving_transaction_heals_both_accounts(state):
    with_b = reduce_state(state, AddAccount(make_account("b", "500")))
    moved = make_transaction("t2", "b", date(2024, 2, 29), "550")
    new_state = reduce_state(with_b, SaveTransaction(moved))

    assert new_state.get_account("a").current_balance == Decimal("1100")
    assert new_state.get_account("b").current_balance == Decimal("550")
    assert new_state.get_transaction("t2").previous_balance == Decimal("500")


def test_delete_transaction_reheals(state):
    new_state = reduce_state(state, DeleteTransaction("t1"))

    (remaining,) = new_state.transactions
    assert remaining.previous_balance == Decimal("1000")
    assert remaining.calculated_profit == Decimal("150")
    assert new_state.get_account("a").current_balance == Decimal("1150")


def test_delete_last_transaction_restores_capital(state):
    new_state = reduce_state(state, DeleteTransaction("t2"))
    new_state = reduce_state(new_state, DeleteTransaction("t1"))
    assert new_state.get_account("a").current_balance == Decimal("1000")


def test_delete_unknown_transaction_is_noop(state):
    assert reduce_state(state, DeleteTransaction("nope")) is state


def test_delete_account_cascades(state):
    with_b = reduce_state(state, AddAccount(make_account("b", "500")))
    with_b = reduce_state(
        with_b, SaveTransaction(make_transaction("b1", "b", date(2024, 1, 31), "505"))
    )

    new_state = reduce_state(with_b, DeleteAccount("a"))

    assert [acc.id for acc in new_state.accounts] == ["b"]
    assert [txn.id for txn in new_state.transactions] == ["b1"]


def test_import_merges_new_records_only(state):
    imported_txn = make_transaction("b1", "b", date(2024, 1, 31), "530", deposit="20")
    action = ImportData(
        accounts=(make_account("a", "1"), make_account("b", "500")),
        transactions=(
            make_transaction("t1", "a", date(2024, 1, 31), "1"),
            imported_txn,
            make_transaction("orphan", "zzz", date(2024, 1, 31), "10"),
        ),
    )

    new_state = reduce_state(state, action)

    assert [acc.id for acc in new_state.accounts] == ["a", "b"]
    assert new_state.get_account("a").initial_capital == Decimal("1000")
    assert new_state.get_transaction("t1").current_balance == Decimal("1100")
    assert new_state.get_transaction("orphan") is None
    b1 = new_state.get_transaction("b1")
    assert b1.previous_balance == Decimal("500")
    assert b1.calculated_profit == Decimal("10")
    assert b1.type == TransactionType.MIXED
    assert new_state.get_account("b").current_balance == Decimal("530")


def test_import_without_accounts_is_noop(state):
    action = ImportData(
        accounts=(), transactions=(make_transaction("x", "a", date(2024, 3, 1), "1"),)
    )
    assert reduce_state(state, action) is state


def test_import_heals_existing_account_receiving_entries(state):
    action = ImportData(
        accounts=(make_account("c", "10"),),
        transactions=(make_transaction("t3", "a", date(2024, 3, 31), "1200"),),
    )

    new_state = reduce_state(state, action)

    assert new_state.get_transaction("t3").previous_balance == Decimal("1150")
    assert new_state.get_account("a").current_balance == Decimal("1200")


def test_reset_clears_everything(state):
    assert reduce_state(state, ResetData()) == PortfolioState()


def test_unknown_action_raises(state):
    with pytest.raises(TypeError):
        reduce_state(state, object())


def test_save_transaction_for_unknown_account_is_ignored(state):
    orphan = make_transaction("t9", "ghost", date(2024, 3, 31), "10")

    assert reduce_state(state, SaveTransaction(orphan)) is state
    assert reduce_state(PortfolioState(), SaveTransaction(orphan)) == PortfolioState()
