"""Tests for rebuilding an account's statement chain."""

from datetime import date
from decimal import Decimal

from barakainvest.domain.entities import TransactionType
from barakainvest.domain.healing import heal_transaction_chain, sort_chain

from conftest import make_account, make_transaction


def _chain(result, account_id):
    return [txn for txn in result.transactions if txn.account_id == account_id]


def test_chain_starts_from_initial_capital():
    accounts = [make_account("a", "1000")]
    transactions = [make_transaction("t1", "a", date(2024, 1, 31), "1100")]

    result = heal_transaction_chain(transactions, "a", accounts)

    (txn,) = result.transactions
    assert txn.previous_balance == Decimal("1000")
    assert txn.calculated_profit == Decimal("100")
    assert txn.profit_percentage == Decimal("10")
    assert txn.type == TransactionType.BANK_PROFIT
    assert result.accounts[0].current_balance == Decimal("1100")


def test_chain_is_continuous_in_date_order():
    accounts = [make_account("a", "1000")]
    transactions = [
        make_transaction("t3", "a", date(2024, 3, 31), "1300"),
        make_transaction("t1", "a", date(2024, 1, 31), "1100"),
        make_transaction("t2", "a", date(2024, 2, 29), "1200"),
    ]

    result = heal_transaction_chain(transactions, "a", accounts)

    chain = _chain(result, "a")
    assert [txn.id for txn in chain] == ["t1", "t2", "t3"]
    assert chain[0].previous_balance == Decimal("1000")
    for earlier, later in zip(chain, chain[1:]):
        assert later.previous_balance == earlier.current_balance
    assert result.accounts[0].current_balance == Decimal("1300")


def test_editing_early_entry_cascades():
    """Lowering January's balance raises February's detected profit."""
    accounts = [make_account("a", "1000")]
    original = [
        make_transaction("jan", "a", date(2024, 1, 31), "1100"),
        make_transaction("feb", "a", date(2024, 2, 29), "1250", deposit="100"),
    ]
    healed = heal_transaction_chain(original, "a", accounts)
    feb = _chain(healed, "a")[1]
    assert feb.calculated_profit == Decimal("50")
    assert feb.type == TransactionType.MIXED

    edited = [
        make_transaction("jan", "a", date(2024, 1, 31), "1050"),
        make_transaction("feb", "a", date(2024, 2, 29), "1250", deposit="100"),
    ]
    result = heal_transaction_chain(edited, "a", healed.accounts)

    jan, feb = _chain(result, "a")
    assert jan.calculated_profit == Decimal("50")
    assert feb.previous_balance == Decimal("1050")
    assert feb.calculated_profit == Decimal("100")
    assert result.accounts[0].current_balance == Decimal("1250")


def test_healing_is_idempotent():
    accounts = [make_account("a", "1000")]
    transactions = [
        make_transaction("t1", "a", date(2024, 1, 31), "1100"),
        make_transaction("t2", "a", date(2024, 2, 29), "1000", withdrawal="150"),
    ]

    once = heal_transaction_chain(transactions, "a", accounts)
    twice = heal_transaction_chain(once.transactions, "a", once.accounts)

    assert twice == once


def test_other_accounts_are_untouched():
    accounts = [make_account("a", "1000"), make_account("b", "500")]
    stale = make_transaction("b1", "b", date(2024, 1, 15), "510")
    transactions = [
        make_transaction("a1", "a", date(2024, 1, 31), "1100"),
        stale,
        make_transaction("a2", "a", date(2024, 2, 29), "1150"),
    ]

    result = heal_transaction_chain(transactions, "a", accounts)

    assert result.transactions[0] is stale
    assert [txn.id for txn in result.transactions] == ["b1", "a1", "a2"]
    assert result.accounts[1] == accounts[1]
    assert result.accounts[0].current_balance == Decimal("1150")


def test_empty_chain_resets_balance_to_capital():
    account = make_account("a", "1000", current_balance=Decimal("4242"))

    result = heal_transaction_chain([], "a", [account])

    assert result.transactions == ()
    assert result.accounts[0].current_balance == Decimal("1000")


def test_missing_account_returns_inputs_unchanged():
    accounts = [make_account("a", "1000")]
    transactions = [make_transaction("t1", "a", date(2024, 1, 31), "1100")]

    result = heal_transaction_chain(transactions, "missing", accounts)

    assert result.transactions == tuple(transactions)
    assert result.accounts == tuple(accounts)


def test_same_date_entries_keep_input_order():
    accounts = [make_account("a", "1000")]
    transactions = [
        make_transaction("first", "a", date(2024, 1, 31), "1010"),
        make_transaction("second", "a", date(2024, 1, 31), "1030"),
    ]

    result = heal_transaction_chain(transactions, "a", accounts)

    first, second = _chain(result, "a")
    assert (first.id, second.id) == ("first", "second")
    assert second.previous_balance == Decimal("1010")
    assert [txn.id for txn in sort_chain(reversed(transactions))] == ["second", "first"]


def test_zero_capital_account():
    accounts = [make_account("a", "0")]
    transactions = [make_transaction("t1", "a", date(2024, 1, 31), "520", deposit="500")]

    result = heal_transaction_chain(transactions, "a", accounts)

    (txn,) = result.transactions
    assert txn.calculated_profit == Decimal("20")
    assert txn.profit_percentage == Decimal("4")
    assert txn.type == TransactionType.MIXED
