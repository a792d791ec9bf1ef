"""Tests for the profit classifier."""

from decimal import Decimal

import pytest

from barakainvest.domain.entities import TransactionType
from barakainvest.domain.profit import classify, classify_type, profit_base, to_decimal


def test_pure_bank_profit():
    stats = classify(100, 110)
    assert stats.profit_amount == Decimal("10")
    assert stats.profit_percentage == Decimal("10")
    assert stats.type == TransactionType.BANK_PROFIT


def test_deposit_with_profit_is_mixed():
    stats = classify(100, 120, user_deposit=10)
    assert stats.profit_amount == Decimal("10")
    assert stats.profit_percentage == Decimal("10")
    assert stats.type == TransactionType.MIXED


def test_deposit_without_profit():
    """A balance that grew by less than the deposit shows a negative profit."""
    stats = classify(100, 105, user_deposit=10)
    assert stats.profit_amount == Decimal("-5")
    assert stats.profit_percentage == Decimal("-5")
    assert stats.type == TransactionType.USER_DEPOSIT


def test_withdrawal_wins_over_deposit():
    stats = classify(100, 100, user_deposit=5, withdrawal=10)
    assert stats.profit_amount == Decimal("5")
    assert stats.type == TransactionType.WITHDRAWAL


def test_withdrawal_with_profit():
    stats = classify(1000, 920, withdrawal=100)
    assert stats.profit_amount == Decimal("20")
    assert stats.profit_percentage == Decimal("2")
    assert stats.type == TransactionType.WITHDRAWAL


def test_balance_loss_is_negative_bank_profit():
    stats = classify(200, 190)
    assert stats.profit_amount == Decimal("-10")
    assert stats.profit_percentage == Decimal("-5")
    assert stats.type == TransactionType.BANK_PROFIT


def test_zero_previous_uses_one_as_base():
    stats = classify(0, 50)
    assert stats.profit_amount == Decimal("50")
    assert stats.profit_percentage == Decimal("5000")


def test_zero_previous_uses_deposit_as_base():
    stats = classify(0, 50, user_deposit=20)
    assert stats.profit_amount == Decimal("30")
    assert stats.profit_percentage == Decimal("150")
    assert stats.type == TransactionType.MIXED


def test_profit_identity_holds_for_decimal_strings():
    previous, current, deposit, withdrawal = "1500.25", "1612.40", "100.10", "0.35"
    stats = classify(previous, current, deposit, withdrawal)
    expected = (Decimal(current) - Decimal(previous)) - (Decimal(deposit) - Decimal(withdrawal))
    assert stats.profit_amount == expected


def test_float_inputs_convert_through_str():
    assert to_decimal(0.1) == Decimal("0.1")
    assert classify(0.1, 0.3).profit_amount == Decimal("0.2")


@pytest.mark.parametrize(
    "previous,deposit,expected",
    [
        (100, 0, Decimal("100")),
        (0, 25, Decimal("25")),
        (-10, 25, Decimal("25")),
        (0, 0, Decimal("1")),
        (-10, 0, Decimal("1")),
    ],
)
def test_profit_base(previous, deposit, expected):
    assert profit_base(previous, deposit) == expected


def test_classify_type_priority():
    zero = Decimal("0")
    assert classify_type(Decimal("5"), Decimal("5"), Decimal("1")) == TransactionType.WITHDRAWAL
    assert classify_type(Decimal("5"), Decimal("5"), zero) == TransactionType.MIXED
    assert classify_type(zero, Decimal("5"), zero) == TransactionType.USER_DEPOSIT
    assert classify_type(Decimal("-5"), zero, zero) == TransactionType.BANK_PROFIT
