"""Domain model entities for barakainvest.

These are pure data classes representing business concepts, independent of
database schema. Entities are frozen: the reconciliation engine produces new
instances with ``dataclasses.replace`` instead of mutating the ones it is given.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Currency(str, Enum):
    """Currencies an account can be held in."""

    TRY = "TRY"
    USD = "USD"


class InvestmentType(str, Enum):
    """Kinds of profit-sharing investment accounts."""

    PARTICIPATION = "Participation Account"
    SUKUK = "Sukuk (Lease Certificate)"
    GOLD = "Gold Account"
    REAL_ESTATE = "Real Estate Fund"


class RiskLevel(str, Enum):
    """Advisory risk profile of an account."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TransactionType(str, Enum):
    """Classification tag derived for every balance statement."""

    USER_DEPOSIT = "USER_DEPOSIT"
    BANK_PROFIT = "BANK_PROFIT"
    WITHDRAWAL = "WITHDRAWAL"
    MIXED = "MIXED"


@dataclass(frozen=True)
class Account:
    """Investment account domain entity.

    ``current_balance`` is derived by the chain healer and mirrors the balance
    of the latest transaction (or ``initial_capital`` for an empty chain).
    """

    id: str
    bank_name: str
    currency: Currency
    investment_type: InvestmentType
    start_date: date
    maturity_period: int
    risk_level: RiskLevel
    initial_capital: Decimal
    current_balance: Decimal


@dataclass(frozen=True)
class Transaction:
    """Balance statement domain entity.

    ``current_balance``, ``user_deposit`` and ``withdrawal`` are supplied by the
    caller. The remaining numeric fields and ``type`` are derived.
    """

    id: str
    account_id: str
    date: date
    current_balance: Decimal
    user_deposit: Decimal = Decimal("0")
    withdrawal: Decimal = Decimal("0")
    previous_balance: Decimal = Decimal("0")
    calculated_profit: Decimal = Decimal("0")
    profit_percentage: Decimal = Decimal("0")
    type: TransactionType = TransactionType.BANK_PROFIT


@dataclass(frozen=True)
class ProfitStats:
    """Output of the profit classifier."""

    profit_amount: Decimal
    profit_percentage: Decimal
    type: TransactionType


@dataclass(frozen=True)
class HealResult:
    """Collections produced by healing one account's chain."""

    transactions: tuple[Transaction, ...]
    accounts: tuple[Account, ...]


@dataclass(frozen=True)
class AccountPerformance:
    """Profit and return on investment of a single account."""

    account: Account
    total_profit: Decimal
    roi: Decimal


@dataclass(frozen=True)
class CurrencyTotals:
    """Aggregated capital and profit for one currency."""

    capital: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")


@dataclass(frozen=True)
class BankAllocation:
    """Current balance held at one account, for allocation views."""

    bank_name: str
    balance: Decimal
    currency: Currency


@dataclass(frozen=True)
class CumulativeProfitPoint:
    """Running profit per currency up to and including ``date``."""

    date: date
    totals: dict[Currency, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class PortfolioSummary:
    """Dashboard figures for the whole portfolio."""

    currency_totals: dict[Currency, CurrencyTotals]
    account_count: int
    last_entry_date: Optional[date]
    allocation_by_bank: tuple[BankAllocation, ...]
    allocation_by_type: dict[InvestmentType, Decimal]
    risk_distribution: dict[RiskLevel, Decimal]
    cumulative_profit: tuple[CumulativeProfitPoint, ...]
    best_performer: Optional[AccountPerformance]
    worst_performer: Optional[AccountPerformance]


@dataclass(frozen=True)
class ImportResult:
    """Records decoded from an interchange document."""

    accounts: tuple[Account, ...]
    transactions: tuple[Transaction, ...]
    skipped_rows: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.accounts and not self.transactions


@dataclass(frozen=True)
class StoredPortfolio:
    """Everything the persistence store holds."""

    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
