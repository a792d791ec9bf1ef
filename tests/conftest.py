"""Shared pytest fixtures for barakainvest tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from barakainvest.database.factories import create_sqlite_database
from barakainvest.domain.account import AccountService
from barakainvest.domain.backup import BackupService
from barakainvest.domain.entities import Account, Currency, InvestmentType, RiskLevel, Transaction
from barakainvest.domain.session import PortfolioSession
from barakainvest.domain.summary import SummaryService
from barakainvest.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def session(temp_db):
    """Create a PortfolioSession over the temporary database."""
    return PortfolioSession(temp_db)


@pytest.fixture
def account_service(session):
    """Create an AccountService with a temporary database."""
    return AccountService(session)


@pytest.fixture
def transaction_service(session):
    """Create a TransactionService with a temporary database."""
    return TransactionService(session)


@pytest.fixture
def backup_service(session):
    """Create a BackupService with a temporary database."""
    return BackupService(session)


@pytest.fixture
def summary_service(session):
    """Create a SummaryService with a temporary database."""
    return SummaryService(session)


@pytest.fixture
def sample_account(account_service):
    """Create a sample account with 1000 TRY initial capital."""
    account_id = account_service.create_account(
        bank_name="Kuveyt Turk",
        initial_capital=Decimal("1000"),
        currency=Currency.TRY,
        investment_type=InvestmentType.PARTICIPATION,
        start_date=date(2024, 1, 1),
    )
    return account_service.get_account(account_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


def make_account(account_id="acc-1", initial_capital="1000", **overrides) -> Account:
    """Build an Account entity for pure engine tests."""
    fields = dict(
        id=account_id,
        bank_name="Test Bank",
        currency=Currency.TRY,
        investment_type=InvestmentType.PARTICIPATION,
        start_date=date(2024, 1, 1),
        maturity_period=12,
        risk_level=RiskLevel.LOW,
        initial_capital=Decimal(initial_capital),
        current_balance=Decimal(initial_capital),
    )
    fields.update(overrides)
    return Account(**fields)


def make_transaction(
    transaction_id, account_id, on, balance, deposit="0", withdrawal="0"
) -> Transaction:
    """Build a Transaction entity with only its input fields set."""
    return Transaction(
        id=transaction_id,
        account_id=account_id,
        date=on,
        current_balance=Decimal(balance),
        user_deposit=Decimal(deposit),
        withdrawal=Decimal(withdrawal),
    )
