"""SQLAlchemy models for barakainvest database."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    Text,
    create_engine,
)
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class DecimalText(TypeDecorator):
    """Decimal stored as its exact string form.

    SQLite has no decimal type and rounds NUMERIC columns through float.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(str(value)))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class Account(Base):
    """Investment account model."""

    __tablename__ = "accounts"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, default="0")
    bank_name = Column(String, nullable=False)
    currency = Column(String(3), nullable=False)
    investment_type = Column(String, nullable=False)
    start_date = Column(Date, nullable=False)
    maturity_period = Column(Integer, nullable=False, default="0")
    risk_level = Column(String, nullable=False)
    initial_capital = Column(DecimalText(), nullable=False)
    current_balance = Column(DecimalText(), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="account")


class Transaction(Base):
    """Balance statement model."""

    __tablename__ = "transactions"

    id = Column(String, primary_key=True)
    position = Column(Integer, nullable=False, default="0")
    account_id = Column(String, ForeignKey("accounts.id"), nullable=False)
    date = Column(Date, nullable=False)
    previous_balance = Column(DecimalText(), nullable=False)
    current_balance = Column(DecimalText(), nullable=False)
    user_deposit = Column(DecimalText(), nullable=False, default="0")
    withdrawal = Column(DecimalText(), nullable=False, default="0")
    calculated_profit = Column(DecimalText(), nullable=False)
    profit_percentage = Column(DecimalText(), nullable=False)
    type = Column(String, nullable=False)

    # Relationships
    account = relationship("Account", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
