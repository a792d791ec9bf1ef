"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from barakainvest.domain.entities import Account, StoredPortfolio, Transaction


class Database(ABC):
    """Abstract persistence store for barakainvest.

    The store holds two collections, accounts and transactions, and is always
    read and written as a whole.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def load_all(self) -> StoredPortfolio:
        """Load every account and transaction, in stored order."""
        pass

    @abstractmethod
    def replace_all(
        self, accounts: Sequence[Account], transactions: Sequence[Transaction]
    ) -> bool:
        """Replace the stored collections. Returns False on failure."""
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Remove all stored records. Returns False on failure."""
        pass
