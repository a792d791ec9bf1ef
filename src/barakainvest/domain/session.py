"""Session orchestrator owning the in-memory portfolio state."""

import logging

from barakainvest.database.base import Database
from barakainvest.domain.state import (
    Action,
    PortfolioState,
    ResetData,
    reduce_state,
)

logger = logging.getLogger(__name__)


class PortfolioSession:
    """Holds the current portfolio state and mirrors it to the database.

    The in-memory state is the source of truth for the session. After each
    dispatched action the new state is written to the database; a failed
    write is logged and does not roll the in-memory state back.
    """

    def __init__(self, db: Database):
        """Initialize the session and load the stored portfolio.

        Args:
            db: Database instance
        """
        self.db = db
        stored = db.load_all()
        self._state = PortfolioState(
            accounts=stored.accounts, transactions=stored.transactions
        )
        logger.debug(
            "Loaded %d accounts and %d transactions",
            len(self._state.accounts),
            len(self._state.transactions),
        )

    @property
    def state(self) -> PortfolioState:
        return self._state

    def dispatch(self, action: Action) -> PortfolioState:
        """Apply an action, swap in the new state and persist it.

        Returns:
            The new state
        """
        new_state = reduce_state(self._state, action)
        self._state = new_state
        self.persist()
        return new_state

    def persist(self) -> bool:
        """Write the current state to the database.

        Returns:
            True if the write succeeded
        """
        saved = self.db.replace_all(self._state.accounts, self._state.transactions)
        if not saved:
            logger.error(
                "Saving portfolio failed; in-memory state kept (%d accounts, %d transactions)",
                len(self._state.accounts),
                len(self._state.transactions),
            )
        return saved

    def reset(self) -> bool:
        """Clear the database and the in-memory state."""
        self._state = reduce_state(self._state, ResetData())
        cleared = self.db.clear()
        if not cleared:
            logger.error("Clearing the database failed")
        return cleared
