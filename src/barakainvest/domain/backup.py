"""Backup import/export domain service."""

import logging
from dataclasses import dataclass
from pathlib import Path

from barakainvest.domain.entities import ImportResult
from barakainvest.domain.errors import ValidationError, empty_import
from barakainvest.domain.interchange import BOM, export_text, parse_import_text
from barakainvest.domain.session import PortfolioSession
from barakainvest.domain.state import ImportData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImportSummary:
    """Outcome of merging a backup into the portfolio."""

    accounts_found: int
    transactions_found: int
    accounts_added: int
    transactions_added: int
    skipped_rows: int


class BackupService:
    """Service for exporting and importing portfolio backups."""

    def __init__(self, session: PortfolioSession):
        """Initialize backup service.

        Args:
            session: Portfolio session owning the current state
        """
        self.session = session

    def export_text(self) -> str:
        """Encode the whole portfolio as a backup document."""
        state = self.session.state
        return export_text(state.accounts, state.transactions)

    def export_file(self, path: str) -> Path:
        """Write the portfolio backup to ``path`` (UTF-8 with BOM).

        Returns:
            Path written
        """
        target = Path(path)
        target.write_text(BOM + self.export_text(), encoding="utf-8")
        logger.info("Exported backup to %s", target)
        return target

    def preview_file(self, path: str) -> ImportResult:
        """Decode a backup file without touching the portfolio.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the file holds no usable accounts or transactions
        """
        source = Path(path)
        if not source.exists():
            raise FileNotFoundError(f"Backup file not found: {path}")

        content = source.read_text(encoding="utf-8-sig")
        if not content.strip():
            raise ValidationError(f"The file '{path}' is empty")

        result = parse_import_text(content)
        if result.is_empty:
            raise ValidationError(empty_import(path))
        return result

    def import_file(self, path: str) -> ImportSummary:
        """Merge a backup file into the portfolio.

        Records whose ID already exists are kept as they are. Nothing is
        applied when the file cannot be decoded.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the file holds no usable accounts or transactions
        """
        result = self.preview_file(path)
        before = self.session.state
        after = self.session.dispatch(ImportData(result.accounts, result.transactions))

        summary = ImportSummary(
            accounts_found=len(result.accounts),
            transactions_found=len(result.transactions),
            accounts_added=len(after.accounts) - len(before.accounts),
            transactions_added=len(after.transactions) - len(before.transactions),
            skipped_rows=result.skipped_rows,
        )
        logger.info(
            "Imported %d accounts and %d transactions from %s",
            summary.accounts_added,
            summary.transactions_added,
            path,
        )
        return summary
