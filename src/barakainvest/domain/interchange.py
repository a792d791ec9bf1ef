"""Encoding and decoding of the sectioned CSV backup format.

A backup holds two sections, each introduced by a marker line and a header
row::

    ---ACCOUNTS---
    ID,Bank Name,Currency,Type,Start Date,Maturity,Risk,Current Balance,Initial Capital
    ...

    ---TRANSACTIONS---
    ID,Account ID,Date,Prev Balance,Curr Balance,User Deposit,Withdrawal,Profit,Profit %,Type
    ...
"""

import csv
import logging
from datetime import date
from typing import Iterable, Optional

from barakainvest.domain.entities import Account, ImportResult, Transaction
from barakainvest.domain.resolvers import (
    resolve_currency,
    resolve_date,
    resolve_investment_type,
    resolve_maturity,
    resolve_number,
    resolve_risk_level,
    resolve_transaction_type,
)
from barakainvest.utils.ids import generate_id

logger = logging.getLogger(__name__)

ACCOUNTS_MARKER = "---ACCOUNTS---"
TRANSACTIONS_MARKER = "---TRANSACTIONS---"

ACCOUNT_HEADERS = [
    "ID",
    "Bank Name",
    "Currency",
    "Type",
    "Start Date",
    "Maturity",
    "Risk",
    "Current Balance",
    "Initial Capital",
]
TRANSACTION_HEADERS = [
    "ID",
    "Account ID",
    "Date",
    "Prev Balance",
    "Curr Balance",
    "User Deposit",
    "Withdrawal",
    "Profit",
    "Profit %",
    "Type",
]

MIN_ACCOUNT_FIELDS = 8
MIN_TRANSACTION_FIELDS = 9

BOM = "\ufeff"
UNKNOWN_BANK = "Unknown Bank"


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def export_text(accounts: Iterable[Account], transactions: Iterable[Transaction]) -> str:
    """Encode accounts and transactions as a backup document (without BOM)."""
    lines = [ACCOUNTS_MARKER, ",".join(ACCOUNT_HEADERS)]
    for acc in accounts:
        lines.append(
            ",".join(
                [
                    _quote(acc.id),
                    _quote(acc.bank_name),
                    acc.currency.value,
                    _quote(acc.investment_type.value),
                    acc.start_date.isoformat(),
                    str(acc.maturity_period),
                    acc.risk_level.value,
                    str(acc.current_balance),
                    str(acc.initial_capital),
                ]
            )
        )

    lines.append("")
    lines.append(TRANSACTIONS_MARKER)
    lines.append(",".join(TRANSACTION_HEADERS))
    for txn in transactions:
        lines.append(
            ",".join(
                [
                    _quote(txn.id),
                    _quote(txn.account_id),
                    txn.date.isoformat(),
                    str(txn.previous_balance),
                    str(txn.current_balance),
                    str(txn.user_deposit),
                    str(txn.withdrawal),
                    str(txn.calculated_profit),
                    str(txn.profit_percentage),
                    txn.type.value,
                ]
            )
        )
    return "\n".join(lines) + "\n"


def split_row(line: str) -> list[str]:
    """Split a data row on commas outside double quotes and strip each field."""
    fields = next(csv.reader([line], skipinitialspace=True), [])
    return [field.strip() for field in fields]


def _field(fields: list[str], index: int) -> Optional[str]:
    return fields[index] if index < len(fields) else None


def parse_account_row(fields: list[str], today: date) -> Account:
    """Build an account from a data row, applying default policies."""
    current_balance = resolve_number(_field(fields, 7))
    return Account(
        id=fields[0] or generate_id(),
        bank_name=fields[1] or UNKNOWN_BANK,
        currency=resolve_currency(fields[2]),
        investment_type=resolve_investment_type(fields[3]),
        start_date=resolve_date(fields[4], default=today),
        maturity_period=resolve_maturity(fields[5]),
        risk_level=resolve_risk_level(fields[6]),
        current_balance=current_balance,
        initial_capital=resolve_number(_field(fields, 8)) or current_balance,
    )


def parse_transaction_row(fields: list[str], today: date) -> Transaction:
    """Build a transaction from a data row, applying default policies."""
    return Transaction(
        id=fields[0] or generate_id(),
        account_id=fields[1],
        date=resolve_date(fields[2], default=today),
        previous_balance=resolve_number(fields[3]),
        current_balance=resolve_number(fields[4]),
        user_deposit=resolve_number(fields[5]),
        withdrawal=resolve_number(fields[6]),
        calculated_profit=resolve_number(fields[7]),
        profit_percentage=resolve_number(fields[8]),
        type=resolve_transaction_type(_field(fields, 9)),
    )


def parse_import_text(content: str, today: Optional[date] = None) -> ImportResult:
    """Decode a backup document.

    Rows shorter than the minimum field count of their section are skipped,
    as are data rows appearing before any section marker. This function never
    raises for malformed content; an unusable document decodes to an empty
    result.
    """
    today = today or date.today()
    normalized = content.lstrip(BOM).replace("\r\n", "\n")
    lines = [line.strip() for line in normalized.split("\n")]

    accounts: list[Account] = []
    transactions: list[Transaction] = []
    skipped = 0
    section = None

    for line in lines:
        if not line:
            continue
        upper_line = line.upper()
        if ACCOUNTS_MARKER in upper_line:
            section = "accounts"
            continue
        if TRANSACTIONS_MARKER in upper_line:
            section = "transactions"
            continue
        if line.lower().startswith("id,"):
            continue

        fields = split_row(line)
        if section == "accounts" and len(fields) >= MIN_ACCOUNT_FIELDS:
            accounts.append(parse_account_row(fields, today))
        elif section == "transactions" and len(fields) >= MIN_TRANSACTION_FIELDS:
            transactions.append(parse_transaction_row(fields, today))
        else:
            skipped += 1
            logger.debug("Skipping row in section %s: %r", section, line)

    return ImportResult(
        accounts=tuple(accounts),
        transactions=tuple(transactions),
        skipped_rows=skipped,
    )
