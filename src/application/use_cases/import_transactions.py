"""Use case to import bank transactions as payment records.

Subjects look like ``"<prefix>: <player> (<category>)"``. Membership dues
(``Beiträge: ...``) are normally imported from the dues export and are only
accepted here in the ``Beiträge: <player> (<due name>)`` form.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
import re
from pathlib import Path

from src.application.ports.csv_rows import CsvRowsSourcePort
from src.application.use_cases.csv_parsing import cell, parse_german_date
from src.domain.models import Payment
from src.domain.policies import is_valid_player_name
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import cents_to_units

REQUIRED_COLUMNS = (
    "transaction_date",
    "transaction_amount",
    "transaction_subject",
)
_DUES_SUBJECT = re.compile(r"^Beiträge:\s*(.+?)\s*\((.+)\)$", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedSubject:
    """Player and optional category extracted from a subject line."""

    player_name: str
    category: str | None = None


@dataclass
class TransactionImportResult:
    """Outcome of importing a transaction export."""

    payments: list[Payment] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    rows_processed: int = 0


def parse_transaction_subject(subject: str) -> ParsedSubject | None:
    """Extract the player name and category from a subject line.

    Args:
        subject: Trimmed transaction subject.

    Returns:
        ParsedSubject | None: None when no player name can be found.
    """
    prefix, separator, rest = subject.partition(":")
    if "beitr" in prefix.strip().lower():
        match = _DUES_SUBJECT.match(subject)
        if not match:
            return None
        return ParsedSubject(
            player_name=match.group(1).strip(),
            category=match.group(2).strip(),
        )
    if not separator:
        return None
    rest = rest.strip()
    open_paren = rest.find("(")
    if open_paren == -1:
        return ParsedSubject(player_name=rest) if rest else None
    player_name = rest[:open_paren].strip()
    close_paren = rest.find(")", open_paren)
    category = None
    if close_paren > open_paren:
        category = rest[open_paren + 1:close_paren].strip() or None
    if not player_name:
        return None
    return ParsedSubject(player_name=player_name, category=category)


def parse_transaction_rows(
    rows: Iterable[dict],
    resolve_player: Callable[[str], str],
) -> TransactionImportResult:
    """Convert transaction rows into payment records.

    Negative amounts are reversals (storno): they become unpaid payments of
    the absolute amount instead of negative credits.

    Args:
        rows: Raw rows keyed by CSV header.
        resolve_player: Maps a player name to its entity id.

    Returns:
        TransactionImportResult: Payments plus per-row diagnostics.
    """
    result = TransactionImportResult()
    for index, row in enumerate(rows):
        result.rows_processed += 1
        line = index + 1
        if any(not cell(row, column) for column in REQUIRED_COLUMNS):
            result.warnings.append(f"Row {line}: Missing required fields")
            continue

        date = parse_german_date(cell(row, "transaction_date"))
        if date is None:
            result.warnings.append(
                f"Row {line}: Invalid date: {cell(row, 'transaction_date')}"
            )
            continue
        raw_amount = cell(row, "transaction_amount")
        amount = cents_to_units(raw_amount)
        if amount is None:
            result.warnings.append(f"Row {line}: Invalid amount: {raw_amount}")
            continue

        subject = cell(row, "transaction_subject")
        parsed = parse_transaction_subject(subject)
        if parsed is None:
            if "beitr" in subject.lower():
                result.warnings.append(
                    f"Row {line}: Skipped Beiträge transaction "
                    f"(handled via dues CSV): {subject}"
                )
            else:
                result.warnings.append(
                    f"Row {line}: Could not parse player name from subject: "
                    f"{subject}"
                )
            continue
        if not is_valid_player_name(parsed.player_name):
            result.warnings.append(
                f"Row {line}: Skipped due to missing or unknown player name "
                "in subject"
            )
            continue

        is_storno = amount < 0
        if is_storno:
            result.warnings.append(
                f"Row {line}: Storno transaction detected (negative amount)"
            )
        result.payments.append(
            Payment(
                id=f"transaction-{index}",
                entity_id=resolve_player(parsed.player_name),
                reason=parsed.category or subject,
                amount=abs(amount),
                date=date,
                paid=not is_storno,
                paid_at=None if is_storno else date,
            )
        )
    return result


class ImportTransactionsUseCase:
    """Read a bank transaction export and build payment records."""

    def __init__(
        self,
        rows_source: CsvRowsSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            rows_source: Port reading the delimited export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._rows_source = rows_source
        self._logger = logger or get_app_logger()

    def execute(
        self,
        path: Path | str,
        resolve_player: Callable[[str], str],
    ) -> TransactionImportResult:
        """Return the payments found in the export at ``path``."""
        try:
            rows = self._rows_source.read_rows(path)
        except (OSError, ValueError) as exc:
            self._logger.error(
                f"Could not read transactions from {path}: {exc}"
            )
            result = TransactionImportResult()
            result.errors.append(f"Fatal error: {exc}")
            return result

        result = parse_transaction_rows(rows, resolve_player)
        self._logger.info(
            f"Imported {len(result.payments)} payments from "
            f"{result.rows_processed} transaction rows"
        )
        return result


__all__ = [
    "ImportTransactionsUseCase",
    "ParsedSubject",
    "TransactionImportResult",
    "parse_transaction_rows",
    "parse_transaction_subject",
]
