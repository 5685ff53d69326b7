"""Use case to import punishment rows from a team-cashbox CSV export.

Each row is classified as a fine, a beverage charge or a mis-filed credit:

* credits (``Guthaben``, ``Einzahlung ...``) become settled payments;
* drink reasons become beverage fines tagged with a beverage category;
* everything else becomes a regular fine.

Rows that cannot be used are reported in ``warnings`` and skipped.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from src.application.ports.csv_rows import CsvRowsSourcePort
from src.application.use_cases.csv_parsing import (
    cell,
    parse_german_date,
    parse_paid_status,
)
from src.domain.models import Fine, FineKind, Payment, TransactionKind
from src.domain.policies import is_valid_player_name
from src.domain.services import (
    classify_punishment_with_subject,
    map_beverage_category,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import cents_to_units

REQUIRED_COLUMNS = ("penatly_user", "penatly_reason", "penatly_amount")


@dataclass(frozen=True)
class ParsedPunishmentRow:
    """Classified punishment row, amounts already in currency units."""

    row_index: int
    kind: TransactionKind
    player_name: str
    reason: str
    amount: Decimal
    date: str
    paid: bool
    paid_at: str | None
    beverage_category: str | None = None


@dataclass
class PunishmentParseResult:
    """Outcome of parsing a punishment export."""

    rows: list[ParsedPunishmentRow] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    total_rows_processed: int = 0


@dataclass(frozen=True)
class ImportedRecords:
    """Ledger records built from parsed punishment rows."""

    payments: list[Payment]
    fines: list[Fine]


def parse_punishment_rows(
    rows: Iterable[dict],
    now: datetime | None = None,
) -> PunishmentParseResult:
    """Classify raw punishment rows.

    Args:
        rows: Raw rows keyed by CSV header.
        now: Timestamp used when a row has no readable creation date.

    Returns:
        PunishmentParseResult: Parsed rows plus per-row diagnostics.
    """
    result = PunishmentParseResult()
    fallback_date = (now or datetime.now(timezone.utc)).isoformat()
    for index, row in enumerate(rows):
        result.total_rows_processed += 1
        line = index + 1
        if any(not cell(row, column) for column in REQUIRED_COLUMNS):
            result.warnings.append(f"Row {line}: Missing required fields")
            continue

        raw_amount = cell(row, "penatly_amount")
        amount = cents_to_units(raw_amount)
        if amount is None:
            result.warnings.append(
                f"Row {line}: Invalid amount: {raw_amount}"
            )
            continue
        if amount == 0:
            result.warnings.append(
                f"Row {line}: Skipped zero-amount penalty"
            )
            continue
        if amount < 0:
            result.warnings.append(
                f"Row {line}: Skipped storno penalty (negative amount)"
            )
            continue

        player_name = cell(row, "penatly_user")
        if not is_valid_player_name(player_name):
            result.warnings.append(
                f"Row {line}: Skipped due to missing or unknown player name"
            )
            continue

        created = parse_german_date(cell(row, "penatly_created"))
        if created is None:
            result.warnings.append(
                f"Row {line}: Invalid creation date, using import time"
            )
            created = fallback_date
        status = parse_paid_status(row.get("penatly_paid"))
        reason = cell(row, "penatly_reason")
        kind = classify_punishment_with_subject(
            reason,
            cell(row, "penatly_subject") or None,
        )

        if kind is TransactionKind.PAYMENT:
            result.rows.append(
                ParsedPunishmentRow(
                    row_index=index,
                    kind=kind,
                    player_name=player_name,
                    reason=reason,
                    amount=amount,
                    date=created,
                    paid=True,
                    paid_at=status.paid_at or created,
                )
            )
            continue

        result.rows.append(
            ParsedPunishmentRow(
                row_index=index,
                kind=kind,
                player_name=player_name,
                reason=reason,
                amount=amount,
                date=created,
                paid=status.paid,
                paid_at=status.paid_at,
                beverage_category=(
                    map_beverage_category(reason)
                    if kind is TransactionKind.DRINK
                    else None
                ),
            )
        )
    return result


def build_ledger_records(
    result: PunishmentParseResult,
    resolve_player: Callable[[str], str],
) -> ImportedRecords:
    """Convert parsed rows into payment and fine records.

    Args:
        result: Parsed punishment rows.
        resolve_player: Maps a player name to its entity id.

    Returns:
        ImportedRecords: Payments for credit rows, fines for the rest.
    """
    payments: list[Payment] = []
    fines: list[Fine] = []
    for row in result.rows:
        entity_id = resolve_player(row.player_name)
        if row.kind is TransactionKind.PAYMENT:
            payments.append(
                Payment(
                    id=f"punishment-{row.row_index}",
                    entity_id=entity_id,
                    reason=row.reason,
                    amount=row.amount,
                    date=row.date,
                    paid=True,
                    paid_at=row.paid_at,
                )
            )
            continue
        kind = (
            FineKind.BEVERAGE
            if row.kind is TransactionKind.DRINK
            else FineKind.REGULAR
        )
        fines.append(
            Fine(
                id=f"punishment-{row.row_index}",
                entity_id=entity_id,
                reason=(
                    row.beverage_category
                    if row.beverage_category
                    else row.reason
                ),
                amount=row.amount,
                date=row.date,
                paid=row.paid,
                kind=kind,
            )
        )
    return ImportedRecords(payments=payments, fines=fines)


class ImportPunishmentsUseCase:
    """Read and classify a punishment CSV export."""

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
        now: datetime | None = None,
    ) -> PunishmentParseResult:
        """Return the classified rows of the export at ``path``.

        Args:
            path: Location of the CSV export.
            now: Timestamp used for rows without a readable date.

        Returns:
            PunishmentParseResult: Parsed rows, warnings and errors.
        """
        try:
            rows = self._rows_source.read_rows(path)
        except (OSError, ValueError) as exc:
            self._logger.error(f"Could not read punishments from {path}: {exc}")
            result = PunishmentParseResult()
            result.errors.append(f"Fatal error: {exc}")
            return result

        result = parse_punishment_rows(rows, now=now)
        counts = {kind: 0 for kind in TransactionKind}
        for row in result.rows:
            counts[row.kind] += 1
        self._logger.info(
            f"Parsed {result.total_rows_processed} punishment rows: "
            f"fines={counts[TransactionKind.FINE]}, "
            f"drinks={counts[TransactionKind.DRINK]}, "
            f"payments={counts[TransactionKind.PAYMENT]}, "
            f"warnings={len(result.warnings)}"
        )
        return result


__all__ = [
    "ImportPunishmentsUseCase",
    "ImportedRecords",
    "ParsedPunishmentRow",
    "PunishmentParseResult",
    "build_ledger_records",
    "parse_punishment_rows",
]
