"""Ledger repository reading a JSON export of the team collections.

The export is one object holding the collections ``players``, ``payments``,
``fines``, ``dues``, ``duePayments`` and ``beverageConsumptions``. Field
names follow the document store (``userId``, ``amountPaid``, ``fineType``);
amounts are already in currency units.

Flags accept JSON booleans, 0/1 and the strings true/false/yes/no; a null
or missing flag takes its default (a due is active unless stored as false).
"""

import json
from pathlib import Path
from typing import Any

from src.domain.models import (
    BeverageConsumption,
    Due,
    DuePayment,
    Fine,
    FineKind,
    LedgerSnapshot,
    Payment,
    Player,
    parse_payment_category,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal


class LedgerDataError(ValueError):
    """Raised when a ledger export is structurally invalid."""


class JsonLedgerRepository:
    """Read-only ledger repository backed by a JSON snapshot file."""

    def __init__(self, snapshot_file: Path | str, logger=None) -> None:
        """Initialize the repository.

        Args:
            snapshot_file: Path to the JSON export.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._snapshot_file = Path(snapshot_file)
        self._logger = logger or get_app_logger()
        self._snapshot: LedgerSnapshot | None = None

    def fetch_players(self) -> list[Player]:
        """Return the player summary records."""
        return list(self._load().players)

    def fetch_payments(self) -> list[Payment]:
        """Return the payment records."""
        return list(self._load().payments)

    def fetch_fines(self) -> list[Fine]:
        """Return the fine records, regular and beverage kinds."""
        return list(self._load().fines)

    def fetch_dues(self) -> list[Due]:
        """Return the due definitions."""
        return list(self._load().dues)

    def fetch_due_payments(self) -> list[DuePayment]:
        """Return the per-player due obligations."""
        return list(self._load().due_payments)

    def fetch_beverage_consumptions(self) -> list[BeverageConsumption]:
        """Return the beverage consumption records."""
        return list(self._load().beverage_consumptions)

    def _load(self) -> LedgerSnapshot:
        if self._snapshot is None:
            try:
                raw = json.loads(
                    self._snapshot_file.read_text(encoding="utf-8")
                )
            except OSError as exc:
                raise RuntimeError(
                    f"Cannot read ledger snapshot {self._snapshot_file}: {exc}"
                ) from exc
            except json.JSONDecodeError as exc:
                raise LedgerDataError(
                    f"Invalid JSON in {self._snapshot_file}: {exc}"
                ) from exc
            self._snapshot = decode_snapshot(raw)
            self._logger.info(
                f"Loaded ledger snapshot {self._snapshot_file.name}: "
                f"players={len(self._snapshot.players)}, "
                f"payments={len(self._snapshot.payments)}, "
                f"fines={len(self._snapshot.fines)}, "
                f"due_payments={len(self._snapshot.due_payments)}"
            )
        return self._snapshot


def decode_snapshot(raw: Any) -> LedgerSnapshot:
    """Decode a parsed JSON export into typed ledger records.

    Args:
        raw: Parsed JSON document.

    Returns:
        LedgerSnapshot: Typed collections.

    Raises:
        LedgerDataError: When the document or a record is malformed.
    """
    if not isinstance(raw, dict):
        raise LedgerDataError("Ledger snapshot must be a JSON object")
    return LedgerSnapshot(
        players=tuple(_decode_player(doc) for doc in _collection(raw, "players")),
        payments=tuple(
            _decode_payment(doc) for doc in _collection(raw, "payments")
        ),
        fines=tuple(_decode_fine(doc) for doc in _collection(raw, "fines")),
        dues=tuple(_decode_due(doc) for doc in _collection(raw, "dues")),
        due_payments=tuple(
            _decode_due_payment(doc)
            for doc in _collection(raw, "duePayments")
        ),
        beverage_consumptions=tuple(
            _decode_beverage_consumption(doc)
            for doc in _collection(raw, "beverageConsumptions")
        ),
    )


def _collection(raw: dict, key: str) -> list[dict]:
    docs = raw.get(key) or []
    if not isinstance(docs, list):
        raise LedgerDataError(f"Collection '{key}' must be a list")
    for doc in docs:
        if not isinstance(doc, dict):
            raise LedgerDataError(f"Collection '{key}' holds a non-object")
    return docs


def _required(doc: dict, key: str) -> str:
    value = doc.get(key)
    if value is None or str(value).strip() == "":
        raise LedgerDataError(f"Record {doc.get('id', '?')} lacks '{key}'")
    return str(value)


_TRUE_FLAGS = ("true", "1", "yes")
_FALSE_FLAGS = ("false", "0", "no")


def _flag(doc: dict, key: str, default: bool) -> bool:
    value = doc.get(key)
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_FLAGS:
            return True
        if lowered in _FALSE_FLAGS:
            return False
    raise LedgerDataError(
        f"Record {doc.get('id', '?')} has invalid flag '{key}': {value!r}"
    )


def _optional_decimal(doc: dict, key: str):
    value = doc.get(key)
    return None if value is None else coerce_decimal(value)


def _decode_player(doc: dict) -> Player:
    return Player(
        id=_required(doc, "id"),
        name=str(doc.get("name") or doc.get("nickname") or doc["id"]),
        balance=coerce_decimal(doc.get("balance")),
    )


def _decode_payment(doc: dict) -> Payment:
    return Payment(
        id=_required(doc, "id"),
        entity_id=_required(doc, "userId"),
        reason=str(doc.get("reason") or ""),
        amount=coerce_decimal(doc.get("amount")),
        date=str(doc.get("date") or ""),
        paid=_flag(doc, "paid", False),
        paid_at=doc.get("paidAt"),
        category=parse_payment_category(doc.get("category")),
    )


def _decode_fine(doc: dict) -> Fine:
    fine_type = str(doc.get("fineType") or "").strip().lower()
    kind = FineKind.BEVERAGE if fine_type == "beverage" else FineKind.REGULAR
    return Fine(
        id=_required(doc, "id"),
        entity_id=_required(doc, "userId"),
        reason=str(doc.get("reason") or ""),
        amount=coerce_decimal(doc.get("amount")),
        date=str(doc.get("date") or ""),
        paid=_flag(doc, "paid", False),
        amount_paid=_optional_decimal(doc, "amountPaid"),
        kind=kind,
    )


def _decode_due(doc: dict) -> Due:
    return Due(
        id=_required(doc, "id"),
        name=str(doc.get("name") or ""),
        amount=coerce_decimal(doc.get("amount")),
        created_at=str(doc.get("createdAt") or ""),
        active=_flag(doc, "active", True),
        archived=_flag(doc, "archived", False),
    )


def _decode_due_payment(doc: dict) -> DuePayment:
    return DuePayment(
        id=_required(doc, "id"),
        due_id=_required(doc, "dueId"),
        entity_id=_required(doc, "userId"),
        amount_due=coerce_decimal(doc.get("amountDue")),
        created_at=str(doc.get("createdAt") or ""),
        paid=_flag(doc, "paid", False),
        amount_paid=_optional_decimal(doc, "amountPaid"),
        exempt=_flag(doc, "exempt", False),
    )


def _decode_beverage_consumption(doc: dict) -> BeverageConsumption:
    return BeverageConsumption(
        id=_required(doc, "id"),
        entity_id=_required(doc, "userId"),
        beverage_id=str(doc.get("beverageId") or ""),
        amount=coerce_decimal(doc.get("amount")),
        date=str(doc.get("date") or ""),
        paid=_flag(doc, "paid", False),
        amount_paid=_optional_decimal(doc, "amountPaid"),
    )


__all__ = ["JsonLedgerRepository", "LedgerDataError", "decode_snapshot"]
