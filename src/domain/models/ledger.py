"""Domain models for ledger records.

Records arrive already decoded: amounts in currency units, dates as ISO-8601
strings. Every record belongs to one owning entity (the player) through
``entity_id``.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentCategory(str, Enum):
    """Category tag carried by newer payment records.

    ``UNKNOWN`` stands for a tag that is present but not recognized. Legacy
    records carry no tag at all (``None``).
    """

    DEPOSIT = "deposit"
    SETTLEMENT = "payment"
    TRANSFER = "transfer"
    UNKNOWN = "unknown"


class FineKind(str, Enum):
    """Discriminant separating regular fines from beverage charges."""

    REGULAR = "regular"
    BEVERAGE = "beverage"


class TransactionKind(str, Enum):
    """Kind of a punishment-style row once classified."""

    FINE = "FINE"
    DRINK = "DRINK"
    PAYMENT = "PAYMENT"


class CreditBucket(str, Enum):
    """Credit sub-bucket selected from a legacy payment reason."""

    GUTHABEN = "guthaben"
    GUTHABEN_REST = "guthaben_rest"


_CATEGORY_ALIASES = {
    "deposit": PaymentCategory.DEPOSIT,
    "payment": PaymentCategory.SETTLEMENT,
    "settlement": PaymentCategory.SETTLEMENT,
    "transfer": PaymentCategory.TRANSFER,
}


def parse_payment_category(raw) -> PaymentCategory | None:
    """Map a stored category value to a PaymentCategory.

    Args:
        raw: Stored value (string, enum member or None).

    Returns:
        PaymentCategory | None: None when no category is set.
    """
    if raw is None:
        return None
    if isinstance(raw, PaymentCategory):
        return raw
    cleaned = str(raw).strip().lower()
    if not cleaned:
        return None
    return _CATEGORY_ALIASES.get(cleaned, PaymentCategory.UNKNOWN)


@dataclass(frozen=True)
class Payment:
    """One-time credit or transfer event."""

    id: str
    entity_id: str
    reason: str
    amount: Decimal
    date: str
    paid: bool = False
    paid_at: str | None = None
    category: PaymentCategory | None = None


@dataclass(frozen=True)
class Fine:
    """Fine or beverage charge, told apart by ``kind``."""

    id: str
    entity_id: str
    reason: str
    amount: Decimal
    date: str
    paid: bool = False
    amount_paid: Decimal | None = None
    kind: FineKind = FineKind.REGULAR

    @property
    def is_beverage(self) -> bool:
        """Return True when the fine is a beverage charge."""
        return self.kind is FineKind.BEVERAGE


@dataclass(frozen=True)
class Due:
    """Recurring obligation definition shared by several players."""

    id: str
    name: str
    amount: Decimal
    created_at: str
    active: bool = True
    archived: bool = False


@dataclass(frozen=True)
class DuePayment:
    """One player's obligation against a Due."""

    id: str
    due_id: str
    entity_id: str
    amount_due: Decimal
    created_at: str
    paid: bool = False
    amount_paid: Decimal | None = None
    exempt: bool = False


@dataclass(frozen=True)
class BeverageConsumption:
    """Charge for a consumed beverage item."""

    id: str
    entity_id: str
    beverage_id: str
    amount: Decimal
    date: str
    paid: bool = False
    amount_paid: Decimal | None = None


LiabilityRecord = Fine | DuePayment | BeverageConsumption


@dataclass(frozen=True)
class Player:
    """Entity summary record carrying a denormalized balance."""

    id: str
    name: str
    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class LedgerSnapshot:
    """All collections needed to compute balances, as decoded records."""

    players: tuple[Player, ...] = ()
    payments: tuple[Payment, ...] = ()
    fines: tuple[Fine, ...] = ()
    dues: tuple[Due, ...] = ()
    due_payments: tuple[DuePayment, ...] = ()
    beverage_consumptions: tuple[BeverageConsumption, ...] = ()


__all__ = [
    "PaymentCategory",
    "FineKind",
    "TransactionKind",
    "CreditBucket",
    "parse_payment_category",
    "Payment",
    "Fine",
    "Due",
    "DuePayment",
    "BeverageConsumption",
    "LiabilityRecord",
    "Player",
    "LedgerSnapshot",
]
