"""Domain models for computed balances."""

from dataclasses import dataclass
from decimal import Decimal

_ZERO = Decimal("0")


@dataclass(frozen=True)
class BalanceRules:
    """Switches selecting how credits are counted.

    Attributes:
        legacy_credit_fallback: Also count paid payments without a category
            as general credit.
    """

    legacy_credit_fallback: bool = False


@dataclass(frozen=True)
class BalanceBreakdown:
    """Open credits and liabilities of one player.

    Attributes:
        guthaben: Open general credit.
        guthaben_rest: Open remaining-credit sub-bucket.
        fines: Open remaining fine debt.
        dues: Open remaining dues debt.
        beverages: Open remaining beverage debt.
    """

    guthaben: Decimal = _ZERO
    guthaben_rest: Decimal = _ZERO
    fines: Decimal = _ZERO
    dues: Decimal = _ZERO
    beverages: Decimal = _ZERO

    @property
    def total_credits(self) -> Decimal:
        """Return guthaben plus guthaben_rest."""
        return self.guthaben + self.guthaben_rest

    @property
    def total_liabilities(self) -> Decimal:
        """Return fines plus dues plus beverages."""
        return self.fines + self.dues + self.beverages

    @property
    def balance(self) -> Decimal:
        """Return total credits minus total liabilities."""
        return self.total_credits - self.total_liabilities

    @classmethod
    def zero(cls) -> "BalanceBreakdown":
        """Return a breakdown with every bucket at zero."""
        return cls()


@dataclass(frozen=True)
class PaymentStatus:
    """Payment state of a single liability."""

    is_paid: bool
    amount_paid: Decimal
    amount_remaining: Decimal
    total_amount: Decimal


@dataclass(frozen=True)
class AutoPayment:
    """How much of a new fine an existing credit settles."""

    paid: bool
    amount_paid: Decimal | None


@dataclass(frozen=True)
class BalanceDiscrepancy:
    """Player whose stored balance differs from the computed one."""

    player_id: str
    player_name: str
    stored_balance: Decimal
    computed_balance: Decimal

    @property
    def delta(self) -> Decimal:
        """Return computed minus stored balance."""
        return self.computed_balance - self.stored_balance


__all__ = [
    "BalanceRules",
    "BalanceBreakdown",
    "PaymentStatus",
    "AutoPayment",
    "BalanceDiscrepancy",
]
