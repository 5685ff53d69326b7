"""Balance aggregation over ledger records.

A player's balance is the open credit owed to them minus the open amounts
they still owe:

* credits come from payments (see ``credit_contribution``);
* liabilities come from fines, due payments and beverage consumptions,
  each contributing its remaining amount ``max(0, amount - amount_paid)``
  unless it is paid.

All functions are pure: inputs are never mutated and every call builds a
fresh result.
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import replace
from decimal import Decimal
from itertools import chain
from logging import Logger
from types import MappingProxyType

from src.domain.models import (
    AutoPayment,
    BalanceBreakdown,
    BalanceRules,
    BeverageConsumption,
    CreditBucket,
    Due,
    DuePayment,
    Fine,
    LiabilityRecord,
    Payment,
    PaymentCategory,
    PaymentStatus,
    Player,
)
from src.domain.services.classifier import credit_bucket_for_reason
from src.domain.services.validation import (
    validate_credit_amount,
    validate_liability_amounts,
)
from src.utils.decimal_utils import ZERO, coerce_decimal, remaining_amount

_CREDIT_CATEGORIES = (PaymentCategory.DEPOSIT, PaymentCategory.SETTLEMENT)
_BUCKET_FIELDS = {
    CreditBucket.GUTHABEN: "guthaben",
    CreditBucket.GUTHABEN_REST: "guthaben_rest",
}
_EMPTY_BREAKDOWN = BalanceBreakdown()


def credit_contribution(
    payment: Payment,
    rules: BalanceRules,
) -> tuple[CreditBucket, Decimal] | None:
    """Return the credit bucket and amount a payment adds, if any.

    Only unpaid payments are open credit. A category, when present, is
    authoritative; legacy payments without a category fall back to reason
    matching, and unmatched reasons add nothing. With
    ``legacy_credit_fallback`` a paid payment without a category also
    counts as general credit.

    Args:
        payment: Payment record.
        rules: Credit counting rules.

    Returns:
        tuple[CreditBucket, Decimal] | None: Bucket and amount, or None.
    """
    amount = max(ZERO, coerce_decimal(payment.amount))
    category = payment.category
    if payment.paid:
        if rules.legacy_credit_fallback and category is None:
            return CreditBucket.GUTHABEN, amount
        return None
    if category is None:
        bucket = credit_bucket_for_reason(payment.reason)
        if bucket is None:
            return None
        return bucket, amount
    if category in _CREDIT_CATEGORIES:
        return CreditBucket.GUTHABEN, amount
    return None


def liability_contribution(
    record: LiabilityRecord,
    dues_by_id: Mapping[str, Due],
) -> tuple[str, Decimal] | None:
    """Return the breakdown field and open amount of a liability.

    Args:
        record: Fine, due payment or beverage consumption.
        dues_by_id: Due definitions keyed by id.

    Returns:
        tuple[str, Decimal] | None: Field name and remaining amount, or
        None when the record has no balance impact at all.
    """
    if isinstance(record, DuePayment):
        if record.exempt:
            return None
        due = dues_by_id.get(record.due_id)
        if due is not None and (due.archived or not due.active):
            return None
        return "dues", _open_amount(
            record.paid, record.amount_due, record.amount_paid
        )
    if isinstance(record, Fine):
        field = "beverages" if record.is_beverage else "fines"
        return field, _open_amount(
            record.paid, record.amount, record.amount_paid
        )
    if isinstance(record, BeverageConsumption):
        return "beverages", _open_amount(
            record.paid, record.amount, record.amount_paid
        )
    raise TypeError(f"Unsupported liability record: {type(record).__name__}")


def compute_balance_breakdowns(
    payments: Iterable[Payment] = (),
    fines: Iterable[Fine] = (),
    due_payments: Iterable[DuePayment] = (),
    beverage_consumptions: Iterable[BeverageConsumption] = (),
    dues: Iterable[Due] = (),
    *,
    rules: BalanceRules | None = None,
    logger: Logger | None = None,
) -> Mapping[str, BalanceBreakdown]:
    """Compute the balance breakdown of every player in the collections.

    Every entity id found in any record gets an entry, even when nothing
    it owns is open. A missing id is equivalent to ``BalanceBreakdown()``.

    Args:
        payments: Payment records.
        fines: Fines, regular and beverage kinds alike.
        due_payments: Per-player due obligations.
        beverage_consumptions: Beverage charges kept as a separate
            collection.
        dues: Due definitions gating their due payments.
        rules: Credit counting rules; defaults to ``BalanceRules()``.
        logger: Optional logger for out-of-contract data warnings.

    Returns:
        Mapping[str, BalanceBreakdown]: Read-only map keyed by entity id.
    """
    resolved_rules = rules or BalanceRules()
    dues_by_id = {due.id: due for due in dues}
    totals: dict[str, dict[str, Decimal]] = {}

    for payment in payments:
        if not payment.entity_id:
            continue
        buckets = totals.setdefault(payment.entity_id, {})
        validate_credit_amount(
            payment.id, coerce_decimal(payment.amount), logger
        )
        contribution = credit_contribution(payment, resolved_rules)
        if contribution is None:
            continue
        bucket, amount = contribution
        field = _BUCKET_FIELDS[bucket]
        buckets[field] = buckets.get(field, ZERO) + amount

    for record in _iter_liabilities(fines, due_payments, beverage_consumptions):
        if not record.entity_id:
            continue
        buckets = totals.setdefault(record.entity_id, {})
        _validate_liability(record, dues_by_id, logger)
        contribution = liability_contribution(record, dues_by_id)
        if contribution is None:
            continue
        field, amount = contribution
        buckets[field] = buckets.get(field, ZERO) + amount

    return MappingProxyType(
        {
            entity_id: BalanceBreakdown(**buckets)
            for entity_id, buckets in totals.items()
        }
    )


def breakdown_for(
    breakdowns: Mapping[str, BalanceBreakdown],
    entity_id: str,
) -> BalanceBreakdown:
    """Return the breakdown of a player, zero when the player is absent."""
    return breakdowns.get(entity_id, _EMPTY_BREAKDOWN)


def compute_entity_breakdown(
    entity_id: str,
    payments: Iterable[Payment] = (),
    fines: Iterable[Fine] = (),
    due_payments: Iterable[DuePayment] = (),
    beverage_consumptions: Iterable[BeverageConsumption] = (),
    dues: Iterable[Due] = (),
    *,
    rules: BalanceRules | None = None,
    logger: Logger | None = None,
) -> BalanceBreakdown:
    """Compute the balance breakdown of a single player."""
    breakdowns = compute_balance_breakdowns(
        (p for p in payments if p.entity_id == entity_id),
        (f for f in fines if f.entity_id == entity_id),
        (dp for dp in due_payments if dp.entity_id == entity_id),
        (bc for bc in beverage_consumptions if bc.entity_id == entity_id),
        dues,
        rules=rules,
        logger=logger,
    )
    return breakdown_for(breakdowns, entity_id)


def calculate_entity_balance(
    entity_id: str,
    payments: Iterable[Payment] = (),
    fines: Iterable[Fine] = (),
    due_payments: Iterable[DuePayment] = (),
    beverage_consumptions: Iterable[BeverageConsumption] = (),
    dues: Iterable[Due] = (),
    *,
    rules: BalanceRules | None = None,
) -> Decimal:
    """Return only the net balance of a single player."""
    return compute_entity_breakdown(
        entity_id,
        payments,
        fines,
        due_payments,
        beverage_consumptions,
        dues,
        rules=rules,
    ).balance


def update_entities_with_calculated_balances(
    players: Iterable[Player],
    payments: Iterable[Payment] = (),
    fines: Iterable[Fine] = (),
    due_payments: Iterable[DuePayment] = (),
    beverage_consumptions: Iterable[BeverageConsumption] = (),
    dues: Iterable[Due] = (),
    *,
    rules: BalanceRules | None = None,
) -> list[Player]:
    """Return copies of the players carrying their computed balance.

    Args:
        players: Player summary records.
        payments: Payment records.
        fines: Fine records.
        due_payments: Due payment records.
        beverage_consumptions: Beverage consumption records.
        dues: Due definitions.
        rules: Credit counting rules.

    Returns:
        list[Player]: New player records, input order preserved.
    """
    breakdowns = compute_balance_breakdowns(
        payments,
        fines,
        due_payments,
        beverage_consumptions,
        dues,
        rules=rules,
    )
    return [
        replace(player, balance=breakdown_for(breakdowns, player.id).balance)
        for player in players
    ]


def payment_status(
    total_amount,
    paid: bool,
    amount_paid=None,
) -> PaymentStatus:
    """Describe how much of a liability is settled.

    Args:
        total_amount: Total amount of the fine, due or beverage charge.
        paid: Whether the liability is marked as paid.
        amount_paid: Partial payments recorded so far.

    Returns:
        PaymentStatus: Paid flag, paid amount and remaining amount.
    """
    total = coerce_decimal(total_amount)
    if paid:
        return PaymentStatus(
            is_paid=True,
            amount_paid=total,
            amount_remaining=ZERO,
            total_amount=total,
        )
    return PaymentStatus(
        is_paid=False,
        amount_paid=coerce_decimal(amount_paid),
        amount_remaining=remaining_amount(total, amount_paid),
        total_amount=total,
    )


def auto_payment(fine_amount, current_balance) -> AutoPayment:
    """Return how much of a new fine the player's credit settles.

    Args:
        fine_amount: Amount of the fine being created.
        current_balance: Player's current net balance.

    Returns:
        AutoPayment: Paid in full, partially paid, or untouched.
    """
    amount = coerce_decimal(fine_amount)
    balance = coerce_decimal(current_balance)
    if balance >= amount:
        return AutoPayment(paid=True, amount_paid=amount)
    if balance > 0:
        return AutoPayment(paid=False, amount_paid=balance)
    return AutoPayment(paid=False, amount_paid=None)


def total_unpaid(
    entity_id: str,
    fines: Iterable[Fine] = (),
    due_payments: Iterable[DuePayment] = (),
    beverage_consumptions: Iterable[BeverageConsumption] = (),
    dues: Iterable[Due] = (),
) -> Decimal:
    """Return the open liabilities of a player."""
    return compute_entity_breakdown(
        entity_id,
        (),
        fines,
        due_payments,
        beverage_consumptions,
        dues,
    ).total_liabilities


def total_paid(entity_id: str, payments: Iterable[Payment] = ()) -> Decimal:
    """Return the sum of a player's paid payments."""
    return sum(
        (
            coerce_decimal(payment.amount)
            for payment in payments
            if payment.entity_id == entity_id and payment.paid
        ),
        ZERO,
    )


def _open_amount(paid: bool, amount, amount_paid) -> Decimal:
    if paid:
        return ZERO
    return remaining_amount(amount, amount_paid)


def _iter_liabilities(
    fines: Iterable[Fine],
    due_payments: Iterable[DuePayment],
    beverage_consumptions: Iterable[BeverageConsumption],
) -> Iterator[LiabilityRecord]:
    return chain(fines, due_payments, beverage_consumptions)


def _validate_liability(
    record: LiabilityRecord,
    dues_by_id: Mapping[str, Due],
    logger: Logger | None,
) -> None:
    if logger is None:
        return
    if isinstance(record, DuePayment):
        if dues_by_id and record.due_id not in dues_by_id:
            logger.warning(
                f"Due payment {record.id} references unknown due_id="
                f"{record.due_id}"
            )
        amount = record.amount_due
    else:
        amount = record.amount
    validate_liability_amounts(
        record.id,
        coerce_decimal(amount),
        coerce_decimal(record.amount_paid),
        logger,
    )


__all__ = [
    "credit_contribution",
    "liability_contribution",
    "compute_balance_breakdowns",
    "breakdown_for",
    "compute_entity_breakdown",
    "calculate_entity_balance",
    "update_entities_with_calculated_balances",
    "payment_status",
    "auto_payment",
    "total_unpaid",
    "total_paid",
]
