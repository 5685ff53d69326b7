"""Tests for the balance aggregation service."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    BalanceBreakdown,
    BalanceRules,
    BeverageConsumption,
    Due,
    DuePayment,
    Fine,
    FineKind,
    Payment,
    PaymentCategory,
)
from src.domain.services.balance import (
    breakdown_for,
    calculate_entity_balance,
    compute_balance_breakdowns,
    compute_entity_breakdown,
)

PLAYER = "player-1"
LEGACY = BalanceRules(legacy_credit_fallback=True)


def _payment(amount, paid=False, category=None, reason="", entity_id=PLAYER):
    return Payment(
        id=f"pay-{amount}-{reason}",
        entity_id=entity_id,
        reason=reason,
        amount=Decimal(str(amount)),
        date="2024-03-01T12:00:00+00:00",
        paid=paid,
        category=category,
    )


def _fine(amount, paid=False, amount_paid=None, kind=FineKind.REGULAR):
    return Fine(
        id=f"fine-{amount}-{kind.value}",
        entity_id=PLAYER,
        reason="Zu spät",
        amount=Decimal(str(amount)),
        date="2024-03-01T12:00:00+00:00",
        paid=paid,
        amount_paid=None if amount_paid is None else Decimal(str(amount_paid)),
        kind=kind,
    )


def _due_payment(amount, due_id="due-1", paid=False, exempt=False, amount_paid=None):
    return DuePayment(
        id=f"dp-{due_id}-{amount}",
        due_id=due_id,
        entity_id=PLAYER,
        amount_due=Decimal(str(amount)),
        created_at="2024-01-01T12:00:00+00:00",
        paid=paid,
        amount_paid=None if amount_paid is None else Decimal(str(amount_paid)),
        exempt=exempt,
    )


def _due(due_id="due-1", active=True, archived=False):
    return Due(
        id=due_id,
        name="Saisonbeitrag 2024",
        amount=Decimal("50"),
        created_at="2024-01-01T12:00:00+00:00",
        active=active,
        archived=archived,
    )


def test_full_breakdown_for_mixed_records() -> None:
    """Credits, fines, dues and beverages should land in their buckets."""
    breakdown = compute_entity_breakdown(
        PLAYER,
        payments=[_payment(50, category=PaymentCategory.SETTLEMENT)],
        fines=[
            _fine(10, amount_paid=3),
            _fine(5, kind=FineKind.BEVERAGE),
        ],
        due_payments=[_due_payment(50)],
        dues=[_due()],
    )

    assert breakdown.guthaben == Decimal("50")
    assert breakdown.guthaben_rest == Decimal("0")
    assert breakdown.fines == Decimal("7")
    assert breakdown.dues == Decimal("50")
    assert breakdown.beverages == Decimal("5")
    assert breakdown.total_credits == Decimal("50")
    assert breakdown.total_liabilities == Decimal("62")
    assert breakdown.balance == Decimal("-12")


def test_paid_records_contribute_nothing() -> None:
    """A paid payment and a paid fine leave the balance at zero."""
    balance = calculate_entity_balance(
        PLAYER,
        payments=[_payment(100, paid=True, category=PaymentCategory.DEPOSIT)],
        fines=[_fine(20, paid=True)],
    )

    assert balance == Decimal("0")


@pytest.mark.parametrize(
    ("rules", "expected"),
    [
        (BalanceRules(), Decimal("-30")),
        (LEGACY, Decimal("70")),
    ],
)
def test_exempt_due_and_paid_payment_depend_on_credit_rule(rules, expected) -> None:
    """Exempt dues never count; the paid payment counts only in legacy mode."""
    balance = calculate_entity_balance(
        PLAYER,
        payments=[_payment(100, paid=True)],
        due_payments=[
            _due_payment(50, due_id="due-1", exempt=True),
            _due_payment(30, due_id="due-2"),
        ],
        dues=[_due("due-1"), _due("due-2")],
        rules=rules,
    )

    assert balance == expected


def test_legacy_fallback_ignores_categorized_paid_payments() -> None:
    """Only uncategorized paid payments are rescued by the legacy rule."""
    breakdown = compute_entity_breakdown(
        PLAYER,
        payments=[
            _payment(40, paid=True, category=PaymentCategory.DEPOSIT),
            _payment(15, paid=True, reason="Trikot"),
        ],
        rules=LEGACY,
    )

    assert breakdown.guthaben == Decimal("15")


def test_category_is_authoritative_over_reason() -> None:
    """Present categories decide; reason text is only a legacy fallback."""
    breakdown = compute_entity_breakdown(
        PLAYER,
        payments=[
            _payment(10, category=PaymentCategory.DEPOSIT, reason="Trikot"),
            _payment(20, category=PaymentCategory.TRANSFER, reason="Guthaben"),
            _payment(30, category=PaymentCategory.UNKNOWN, reason="Guthaben"),
        ],
    )

    assert breakdown.guthaben == Decimal("10")
    assert breakdown.guthaben_rest == Decimal("0")


def test_legacy_reasons_select_credit_buckets() -> None:
    """Uncategorized unpaid payments are matched by reason text."""
    breakdown = compute_entity_breakdown(
        PLAYER,
        payments=[
            _payment(12, reason="Guthaben Rest"),
            _payment(25, reason="Guthaben"),
            _payment(5, reason="Einzahlung Mai"),
            _payment(99, reason="Grillfest"),
        ],
    )

    assert breakdown.guthaben_rest == Decimal("12")
    assert breakdown.guthaben == Decimal("30")
    assert breakdown.total_credits == Decimal("42")


def test_overpaid_liabilities_never_go_negative() -> None:
    """amount_paid above amount must not produce a negative remaining."""
    breakdown = compute_entity_breakdown(
        PLAYER,
        fines=[_fine(10, amount_paid=15)],
        due_payments=[_due_payment(20, amount_paid=25)],
    )

    assert breakdown.fines == Decimal("0")
    assert breakdown.dues == Decimal("0")
    assert breakdown.balance == Decimal("0")


def test_archived_or_inactive_due_gates_its_payments() -> None:
    """Due payments of archived or inactive dues have no impact."""
    breakdown = compute_entity_breakdown(
        PLAYER,
        due_payments=[
            _due_payment(10, due_id="archived"),
            _due_payment(20, due_id="inactive"),
            _due_payment(30, due_id="unknown"),
            _due_payment(40, due_id="active", paid=True),
        ],
        dues=[
            _due("archived", archived=True),
            _due("inactive", active=False),
            _due("active"),
        ],
    )

    assert breakdown.dues == Decimal("30")


def test_separate_beverage_consumptions_count_as_beverages() -> None:
    """Beverage charges supplied as their own collection use one path."""
    consumptions = [
        BeverageConsumption(
            id="bc-1",
            entity_id=PLAYER,
            beverage_id="bier",
            amount=Decimal("2.50"),
            date="2024-03-02T12:00:00+00:00",
            amount_paid=Decimal("1.00"),
        ),
        BeverageConsumption(
            id="bc-2",
            entity_id=PLAYER,
            beverage_id="cola",
            amount=Decimal("2.00"),
            date="2024-03-02T12:00:00+00:00",
            paid=True,
        ),
    ]

    breakdown = compute_entity_breakdown(
        PLAYER,
        fines=[_fine(3, kind=FineKind.BEVERAGE)],
        beverage_consumptions=consumptions,
    )

    assert breakdown.beverages == Decimal("4.50")
    assert breakdown.fines == Decimal("0")


def test_breakdowns_cover_every_entity_and_are_read_only() -> None:
    """Every owner gets an entry; the result map cannot be mutated."""
    breakdowns = compute_balance_breakdowns(
        payments=[_payment(10, paid=True, entity_id="other")],
        fines=[_fine(4)],
    )

    assert set(breakdowns) == {PLAYER, "other"}
    assert breakdowns["other"] == BalanceBreakdown()
    assert breakdowns[PLAYER].balance == Decimal("-4")
    with pytest.raises(TypeError):
        breakdowns["new"] = BalanceBreakdown()


def test_missing_entity_is_equivalent_to_zero_breakdown() -> None:
    """Players without records have a zero balance."""
    breakdowns = compute_balance_breakdowns()
    breakdown = breakdown_for(breakdowns, "nobody")

    assert breakdown.balance == Decimal("0")
    assert breakdown.total_credits == Decimal("0")
    assert breakdown.total_liabilities == Decimal("0")
    assert calculate_entity_balance("nobody") == Decimal("0")


def test_inputs_are_not_mutated() -> None:
    """Aggregation must leave the input collections untouched."""
    fines = [_fine(10, amount_paid=2)]
    snapshot = list(fines)

    compute_balance_breakdowns(fines=fines)
    compute_balance_breakdowns(fines=fines)

    assert fines == snapshot


def test_out_of_contract_data_is_logged() -> None:
    """Negative amounts, overpayments and unknown dues are warned about."""
    logger = MagicMock()

    breakdowns = compute_balance_breakdowns(
        payments=[_payment(-5, reason="Guthaben")],
        fines=[_fine(-8), _fine(10, amount_paid=12)],
        due_payments=[_due_payment(10, due_id="missing")],
        dues=[_due("due-1")],
        logger=logger,
    )

    messages = [call.args[0] for call in logger.warning.call_args_list]
    assert any("Negative payment amount" in msg for msg in messages)
    assert any("Negative amount" in msg for msg in messages)
    assert any("amount_paid exceeds amount" in msg for msg in messages)
    assert any("unknown due_id=missing" in msg for msg in messages)
    assert breakdowns[PLAYER].guthaben == Decimal("0")
    assert breakdowns[PLAYER].fines == Decimal("0")
    assert breakdowns[PLAYER].dues == Decimal("10")
