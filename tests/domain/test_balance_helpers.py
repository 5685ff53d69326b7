from decimal import Decimal

import pytest

from src.domain.models import (
    BalanceBreakdown,
    BalanceRules,
    BeverageConsumption,
    CreditBucket,
    Due,
    DuePayment,
    Fine,
    Payment,
    PaymentCategory,
    Player,
)
from src.domain.services.balance import (
    auto_payment,
    credit_contribution,
    liability_contribution,
    payment_status,
    total_paid,
    total_unpaid,
    update_entities_with_calculated_balances,
)


def _fine(entity_id, amount, paid=False, amount_paid=None):
    return Fine(
        id=f"fine-{entity_id}-{amount}",
        entity_id=entity_id,
        reason="Gelbe Karte",
        amount=Decimal(amount),
        date="2024-05-01T12:00:00+00:00",
        paid=paid,
        amount_paid=None if amount_paid is None else Decimal(amount_paid),
    )


def test_breakdown_zero_has_zero_totals():
    zero = BalanceBreakdown.zero()

    assert zero == BalanceBreakdown()
    assert zero.balance == Decimal("0")


def test_payment_status_for_paid_liability():
    status = payment_status(Decimal("20"), True, Decimal("5"))

    assert status.is_paid is True
    assert status.amount_paid == Decimal("20")
    assert status.amount_remaining == Decimal("0")
    assert status.total_amount == Decimal("20")


def test_payment_status_for_partially_paid_liability():
    status = payment_status("20", False, "7.50")

    assert status.is_paid is False
    assert status.amount_paid == Decimal("7.50")
    assert status.amount_remaining == Decimal("12.50")


def test_payment_status_without_partial_payment():
    status = payment_status(Decimal("10"), False)

    assert status.amount_paid == Decimal("0")
    assert status.amount_remaining == Decimal("10")


@pytest.mark.parametrize(
    ("fine_amount", "balance", "expected_paid", "expected_amount"),
    [
        ("10", "25", True, Decimal("10")),
        ("10", "10", True, Decimal("10")),
        ("10", "4", False, Decimal("4")),
        ("10", "0", False, None),
        ("10", "-5", False, None),
    ],
)
def test_auto_payment(fine_amount, balance, expected_paid, expected_amount):
    result = auto_payment(Decimal(fine_amount), Decimal(balance))

    assert result.paid is expected_paid
    assert result.amount_paid == expected_amount


def test_total_unpaid_sums_open_liabilities_of_one_player():
    fines = [
        _fine("p1", "10", amount_paid="4"),
        _fine("p1", "3", paid=True),
        _fine("p2", "100"),
    ]
    due_payments = [
        DuePayment(
            id="dp-1",
            due_id="due-1",
            entity_id="p1",
            amount_due=Decimal("30"),
            created_at="2024-01-01T12:00:00+00:00",
        )
    ]
    consumptions = [
        BeverageConsumption(
            id="bc-1",
            entity_id="p1",
            beverage_id="wasser",
            amount=Decimal("1.50"),
            date="2024-05-02T12:00:00+00:00",
        )
    ]

    assert total_unpaid("p1", fines, due_payments, consumptions) == Decimal(
        "37.50"
    )


def test_total_paid_sums_settled_payments_only():
    payments = [
        Payment("a", "p1", "Einzahlung", Decimal("20"), "2024-05-01", paid=True),
        Payment("b", "p1", "Guthaben", Decimal("5"), "2024-05-02"),
        Payment("c", "p2", "Einzahlung", Decimal("50"), "2024-05-03", paid=True),
    ]

    assert total_paid("p1", payments) == Decimal("20")


def test_update_entities_returns_new_players_with_computed_balance():
    players = [
        Player(id="p1", name="Anna", balance=Decimal("99")),
        Player(id="p2", name="Ben"),
    ]
    payments = [
        Payment(
            "pay-1",
            "p1",
            "Guthaben",
            Decimal("15"),
            "2024-05-01",
            category=PaymentCategory.DEPOSIT,
        )
    ]

    updated = update_entities_with_calculated_balances(
        players, payments, [_fine("p1", "5")]
    )

    assert [player.balance for player in updated] == [
        Decimal("10"),
        Decimal("0"),
    ]
    assert players[0].balance == Decimal("99")


def test_credit_contribution_uses_rest_bucket():
    payment = Payment("r", "p1", " Guthaben Rest ", Decimal("8"), "2024-05-01")

    assert credit_contribution(payment, BalanceRules()) == (
        CreditBucket.GUTHABEN_REST,
        Decimal("8"),
    )


def test_liability_contribution_rejects_unknown_records():
    with pytest.raises(TypeError):
        liability_contribution(object(), {})


def test_liability_contribution_for_inactive_due():
    due = Due(
        id="due-1",
        name="Hallenmiete",
        amount=Decimal("20"),
        created_at="2024-01-01",
        active=False,
    )
    record = DuePayment(
        id="dp-1",
        due_id="due-1",
        entity_id="p1",
        amount_due=Decimal("20"),
        created_at="2024-01-01",
    )

    assert liability_contribution(record, {"due-1": due}) is None
    assert liability_contribution(record, {}) == ("dues", Decimal("20"))
