"""Shared fixtures for application use case tests."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.models import (
    Due,
    DuePayment,
    Fine,
    FineKind,
    Payment,
    PaymentCategory,
    Player,
)


@pytest.fixture
def ledger_repository() -> MagicMock:
    """Repository port stub holding a small team ledger."""
    repo = MagicMock()
    repo.fetch_players.return_value = [
        Player(id="p1", name="Zoe", balance=Decimal("-12")),
        Player(id="p2", name="anna", balance=Decimal("5")),
        Player(id="p3", name="Ben"),
    ]
    repo.fetch_payments.return_value = [
        Payment(
            id="pay-1",
            entity_id="p1",
            reason="Einzahlung",
            amount=Decimal("50"),
            date="2024-03-01T12:00:00+00:00",
            category=PaymentCategory.DEPOSIT,
        ),
        Payment(
            id="pay-2",
            entity_id="p2",
            reason="Einzahlung",
            amount=Decimal("30"),
            date="2024-03-02T12:00:00+00:00",
            paid=True,
        ),
    ]
    repo.fetch_fines.return_value = [
        Fine(
            id="fine-1",
            entity_id="p1",
            reason="Zu spät",
            amount=Decimal("10"),
            date="2024-03-03T12:00:00+00:00",
            amount_paid=Decimal("3"),
        ),
        Fine(
            id="fine-2",
            entity_id="p1",
            reason="Bier",
            amount=Decimal("5"),
            date="2024-03-03T12:00:00+00:00",
            kind=FineKind.BEVERAGE,
        ),
        Fine(
            id="fine-3",
            entity_id="ghost",
            reason="Handy",
            amount=Decimal("2"),
            date="2024-03-04T12:00:00+00:00",
        ),
    ]
    repo.fetch_dues.return_value = [
        Due(
            id="due-1",
            name="Saison 2024",
            amount=Decimal("50"),
            created_at="2024-01-01T12:00:00+00:00",
        )
    ]
    repo.fetch_due_payments.return_value = [
        DuePayment(
            id="dp-1",
            due_id="due-1",
            entity_id="p1",
            amount_due=Decimal("50"),
            created_at="2024-01-01T12:00:00+00:00",
        )
    ]
    repo.fetch_beverage_consumptions.return_value = []
    return repo
