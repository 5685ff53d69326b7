"""Domain services package."""

from .balance import (
    auto_payment,
    breakdown_for,
    calculate_entity_balance,
    compute_balance_breakdowns,
    compute_entity_breakdown,
    credit_contribution,
    liability_contribution,
    payment_status,
    total_paid,
    total_unpaid,
    update_entities_with_calculated_balances,
)
from .classifier import (
    classify,
    classify_punishment_with_subject,
    credit_bucket_for_reason,
    is_credit_reason,
    map_beverage_category,
)
from .diagnostics import compare_stored_balances
from .normalization import normalize_reason
from .validation import validate_credit_amount, validate_liability_amounts

__all__ = [
    "auto_payment",
    "breakdown_for",
    "calculate_entity_balance",
    "compute_balance_breakdowns",
    "compute_entity_breakdown",
    "credit_contribution",
    "liability_contribution",
    "payment_status",
    "total_paid",
    "total_unpaid",
    "update_entities_with_calculated_balances",
    "classify",
    "classify_punishment_with_subject",
    "credit_bucket_for_reason",
    "is_credit_reason",
    "map_beverage_category",
    "compare_stored_balances",
    "normalize_reason",
    "validate_credit_amount",
    "validate_liability_amounts",
]
