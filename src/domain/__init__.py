"""Domain package for ledger rules and core models."""

from .constants import (
    BEVERAGE_CATEGORY_APPLER,
    BEVERAGE_CATEGORY_BEER_LEMONADE,
    BEVERAGE_CATEGORY_DEFAULT,
)
from .models import (
    BalanceBreakdown,
    BalanceRules,
    BeverageConsumption,
    Due,
    DuePayment,
    Fine,
    FineKind,
    LedgerSnapshot,
    Payment,
    PaymentCategory,
    Player,
    TransactionKind,
)
from .policies import is_valid_player_name
from .services import (
    calculate_entity_balance,
    classify,
    classify_punishment_with_subject,
    compute_balance_breakdowns,
    compute_entity_breakdown,
    map_beverage_category,
    update_entities_with_calculated_balances,
)

__all__ = [
    "BEVERAGE_CATEGORY_APPLER",
    "BEVERAGE_CATEGORY_BEER_LEMONADE",
    "BEVERAGE_CATEGORY_DEFAULT",
    "BalanceBreakdown",
    "BalanceRules",
    "BeverageConsumption",
    "Due",
    "DuePayment",
    "Fine",
    "FineKind",
    "LedgerSnapshot",
    "Payment",
    "PaymentCategory",
    "Player",
    "TransactionKind",
    "is_valid_player_name",
    "calculate_entity_balance",
    "classify",
    "classify_punishment_with_subject",
    "compute_balance_breakdowns",
    "compute_entity_breakdown",
    "map_beverage_category",
    "update_entities_with_calculated_balances",
]
