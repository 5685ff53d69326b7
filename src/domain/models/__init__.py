"""Domain models package."""

from .balances import (
    AutoPayment,
    BalanceBreakdown,
    BalanceDiscrepancy,
    BalanceRules,
    PaymentStatus,
)
from .ledger import (
    BeverageConsumption,
    CreditBucket,
    Due,
    DuePayment,
    Fine,
    FineKind,
    LedgerSnapshot,
    LiabilityRecord,
    Payment,
    PaymentCategory,
    Player,
    TransactionKind,
    parse_payment_category,
)
from .stats import DayPoint, MonthlyCohortPoint

__all__ = [
    "AutoPayment",
    "BalanceBreakdown",
    "BalanceDiscrepancy",
    "BalanceRules",
    "PaymentStatus",
    "BeverageConsumption",
    "CreditBucket",
    "Due",
    "DuePayment",
    "Fine",
    "FineKind",
    "LedgerSnapshot",
    "LiabilityRecord",
    "Payment",
    "PaymentCategory",
    "Player",
    "TransactionKind",
    "parse_payment_category",
    "DayPoint",
    "MonthlyCohortPoint",
]
