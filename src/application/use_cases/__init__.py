"""Application use cases package."""

from .check_balances import CheckBalancesUseCase
from .get_payment_stats import GetPaymentStatsUseCase, PaymentStatsView
from .get_player_balances import (
    GetPlayerBalancesUseCase,
    PlayerBalance,
    PlayerBalancesView,
)
from .import_punishments import (
    ImportPunishmentsUseCase,
    PunishmentParseResult,
)
from .import_transactions import (
    ImportTransactionsUseCase,
    TransactionImportResult,
)

__all__ = [
    "CheckBalancesUseCase",
    "GetPaymentStatsUseCase",
    "PaymentStatsView",
    "GetPlayerBalancesUseCase",
    "PlayerBalance",
    "PlayerBalancesView",
    "ImportPunishmentsUseCase",
    "PunishmentParseResult",
    "ImportTransactionsUseCase",
    "TransactionImportResult",
]
