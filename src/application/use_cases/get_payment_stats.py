"""Use case to compute payment statistics for the dashboard."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models import DayPoint, MonthlyCohortPoint
from src.domain.services.stats import (
    build_first_payers_and_cumulative_revenue_by_month,
    compute_arppu,
    compute_open_fines_total,
    group_payments_by_day,
    max_date_from_collections,
    moving_average,
    sum_payments_in_last_days,
    sum_payments_today,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class PaymentStatsView:
    """Payment statistics over a trailing window."""

    today_total: Decimal
    window_total: Decimal
    arppu: Decimal
    open_fines_total: Decimal
    daily: list[DayPoint]
    daily_average: list[DayPoint]
    cohorts: list[MonthlyCohortPoint]
    last_activity: str | None


class GetPaymentStatsUseCase:
    """Compute payment statistics from the ledger repository."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing decoded ledger collections.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        days: int = 30,
        average_window: int = 7,
        now: datetime | None = None,
    ) -> PaymentStatsView:
        """Return payment statistics for the trailing ``days`` window.

        Args:
            days: Size of the trailing window in days.
            average_window: Window of the moving average over daily totals.
            now: Reference time; defaults to the current UTC time.

        Returns:
            PaymentStatsView: Totals, series and cohorts.
        """
        payments = self._ledger_repository.fetch_payments()
        fines = self._ledger_repository.fetch_fines()
        due_payments = self._ledger_repository.fetch_due_payments()

        daily = group_payments_by_day(payments)
        view = PaymentStatsView(
            today_total=sum_payments_today(payments, now=now),
            window_total=sum_payments_in_last_days(payments, days, now=now),
            arppu=compute_arppu(payments, days, now=now),
            open_fines_total=compute_open_fines_total(fines),
            daily=daily,
            daily_average=moving_average(daily, average_window),
            cohorts=build_first_payers_and_cumulative_revenue_by_month(
                payments
            ),
            last_activity=max_date_from_collections(
                [payments, fines, due_payments]
            ),
        )
        self._logger.info(
            f"Payment stats computed over {days} days: "
            f"total={view.window_total}, arppu={view.arppu}"
        )
        return view


__all__ = ["GetPaymentStatsUseCase", "PaymentStatsView"]
