"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from src.domain.models import BalanceRules
from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for loading ledger data and computing balances.

    Attributes:
        legacy_credit_fallback: Count paid payments without a category as
            credit.
        snapshot_file: Optional path to the JSON ledger snapshot.
        currency: Currency code used when printing amounts.
    """

    legacy_credit_fallback: bool = False
    snapshot_file: Optional[Path] = None
    currency: str = "EUR"

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        legacy = cls._parse_bool(os.getenv("LEGACY_CREDIT_FALLBACK", ""))
        raw_snapshot = os.getenv("LEDGER_SNAPSHOT_FILE")
        if raw_snapshot:
            snapshot_file = cls._normalize_path(raw_snapshot, logger=logger)
        else:
            snapshot_file = cls._default_snapshot_file(logger=logger)
        currency = os.getenv("LEDGER_CURRENCY", "EUR").strip().upper()
        return cls(
            legacy_credit_fallback=legacy,
            snapshot_file=snapshot_file,
            currency=currency or "EUR",
        )

    @property
    def balance_rules(self) -> BalanceRules:
        """Return the credit counting rules selected by these settings."""
        return BalanceRules(
            legacy_credit_fallback=self.legacy_credit_fallback
        )

    @staticmethod
    def _parse_bool(raw: str) -> bool:
        return raw.strip().lower() in _TRUE_VALUES

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the snapshot path, accepting ``file://`` URIs.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger snapshot does not exist at {path}")
        return path

    @staticmethod
    def _default_snapshot_file(logger) -> Path | None:
        """Return a default snapshot path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single snapshot is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json snapshots found in data/. "
                "Set LEDGER_SNAPSHOT_FILE to choose one."
            )
        return None


__all__ = ["LedgerSettings"]
