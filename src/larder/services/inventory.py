"""Pantry expiry queries."""

import logging
from dataclasses import dataclass
from datetime import date

from larder.domain.inventory import DEFAULT_EXPIRING_SOON_DAYS, Pantry, Perishable

_logger = logging.getLogger(__name__)


@dataclass
class InventoryService:
    """Service for pantry expiry checks with a configured default threshold."""

    expiring_soon_days: int = DEFAULT_EXPIRING_SOON_DAYS

    def expiring_soon(
        self,
        pantry: Pantry,
        threshold_days: int | None = None,
        today: date | None = None,
    ) -> list[Perishable]:
        """Return pantry items expiring within the threshold."""
        threshold = self.expiring_soon_days if threshold_days is None else threshold_days
        items = pantry.items_expiring_soon(threshold, today=today)
        _logger.info(
            "Pantry expiry check: threshold_days=%s matches=%s", threshold, len(items)
        )
        return items

    def expired(self, pantry: Pantry, today: date | None = None) -> list[Perishable]:
        """Return pantry items at or past their expiry date."""
        return pantry.expired_items(today=today)
