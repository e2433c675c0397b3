"""Domain models for perishable pantry items."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, timedelta
from uuid import UUID, uuid4

from larder.domain.cooking import Ingredient

DEFAULT_EXPIRING_SOON_DAYS = 3


@dataclass(frozen=True)
class Perishable:
    """An ingredient with a purchase date and an expiry date."""

    ingredient: Ingredient
    purchase_date: date
    expiry_date: date
    id: UUID = field(default_factory=uuid4)

    @classmethod
    def from_shelf_life(
        cls, ingredient: Ingredient, purchase_date: date, shelf_life: timedelta
    ) -> "Perishable":
        """Create a perishable that expires a shelf life after purchase.

        Only whole days count, so a half-day shelf life expires on the
        purchase date.
        """
        return cls(
            ingredient=ingredient,
            purchase_date=purchase_date,
            expiry_date=purchase_date + timedelta(days=_whole_days(shelf_life)),
        )

    @classmethod
    def from_expiration_date(
        cls,
        ingredient: Ingredient,
        purchase_date: date,
        expiration_date: date,
        extended_shelf_life: timedelta | None = None,
    ) -> "Perishable":
        """Create a perishable from a labelled expiration date.

        ``extended_shelf_life`` moves the expiry by whole days and may be
        negative for items that should be used before the label says.
        """
        if extended_shelf_life is not None:
            expiration_date += timedelta(days=_whole_days(extended_shelf_life))
        return cls(
            ingredient=ingredient,
            purchase_date=purchase_date,
            expiry_date=expiration_date,
        )

    def days_until_expiry(self, today: date) -> int:
        """Return the days left before expiry; negative once expired."""
        return (self.expiry_date - today).days


class Pantry:
    """A collection of perishable items, kept in insertion order."""

    def __init__(self, contents: Iterable[Perishable] | None = None) -> None:
        self.id: UUID = uuid4()
        self._items: list[Perishable] = list(contents or [])

    @property
    def items(self) -> tuple[Perishable, ...]:
        """Return a read-only view of the items."""
        return tuple(self._items)

    def add(self, item: Perishable) -> None:
        """Add an item."""
        self._items.append(item)

    def extend(self, items: Iterable[Perishable]) -> None:
        """Add several items."""
        self._items.extend(items)

    def remove(self, item: Perishable) -> None:
        """Remove an item, raising ValueError when it is absent."""
        self._items.remove(item)

    def discard(self, item: Perishable) -> bool:
        """Remove an item if present and report whether it was removed."""
        try:
            self._items.remove(item)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def items_expiring_soon(
        self,
        threshold_days: int | timedelta = DEFAULT_EXPIRING_SOON_DAYS,
        today: date | None = None,
    ) -> list[Perishable]:
        """Return items expiring within the threshold, including expired ones."""
        if isinstance(threshold_days, timedelta):
            threshold_days = _whole_days(threshold_days)
        if threshold_days < 0:
            raise ValueError("The threshold must be non-negative")
        current = today or date.today()
        return [
            item
            for item in self._items
            if item.days_until_expiry(current) <= threshold_days
        ]

    def expired_items(self, today: date | None = None) -> list[Perishable]:
        """Return items at or past their expiry date."""
        return self.items_expiring_soon(0, today=today)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Perishable]:
        return iter(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self._items


def _whole_days(span: timedelta) -> int:
    """Return the whole days in a span, truncating toward zero."""
    return int(span / timedelta(days=1))
