"""Date picker state owned by the presentation layer.

The store never reads this. The API passes the selected timestamp into
``TaskStore.create`` when a request does not name its own due date.
"""

from datetime import datetime, timedelta


def upcoming_dates(start: datetime, days: int = 7) -> list[datetime]:
    """Return ``start`` and the same time on each of the following days."""
    return [start + timedelta(days=offset) for offset in range(days)]


class DatePicker:
    """The currently selected due date."""

    def __init__(self, selected: datetime | None = None) -> None:
        self.selected: datetime = selected or datetime.now()

    def select(self, when: datetime) -> None:
        self.selected = when

    def reset(self) -> None:
        """Go back to the current time."""
        self.selected = datetime.now()


# Global picker instance
picker = DatePicker()
