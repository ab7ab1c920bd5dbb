from datetime import UTC, date, datetime


class Now:
    @staticmethod
    def as_date() -> date:
        """Return the current UTC calendar date."""

        return datetime.now(UTC).date()
