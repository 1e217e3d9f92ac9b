"""Current-date helper used to parameterize upstream rate queries."""

from datetime import datetime, timezone


def today(now: datetime | None = None) -> str:
    """
    Return today's date as YYYY-MM-DD.

    The date is the part of the ISO 8601 timestamp before the ``T``
    separator, so it is the UTC calendar date unless ``now`` carries
    another offset.

    Args:
        now: Instant to use instead of the current UTC time

    Returns:
        Date string, or "" if the timestamp has no ``T`` separator
    """
    if now is None:
        now = datetime.now(timezone.utc)

    date_part, separator, _ = now.isoformat().partition("T")
    return date_part if separator else ""
