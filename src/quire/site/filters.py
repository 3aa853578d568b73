"""Custom Jinja2 filters for page templates."""

from datetime import date, datetime


def format_date(value: date | datetime, format_str: str = "%B %d, %Y") -> str:
    """Format a post date for display.

    Args:
        value: Date or datetime to format
        format_str: strftime format string

    Returns:
        Formatted date string

    """
    if not isinstance(value, date):
        return str(value)
    return value.strftime(format_str)


def isoformat(value: date | datetime) -> str:
    """Format a date as ISO 8601, suitable for ``<time datetime=...>``."""
    if not isinstance(value, date):
        return str(value)
    return value.isoformat()


def reading_time(minutes: int) -> str:
    if minutes <= 1:
        return "1 min read"
    return f"{minutes} min read"
