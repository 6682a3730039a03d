"""Date formatting and age calculations."""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

MONTHS_IN_YEAR = 12
NOON = 12
WEEK_DAYS = 7

AGE_GROUP_NEWBORN = "0-6 months"
AGE_GROUP_INFANT = "6-12 months"
AGE_GROUP_YOUNG_TODDLER = "12-24 months"
AGE_GROUP_TODDLER = "2+ years"


def local_now(timezone_name: str = "UTC") -> datetime:
    """Return the current time in the given IANA timezone."""
    return datetime.now(tz=ZoneInfo(timezone_name))


def current_date(timezone_name: str = "UTC") -> str:
    """Return today's date as YYYY-MM-DD."""
    return local_now(timezone_name).date().isoformat()


def current_time(timezone_name: str = "UTC") -> str:
    """Return the current time as HH:MM."""
    return local_now(timezone_name).strftime("%H:%M")


def format_date(value: date | str | None) -> str:
    """Format a date like 'Jan 5, 2024'."""
    parsed = _as_date(value)
    if parsed is None:
        return ""
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def format_date_short(value: date | str | None) -> str:
    """Format a date like 'Jan 5'."""
    parsed = _as_date(value)
    if parsed is None:
        return ""
    return f"{parsed.strftime('%b')} {parsed.day}"


def format_day_short(value: date | str | None) -> str:
    """Format a date like '1/5'."""
    parsed = _as_date(value)
    if parsed is None:
        return ""
    return f"{parsed.month}/{parsed.day}"


def format_time(value: str | None) -> str:
    """Convert 'HH:MM' to a 12-hour clock string like '2:05 PM'."""
    if not value:
        return ""
    hours, minutes = value.split(":", maxsplit=1)
    hours_num = int(hours)
    suffix = "PM" if hours_num >= NOON else "AM"
    return f"{hours_num % NOON or NOON}:{minutes} {suffix}"


def months_between(birthday: date, today: date) -> int:
    """Return whole calendar months elapsed since birthday."""
    months = (today.year - birthday.year) * MONTHS_IN_YEAR
    months += today.month - birthday.month
    if today.day < birthday.day:
        months -= 1
    return months


def age_group(birthday: date, today: date | None = None) -> str:
    """Bucket a baby's age into one of the four feeding age groups."""
    months = months_between(birthday, today or _utc_today())
    if months < 6:  # noqa: PLR2004
        return AGE_GROUP_NEWBORN
    if months < 12:  # noqa: PLR2004
        return AGE_GROUP_INFANT
    if months < 24:  # noqa: PLR2004
        return AGE_GROUP_YOUNG_TODDLER
    return AGE_GROUP_TODDLER


def baby_age(birthday: date, today: date | None = None) -> str:
    """Describe a baby's age for display."""
    resolved_today = today or _utc_today()
    months = months_between(birthday, resolved_today)
    if months < 1:
        days = max((resolved_today - birthday).days, 0)
        return f"{days} days old"
    if months < 2 * MONTHS_IN_YEAR:
        return f"{months} months old"
    years, remaining = divmod(months, MONTHS_IN_YEAR)
    return (
        f"{years} year{'' if years == 1 else 's'}, "
        f"{remaining} month{'' if remaining == 1 else 's'} old"
    )


def last_seven_days(today: date | None = None) -> list[date]:
    """Return the last seven days, oldest first, ending today."""
    resolved_today = today or _utc_today()
    return [
        resolved_today - timedelta(days=offset)
        for offset in range(WEEK_DAYS - 1, -1, -1)
    ]


def _utc_today() -> date:
    return datetime.now(tz=UTC).date()


def _as_date(value: date | str | None) -> date | None:
    if not value:
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)
