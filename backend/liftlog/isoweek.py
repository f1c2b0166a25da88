"""ISO-8601 week arithmetic (Monday start, Thursday anchored)."""
from __future__ import annotations
from datetime import date, timedelta

from liftlog.domain import DAYS_OF_WEEK, DayOfWeek


def day_of_week(d: date) -> DayOfWeek:
    return DAYS_OF_WEEK[d.weekday()]


def thursday_of(d: date) -> date:
    """Thursday of the Monday-start week containing ``d``."""
    return d + timedelta(days=3 - d.weekday())


def iso_week(d: date) -> tuple[int, int]:
    """Return ``(iso_year, week_number)`` for ``d``.

    The week belongs to the year its Thursday falls in; week 1 is the week
    holding that year's first Thursday (always the week containing Jan 4).
    """
    thursday = thursday_of(d)
    year = thursday.year
    first_thursday = thursday_of(date(year, 1, 4))
    week = 1 + (thursday - first_thursday).days // 7
    return year, week


def iso_week_key(d: date) -> str:
    year, week = iso_week(d)
    return f"{year}-W{week:02d}"


def week_number(d: date) -> int:
    return iso_week(d)[1]
