"""
Date helpers for post dates and directory prefixes.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as date_parser

from ..errors import ParseError

DatePrefixSpec = Union[None, bool, str, date]

PREFIX_FORMAT = "%Y-%m-%d"
POST_DATE_FORMAT = "%m-%d-%Y"
TODAY_KEYWORD = "today"

# Tried in order; month-first keeps "9/12/2020" as September 12th.
_DATE_PARSING_STRATEGIES = [
    lambda value: date_parser.isoparse(value),
    lambda value: date_parser.parse(value, dayfirst=False),
]


def today() -> date:
    """Return the current local calendar date."""
    return date.today()


def parse_date(value: str, label: str = "date prefix") -> date:
    """
    Parse a free-form date string such as ``9/15/2020``, ``2020-09-15`` or ``today``.

    ``label`` names the value in the error message.

    Raises:
        ParseError: If none of the parsing strategies yields a calendar date.
    """
    text = (value or "").strip()
    if text.lower() == TODAY_KEYWORD:
        return today()
    if text:
        for strategy in _DATE_PARSING_STRATEGIES:
            try:
                return strategy(text).date()
            except (ValueError, OverflowError):
                continue
    raise ParseError(f"Invalid {label} '{value}': expected a date such as 9/15/2020 or 2020-09-15")


def resolve_date_prefix(value: DatePrefixSpec) -> Optional[str]:
    """
    Interpret a date prefix request as a ``YYYY-MM-DD`` token.

    ``None`` means no prefix and ``True`` means today. Strings are parsed with
    :func:`parse_date`; date and datetime values are used directly.
    """
    if value is None:
        return None
    if value is True:
        resolved = today()
    elif isinstance(value, str):
        resolved = parse_date(value)
    elif isinstance(value, datetime):
        resolved = value.date()
    elif isinstance(value, date):
        resolved = value
    else:
        raise ParseError(f"Invalid date prefix {value!r}: specify either None or a date")
    return resolved.strftime(PREFIX_FORMAT)


def format_post_date(value: date) -> str:
    """Format a date the way post front matter stores it (``MM-DD-YYYY``)."""
    return value.strftime(POST_DATE_FORMAT)
