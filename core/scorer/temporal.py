#!/usr/bin/env python3
"""
Temporal Parsing - Purchase date and time parsing.

Dates are YYYY-MM-DD and times are 24-hour HH:MM, both zero-padded,
with no time zone. Failures return ParsedValue(None, False).
"""

import re
from datetime import date, datetime, time
from typing import Any

from core.scorer.models import ParsedValue

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

# strptime alone accepts unpadded fields such as "2022-1-1"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")


def parse_purchase_date(text: Any) -> ParsedValue:
    """
    Parse a purchase date such as "2022-01-01".

    Returns:
        ParsedValue(date, True), or ParsedValue(None, False) when the text is
        not a zero-padded YYYY-MM-DD string naming a real calendar day.
    """
    if not isinstance(text, str) or not _DATE_PATTERN.fullmatch(text):
        return ParsedValue(None, False)
    try:
        parsed: date = datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return ParsedValue(None, False)
    return ParsedValue(parsed, True)


def parse_purchase_time(text: Any) -> ParsedValue:
    """
    Parse a purchase time such as "14:33".

    Returns:
        ParsedValue(time, True), or ParsedValue(None, False) when the text is
        not a zero-padded 24-hour HH:MM string.
    """
    if not isinstance(text, str) or not _TIME_PATTERN.fullmatch(text):
        return ParsedValue(None, False)
    try:
        parsed: time = datetime.strptime(text, TIME_FORMAT).time()
    except ValueError:
        return ParsedValue(None, False)
    return ParsedValue(parsed, True)
