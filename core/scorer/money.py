#!/usr/bin/env python3
"""
Money Parsing - Lenient decimal parsing for receipt amounts.

Amounts are parsed into exact Decimals so that cent-level checks
(round dollar, quarter multiples) never suffer from float error, and the
arithmetic runs with as many digits as the operands need.
A malformed amount never raises: it parses to zero with ok=False and
the rules that depend on it contribute nothing.
"""

import math
import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

from core.scorer.models import ParsedValue

ZERO = Decimal("0")

# Plain non-negative decimal: "6.49", "10.00", "10", "10.000"
_AMOUNT_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+)?")


def parse_money(text: Any) -> ParsedValue:
    """
    Parse a currency amount string.

    Args:
        text: Amount as text, e.g. "35.35".

    Returns:
        ParsedValue(Decimal, True) on success, ParsedValue(Decimal("0"), False)
        for anything that is not a plain non-negative decimal string.
    """
    if not isinstance(text, str):
        return ParsedValue(ZERO, False)

    candidate = text.strip()
    if not _AMOUNT_PATTERN.fullmatch(candidate):
        return ParsedValue(ZERO, False)

    try:
        amount = Decimal(candidate)
    except InvalidOperation:
        return ParsedValue(ZERO, False)

    return ParsedValue(amount, True)


def _exact_precision(*amounts: Decimal) -> int:
    """Enough significant digits that % and * on these amounts never round."""
    digits = 0
    for amount in amounts:
        sign, coefficient, exponent = amount.as_tuple()
        digits += len(coefficient) + abs(exponent)
    return digits + 2


def is_whole_amount(amount: Decimal) -> bool:
    """True when the amount has no fractional cents (10.00, 10, 10.000)."""
    with localcontext() as ctx:
        ctx.prec = _exact_precision(amount)
        return amount == amount.to_integral_value()


def is_multiple_of(amount: Decimal, step: Decimal) -> bool:
    """True when the amount is an exact multiple of step."""
    with localcontext() as ctx:
        ctx.prec = _exact_precision(amount, step)
        return amount % step == 0


def ceil_points(amount: Decimal, multiplier: Decimal) -> int:
    """Smallest integer greater than or equal to amount * multiplier."""
    with localcontext() as ctx:
        ctx.prec = _exact_precision(amount, multiplier)
        return math.ceil(amount * multiplier)
