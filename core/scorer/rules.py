#!/usr/bin/env python3
"""
Scoring Rules - The eight independent point rules.

Each rule takes the receipt and the shared ParsedReceiptValues and
returns a non-negative number of points. Rules never raise on malformed
content: a value that failed to parse makes its rule contribute 0.

Rule set:
- retailer_alphanumeric: 1 point per ASCII letter or digit in the retailer name
- round_dollar_total: 50 points if the total has no cents
- quarter_multiple_total: 25 points if the total is a multiple of 0.25
- item_pairs: 5 points for every two items
- item_description_length: ceil(price * 0.2) per item whose trimmed
  description length is a non-zero multiple of 3
- total_over_ten: 5 points if the total is greater than 10.00
- odd_purchase_day: 6 points if the day of the purchase date is odd
- afternoon_purchase: 10 points if the purchase time is after 14:00
  and before 16:00
"""

import logging
import string
from dataclasses import dataclass
from datetime import time
from decimal import Decimal
from typing import TYPE_CHECKING, Callable, List

from core.scorer.models import ParsedReceiptValues
from core.scorer.money import ceil_points, is_multiple_of, is_whole_amount, parse_money

if TYPE_CHECKING:
    from core.receipts.models import Receipt

logger = logging.getLogger(__name__)

POINTS_PER_RETAILER_CHARACTER = 1
POINTS_ROUND_DOLLAR_TOTAL = 50
POINTS_QUARTER_MULTIPLE_TOTAL = 25
POINTS_PER_ITEM_PAIR = 5
POINTS_TOTAL_OVER_THRESHOLD = 5
POINTS_ODD_PURCHASE_DAY = 6
POINTS_AFTERNOON_PURCHASE = 10

QUARTER = Decimal("0.25")
TOTAL_THRESHOLD = Decimal("10.00")
DESCRIPTION_LENGTH_FACTOR = 3
ITEM_PRICE_MULTIPLIER = Decimal("0.2")
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)

_ASCII_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)


@dataclass(frozen=True)
class ScoringRule:
    """A named rule and the function that evaluates it."""
    name: str
    description: str
    evaluate: Callable[['Receipt', ParsedReceiptValues], int]


def count_alphanumeric(text: str) -> int:
    """Count ASCII letters and digits in text."""
    return sum(1 for ch in text if ch in _ASCII_ALPHANUMERIC)


def retailer_points(receipt: 'Receipt', parsed: ParsedReceiptValues) -> int:
    return count_alphanumeric(receipt.retailer) * POINTS_PER_RETAILER_CHARACTER


def round_dollar_points(receipt: 'Receipt', parsed: ParsedReceiptValues) -> int:
    # Numeric equality, not a ".00" suffix test: "10", "10.0" and "10.000" all count
    total, ok = parsed.total
    if ok and is_whole_amount(total):
        return POINTS_ROUND_DOLLAR_TOTAL
    return 0


def quarter_multiple_points(receipt: 'Receipt', parsed: ParsedReceiptValues) -> int:
    total, ok = parsed.total
    if ok and is_multiple_of(total, QUARTER):
        return POINTS_QUARTER_MULTIPLE_TOTAL
    return 0


def item_pair_points(receipt: 'Receipt', parsed: ParsedReceiptValues) -> int:
    return (len(receipt.items) // 2) * POINTS_PER_ITEM_PAIR


def item_description_points(receipt: 'Receipt', parsed: ParsedReceiptValues) -> int:
    """
    Award ceil(price * 0.2) for each item whose trimmed description
    length is a multiple of 3. Length counts characters, not UTF-8 bytes.

    Empty descriptions (length 0) never qualify. Items whose price does
    not parse are skipped.
    """
    points = 0
    for index, item in enumerate(receipt.items):
        description = item.short_description.strip()
        if not description or len(description) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue

        price, ok = parse_money(item.price)
        if not ok:
            logger.debug(f"Item {index} price {item.price!r} did not parse, skipping")
            continue

        points += ceil_points(price, ITEM_PRICE_MULTIPLIER)
    return points


def total_over_threshold_points(receipt: 'Receipt', parsed: ParsedReceiptValues) -> int:
    total, ok = parsed.total
    if ok and total > TOTAL_THRESHOLD:
        return POINTS_TOTAL_OVER_THRESHOLD
    return 0


def odd_day_points(receipt: 'Receipt', parsed: ParsedReceiptValues) -> int:
    purchase_date, ok = parsed.purchase_date
    if ok and purchase_date.day % 2 == 1:
        return POINTS_ODD_PURCHASE_DAY
    return 0


def afternoon_points(receipt: 'Receipt', parsed: ParsedReceiptValues) -> int:
    # Open interval: exactly 14:00 and exactly 16:00 earn nothing
    purchase_time, ok = parsed.purchase_time
    if ok and AFTERNOON_START < purchase_time < AFTERNOON_END:
        return POINTS_AFTERNOON_PURCHASE
    return 0


RULES: List[ScoringRule] = [
    ScoringRule(
        "retailer_alphanumeric",
        "One point for every alphanumeric character in the retailer name",
        retailer_points,
    ),
    ScoringRule(
        "round_dollar_total",
        "50 points if the total is a round dollar amount with no cents",
        round_dollar_points,
    ),
    ScoringRule(
        "quarter_multiple_total",
        "25 points if the total is a multiple of 0.25",
        quarter_multiple_points,
    ),
    ScoringRule(
        "item_pairs",
        "5 points for every two items on the receipt",
        item_pair_points,
    ),
    ScoringRule(
        "item_description_length",
        "ceil(price * 0.2) points per item whose trimmed description length is a multiple of 3",
        item_description_points,
    ),
    ScoringRule(
        "total_over_ten",
        "5 points if the total is greater than 10.00",
        total_over_threshold_points,
    ),
    ScoringRule(
        "odd_purchase_day",
        "6 points if the day in the purchase date is odd",
        odd_day_points,
    ),
    ScoringRule(
        "afternoon_purchase",
        "10 points if the time of purchase is after 2:00pm and before 4:00pm",
        afternoon_points,
    ),
]
