#!/usr/bin/env python3
"""
Scoring Service - Turns a receipt into an integer point total.

The service is a pure function of its input:
1. Parse the total, purchase date and purchase time once
2. Evaluate every rule against the receipt and the parsed values
3. Sum the contributions

Parse failures are absorbed here (logged at DEBUG) and never surfaced;
the affected rules simply contribute 0.
"""

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from core.scorer.models import ParsedReceiptValues, RuleContribution, ScoreBreakdown
from core.scorer.money import parse_money
from core.scorer.rules import RULES, ScoringRule
from core.scorer.temporal import parse_purchase_date, parse_purchase_time

if TYPE_CHECKING:
    from core.receipts.models import Receipt

logger = logging.getLogger(__name__)


def parse_receipt_values(receipt: 'Receipt') -> ParsedReceiptValues:
    """
    Parse the receipt-level values shared by the rules.

    Args:
        receipt: Shape-validated receipt.

    Returns:
        ParsedReceiptValues; each value carries its own ok flag.
    """
    parsed = ParsedReceiptValues(
        total=parse_money(receipt.total),
        purchase_date=parse_purchase_date(receipt.purchase_date),
        purchase_time=parse_purchase_time(receipt.purchase_time),
    )

    if not parsed.total.ok:
        logger.debug(f"Total {receipt.total!r} did not parse; total rules score 0")
    if not parsed.purchase_date.ok:
        logger.debug(f"Purchase date {receipt.purchase_date!r} did not parse; date rule scores 0")
    if not parsed.purchase_time.ok:
        logger.debug(f"Purchase time {receipt.purchase_time!r} did not parse; time rule scores 0")

    return parsed


class ReceiptScorer:
    """
    Applies an ordered set of scoring rules to receipts.

    Stateless apart from the rule table, so one instance can be shared
    across threads.
    """

    def __init__(self, rules: Optional[Sequence[ScoringRule]] = None):
        self.rules = list(rules) if rules is not None else list(RULES)

    def breakdown(self, receipt: 'Receipt') -> ScoreBreakdown:
        """
        Score a receipt and keep each rule's contribution.

        Args:
            receipt: Shape-validated receipt.

        Returns:
            ScoreBreakdown whose total is the receipt's score.
        """
        parsed = parse_receipt_values(receipt)
        contributions = [
            RuleContribution(
                rule=rule.name,
                description=rule.description,
                points=rule.evaluate(receipt, parsed),
            )
            for rule in self.rules
        ]
        return ScoreBreakdown(contributions=contributions)

    def score(self, receipt: 'Receipt') -> int:
        return self.breakdown(receipt).total


_default_scorer = ReceiptScorer()


def score_receipt(receipt: 'Receipt') -> int:
    """Score a receipt with the standard rule set."""
    return _default_scorer.score(receipt)


def score_breakdown(receipt: 'Receipt') -> ScoreBreakdown:
    """Per-rule breakdown of a receipt's score with the standard rule set."""
    return _default_scorer.breakdown(receipt)
