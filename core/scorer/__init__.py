#!/usr/bin/env python3
"""
Scoring Module - Rule-based receipt scoring.

Public API:
- ReceiptScorer: Applies the rule table to receipts
- score_receipt / score_breakdown: Module-level helpers using the standard rules
- ScoreBreakdown: Per-rule contributions for one receipt

The scoring module is split into focused, single-responsibility modules:

- models.py: Data structures (ParsedValue, ScoreBreakdown)
- money.py: Currency amount parsing and cent-exact checks
- temporal.py: Purchase date and time parsing
- rules.py: The eight scoring rules and the ordered RULES table
- service.py: ReceiptScorer orchestrator
"""

from core.scorer.models import ParsedValue, RuleContribution, ScoreBreakdown
from core.scorer.rules import RULES, ScoringRule
from core.scorer.service import ReceiptScorer, score_breakdown, score_receipt

__all__ = [
    'ReceiptScorer',
    'score_receipt',
    'score_breakdown',
    'ScoreBreakdown',
    'RuleContribution',
    'ParsedValue',
    'ScoringRule',
    'RULES',
]
