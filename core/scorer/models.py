#!/usr/bin/env python3
"""
Scoring Models - Data structures for parsed values and scoring results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple


class ParsedValue(NamedTuple):
    """Outcome of a lenient parse: the value (or its zero value) and a success flag."""
    value: Any
    ok: bool


@dataclass(frozen=True)
class ParsedReceiptValues:
    """Receipt-level values parsed once and shared by every rule."""
    total: ParsedValue
    purchase_date: ParsedValue
    purchase_time: ParsedValue


@dataclass(frozen=True)
class RuleContribution:
    """Points contributed by a single rule."""
    rule: str
    description: str
    points: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-rule contributions for one receipt, in rule order."""
    contributions: List[RuleContribution] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(c.points for c in self.contributions)

    def as_dict(self) -> Dict[str, int]:
        return {c.rule: c.points for c in self.contributions}

    def points_for(self, rule: str) -> int:
        """
        Get the points a named rule contributed.

        Raises:
            KeyError: If no rule with that name was evaluated.
        """
        for contribution in self.contributions:
            if contribution.rule == rule:
                return contribution.points
        raise KeyError(rule)
