"""
rulebook - working memory and rule sequencing.
"""

from rulebook.errors import (
    FactNameMismatchError,
    FactParseError,
    InvalidRuleError,
    RulebookError,
)
from rulebook.facts import Fact, FactMap, ValueKind
from rulebook.rules import DecisionSequencer, Result, Rule, RuleAdapter, then, when

__all__ = [
    "DecisionSequencer",
    "Fact",
    "FactMap",
    "FactNameMismatchError",
    "FactParseError",
    "InvalidRuleError",
    "Result",
    "Rule",
    "RuleAdapter",
    "RulebookError",
    "ValueKind",
    "then",
    "when",
]
