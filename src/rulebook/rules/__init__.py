"""
Rule sequencing on top of the fact store.
"""

from rulebook.rules.adapter import RuleAdapter
from rulebook.rules.models import Result, Rule, then, when
from rulebook.rules.registry import build_sequencer, register_rule
from rulebook.rules.sequencer import DecisionSequencer

__all__ = [
    "DecisionSequencer",
    "Result",
    "Rule",
    "RuleAdapter",
    "build_sequencer",
    "register_rule",
    "then",
    "when",
]
