"""
Working memory for rule evaluation.

Facts are named, mutable values; a FactMap holds them by name and
offers typed, coercing accessors to the rules that read and update it.
"""

from rulebook.facts.models import Fact, ValueKind, classify_value
from rulebook.facts.store import FactMap

__all__ = [
    "Fact",
    "FactMap",
    "ValueKind",
    "classify_value",
]
