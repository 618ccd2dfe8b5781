"""
FactMap - the working memory consulted and updated by rules.

A FactMap maps fact names to Facts. It behaves as an ordinary mutable
mapping from str to Fact, and layers typed accessors and single-fact
shorthand on top. Storage is an internally owned dict; the mapping
protocol forwards to it.
"""

import logging
from collections.abc import ItemsView, KeysView, Mapping, MutableMapping, ValuesView
from typing import Any, Iterator, Optional

from rulebook.errors import FactNameMismatchError
from rulebook.facts.coercion import to_float, to_int, to_str
from rulebook.facts.models import Fact, ValueKind

logger = logging.getLogger(__name__)


class FactMap(MutableMapping):
    """Insertion-ordered store of Facts keyed by fact name.

    Every entry satisfies ``fm[key].name == key``. All insert paths,
    including raw keyed assignment, enforce this and raise
    FactNameMismatchError when it does not hold.

    Not thread-safe: one rule run should own a FactMap at a time.
    """

    def __init__(self, facts: Optional[Mapping[str, Fact]] = None):
        self._facts: dict[str, Fact] = {}
        if facts is not None:
            self.update(facts)

    @classmethod
    def from_values(cls, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "FactMap":
        """Build a FactMap from plain name -> value pairs."""
        fact_map = cls()
        for name, value in dict(values or {}, **kwargs).items():
            fact_map.set_value(name, value)
        return fact_map

    # ------------------------------------------------------------------ #
    # Mapping protocol
    # ------------------------------------------------------------------ #

    def __getitem__(self, name: str) -> Fact:
        return self._facts[name]

    def __setitem__(self, name: str, fact: Fact) -> None:
        self._check_entry(name, fact)
        self._facts[name] = fact

    def __delitem__(self, name: str) -> None:
        del self._facts[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._facts)

    def __len__(self) -> int:
        return len(self._facts)

    def __contains__(self, name: object) -> bool:
        return name in self._facts

    def keys(self) -> KeysView:
        return self._facts.keys()

    def values(self) -> ValuesView:
        return self._facts.values()

    def items(self) -> ItemsView:
        return self._facts.items()

    def clear(self) -> None:
        self._facts.clear()

    def is_empty(self) -> bool:
        return not self._facts

    def contains_value(self, fact: Fact) -> bool:
        """True if an equal Fact (same name and value) is stored."""
        return fact in self._facts.values()

    def put_item(self, name: str, fact: Fact) -> Optional[Fact]:
        """Store ``fact`` under ``name`` and return the Fact it replaced."""
        self._check_entry(name, fact)
        previous = self._facts.get(name)
        self._facts[name] = fact
        return previous

    def put_all(self, facts: Mapping[str, Fact]) -> None:
        self.update(facts)

    def remove(self, name: str) -> Optional[Fact]:
        """Remove and return the named Fact, or None if it is absent."""
        return self._facts.pop(name, None)

    @staticmethod
    def _check_entry(name: str, fact: Fact) -> None:
        if not isinstance(fact, Fact):
            raise TypeError(f"FactMap values must be Fact, got {type(fact).__name__}")
        if fact.name != name:
            raise FactNameMismatchError(name, fact.name)

    # ------------------------------------------------------------------ #
    # Fact-oriented access
    # ------------------------------------------------------------------ #

    def put(self, fact: Fact) -> Optional[Fact]:
        """Store a Fact under its own name.

        Returns:
            The Fact previously stored under that name, or None.
        """
        return self.put_item(fact.name, fact)

    def set_value(self, name: str, value: Any) -> None:
        """Set the value of the named Fact, creating it if needed.

        An existing Fact keeps its identity; only its value changes.
        """
        fact = self._facts.get(name)
        if fact is None:
            self._facts[name] = Fact(name, value)
            logger.debug(f"FactMap: created fact '{name}'")
            return
        fact.value = value

    def get_one(self) -> Optional[Any]:
        """Value of the only Fact, or None unless exactly one Fact is stored."""
        if len(self._facts) != 1:
            return None
        return next(iter(self._facts.values())).value

    def get_value(self, name: str) -> Optional[Any]:
        fact = self._facts.get(name)
        if fact is None:
            return None
        return fact.value

    def _value_and_kind(self, name: str) -> tuple[Any, ValueKind]:
        fact = self._facts.get(name)
        if fact is None:
            return None, ValueKind.EMPTY
        return fact.value, fact.kind

    def get_str_val(self, name: str) -> str:
        """String form of the named value; a missing fact renders as 'None'."""
        value, kind = self._value_and_kind(name)
        return to_str(value, kind)

    def get_int_val(self, name: str) -> Optional[int]:
        """Named value as an int.

        Raises:
            FactParseError: if the value is text that is not an integer literal.
        """
        value, kind = self._value_and_kind(name)
        return to_int(value, name, kind)

    def get_dbl_val(self, name: str) -> Optional[float]:
        """Named value as a float.

        Raises:
            FactParseError: if the value is text that is not a float literal.
        """
        value, kind = self._value_and_kind(name)
        return to_float(value, name, kind)

    def to_values(self) -> dict[str, Any]:
        """Snapshot of name -> value."""
        return {name: fact.value for name, fact in self._facts.items()}

    def __str__(self) -> str:
        if len(self._facts) == 1:
            return str(self.get_one())
        return str(self._facts)

    def __repr__(self) -> str:
        return f"FactMap({self._facts!r})"
