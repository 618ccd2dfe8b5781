"""
Adapter that lets an arbitrary object act as a Rule.

The wrapped object declares its conditions and actions by decorating
methods with ``when`` and ``then``. Methods are collected in class
definition order, base classes first; an override in a subclass keeps
the position of the method it replaces.
"""

import logging
from typing import Any, Callable

from rulebook.errors import InvalidRuleError
from rulebook.facts.store import FactMap
from rulebook.rules.models import ROLE_ATTR, THEN, WHEN, Result, Rule

logger = logging.getLogger(__name__)


def _marked_methods(obj: Any, role: str) -> list[Callable]:
    """Bound methods of ``obj`` carrying the given role, in definition order."""
    names: list[str] = []
    for klass in reversed(type(obj).__mro__):
        for attr_name in vars(klass):
            if attr_name not in names:
                names.append(attr_name)

    methods: list[Callable] = []
    for attr_name in names:
        func = getattr(type(obj), attr_name, None)
        if callable(func) and getattr(func, ROLE_ATTR, None) == role:
            methods.append(getattr(obj, attr_name))
    return methods


class RuleAdapter(Rule):
    """Wraps a decorated object so a DecisionSequencer can run it.

    Raises:
        InvalidRuleError: if the object is already a Rule or declares
            no ``then`` method.
    """

    def __init__(self, target: Any):
        if isinstance(target, Rule):
            raise InvalidRuleError(f"{target!r} is already a Rule and needs no adapter")

        self.target = target
        self._conditions = _marked_methods(target, WHEN)
        self._actions = _marked_methods(target, THEN)
        if not self._actions:
            raise InvalidRuleError(
                f"{type(target).__name__} has no @then method and cannot be used as a rule"
            )

        name = getattr(target, "name", None)
        super().__init__(name=name if isinstance(name, str) and name else type(target).__name__)
        logger.debug(
            f"RuleAdapter: wrapped '{self.name}' "
            f"({len(self._conditions)} conditions, {len(self._actions)} actions)"
        )

    def evaluate(self, facts: FactMap) -> bool:
        return all(condition(facts) for condition in self._conditions)

    def execute(self, facts: FactMap, result: Result) -> None:
        for action in self._actions:
            value = action(facts)
            if value is not None:
                result.value = value
