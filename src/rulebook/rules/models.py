"""
Rule and Result models.

A Rule pairs a condition over a FactMap with an action that may update
the FactMap and the shared Result. Externally defined objects can take
part in a rule run by marking methods with the ``when`` and ``then``
decorators (see rulebook.rules.adapter).
"""

from typing import Any, Callable, Optional

from rulebook.facts.store import FactMap

# Attribute set on decorated methods to record their role
ROLE_ATTR = "__rulebook_role__"
WHEN = "when"
THEN = "then"

Condition = Callable[[FactMap], Any]
Action = Callable[[FactMap, "Result"], None]


def when(func: Callable) -> Callable:
    """Mark a method as a rule condition. It receives the FactMap."""
    setattr(func, ROLE_ATTR, WHEN)
    return func


def then(func: Callable) -> Callable:
    """Mark a method as a rule action. It receives the FactMap.

    A non-None return value becomes the decision result.
    """
    setattr(func, ROLE_ATTR, THEN)
    return func


class Result:
    """Decision value accumulated across a rule run."""

    def __init__(self, default: Any = None):
        self.default = default
        self.value = default

    def reset(self) -> None:
        self.value = self.default

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Result(value={self.value!r}, default={self.default!r})"


class Rule:
    """A condition/action pair evaluated against a FactMap.

    A missing condition always holds; a missing action does nothing.
    """

    def __init__(
        self,
        condition: Optional[Condition] = None,
        action: Optional[Action] = None,
        name: str = "",
    ):
        self.condition = condition
        self.action = action
        self.name = name or type(self).__name__

    def evaluate(self, facts: FactMap) -> bool:
        if self.condition is None:
            return True
        return bool(self.condition(facts))

    def execute(self, facts: FactMap, result: Result) -> None:
        if self.action is not None:
            self.action(facts, result)

    def run(self, facts: FactMap, result: Result) -> bool:
        """Execute the action if the condition holds. Returns True if it fired."""
        if not self.evaluate(facts):
            return False
        self.execute(facts, result)
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
