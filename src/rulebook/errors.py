"""
Exception types raised by rulebook.

Absence of a fact is never an error; accessors return None instead.
"""


class RulebookError(Exception):
    """Base class for rulebook errors."""


class FactParseError(RulebookError, ValueError):
    """A textual fact value could not be parsed as the requested number."""

    def __init__(self, name: str, text: str, target: str):
        self.name = name
        self.text = text
        self.target = target
        super().__init__(f"Fact '{name}': cannot parse {text!r} as {target}")


class FactNameMismatchError(RulebookError, ValueError):
    """A Fact was stored under a key that differs from its own name."""

    def __init__(self, key: str, fact_name: str):
        self.key = key
        self.fact_name = fact_name
        super().__init__(f"Fact named '{fact_name}' cannot be stored under key '{key}'")


class InvalidRuleError(RulebookError, TypeError):
    """An object cannot be adapted into a rule."""
