"""
Type coercion for fact values.

Every function branches over ValueKind and covers each variant
explicitly. The kind stored on a Fact is passed in by the FactMap; it is
derived from the value only when the caller has none. Only textual input
can fail, and only with FactParseError.
"""

import re
from typing import Any, Optional

from rulebook.errors import FactParseError
from rulebook.facts.models import ValueKind, classify_value

# Optional sign followed by decimal digits only (no whitespace, underscores or 0x)
_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def to_str(value: Any, kind: Optional[ValueKind] = None) -> str:
    """Return text unchanged, anything else in its default string form."""
    if kind is None:
        kind = classify_value(value)
    if kind == ValueKind.TEXT:
        return value
    return str(value)


def to_int(value: Any, name: str = "", kind: Optional[ValueKind] = None) -> Optional[int]:
    """Reinterpret a value as an int.

    Integers pass through, text is parsed as a base-10 literal and
    everything else (floats included) yields None. Surrounding
    whitespace makes the text invalid.

    Raises:
        FactParseError: if text is not a valid integer literal.
    """
    if kind is None:
        kind = classify_value(value)
    if kind == ValueKind.INTEGER:
        return int(value)
    if kind == ValueKind.TEXT:
        if not _INT_LITERAL.fullmatch(value):
            raise FactParseError(name, value, "int")
        return int(value, 10)
    if kind in (ValueKind.EMPTY, ValueKind.REAL, ValueKind.OTHER):
        return None
    raise AssertionError(f"Unhandled value kind: {kind}")


def to_float(value: Any, name: str = "", kind: Optional[ValueKind] = None) -> Optional[float]:
    """Reinterpret a value as a double-precision float.

    Floats of any precision and integers are widened, text is parsed as
    a floating-point literal (surrounding whitespace ignored) and
    everything else yields None.

    Raises:
        FactParseError: if text is not a valid float literal.
    """
    if kind is None:
        kind = classify_value(value)
    if kind in (ValueKind.REAL, ValueKind.INTEGER):
        return float(value)
    if kind == ValueKind.TEXT:
        text = value.strip()
        if not text or "_" in text:
            raise FactParseError(name, value, "float")
        try:
            return float(text)
        except ValueError:
            raise FactParseError(name, value, "float") from None
    if kind in (ValueKind.EMPTY, ValueKind.OTHER):
        return None
    raise AssertionError(f"Unhandled value kind: {kind}")
