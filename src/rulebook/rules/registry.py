"""
Named rule registration and sequencer assembly.

Rule classes (or zero-argument factories) register under a name with
``@register_rule``; ``build_sequencer`` instantiates them into a
DecisionSequencer in registration order.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Optional

from rulebook.config import SequencerConfig
from rulebook.rules.sequencer import DecisionSequencer

logger = logging.getLogger(__name__)

_RULE_REGISTRY: Dict[str, Callable[[], Any]] = {}


def register_rule(name: str):
    def _wrap(factory: Callable[[], Any]):
        if name in _RULE_REGISTRY:
            raise ValueError(f"Rule '{name}' is already registered")
        _RULE_REGISTRY[name] = factory
        return factory
    return _wrap


def unregister_rule(name: str) -> None:
    _RULE_REGISTRY.pop(name, None)


def get_rule(name: str) -> Callable[[], Any]:
    try:
        return _RULE_REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown rule '{name}'. Registered: {sorted(_RULE_REGISTRY)}") from None


def registered_rules() -> list[str]:
    return list(_RULE_REGISTRY)


def build_sequencer(
    names: Optional[Iterable[str]] = None,
    config: Optional[SequencerConfig] = None,
    default_result: Any = None,
) -> DecisionSequencer:
    """Instantiate registered rules into a new DecisionSequencer.

    Args:
        names: Rules to include, in order. Defaults to every registered rule.
        config: Sequencer configuration; read from the environment if omitted.
        default_result: Initial Result value for each run.
    """
    selected = list(names) if names is not None else registered_rules()
    sequencer = DecisionSequencer(config=config, default_result=default_result)
    for name in selected:
        sequencer.add_rule(get_rule(name)())
    logger.info(f"Built sequencer with {len(selected)} registered rules")
    return sequencer
