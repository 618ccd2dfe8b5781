"""
DecisionSequencer - runs an ordered list of rules against one FactMap.

Every rule sees the same FactMap instance, so facts written by one rule
are visible to the rules after it. The sequencer never creates a
FactMap; callers supply one per run.
"""

import logging
from typing import Any, Iterable, Optional

from rulebook.config import SequencerConfig
from rulebook.facts.store import FactMap
from rulebook.rules.adapter import RuleAdapter
from rulebook.rules.models import Result, Rule

logger = logging.getLogger(__name__)


class DecisionSequencer:
    """Ordered rule runner that accumulates a Result.

    Rules may be Rule instances or any object with ``@then`` methods,
    which is wrapped in a RuleAdapter on registration.
    """

    def __init__(
        self,
        rules: Optional[Iterable[Any]] = None,
        config: Optional[SequencerConfig] = None,
        default_result: Any = None,
    ):
        self.config = config or SequencerConfig.from_env()
        self._rules: list[Rule] = []
        self.default_result = default_result
        self._result = Result(default_result)
        for rule in rules or []:
            self.add_rule(rule)

    def add_rule(self, rule: Any) -> "DecisionSequencer":
        """Append a rule, adapting plain objects. Returns self for chaining.

        Raises:
            InvalidRuleError: if ``rule`` is neither a Rule nor adaptable.
        """
        if not isinstance(rule, Rule):
            rule = RuleAdapter(rule)
        self._rules.append(rule)
        logger.debug(f"DecisionSequencer: added rule '{rule.name}' at position {len(self._rules)}")
        return self

    @property
    def rules(self) -> list[Rule]:
        return list(self._rules)

    @property
    def result(self) -> Result:
        """Result of the most recent run."""
        return self._result

    def run(self, facts: FactMap) -> Result:
        """Run every rule in order against ``facts``.

        Each run starts from a new Result holding ``default_result``, so a
        Result returned by an earlier run is never changed by later runs.

        Rule exceptions propagate unless ``config.continue_on_error`` is
        set, in which case they are logged and the run moves on.
        """
        if not isinstance(facts, FactMap):
            raise TypeError(f"DecisionSequencer.run expects a FactMap, got {type(facts).__name__}")

        self._result = Result(self.default_result)
        logger.info(f"DecisionSequencer: running {len(self._rules)} rules against {len(facts)} facts")

        fired = 0
        failed = 0
        for rule in self._rules:
            try:
                if rule.run(facts, self._result):
                    fired += 1
                    logger.debug(f"Rule '{rule.name}' fired")
                else:
                    logger.debug(f"Rule '{rule.name}' skipped")
            except Exception as e:
                if not self.config.continue_on_error:
                    raise
                failed += 1
                logger.error(f"Rule '{rule.name}' failed: {e}")

        logger.info(
            f"DecisionSequencer: {fired} fired, {failed} failed, result={self._result.value!r}"
        )
        if self.config.log_facts:
            logger.info(f"DecisionSequencer: facts after run: {facts.to_values()}")
        return self._result
