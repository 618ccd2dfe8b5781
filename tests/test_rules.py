"""Tests for rulebook.rules - Rule, RuleAdapter and DecisionSequencer."""

import logging

import pytest

from rulebook.config import SequencerConfig
from rulebook.errors import FactParseError, InvalidRuleError
from rulebook.facts.store import FactMap
from rulebook.rules.adapter import RuleAdapter
from rulebook.rules.models import Result, Rule, then, when
from rulebook.rules.sequencer import DecisionSequencer


class AgeCheck:
    """Externally defined rule object."""

    name = "age-check"

    @when
    def is_adult(self, facts):
        return facts.get_int_val("age") >= 18

    @then
    def approve(self, facts):
        facts.set_value("approved", True)
        return "approved"


class Counter:
    @then
    def first(self, facts):
        facts.set_value("order", ["first"])

    @then
    def second(self, facts):
        facts.get_value("order").append("second")


class NoActions:
    @when
    def always(self, facts):
        return True


@pytest.fixture
def config():
    return SequencerConfig()


class TestResult:
    def test_default(self):
        result = Result(default="none")
        assert result.value == "none"
        result.value = "done"
        assert str(result) == "done"
        result.reset()
        assert result.value == "none"


class TestRule:
    def test_fires_when_condition_holds(self):
        rule = Rule(
            condition=lambda facts: facts.get_int_val("n") > 1,
            action=lambda facts, result: facts.set_value("big", True),
        )
        facts = FactMap.from_values(n=5)
        assert rule.run(facts, Result()) is True
        assert facts.get_value("big") is True

    def test_skips_when_condition_fails(self):
        rule = Rule(
            condition=lambda facts: False,
            action=lambda facts, result: facts.set_value("touched", True),
        )
        facts = FactMap()
        assert rule.run(facts, Result()) is False
        assert "touched" not in facts

    def test_missing_condition_always_holds(self):
        assert Rule().evaluate(FactMap()) is True

    def test_default_name(self):
        assert Rule().name == "Rule"
        assert Rule(name="custom").name == "custom"


class TestRuleAdapter:
    def test_adapts_decorated_object(self):
        rule = RuleAdapter(AgeCheck())
        facts = FactMap.from_values(age=21)
        result = Result()
        assert rule.run(facts, result) is True
        assert facts.get_value("approved") is True
        assert result.value == "approved"
        assert rule.name == "age-check"

    def test_condition_false(self):
        rule = RuleAdapter(AgeCheck())
        facts = FactMap.from_values(age=12)
        assert rule.run(facts, Result()) is False
        assert "approved" not in facts

    def test_actions_run_in_definition_order(self):
        facts = FactMap()
        RuleAdapter(Counter()).run(facts, Result())
        assert facts.get_value("order") == ["first", "second"]

    def test_none_return_keeps_result(self):
        result = Result(default="kept")
        RuleAdapter(Counter()).run(FactMap(), result)
        assert result.value == "kept"

    def test_name_defaults_to_class_name(self):
        assert RuleAdapter(Counter()).name == "Counter"

    def test_inherited_and_overridden_methods(self):
        class Base:
            @then
            def act(self, facts):
                facts.set_value("who", "base")

        class Child(Base):
            @then
            def act(self, facts):
                facts.set_value("who", "child")

        facts = FactMap()
        RuleAdapter(Child()).run(facts, Result())
        assert facts.get_value("who") == "child"

    def test_object_without_then_rejected(self):
        with pytest.raises(InvalidRuleError):
            RuleAdapter(NoActions())
        with pytest.raises(InvalidRuleError):
            RuleAdapter(object())

    def test_rule_instance_rejected(self):
        with pytest.raises(InvalidRuleError):
            RuleAdapter(Rule())

    def test_invalid_rule_error_is_type_error(self):
        with pytest.raises(TypeError):
            RuleAdapter(object())


class TestDecisionSequencer:
    def test_runs_rules_in_order_on_shared_facts(self, config):
        seen = []

        def record(label):
            def action(facts, result):
                seen.append((label, facts.get_int_val("n")))
                facts.set_value("n", facts.get_int_val("n") + 1)
            return action

        sequencer = DecisionSequencer(config=config)
        sequencer.add_rule(Rule(action=record("a"))).add_rule(Rule(action=record("b")))

        facts = FactMap.from_values(n=0)
        sequencer.run(facts)
        assert seen == [("a", 0), ("b", 1)]
        assert facts.get_int_val("n") == 2

    def test_adapts_plain_objects(self, config):
        sequencer = DecisionSequencer([AgeCheck()], config=config)
        assert isinstance(sequencer.rules[0], RuleAdapter)
        result = sequencer.run(FactMap.from_values(age=30))
        assert result.value == "approved"
        assert sequencer.result is result

    def test_add_rule_rejects_invalid_objects(self, config):
        with pytest.raises(InvalidRuleError):
            DecisionSequencer(config=config).add_rule(NoActions())

    def test_result_reset_between_runs(self, config):
        sequencer = DecisionSequencer([AgeCheck()], config=config, default_result="denied")
        assert sequencer.run(FactMap.from_values(age=30)).value == "approved"
        assert sequencer.run(FactMap.from_values(age=10)).value == "denied"

    def test_earlier_result_not_changed_by_later_run(self, config):
        sequencer = DecisionSequencer([AgeCheck()], config=config, default_result="denied")
        first = sequencer.run(FactMap.from_values(age=30))
        second = sequencer.run(FactMap.from_values(age=10))
        assert first is not second
        assert first.value == "approved"
        assert second.value == "denied"
        assert sequencer.result is second

    def test_requires_fact_map(self, config):
        with pytest.raises(TypeError):
            DecisionSequencer(config=config).run({"age": 30})

    def test_rule_errors_propagate(self, config):
        sequencer = DecisionSequencer([AgeCheck()], config=config)
        with pytest.raises(FactParseError):
            sequencer.run(FactMap.from_values(age="unknown"))

    def test_continue_on_error(self, caplog):
        sequencer = DecisionSequencer(
            [AgeCheck(), Rule(action=lambda facts, result: facts.set_value("after", True))],
            config=SequencerConfig(continue_on_error=True),
        )
        facts = FactMap.from_values(age="unknown")
        with caplog.at_level(logging.ERROR, logger="rulebook.rules.sequencer"):
            sequencer.run(facts)
        assert facts.get_value("after") is True
        assert "age-check" in caplog.text

    def test_log_facts(self, caplog):
        sequencer = DecisionSequencer(config=SequencerConfig(log_facts=True))
        with caplog.at_level(logging.INFO, logger="rulebook.rules.sequencer"):
            sequencer.run(FactMap.from_values(a=1))
        assert "{'a': 1}" in caplog.text

    def test_rules_property_is_copy(self, config):
        sequencer = DecisionSequencer([Rule()], config=config)
        sequencer.rules.clear()
        assert len(sequencer.rules) == 1
