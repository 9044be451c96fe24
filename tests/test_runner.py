"""
Tests for the rule runner: ordering, accumulation and rule selection.
"""

from unittest.mock import Mock

import pytest

from a11y_checks.errors import ConfigurationError
from a11y_checks.schemas.element import ElementKind, Trait
from a11y_checks.schemas.violation import Severity
from a11y_checks.services.rules.names import RuleName
from a11y_checks.services.runner import RuleRunner, evaluate, evaluate_source
from a11y_checks.tools.accessibility.protocol import StaticElementSource


class TestEndToEnd:
    """A small broken screen run through every rule."""

    @pytest.fixture
    def screen(self, make_element):
        return [
            make_element(label="", width=10, height=10, traits=[Trait.BUTTON]),
            make_element(kind=ElementKind.IMAGE, label="my_photo.jpg", traits=[]),
            make_element(kind=ElementKind.STATIC_TEXT, label="Hi", width=10, height=10, traits=[]),
        ]

    def test_violations_in_evaluation_order(self, screen, config):
        violations = evaluate(["all"], screen, config=config)

        assert [(v.severity, v.message) for v in violations] == [
            (Severity.WARNING, "Element not tall enough"),
            (Severity.WARNING, "Element not wide enough"),
            (Severity.FAILURE, "Interactive element not tall enough"),
            (Severity.FAILURE, "Interactive element not wide enough"),
            (Severity.WARNING, "Label not meaningful"),
            (Severity.FAILURE, "Image file name is used as the accessibility label"),
            (Severity.FAILURE, "Image file name is used as the accessibility label"),
            (Severity.FAILURE, "Image should have Image trait"),
            (Severity.WARNING, "Element not tall enough"),
            (Severity.WARNING, "Element not wide enough"),
            (Severity.WARNING, "Label not meaningful"),
            (Severity.FAILURE, "Screen has no element with a header trait"),
        ]

    def test_report_lines(self, screen, config):
        violations = evaluate(["all"], screen, config=config)

        assert violations[2].text == (
            'Accessibility Failure: Interactive element not tall enough: '
            '"[No identifier]" Button. Minimum size: 44.'
        )
        assert violations[-1].text == (
            "Accessibility Failure: Screen has no element with a header trait."
        )

    def test_repeated_runs_are_identical(self, screen, config):
        runner = RuleRunner(config)

        first = [v.text for v in runner.run(["all"], screen)]
        second = [v.text for v in runner.run(["all"], screen)]

        assert first == second


class TestRuleSelection:
    def test_only_requested_rules_run(self, make_element, config):
        element = make_element(label="", width=10, height=10, traits=[])

        violations = evaluate([RuleName.BUTTON_TRAIT], [element], config=config)

        assert [v.rule for v in violations] == ["buttonTrait"]

    def test_unknown_rule_raises_before_elements_are_read(self, config):
        reader = Mock(return_value=["button"])

        with pytest.raises(ConfigurationError):
            evaluate(["minimumSize", "nope"], [{"type": "button"}], config=config, trait_reader=reader)

        reader.assert_not_called()

    def test_invalid_config_is_rejected(self):
        from a11y_checks.config.check_config import CheckConfig

        with pytest.raises(ConfigurationError):
            RuleRunner(CheckConfig(min_meaningful_length=50, max_meaningful_length=40))

    def test_ignored_elements_produce_nothing(self, make_element, config):
        containers = [
            make_element(kind=kind, label="", width=1, height=1, traits=[Trait.BUTTON, Trait.LINK])
            for kind in (ElementKind.WINDOW, ElementKind.OTHER, ElementKind.SCROLL_VIEW)
        ]
        rules = [name for name in RuleName if name != RuleName.HEADER]

        assert evaluate(rules, containers, config=config) == []


class TestAccumulatingRules:
    def test_header_on_any_element_satisfies_screen(self, make_element, header_element, config):
        screen = [make_element(), header_element, make_element(label="Cancel")]
        assert evaluate([RuleName.HEADER], screen, config=config) == []

    def test_header_failure_comes_after_element_rules(self, make_element, config):
        screen = [make_element(width=10, height=10)]

        violations = evaluate([RuleName.HEADER, RuleName.MINIMUM_SIZE], screen, config=config)

        assert [v.rule for v in violations] == ["minimumSize", "minimumSize", "header"]

    def test_duplicates_grouped_after_header(self, make_element, config):
        a = make_element(label="Save")
        b = make_element(label="Save")
        c = make_element(label="Save")
        x = make_element(label="Close")
        y = make_element(label="Close")

        violations = evaluate(
            [RuleName.DUPLICATED, RuleName.HEADER], [a, x, b, y, c], config=config
        )

        assert [v.rule for v in violations] == ["header", "duplicated", "duplicated"]
        assert violations[1].elements == (a, b, c)
        assert violations[2].elements == (x, y)

    def test_disabled_precedes_conflicting_traits(self, make_element, config):
        element = make_element(enabled=False, traits=[Trait.BUTTON, Trait.LINK])

        violations = evaluate(
            [RuleName.CONFLICTING_TRAITS, RuleName.DISABLED], [element], config=config
        )

        assert [v.rule for v in violations] == ["disabled", "conflictingTraits"]


class TestRawInput:
    def test_raw_dicts_are_normalized(self, config):
        raw = [
            {"type": "XCUIElementTypeButton", "label": "done", "frame": [0, 0, 60, 44], "traits": 1},
            {"role": "AXStaticText", "label": "Title", "frame": [0, 0, 200, 20], "traits": ["header"]},
        ]

        violations = evaluate(["all"], raw, config=config)

        assert [v.message for v in violations] == ["Buttons should begin with a capital letter"]

    def test_ignored_identifiers_are_skipped(self, make_element):
        from a11y_checks.config.check_config import CheckConfig

        config = CheckConfig(ignored_identifiers=("debug_overlay",))
        element = make_element(label="", width=1, height=1, identifier="debug_overlay")

        assert evaluate([RuleName.MINIMUM_SIZE], [element], config=config) == []

    def test_source_trait_reader_fills_missing_traits(self, config):
        class RecordedSource(StaticElementSource):
            def get_traits(self, raw):
                return ["image"] if raw.get("type") == "image" else None

        source = RecordedSource([{"type": "image", "label": "Sunset", "frame": [0, 0, 50, 50]}])

        assert evaluate_source([RuleName.IMAGE_TRAIT], source, config=config) == []
