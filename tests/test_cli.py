"""
Tests for the a11y-checks command line.
"""

import json

import pytest

from a11y_checks.main import EXIT_ERROR, EXIT_FAILURES, EXIT_OK, load_elements, main

GOOD_SCREEN = [
    {"type": "staticText", "label": "Settings", "frame": [0, 0, 200, 30], "traits": ["header"]},
    {"type": "button", "label": "Save", "frame": [0, 40, 100, 44], "traits": ["button"]},
]


@pytest.fixture
def dump(tmp_path):
    def _write(elements, name="screen.json"):
        path = tmp_path / name
        path.write_text(json.dumps(elements))
        return str(path)

    return _write


class TestCheckCommand:
    def test_clean_screen_exits_zero(self, dump):
        assert main(["check", dump(GOOD_SCREEN)]) == EXIT_OK

    def test_failures_exit_one(self, dump):
        screen = GOOD_SCREEN + [{"type": "button", "label": "Go", "frame": [0, 0, 10, 10]}]
        assert main(["check", dump(screen)]) == EXIT_FAILURES

    def test_warnings_alone_exit_zero(self, dump):
        screen = GOOD_SCREEN + [{"type": "staticText", "label": "Hi", "frame": [0, 0, 100, 20]}]
        assert main(["check", dump(screen)]) == EXIT_OK

    def test_rule_selection(self, dump):
        screen = [{"type": "button", "label": "Go", "frame": [0, 0, 10, 10], "traits": ["button"]}]
        assert main(["check", dump(screen), "--rules", "labelPresence"]) == EXIT_OK

    def test_unknown_rule_is_an_error(self, dump):
        assert main(["check", dump(GOOD_SCREEN), "--rules", "bogus"]) == EXIT_ERROR

    def test_config_file(self, dump, tmp_path):
        config = tmp_path / "a11y.yaml"
        config.write_text("min_interactive_size: 60\n")
        assert main(["check", dump(GOOD_SCREEN), "--config", str(config)]) == EXIT_FAILURES

    def test_missing_dump_is_an_error(self, tmp_path):
        assert main(["check", str(tmp_path / "absent.json")]) == EXIT_ERROR


class TestSnapshotCommand:
    def test_generate_then_compare(self, dump, tmp_path):
        args = [
            "snapshot",
            dump(GOOD_SCREEN),
            "--suite",
            "SettingsTests",
            "--test",
            "test_open",
            "--reference-dir",
            str(tmp_path),
        ]

        assert main(args) == EXIT_OK
        assert (tmp_path / "SettingsTests-test-open-0.json").is_file()
        assert main(args) == EXIT_OK

        changed = [dict(GOOD_SCREEN[0]), dict(GOOD_SCREEN[1], label="Store")]
        args[1] = dump(changed, "changed.json")
        assert main(args) == EXIT_FAILURES


class TestLoadElements:
    def test_wrapped_list(self, dump):
        assert load_elements(dump({"elements": GOOD_SCREEN})) == GOOD_SCREEN

    def test_wrong_shape(self, dump):
        from a11y_checks.errors import A11yCheckError

        with pytest.raises(A11yCheckError):
            load_elements(dump({"items": []}))

    def test_invalid_utf8(self, tmp_path):
        from a11y_checks.errors import A11yCheckError

        path = tmp_path / "bad.json"
        path.write_bytes(b'[{"label": "\xff"}]')

        with pytest.raises(A11yCheckError, match="not valid UTF-8"):
            load_elements(str(path))

    def test_invalid_utf8_exits_with_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_bytes(b'[{"label": "\xff"}]')

        assert main(["check", str(path)]) == EXIT_ERROR
