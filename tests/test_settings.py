import calendar
import json
import logging

import pytest

from settings import DEFAULT_OPTIONS, load_settings, merge_options


def test_merge_options_defaults() -> None:
    assert merge_options() == DEFAULT_OPTIONS
    assert merge_options() is not DEFAULT_OPTIONS


def test_merge_options_ignores_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="settings"):
        merged = merge_options({"theme": "dark"})
    assert merged == DEFAULT_OPTIONS
    assert "theme" in caplog.text
    assert "Allowed: footer_text, first_weekday" in caplog.text


def test_merge_options_rejects_bad_values(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="settings"):
        merged = merge_options({"first_weekday": 9, "footer_text": 42})
    assert merged["first_weekday"] == calendar.SUNDAY
    assert merged["footer_text"] is None
    assert len(caplog.records) == 2


def test_load_settings_reads_json(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"footerHTML": "Closed on Sundays", "first_weekday": 0}),
                    encoding="utf-8")
    settings = load_settings(str(path))
    assert settings["footer_text"] == "Closed on Sundays"
    assert settings["first_weekday"] == calendar.MONDAY


def test_load_settings_missing_file_gives_defaults(tmp_path) -> None:
    assert load_settings(str(tmp_path / "absent.json")) == DEFAULT_OPTIONS


def test_load_settings_bad_json_warns(tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="settings"):
        assert load_settings(str(path)) == DEFAULT_OPTIONS
    assert "Could not read settings" in caplog.text


def test_load_settings_non_object_is_ignored(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_settings(str(path)) == DEFAULT_OPTIONS
