"""
Tests for settings storage and title format validation.
"""

import json
import sys

import pytest

from tmdbfiles.settings import (
    APP_DIR_NAME,
    DEFAULT_EPISODE_TITLE_FORMAT,
    SettingsManager,
    app_data_dir,
    validate_title_format,
)


class TestSettingsManager:

    def test_defaults_without_file(self, tmp_path):
        mgr = SettingsManager(tmp_path / "settings.json")
        assert mgr.get("tmdb_language") == "en-US"
        assert mgr.get("image_size") == "original"
        assert mgr.get("config_max_age_days") == 7
        assert mgr.get("episode_title_format") == DEFAULT_EPISODE_TITLE_FORMAT
        assert mgr.get("unknown", "x") == "x"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "settings.json"
        mgr = SettingsManager(path)
        mgr.set("image_size", "w500")
        assert mgr.save()

        assert json.loads(path.read_text(encoding="utf-8")) == {"image_size": "w500"}
        assert SettingsManager(path).get("image_size") == "w500"

    def test_all_merges_defaults(self, tmp_path):
        mgr = SettingsManager(tmp_path / "settings.json")
        mgr.set("tmdb_language", "fi-FI")
        merged = mgr.all()
        assert merged["tmdb_language"] == "fi-FI"
        assert merged["image_size"] == "original"

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2", encoding="utf-8")
        assert SettingsManager(path).get("image_size") == "original"

    def test_reload(self, tmp_path):
        path = tmp_path / "settings.json"
        mgr = SettingsManager(path)
        path.write_text(json.dumps({"image_size": "w92"}), encoding="utf-8")
        mgr.reload()
        assert mgr.get("image_size") == "w92"

    def test_save_failure(self, tmp_path):
        mgr = SettingsManager(tmp_path / "missing" / "settings.json")
        assert mgr.save() is False


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout only")
def test_app_data_dir_created(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert app_data_dir() == tmp_path / APP_DIR_NAME
    assert (tmp_path / APP_DIR_NAME).is_dir()


class TestValidateTitleFormat:

    def test_default_is_valid(self):
        assert validate_title_format(DEFAULT_EPISODE_TITLE_FORMAT) == (True, "")

    def test_padded_episode(self):
        assert validate_title_format("{0} E{2:02d}")[0]

    @pytest.mark.parametrize("template,message", [
        ("", "Template cannot be empty"),
        ("{0} {4}", "more than four fields"),
        ("{show}", "Unknown variable"),
        ("{0:d}", "Format error"),
    ])
    def test_invalid(self, template, message):
        ok, error = validate_title_format(template)
        assert not ok
        assert message in error
