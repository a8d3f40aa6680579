"""Tests for config file handling."""

import pytest

from gitship import (
    App,
    ConfigLoadError,
    append_config,
    config_file,
    load_config,
    parse_config,
    write_config,
)
from gitship.settings import get_settings


class TestParseConfig:
    """Tests for parse_config()."""

    def test_last_write_wins_and_bad_lines_ignored(self):
        config = parse_config("a = 1\nbad line\nb=2\na = 3".splitlines(True))
        assert config == {"a": "3", "b": "2"}

    def test_whitespace_around_equals(self):
        config = parse_config(["  name   =   widget  \n"])
        assert config == {"name": "widget  "}

    def test_value_runs_to_end_of_line(self):
        config = parse_config(["url = https://x.org/?a=b c\r\n"])
        assert config == {"url": "https://x.org/?a=b c"}

    def test_empty_value_is_ignored(self):
        assert parse_config(["empty =\n", "\n"]) == {}


class TestLoadConfig:
    """Tests for load_config() and config_file()."""

    def test_default_file(self):
        assert config_file() == ".git-ship.conf"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("GIT_SHIP_CONFIG", "other.conf")
        assert config_file() == "other.conf"

    def test_empty_env_uses_default(self, monkeypatch):
        monkeypatch.setenv("GIT_SHIP_CONFIG", "")
        assert config_file() == ".git-ship.conf"

    def test_load(self, write_conf):
        path = write_conf("project_name = widget\nrepository = https://github.com/acme/widget.git\n")
        assert load_config(str(path)) == {
            "project_name": "widget",
            "repository": "https://github.com/acme/widget.git",
        }

    def test_missing_file(self, tmp_path):
        path = str(tmp_path / "missing.conf")
        with pytest.raises(ConfigLoadError) as info:
            load_config(path)

        assert info.value.path == path
        assert path in str(info.value)
        assert isinstance(info.value.cause, FileNotFoundError)


class TestWriteConfig:
    """Tests for write_config()."""

    def test_written_file_reads_back(self, tmp_path):
        path = str(tmp_path / "out.conf")
        write_config(path, {"b": "2", "a": "x = y"})

        with open(path) as fh:
            assert fh.read() == "a = x = y\nb = 2\n"
        assert load_config(path) == {"a": "x = y", "b": "2"}

    def test_unwritable_path(self, tmp_path):
        path = str(tmp_path / "no" / "such" / "dir.conf")
        with pytest.raises(ConfigLoadError, match="Write"):
            write_config(path, {"a": "1"})


class TestAppConfig:
    """Tests for the App.config attribute."""

    def test_loaded_from_default_file(self, write_conf):
        write_conf("project_name = widget\n")
        assert App().config() == {"project_name": "widget"}

    def test_loaded_from_env_file(self, write_conf, monkeypatch):
        path = write_conf("project_name = gadget\n", name="custom.conf")
        monkeypatch.setenv("GIT_SHIP_CONFIG", str(path))
        assert App().project_name() == "gadget"

    def test_loaded_once(self, write_conf):
        path = write_conf("project_name = widget\n")
        app = App()
        first = app.config()
        path.write_text("project_name = changed\n")
        assert app.config() is first

    def test_missing_file_aborts(self):
        with pytest.raises(ConfigLoadError, match=r"\.git-ship\.conf"):
            App().config()


class TestSettings:
    """Tests for GIT_SHIP_DEBUG parsing."""

    @pytest.mark.parametrize("value", ["1", "2", "true", "yes", "verbose"])
    def test_debug_on(self, monkeypatch, value):
        monkeypatch.setenv("GIT_SHIP_DEBUG", value)
        assert get_settings().debug is True

    @pytest.mark.parametrize("value", ["", "0", "false", "No", "off"])
    def test_debug_off(self, monkeypatch, value):
        monkeypatch.setenv("GIT_SHIP_DEBUG", value)
        assert get_settings().debug is False

    def test_debug_does_not_break_config(self, monkeypatch, write_conf):
        write_conf("project_name = widget\n")
        monkeypatch.setenv("GIT_SHIP_DEBUG", "2")
        assert App().project_name() == "widget"


class TestAppendConfig:
    """Tests for append_config()."""

    def test_keeps_existing_lines(self, write_conf):
        path = write_conf("# notes\nproject_name = widget\n\nrepository = x\n")
        append_config(str(path), {"homepage": "h", "bugtracker": "b"})

        assert path.read_text() == (
            "# notes\nproject_name = widget\n\nrepository = x\n"
            "bugtracker = b\nhomepage = h\n"
        )

    def test_adds_missing_newline(self, write_conf):
        path = write_conf("project_name = widget")
        append_config(str(path), {"homepage": "h"})
        assert load_config(str(path)) == {"project_name": "widget", "homepage": "h"}

    def test_creates_file(self, tmp_path):
        path = str(tmp_path / "new.conf")
        append_config(path, {"a": "1"})
        assert load_config(path) == {"a": "1"}
