"""Tests for stylesheet location and creation."""

import os

import pytest

pytest.importorskip("gi")

import config
from power_menu.errors import ConfigError


class TestEnsureStyleFile:
    """Test the default stylesheet in the config directory."""

    def test_creates_directory_and_default(self, tmp_path):
        """First run writes the default stylesheet."""
        path = config.ensure_style_file(base=str(tmp_path))

        assert path == os.path.join(str(tmp_path), "oxishut", "style.css")
        with open(path) as f:
            content = f.read()
        assert "#mainwindow" in content
        assert "border-radius: 10px" in content

    def test_keeps_user_edits(self, tmp_path):
        """An existing stylesheet is never overwritten."""
        directory = tmp_path / "oxishut"
        directory.mkdir()
        style = directory / "style.css"
        style.write_text(".button { color: red; }")

        path = config.ensure_style_file(base=str(tmp_path))

        assert path == str(style)
        assert style.read_text() == ".button { color: red; }"

    def test_unwritable_base_raises(self, tmp_path):
        """A config dir that cannot be created is a ConfigError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(ConfigError):
            config.ensure_style_file(base=str(blocker))


class TestResolveStylePath:
    """Test --css handling."""

    def test_explicit_path_wins(self, tmp_path):
        assert config.resolve_style_path("/tmp/other.css", base=str(tmp_path)) == "/tmp/other.css"
        assert not (tmp_path / "oxishut").exists()

    def test_empty_means_no_stylesheet(self, tmp_path):
        assert config.resolve_style_path("", base=str(tmp_path)) == ""

    def test_default_is_created(self, tmp_path):
        path = config.resolve_style_path(None, base=str(tmp_path))
        assert os.path.exists(path)
