"""Tests for configuration loading."""

import os
import tempfile
from pathlib import Path

import pytest

from richnote.config import ConfigError, load_config


def test_load_config_defaults():
    """Test loading config with defaults when no file exists."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config = load_config(config_path=Path(tmpdir) / "missing.toml")

    assert config.id.strategy == "uuid"
    assert config.id.bytes == 6
    assert config.editor.font_sizes == [12, 16, 20, 24]
    assert config.editor.tab_label == "Note {n}"
    assert config.api.port == 8766
    assert config.log.level == "WARNING"


def test_load_config_from_file():
    """Test loading config from a file."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "richnote.toml"
        config_path.write_text("""
[id]
strategy = "hex"
bytes = 8

[editor]
font_sizes = [10, 14]
tab_label = "Page {n}"

[api]
host = "0.0.0.0"
port = 9000

[log]
level = "debug"
""")

        config = load_config(config_path=config_path)

        assert config.id.strategy == "hex"
        assert config.id.bytes == 8
        assert config.editor.font_sizes == [10, 14]
        assert config.editor.tab_label == "Page {n}"
        assert config.api.host == "0.0.0.0"
        assert config.api.port == 9000
        assert config.log.level == "DEBUG"


def test_load_config_search_cwd():
    """Test config search in current working directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        orig_cwd = os.getcwd()
        try:
            os.chdir(tmpdir)
            Path(tmpdir, "richnote.toml").write_text("""
[id]
bytes = 10
""")

            config = load_config()
            assert config.id.bytes == 10
        finally:
            os.chdir(orig_cwd)


def test_load_config_rejects_bad_values():
    """Test malformed values raise ConfigError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "richnote.toml"

        config_path.write_text('[id]\nstrategy = "sequential"\n')
        with pytest.raises(ConfigError):
            load_config(config_path=config_path)

        config_path.write_text("[editor]\nfont_sizes = [12, -1]\n")
        with pytest.raises(ConfigError):
            load_config(config_path=config_path)
