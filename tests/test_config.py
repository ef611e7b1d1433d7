"""Tests for configuration loading."""

import json
import logging

import pytest

from tile_ascii.config import CONFIG_ENV_VAR, AsciiArtConfig, load_config
from tile_ascii.constants import DEFAULT_CHARSET, DEFAULT_RESOLUTION
from tile_ascii.exceptions import ConfigError


def test_defaults(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config()
    assert config.resolution == DEFAULT_RESOLUTION
    assert config.charset == DEFAULT_CHARSET
    assert config.output == 'console'


def test_file_values_and_overrides(tmp_path):
    path = tmp_path / 'cfg.json'
    path.write_text(json.dumps({'resolution': 64, 'output': 'HTML', 'log_level': 'debug'}))
    config = load_config(str(path), resolution=None, charset=' .#')
    assert config.resolution == 64
    assert config.output == 'html'
    assert config.log_level == 'DEBUG'
    assert config.charset == ' .#'


def test_env_var_names_config_file(tmp_path, monkeypatch):
    path = tmp_path / 'env.json'
    path.write_text(json.dumps({'resolution': 32}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert load_config().resolution == 32


def test_unknown_file_keys_are_ignored(tmp_path, caplog):
    path = tmp_path / 'cfg.json'
    path.write_text(json.dumps({'colour': 'red'}))
    with caplog.at_level(logging.WARNING, logger='tile_ascii.config'):
        config = load_config(str(path))
    assert config.resolution == DEFAULT_RESOLUTION
    assert "colour" in caplog.text


@pytest.mark.parametrize('values', [
    {'resolution': 0},
    {'resolution': 'big'},
    {'charset': ''},
    {'output': 'pdf'},
    {'log_level': 'LOUD'},
])
def test_invalid_values(values):
    with pytest.raises(ConfigError):
        AsciiArtConfig(**values).validate()


def test_malformed_file(tmp_path):
    path = tmp_path / 'bad.json'
    path.write_text('{not json')
    with pytest.raises(ConfigError):
        load_config(str(path))
    path.write_text('[1, 2]')
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_config(str(tmp_path / 'missing.json'))


def test_unknown_override(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    with pytest.raises(ConfigError):
        load_config(colour='red')
