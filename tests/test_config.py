"""Tests for the config file."""

from __future__ import annotations

import os

from itsyhome import config
from itsyhome.config import Config, load_config, save_config


def test_default_config():
    cfg = Config()
    assert cfg.host == "localhost"
    assert cfg.port == 8423
    assert cfg.base_url == "http://localhost:8423"


def test_base_url():
    assert Config(host="192.168.1.10", port=9000).base_url == "http://192.168.1.10:9000"


def test_load_missing_file(config_file):
    assert not os.path.exists(config_file)
    assert load_config() == Config()


def test_save_and_load(config_file):
    save_config(Config(host="mac-mini.local", port=9999))
    assert os.path.exists(config_file)
    assert load_config() == Config(host="mac-mini.local", port=9999)


def test_save_escapes_quotes(tmp_path):
    path = str(tmp_path / "config.toml")
    save_config(Config(host='we"ird\\host', port=1), path)
    assert load_config(path).host == 'we"ird\\host'


def test_load_defaults_for_missing_fields(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[server]\nhost = ""\nport = 0\n', encoding="utf-8")
    assert load_config(str(path)) == Config()
    path.write_text('[server]\nhost = "pi.local"\n', encoding="utf-8")
    assert load_config(str(path)) == Config(host="pi.local", port=8423)


def test_load_invalid_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[server\nhost = ", encoding="utf-8")
    assert load_config(str(path)) == Config()


def test_config_path_follows_module_setting(config_file):
    assert config.config_path() == config_file
    assert config_file.endswith(os.path.join("itsyhome", "config.toml"))
