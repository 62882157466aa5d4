"""
Tests for configuration loading
"""
from pathlib import Path

import pytest
import yaml

from easy_caddy.lib.config import Config, ConfigError

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any EASY_CADDY_* variables from the environment"""
    import os
    for name in list(os.environ):
        if name.startswith("EASY_CADDY_"):
            monkeypatch.delenv(name)

def test_defaults(tmp_path):
    config = Config.load(tmp_path / "missing.yaml")
    assert config.caddyfile == Path("/etc/caddy/Caddyfile")
    assert config.backup_file == Path("/etc/caddy/Caddyfile.bak")
    assert config.registry_file == Path("/root/caddy_reverse_proxies.txt")
    assert config.upstream_host == "127.0.0.1"
    assert config.default_pattern == "*"
    assert config.probe_timeout == 1.0

def test_load_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump({
        'caddyfile': str(tmp_path / "Caddyfile"),
        'service_name': 'caddy-custom',
        'probe_timeout': 2
    }))

    config = Config.load(config_file)
    assert config.caddyfile == tmp_path / "Caddyfile"
    assert config.backup_file == tmp_path / "Caddyfile.bak"
    assert config.service_name == 'caddy-custom'
    assert config.probe_timeout == 2.0

def test_env_overrides_file(tmp_path, monkeypatch):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("upstream_host: 10.0.0.1\n")
    monkeypatch.setenv("EASY_CADDY_UPSTREAM_HOST", "192.168.1.5")
    monkeypatch.setenv("EASY_CADDY_REGISTRY_FILE", str(tmp_path / "reg.txt"))

    config = Config.load(config_file)
    assert config.upstream_host == "192.168.1.5"
    assert config.registry_file == tmp_path / "reg.txt"

def test_unknown_key(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("domain: example.com\n")
    with pytest.raises(ConfigError, match="domain"):
        Config.load(config_file)

def test_malformed_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("caddyfile: [unclosed\n")
    with pytest.raises(ConfigError):
        Config.load(config_file)

def test_bad_probe_timeout(tmp_path, monkeypatch):
    monkeypatch.setenv("EASY_CADDY_PROBE_TIMEOUT", "soon")
    with pytest.raises(ConfigError, match="probe_timeout"):
        Config.load(tmp_path / "missing.yaml")

def test_save_round_trip(tmp_path):
    config_file = tmp_path / "nested" / "config.yaml"
    Config(caddyfile=tmp_path / "Caddyfile", log_level="DEBUG").save(config_file)

    loaded = Config.load(config_file)
    assert loaded.caddyfile == tmp_path / "Caddyfile"
    assert loaded.log_level == "DEBUG"
