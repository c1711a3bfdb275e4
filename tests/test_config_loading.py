# tests/test_config_loading.py
import os

import pytest
import yaml
from pydantic import ValidationError

from grass_fireworks.core import BASE, GlobalCfg, github_token, load_config
from fireworks_api.config import ServerConfig


def write_yaml(path, obj):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False, allow_unicode=True)


def test_example_config_loads():
    cfg = load_config(os.path.join(BASE, "conf", "global.example.yaml"))
    assert isinstance(cfg, GlobalCfg)
    assert cfg.canvas.default_width == 400
    assert cfg.canvas.max_height == 400
    assert cfg.github.endpoint == "https://api.github.com/graphql"
    assert cfg.cascade.commit_threshold == 50
    assert cfg.cascade.label == "加茂川"
    assert cfg.demo.display_name == "demo"


def test_partial_config_keeps_defaults(tmp_path):
    p = tmp_path / "global.yaml"
    write_yaml(p, {"cascade": {"commit_threshold": 20}})
    cfg = load_config(str(p))
    assert cfg.cascade.commit_threshold == 20
    assert cfg.cascade.lucky_day is True
    assert cfg.github.timeout_seconds == 10.0


def test_missing_file_uses_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.yaml"))
    assert cfg == GlobalCfg()


def test_empty_file_uses_defaults(tmp_path):
    p = tmp_path / "global.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config(str(p)) == GlobalCfg()


def test_invalid_config_raises(tmp_path):
    p = tmp_path / "global.yaml"
    write_yaml(p, {"canvas": {"default_width": 1000}})
    with pytest.raises(ValidationError):
        load_config(str(p))

    write_yaml(p, {"github": {"timeout_seconds": 0}})
    with pytest.raises(ValidationError):
        load_config(str(p))


def test_github_token_lookup():
    cfg = GlobalCfg()
    assert github_token(cfg, {"GITHUB_TOKEN": "tok"}) == "tok"
    assert github_token(cfg, {"GITHUB_TOKEN": "   "}) is None
    assert github_token(cfg, {}) is None


def test_server_config_dotted_get(tmp_path):
    p = tmp_path / "server.yaml"
    write_yaml(p, {"server": {"port": 9000}, "cache": {"enabled": False}})
    config = ServerConfig(str(p))
    assert config.get("server.port") == 9000
    assert config.get("cache.enabled") is False
    assert config.get("server.host", "127.0.0.1") == "127.0.0.1"
    assert config.get("nothing.here") is None


def test_server_config_defaults_when_missing(tmp_path):
    config = ServerConfig(str(tmp_path / "missing.yaml"))
    assert config.get("server.port") == 8787
    assert config.get("cache.ttl_fireworks") == 3600
    assert config.get("cache.ttl_demo") == 31536000


def test_server_config_defaults_when_malformed(tmp_path):
    p = tmp_path / "server.yaml"
    p.write_text("server: [unclosed", encoding="utf-8")
    config = ServerConfig(str(p))
    assert config.get("server.host") == "127.0.0.1"


def test_shipped_server_config():
    config = ServerConfig(os.path.join(BASE, "conf", "server.yaml"))
    assert config.get("security.security_headers.enabled") is True
    assert config.get("cache.max_entries") == 1024
