from __future__ import annotations

from pathlib import Path

import pytest

from namecheap_ssl.client import SANDBOX_URL
from namecheap_ssl.config import ClientConfig, ConfigError, build_client, load_client_config

_ENV_VARS = (
    "NAMECHEAP_API_USER",
    "NAMECHEAP_API_KEY",
    "NAMECHEAP_USERNAME",
    "NAMECHEAP_CLIENT_IP",
    "NAMECHEAP_SANDBOX",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_missing_config_returns_defaults(tmp_path: Path) -> None:
    assert load_client_config(tmp_path / "missing.toml") == ClientConfig()


def test_load_namecheap_table(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        "[namecheap]\n"
        'api_user = "apiuser"\n'
        'api_key = "k"\n'
        'client_ip = "203.0.113.7"\n'
        "sandbox = true\n"
        "timeout = 5\n",
        encoding="utf-8",
    )
    config = load_client_config(path)

    assert config.api_user == "apiuser"
    assert config.api_key == "k"
    assert config.username is None
    assert config.client_ip == "203.0.113.7"
    assert config.sandbox is True
    assert config.timeout == 5.0


def test_environment_overrides_file(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "config.toml"
    path.write_text('api_user = "fromfile"\nclient_ip = "198.51.100.1"\n', encoding="utf-8")
    monkeypatch.setenv("NAMECHEAP_API_USER", "fromenv")
    monkeypatch.setenv("NAMECHEAP_SANDBOX", "yes")

    config = load_client_config(path)

    assert config.api_user == "fromenv"
    assert config.client_ip == "198.51.100.1"
    assert config.sandbox is True


def test_invalid_values_raise(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('sandbox = "sometimes"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="sandbox"):
        load_client_config(path)

    path.write_text("timeout = 0\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="timeout"):
        load_client_config(path)

    path.write_text("namecheap = 1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="table"):
        load_client_config(path)


def test_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("api_user = \n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid TOML"):
        load_client_config(path)


def test_build_client_requires_identity() -> None:
    with pytest.raises(ConfigError, match="api_user"):
        build_client(ClientConfig(client_ip="203.0.113.7"))
    with pytest.raises(ConfigError, match="client_ip"):
        build_client(ClientConfig(api_user="apiuser"))


def test_build_client_from_config() -> None:
    client = build_client(
        ClientConfig(api_user="apiuser", api_key="k", client_ip="203.0.113.7", sandbox=True)
    )
    assert client.base_url == SANDBOX_URL
    assert client.username == "apiuser"
