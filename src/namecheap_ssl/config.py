"""Configuration helpers for the namecheap-ssl client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from namecheap_ssl.client import API_KEY_ENV_VAR, SSLClient

DEFAULT_CONFIG_PATH = Path.home() / ".namecheap_ssl" / "config.toml"
API_USER_ENV_VAR = "NAMECHEAP_API_USER"
USERNAME_ENV_VAR = "NAMECHEAP_USERNAME"
CLIENT_IP_ENV_VAR = "NAMECHEAP_CLIENT_IP"
SANDBOX_ENV_VAR = "NAMECHEAP_SANDBOX"


@dataclass(frozen=True)
class ClientConfig:
    api_user: str = ""
    api_key: str | None = None
    username: str | None = None
    client_ip: str = ""
    sandbox: bool = False
    base_url: str | None = None
    timeout: float = 30.0


class ConfigError(ValueError):
    """Raised when client config is invalid."""


def _load_toml(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")

    try:  # Python 3.11+
        import tomllib  # type: ignore[attr-defined]
        try:
            return tomllib.loads(raw)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc
    except ModuleNotFoundError:
        try:
            import tomli
        except ModuleNotFoundError as exc:
            raise ConfigError("toml parser unavailable; install tomli for Python < 3.11") from exc
        try:
            return tomli.loads(raw)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _to_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "1", "yes", "on"}:
            return True
        if lowered in {"false", "0", "no", "off"}:
            return False
    raise ConfigError(f"{field_name} must be a boolean")


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


def _env_or(env_var: str, configured: Any) -> Any:
    env_value = os.getenv(env_var)
    if env_value is not None and env_value.strip():
        return env_value.strip()
    return configured


def load_client_config(path: str | Path | None = None) -> ClientConfig:
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    parsed = _load_toml(config_path) if config_path.exists() else {}

    section = parsed.get("namecheap")
    if isinstance(section, dict):
        source = section
    elif section is None:
        source = parsed
    else:
        raise ConfigError("[namecheap] must be a table")

    api_user = str(_env_or(API_USER_ENV_VAR, source.get("api_user", ""))).strip()
    api_key = _optional_str(_env_or(API_KEY_ENV_VAR, source.get("api_key")))
    username = _optional_str(_env_or(USERNAME_ENV_VAR, source.get("username")))
    client_ip = str(_env_or(CLIENT_IP_ENV_VAR, source.get("client_ip", ""))).strip()
    sandbox = _to_bool(_env_or(SANDBOX_ENV_VAR, source.get("sandbox", False)), "sandbox")
    base_url = _optional_str(source.get("base_url"))

    raw_timeout = source.get("timeout", 30.0)
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError) as exc:
        raise ConfigError("timeout must be a number") from exc
    if timeout <= 0:
        raise ConfigError("timeout must be > 0")

    return ClientConfig(
        api_user=api_user,
        api_key=api_key,
        username=username,
        client_ip=client_ip,
        sandbox=sandbox,
        base_url=base_url,
        timeout=timeout,
    )


def build_client(config: ClientConfig) -> SSLClient:
    if not config.api_user:
        raise ConfigError("api_user must not be empty")
    if not config.client_ip:
        raise ConfigError("client_ip must not be empty")
    return SSLClient(
        api_user=config.api_user,
        api_key=config.api_key,
        username=config.username,
        client_ip=config.client_ip,
        sandbox=config.sandbox,
        base_url=config.base_url,
        timeout=config.timeout,
    )
