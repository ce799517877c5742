"""Carregamento da configuração: defaults < arquivo YAML < variáveis de ambiente.

A configuração é lida uma vez na inicialização e passada explicitamente para
o renderizador; os modelos são congelados depois do load.
"""
import logging
import os
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import (
    CONFIG_FILE,
    DEFAULT_ICON_EMOJI,
    DEFAULT_LISTEN_ADDR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MESSAGE_FIELDS,
    DEFAULT_PLATFORM,
    DEFAULT_USERNAME,
    MESSAGE_FIELD_CONFIGS,
    SUPPORTED_PLATFORMS,
)
from .exceptions import ConfigError

logger = logging.getLogger(__name__)


class ServerConfig(BaseModel):
    """Endereço de escuta e nível de log."""

    model_config = ConfigDict(frozen=True)

    listen_addr: str = DEFAULT_LISTEN_ADDR
    log_level: str = DEFAULT_LOG_LEVEL


class DestinationConfig(BaseModel):
    """Webhook de destino (Slack ou Mattermost) e roteamento por severidade."""

    model_config = ConfigDict(frozen=True)

    webhook_url: str = Field(min_length=1)
    platform: str = DEFAULT_PLATFORM
    username: str = DEFAULT_USERNAME
    icon_emoji: str = DEFAULT_ICON_EMOJI
    channel: str = ""
    # severidade (token bruto) -> canal
    destinations: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType({}))
    fields: Tuple[str, ...] = DEFAULT_MESSAGE_FIELDS

    @field_validator("platform", mode="before")
    @classmethod
    def _check_platform(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.lower()
            if value not in SUPPORTED_PLATFORMS:
                raise ValueError(f"platform must be 'slack' or 'mattermost', got: {value}")
        return value

    @field_validator("destinations", mode="before")
    @classmethod
    def _stringify_destinations(cls, value: Any) -> Any:
        if value is None:
            return {}
        # YAML entrega chaves numéricas como int; o lookup é feito pelo token string
        if isinstance(value, Mapping):
            return {str(k): str(v) for k, v in value.items()}
        return value

    @field_validator("destinations")
    @classmethod
    def _freeze_destinations(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_validator("fields", mode="before")
    @classmethod
    def _default_fields(cls, value: Any) -> Any:
        return DEFAULT_MESSAGE_FIELDS if value is None else value

    @field_validator("fields")
    @classmethod
    def _check_fields(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        unknown = [f for f in value if f not in MESSAGE_FIELD_CONFIGS]
        if unknown:
            raise ValueError(f"unknown message fields: {', '.join(unknown)}")
        return value


class Configuration(BaseModel):
    """Raiz da configuração."""

    model_config = ConfigDict(frozen=True)

    server: ServerConfig = Field(default_factory=ServerConfig)
    destination: DestinationConfig

    @property
    def listen_host_port(self) -> Tuple[str, int]:
        host, _, port = self.server.listen_addr.rpartition(":")
        try:
            return host or "0.0.0.0", int(port)
        except ValueError:
            raise ConfigError(f"invalid listen_addr: {self.server.listen_addr}")


def _parse_mapping_env(raw: str) -> Dict[str, str]:
    # Formato: "3=#warnings,2=#errors"
    mapping: Dict[str, str] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        if "=" not in item:
            raise ConfigError(f"invalid DESTINATIONS entry '{item}', expected severity=channel")
        key, value = item.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _parse_list_env(raw: str) -> Tuple[str, ...]:
    return tuple(s.strip() for s in raw.split(",") if s.strip())


def _read_yaml(path: Optional[str]) -> Dict[str, Any]:
    if not path or not os.path.exists(path):
        logger.debug("Config file not found, using defaults and environment path=%s", path)
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fp:
            raw = yaml.safe_load(fp)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"failed to parse config file: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("failed to parse config file: top-level value must be a mapping")
    return raw


def load_config(path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> Configuration:
    env = os.environ if environ is None else environ
    data = _read_yaml(path if path is not None else env.get("CONFIG_FILE", CONFIG_FILE))

    server = data.get("server") or {}
    dest = data.get("destination") or {}
    if isinstance(server, dict):
        server = dict(server)
    if isinstance(dest, dict):
        dest = dict(dest)

        # Variáveis de ambiente sobrescrevem o arquivo
        for env_name, key in (
            ("PLATFORM", "platform"),
            ("WEBHOOK_URL", "webhook_url"),
            ("USERNAME", "username"),
            ("ICON_EMOJI", "icon_emoji"),
            ("CHANNEL", "channel"),
        ):
            if env.get(env_name):
                dest[key] = env[env_name]
        if env.get("DESTINATIONS"):
            dest["destinations"] = _parse_mapping_env(env["DESTINATIONS"])
        if env.get("MESSAGE_FIELDS"):
            dest["fields"] = _parse_list_env(env["MESSAGE_FIELDS"])

    if isinstance(server, dict):
        if env.get("LISTEN_ADDR"):
            server["listen_addr"] = env["LISTEN_ADDR"]
        if env.get("LOG_LEVEL"):
            server["log_level"] = env["LOG_LEVEL"]

    try:
        return Configuration.model_validate({"server": server, "destination": dest})
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
