"""Decodificação do payload de alerta do Graylog.

O formato do webhook do Graylog evoluiu sem versionamento: há nomes de campo
concorrentes (event_message/message/full_message, event_timestamp/timestamp).
A resolução por ordem de precedência fica concentrada nos acessores do Alert,
para que todo renderizador enxergue os mesmos valores derivados.
"""
import json
import math
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Union

from .constants import NO_MESSAGE, UNKNOWN_SEVERITY
from .detection import get_severity_name
from .exceptions import ParseError
from .utils import first_nonempty, parse_rfc3339, utc_now

Clock = Callable[[], datetime]

_STRING_FIELDS = (
    "event_definition_id",
    "event_definition_type",
    "event_trigger_id",
    "event_timestamp",
    "event_message",
    "priority",
    "source",
    "message",
    "timestamp",
    "full_message",
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if _is_number(value):
        if isinstance(value, float):
            if not math.isfinite(value):
                return ""
            if value.is_integer():
                return str(int(value))
        return str(value)
    return ""


@dataclass(frozen=True)
class Alert:
    event_definition_id: str = ""
    event_definition_type: str = ""
    event_trigger_id: str = ""
    event_timestamp: str = ""
    event_message: str = ""
    priority: str = ""
    alert: bool = False
    fields: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    source: str = ""
    message: str = ""
    timestamp: str = ""
    level: Optional[Union[int, float]] = None
    full_message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Alert":
        kwargs = {name: _as_string(data.get(name)) for name in _STRING_FIELDS}

        level = data.get("level")
        if not _is_number(level) or (isinstance(level, float) and not math.isfinite(level)):
            level = None

        fields = data.get("fields")
        if not isinstance(fields, dict):
            fields = {}

        return cls(
            alert=data.get("alert") is True,
            fields=MappingProxyType(dict(fields)),
            level=level,
            **kwargs,
        )

    def severity(self) -> str:
        if self.priority:
            return self.priority
        if self.level is not None:
            return str(int(self.level))
        return UNKNOWN_SEVERITY

    def severity_name(self) -> str:
        return get_severity_name(self.severity())

    def display_message(self) -> str:
        return first_nonempty(self.event_message, self.message, self.full_message, default=NO_MESSAGE)

    def effective_timestamp(self, clock: Optional[Clock] = None) -> datetime:
        """Primeiro timestamp RFC3339 válido; sem nenhum, usa o relógio (UTC por padrão)."""
        parsed = first_nonempty(
            parse_rfc3339(self.event_timestamp),
            parse_rfc3339(self.timestamp),
            default=None,
        )
        if parsed is not None:
            return parsed
        return (clock or utc_now)()


def parse_alert(data: Union[bytes, str]) -> Alert:
    try:
        payload = json.loads(data)
    except ValueError as exc:
        raise ParseError(f"failed to parse Graylog alert: {exc}") from exc

    if not isinstance(payload, dict):
        raise ParseError(f"failed to parse Graylog alert: expected JSON object, got {type(payload).__name__}")

    return Alert.from_dict(payload)
