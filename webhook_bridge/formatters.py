from typing import List, Optional

from .alert import Alert, Clock
from .config import Configuration, DestinationConfig
from .constants import MESSAGE_FIELD_CONFIGS, MESSAGE_MAX_LENGTH
from .detection import get_severity_color
from .models import ChatField, ChatMessage
from .utils import format_rfc3339, truncate


def build_fields(alert: Alert, severity_name: str, time_value: str, field_names) -> List[ChatField]:
    fields = [
        ChatField("Severity", severity_name, True),
        ChatField("Time", time_value, True),
    ]
    # Campos opcionais só entram quando preenchidos, na ordem configurada
    for name in field_names:
        field_config = MESSAGE_FIELD_CONFIGS[name]
        value = getattr(alert, field_config["attr"])
        if value:
            fields.append(ChatField(field_config["title"], value, True))
    return fields


def resolve_channel(alert: Alert, destination: DestinationConfig) -> str:
    # Match exato pelo token bruto (ex.: "3"), não pelo nome (WARNING)
    return destination.destinations.get(alert.severity(), destination.channel)


def render_message(alert: Alert, config: Configuration, clock: Optional[Clock] = None) -> ChatMessage:
    severity_name = alert.severity_name()
    message = truncate(alert.display_message(), MESSAGE_MAX_LENGTH)
    timestamp = alert.effective_timestamp(clock)

    fields = build_fields(alert, severity_name, format_rfc3339(timestamp), config.destination.fields)

    return ChatMessage(
        text=f"[{severity_name}] {message}",
        attachment_color=get_severity_color(alert.severity()),
        title=message,
        fields=tuple(fields),
        channel=resolve_channel(alert, config.destination),
        timestamp=timestamp,
    )
