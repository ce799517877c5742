import os

VERSION = "1.0.0"

# Configurações globais de ambiente
CONFIG_FILE = os.getenv("CONFIG_FILE", "/etc/graylog-webhook/config.yaml")
DEBUG_MODE = os.getenv("DEBUG_MODE", "False").lower() == "true"

DEFAULT_LISTEN_ADDR = "0.0.0.0:8080"
DEFAULT_LOG_LEVEL = "info"
DEFAULT_PLATFORM = "mattermost"
DEFAULT_USERNAME = "Graylog"
DEFAULT_ICON_EMOJI = ":clipboard:"

SUPPORTED_PLATFORMS = ("slack", "mattermost")

# Envio para o webhook de saída (sem retry)
WEBHOOK_TIMEOUT_SECONDS = int(os.getenv("WEBHOOK_TIMEOUT_SECONDS", "10"))
ERROR_BODY_SNIPPET_MAX = 200

# Limites de truncamento: mensagem enviada vs. linha de log
MESSAGE_MAX_LENGTH = 500
LOG_MESSAGE_MAX_LENGTH = 100
ELLIPSIS = "..."

NO_MESSAGE = "No message available"
UNKNOWN_SEVERITY = "unknown"

# Níveis syslog 0-6
SEVERITY_NAMES = {
    "0": "EMERGENCY",
    "1": "ALERT",
    "2": "ERROR",
    "3": "WARNING",
    "4": "NOTICE",
    "5": "INFO",
    "6": "DEBUG",
}
UNKNOWN_SEVERITY_NAME = "UNKNOWN"

COLOR_RED = "#D62828"
COLOR_ORANGE = "#F77F00"
COLOR_YELLOW = "#FFB703"
COLOR_BLUE = "#219EBC"
COLOR_DARK_BLUE = "#023047"
COLOR_GRAY = "#999999"

SEVERITY_COLORS = {
    "0": COLOR_RED,
    "1": COLOR_RED,
    "2": COLOR_ORANGE,
    "3": COLOR_YELLOW,
    "4": COLOR_BLUE,
    "5": COLOR_BLUE,
    "6": COLOR_DARK_BLUE,
}

# Campos opcionais do anexo: nome na config -> (título, atributo do Alert)
MESSAGE_FIELD_CONFIGS = {
    "source": {"title": "Source", "attr": "source"},
    "event_id": {"title": "Event ID", "attr": "event_definition_id"},
    "trigger_id": {"title": "Trigger ID", "attr": "event_trigger_id"},
    "definition_type": {"title": "Definition Type", "attr": "event_definition_type"},
}
DEFAULT_MESSAGE_FIELDS = ("source", "event_id", "trigger_id", "definition_type")

ATTACHMENT_AUTHOR = "Graylog"
