from typing import Optional


class BridgeError(Exception):
    """Erro base do bridge Graylog -> Slack/Mattermost."""


class ParseError(BridgeError):
    """Payload de entrada não é JSON válido ou não é um objeto."""


class DeliveryError(BridgeError):
    """Falha no POST para o webhook de destino (transporte, timeout ou status != 2xx)."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConfigError(BridgeError):
    """Configuração ausente ou inválida; fatal na inicialização."""
