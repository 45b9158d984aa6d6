class WebhookRelayError(Exception):
    """Base de todos os erros do serviço."""


class ConfigError(WebhookRelayError):
    pass


class CoercionError(WebhookRelayError, ValueError):
    """Valor do payload não pode ser convertido para o tipo esperado."""

    def __init__(self, value, expected: str, field=None):
        self.value = value
        self.expected = expected
        self.field = field
        where = f" em '{field}'" if field else ""
        super().__init__(f"esperado {expected}{where}, recebido {type(value).__name__}: {value!r}")


class RelayError(WebhookRelayError):
    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code
