import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import DEFAULT_TELEGRAM_API_BASE_URL, DEFAULT_TELEGRAM_TIMEOUT_SECONDS, DEFAULT_TIMING_UNIT_DIVISOR
from .exceptions import ConfigError


def _positive_float(env: Mapping[str, str], name: str, default: str) -> float:
    raw = env.get(name, "").strip() or default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} inválido: {raw!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a positive finite number")
    return value


@dataclass(frozen=True)
class Settings:
    """Configuração imutável carregada uma única vez na inicialização."""

    bot_token: str
    chat_id: str
    allowed_origin: Optional[str] = None
    api_base_url: str = DEFAULT_TELEGRAM_API_BASE_URL
    timeout_seconds: float = float(DEFAULT_TELEGRAM_TIMEOUT_SECONDS)
    timing_divisor: float = float(DEFAULT_TIMING_UNIT_DIVISOR)

    @property
    def send_message_url(self) -> str:
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}/sendMessage"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        bot_token = env.get("TELEGRAM_BOT_TOKEN", "").strip()
        chat_id = env.get("TELEGRAM_CHAT_ID", "").strip()
        if not bot_token or not chat_id:
            raise ConfigError("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID must be set as environment variables")

        return cls(
            bot_token=bot_token,
            chat_id=chat_id,
            allowed_origin=env.get("ALLOWED_CORS_ORIGIN", "").strip() or None,
            api_base_url=env.get("TELEGRAM_API_BASE_URL", "").strip() or DEFAULT_TELEGRAM_API_BASE_URL,
            timeout_seconds=_positive_float(env, "TELEGRAM_TIMEOUT_SECONDS", DEFAULT_TELEGRAM_TIMEOUT_SECONDS),
            timing_divisor=_positive_float(env, "TIMING_UNIT_DIVISOR", DEFAULT_TIMING_UNIT_DIVISOR),
        )
