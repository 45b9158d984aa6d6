import logging
from typing import Optional

import requests

from .config import Settings
from .constants import TELEGRAM_PARSE_MODE
from .exceptions import RelayError

logger = logging.getLogger(__name__)


class TelegramRelay:
    """Envia a mensagem formatada para a Bot API do Telegram (uma tentativa, sem retry)."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session

    def build_payload(self, message: str) -> dict:
        return {
            "chat_id": self.settings.chat_id,
            "text": message,
            "parse_mode": TELEGRAM_PARSE_MODE,
        }

    def send(self, message: str) -> None:
        post = self.session.post if self.session is not None else requests.post
        try:
            resp = post(
                self.settings.send_message_url,
                json=self.build_payload(message),
                timeout=self.settings.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise RelayError(f"failed to send message to Telegram: {exc}") from exc

        logger.debug("Telegram response: %s", resp.status_code)
        if resp.status_code != 200:
            logger.debug("Response content: %s", resp.text[:500])
            raise RelayError(
                f"failed to send message to Telegram, status code: {resp.status_code}",
                status_code=resp.status_code,
            )
