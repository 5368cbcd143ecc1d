# services/openai_chat.py
import logging

import httpx

from config import Settings

Logger = logging.getLogger(__name__)


# ───────────── Client ─────────────
class ChatCompletionClient:
    """One-shot chat completion over HTTPS (OpenAI wire format).

    No retry and, unless `timeout` is given, no deadline: a silent upstream
    keeps the request waiting.
    """

    def __init__(
        self,
        api_key: str | None,
        url: str,
        model: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.model = model
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.AsyncBaseTransport | None = None
    ) -> "ChatCompletionClient":
        return cls(
            api_key=settings.openai_key,
            url=settings.openai_url,
            model=settings.openai_model,
            timeout=settings.openai_timeout,
            transport=transport,
        )

    async def complete(self, system: str, user: str) -> str:
        """Send system + user messages, return the first choice's text trimmed."""
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
        }
        Logger.debug("chat completion → %s (%s)", self.url, self.model)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as http:
            r = await http.post(
                self.url,
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
            )
        r.raise_for_status()
        return _first_message(r.json())


def _first_message(result: dict) -> str:
    choices = result.get("choices") or []
    if not choices:
        return ""
    content = (choices[0].get("message") or {}).get("content") or ""
    return content.strip()
