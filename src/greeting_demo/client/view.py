"""Client-side view model for the greeting page.

Holds the display state (`reply_text`, `is_loading`) and turns one trigger
into exactly one call to the proxy's `/api/hello` route.
"""
from __future__ import annotations
import logging

import httpx

from greeting_demo.common.schema import GENERIC_ERROR_MESSAGE

LOGGER = logging.getLogger("greeting.client.view")

LOADING_TEXT = "Loading..."
HELLO_PATH = "/api/hello"


class GreetingView:
    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.reply_text = ""
        self.is_loading = False
        self.last_ok = False
        self._transport = transport
        self._timeout = timeout

    async def submit(self) -> bool:
        """
        Handle a trigger event: fetch greetings from the proxy and update state.

        A trigger that arrives while a call is still in flight is ignored.
        Afterwards `last_ok` is True only if the proxy answered 200 with a completion.

        Returns:
            True if a call was made, False if the trigger was ignored.
        """
        if self.is_loading:
            LOGGER.debug("Ignoring trigger: a request is already in flight")
            return False

        self.is_loading = True
        self.last_ok = False
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                r = await client.get(f"{self.base_url}{HELLO_PATH}")
                body = r.json()
            text = body["completion"] if r.status_code == 200 else body["error"]["message"]
            if not isinstance(text, str):
                raise TypeError(f"expected a string reply, got {type(text).__name__}")
            self.reply_text = text
            self.last_ok = r.status_code == 200
        except Exception as e:
            LOGGER.error("Greeting request failed: %s", e)
            self.reply_text = GENERIC_ERROR_MESSAGE
        finally:
            self.is_loading = False
        return True

    def render(self) -> str:
        """Text for the result area; line breaks in the reply are kept as-is."""
        if self.is_loading:
            return LOADING_TEXT
        return self.reply_text
