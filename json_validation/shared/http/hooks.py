"""
Response start hooks for pure ASGI middleware.

Wraps an ASGI ``send`` callable so that middleware can tell whether the
response has started and can adjust headers at the last possible moment,
immediately before ``http.response.start`` goes out.
"""

from collections.abc import Callable

from starlette.datastructures import MutableHeaders
from starlette.types import Message, Send

StartingCallback = Callable[[MutableHeaders], None]


class ResponseStartHooks:
    """ASGI send wrapper running header callbacks before the response starts.

    Callbacks run exactly once, in registration order, and see a mutable
    view over the start message headers. Anything they set overrides what
    the response itself carried.
    """

    def __init__(self, send: Send) -> None:
        self._send = send
        self._callbacks: list[StartingCallback] = []
        self.started = False

    def on_starting(self, callback: StartingCallback) -> None:
        """Register a callback to run just before the start message is sent.

        Raises:
            RuntimeError: If the response has already started.
        """
        if self.started:
            raise RuntimeError("Cannot register a callback after the response started.")
        self._callbacks.append(callback)

    def clear(self) -> None:
        """Drop all registered callbacks."""
        self._callbacks.clear()

    async def __call__(self, message: Message) -> None:
        if message["type"] == "http.response.start" and not self.started:
            self.started = True
            message.setdefault("headers", [])
            headers = MutableHeaders(scope=message)
            callbacks, self._callbacks = self._callbacks, []
            for callback in callbacks:
                callback(headers)
        await self._send(message)
