"""Port: business logic applied to each message, plus a function adapter."""
from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Protocol, runtime_checkable

from sqs_worker.app.domain.handler_result import HandlerResult
from sqs_worker.app.domain.models import QueueMessage


@runtime_checkable
class MessageHandler(Protocol):
    """Handles one message.

    Return None or `HandlerResult.success()` when done, `HandlerResult.invalid_event`
    (or raise `InvalidEventError`) for messages that can never succeed, and raise
    or return `HandlerResult.failure` for anything worth another delivery.
    Called concurrently for every message of a batch.
    """

    async def handle_message(self, message: QueueMessage) -> HandlerResult | None: ...


def _is_async_callable(func: Callable[..., Any]) -> bool:
    return inspect.iscoroutinefunction(func) or inspect.iscoroutinefunction(
        getattr(func, "__call__", None)
    )


class HandlerFunc:
    """Lets a plain function act as a MessageHandler.

    Coroutine functions (and objects with an async `__call__`) are awaited;
    regular functions run in a worker thread so a batch of blocking handlers
    still runs in parallel. An awaitable returned from a regular function is
    awaited too.
    """

    def __init__(self, func: Callable[[QueueMessage], Any]) -> None:
        self._func = func
        self._is_async = _is_async_callable(func)

    async def handle_message(self, message: QueueMessage) -> HandlerResult | None:
        if self._is_async:
            return await self._func(message)
        value = await asyncio.to_thread(self._func, message)
        if inspect.isawaitable(value):
            value = await value
        return value

    def __repr__(self) -> str:
        return f"HandlerFunc({getattr(self._func, '__qualname__', self._func)!r})"


def as_handler(handler: MessageHandler | Callable[[QueueMessage], Any]) -> MessageHandler:
    """Accept a MessageHandler or a bare function.

    Handlers whose `handle_message` is a regular method are wrapped so each
    call runs in a worker thread instead of blocking the event loop.
    """
    if isinstance(handler, MessageHandler):
        if inspect.iscoroutinefunction(handler.handle_message):
            return handler
        return HandlerFunc(handler.handle_message)
    if callable(handler):
        return HandlerFunc(handler)
    raise TypeError(f"not a message handler: {handler!r}")
