"""Worker composition root: build concrete dependencies from settings.

Composition may: import concrete classes, call factories, store interface types,
load the user's handler.
"""
from __future__ import annotations

import importlib
from typing import Any

from loguru import logger

from sqs_worker.app.application.poller import Poller
from sqs_worker.app.application.retry_policy import RetryPolicy, create_retry_policy
from sqs_worker.app.config.settings import Settings
from sqs_worker.app.config.worker_config import WorkerConfig
from sqs_worker.app.core import SERVICE_NAME
from sqs_worker.app.infrastructure.queue.factory import create_queue_client
from sqs_worker.app.ports.message_handler import MessageHandler, as_handler
from sqs_worker.app.ports.queue_client import QueueClient


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def load_handler(path: str) -> MessageHandler:
    """Import "package.module:attribute". Classes are instantiated with no arguments."""
    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(f"handler must look like 'package.module:attribute', got {path!r}")
    module = importlib.import_module(module_name)
    try:
        target = getattr(module, attribute)
    except AttributeError as exc:
        raise ValueError(f"module {module_name!r} has no attribute {attribute!r}") from exc
    if isinstance(target, type):
        target = target()
    return as_handler(target)


class WorkerDependencies:
    """Holds the wired worker dependencies."""

    def __init__(
        self,
        *,
        settings: Settings,
        handler: MessageHandler | None = None,
        queue_client: QueueClient | None = None,
    ) -> None:
        self._settings = settings
        self._handler = handler
        self._queue_client = queue_client
        self._config: WorkerConfig | None = None
        self._retry_policy: RetryPolicy | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def config(self) -> WorkerConfig:
        if self._config is None:
            raise RuntimeError("config is not initialized")
        return self._config

    @property
    def queue_client(self) -> QueueClient:
        if self._queue_client is None:
            raise RuntimeError("queue_client is not initialized")
        return self._queue_client

    @property
    def handler(self) -> MessageHandler:
        if self._handler is None:
            raise RuntimeError("handler is not initialized")
        return self._handler

    def build(self) -> None:
        self._config = WorkerConfig.from_settings(self._settings)
        if self._queue_client is None:
            self._queue_client = create_queue_client(self._settings)
        if self._handler is None:
            if not self._settings.worker_handler:
                raise ValueError("WORKER_HANDLER is not set")
            self._handler = load_handler(self._settings.worker_handler)
        self._retry_policy = create_retry_policy(self._settings)
        _log(
            "worker_dependencies_built",
            queue_url=self._config.queue_url,
            queue_backend=self._settings.queue_backend,
            handler=repr(self._handler),
        )

    def create_poller(self) -> Poller:
        return Poller(self.config, self.queue_client, self.handler, retry_policy=self._retry_policy)


def create_worker_dependencies(settings: Settings | None = None) -> WorkerDependencies:
    return WorkerDependencies(settings=settings or Settings())
