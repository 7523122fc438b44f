import asyncio
import signal
from typing import Any

from loguru import logger

from sqs_worker.app.composition import create_worker_dependencies
from sqs_worker.app.config.settings import Settings
from sqs_worker.app.core import SERVICE_NAME
from sqs_worker.app.core.logging import setup_logger


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


async def run_worker(settings: Settings | None = None) -> None:
    settings = settings or Settings()
    deps = create_worker_dependencies(settings)
    deps.build()
    poller = deps.create_poller()

    shutdown = asyncio.Event()

    def request_shutdown() -> None:
        if not shutdown.is_set():
            _log("shutdown_signal")
            shutdown.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, request_shutdown)
        except NotImplementedError:
            pass

    _log("worker_started", queue_url=deps.config.queue_url)
    # The current receive and batch finish before the loop notices the stop.
    await poller.run_forever(shutdown)
    _log("worker_stopped")


def main() -> None:
    settings = Settings()
    setup_logger(settings.log_level, settings.log_json)
    try:
        asyncio.run(run_worker(settings))
    except KeyboardInterrupt:
        _log("worker_interrupted")
    except Exception as e:
        logger.exception("worker failed: {}", e)
        raise


if __name__ == "__main__":
    main()
