"""Fan-out of one received batch."""
from __future__ import annotations

import asyncio
from typing import Sequence

from sqs_worker.app.application.message_processor import MessageProcessor
from sqs_worker.app.domain.models import BatchReport, QueueMessage
from sqs_worker.app.ports.logger import Logger


class BatchDispatcher:
    """Processes every message of a batch concurrently and waits for all of them.

    There is no early exit: a failing or slow message never cancels the others,
    and `dispatch` returns only after every task it started has finished. Handler
    and delete errors are logged here and go no further.
    """

    def __init__(self, processor: MessageProcessor, logger: Logger) -> None:
        self._processor = processor
        self._logger = logger

    async def dispatch(self, messages: Sequence[QueueMessage]) -> BatchReport:
        if not messages:
            return BatchReport()
        tasks = [asyncio.create_task(self._run_one(message)) for message in messages]
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)
        succeeded = sum(1 for ok in outcomes if ok is True)
        # Non-Exception errors are raised again, but only once every unit has finished.
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        return BatchReport(succeeded=succeeded, failed=len(outcomes) - succeeded)

    async def _run_one(self, message: QueueMessage) -> bool:
        try:
            await self._processor.process(message)
        except Exception as exc:
            self._logger.error(f"worker: message {message.message_id} failed: {exc}")
            return False
        return True
