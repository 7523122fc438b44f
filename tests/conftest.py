from __future__ import annotations

import pytest

from sqs_worker.app.config.worker_config import WorkerConfig
from tests.fakes import QUEUE_URL, RecordingLogger


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def worker_config(recording_logger: RecordingLogger) -> WorkerConfig:
    return WorkerConfig(
        queue_url=QUEUE_URL,
        max_number_of_messages=10,
        wait_time_seconds=20,
        logger=recording_logger,
    )
