"""Unit tests for the Poller loop."""
from __future__ import annotations

import asyncio
from dataclasses import replace

import pytest

from sqs_worker.app.application.poller import Poller
from sqs_worker.app.constants import ALL_MESSAGE_ATTRIBUTES
from sqs_worker.app.domain.errors import QueueReceiveError
from sqs_worker.app.domain.models import ReceiveRequest
from tests.fakes import QUEUE_URL, FakeQueueClient, RecordingHandler, RecordingLogger, make_message


class RecordingRetryPolicy:
    def __init__(self) -> None:
        self.waits: list[int] = []

    async def wait(self, consecutive_failures: int) -> None:
        self.waits.append(consecutive_failures)


def test_receive_request_uses_config(worker_config):
    config = replace(worker_config, max_number_of_messages=4, wait_time_seconds=5)
    client = FakeQueueClient()

    asyncio.run(Poller(config, client, RecordingHandler()).poll_once())

    assert client.receive_calls == [
        ReceiveRequest(
            queue_url=QUEUE_URL,
            max_number_of_messages=4,
            wait_time_seconds=5,
            message_attribute_names=(ALL_MESSAGE_ATTRIBUTES,),
        )
    ]


def test_empty_receive_dispatches_nothing(worker_config, recording_logger):
    client = FakeQueueClient([[]])
    handler = RecordingHandler()

    dispatched = asyncio.run(Poller(worker_config, client, handler).poll_once())

    assert dispatched == 0
    assert handler.handled == []
    assert recording_logger.messages("DEBUG") == ["worker: Start Polling"]
    assert recording_logger.messages("INFO") == []


def test_batch_is_logged_and_dispatched(worker_config, recording_logger):
    client = FakeQueueClient([[make_message("m1"), make_message("m2")]])
    handler = RecordingHandler()

    dispatched = asyncio.run(Poller(worker_config, client, handler).poll_once())

    assert dispatched == 2
    assert sorted(handler.handled) == ["m1", "m2"]
    assert recording_logger.messages("INFO") == ["worker: Received 2 messages"]
    assert len(client.delete_calls) == 2


def test_receive_error_is_logged_and_polling_continues(worker_config, recording_logger):
    stop = asyncio.Event()
    client = FakeQueueClient(
        [QueueReceiveError("throttled")],
        on_exhausted=stop.set,
    )
    handler = RecordingHandler()
    retry = RecordingRetryPolicy()

    asyncio.run(Poller(worker_config, client, handler, retry_policy=retry).run_forever(stop))

    assert len(client.receive_calls) == 2
    assert handler.handled == []
    assert client.delete_calls == []
    assert recording_logger.messages("ERROR") == ["worker: receive failed: throttled"]
    assert retry.waits == [1]


def test_consecutive_failures_reset_after_success(worker_config):
    stop = asyncio.Event()
    client = FakeQueueClient(
        [
            QueueReceiveError("a"),
            QueueReceiveError("b"),
            [],
            QueueReceiveError("c"),
        ],
        on_exhausted=stop.set,
    )
    retry = RecordingRetryPolicy()

    asyncio.run(Poller(worker_config, client, RecordingHandler(), retry_policy=retry).run_forever(stop))

    assert retry.waits == [1, 2, 1]


def test_handler_errors_never_reach_the_loop(worker_config, recording_logger):
    stop = asyncio.Event()
    client = FakeQueueClient(
        [[make_message("m1")], [make_message("m2")]],
        on_exhausted=stop.set,
    )
    handler = RecordingHandler({"m1": RuntimeError("boom")})

    asyncio.run(Poller(worker_config, client, handler).run_forever(stop))

    assert handler.handled == ["m1", "m2"]
    assert client.delete_calls == [(QUEUE_URL, "handle-m2")]
    assert len(recording_logger.messages("ERROR")) == 1


def test_missing_config_falls_back_to_fresh_default():
    first = Poller(None, FakeQueueClient(), RecordingHandler())
    second = Poller(None, FakeQueueClient(), RecordingHandler())

    assert first.config.queue_url == ""
    assert first.config.max_number_of_messages == 10
    assert first.config.wait_time_seconds == 20
    assert first.config is not second.config


def test_update_config_applies_to_next_cycle(worker_config):
    client = FakeQueueClient([[], []])
    poller = Poller(worker_config, client, RecordingHandler())
    other_logger = RecordingLogger()

    asyncio.run(poller.poll_once())
    poller.update_config(replace(worker_config, queue_url="https://queue/other", logger=other_logger))
    asyncio.run(poller.poll_once())

    assert [r.queue_url for r in client.receive_calls] == [QUEUE_URL, "https://queue/other"]
    assert other_logger.messages("DEBUG") == ["worker: Start Polling"]


@pytest.mark.asyncio
async def test_next_receive_waits_for_batch_to_drain(worker_config):
    release = asyncio.Event()
    stop = asyncio.Event()

    class _BlockingHandler:
        async def handle_message(self, message):
            await release.wait()

    client = FakeQueueClient([[make_message("m1")]], on_exhausted=stop.set)
    task = asyncio.create_task(Poller(worker_config, client, _BlockingHandler()).run_forever(stop))

    for _ in range(10):
        await asyncio.sleep(0)
    assert len(client.receive_calls) == 1

    release.set()
    await task
    assert len(client.receive_calls) == 2
    assert client.delete_calls == [(QUEUE_URL, "handle-m1")]
