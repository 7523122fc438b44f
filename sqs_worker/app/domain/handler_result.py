"""Tagged outcome of a handler invocation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqs_worker.app.domain.errors import InvalidEventError


class HandlerOutcome(str, Enum):
    SUCCESS = "SUCCESS"
    INVALID_EVENT = "INVALID_EVENT"
    FAILURE = "FAILURE"


@dataclass(frozen=True)
class HandlerResult:
    """What the handler decided about one message.

    Handlers may return one of these explicitly, return None (success), or
    raise: `InvalidEventError` maps to INVALID_EVENT and any other exception
    to FAILURE. `classify` performs that mapping.
    """

    outcome: HandlerOutcome
    event: str = ""
    reason: str = ""
    cause: Any = None

    @classmethod
    def success(cls) -> HandlerResult:
        return cls(outcome=HandlerOutcome.SUCCESS)

    @classmethod
    def invalid_event(cls, event: str, reason: str) -> HandlerResult:
        return cls(outcome=HandlerOutcome.INVALID_EVENT, event=event, reason=reason)

    @classmethod
    def failure(cls, cause: Any) -> HandlerResult:
        return cls(outcome=HandlerOutcome.FAILURE, cause=cause)

    @classmethod
    def classify(cls, value: HandlerResult | Exception | None) -> HandlerResult:
        if value is None:
            return cls.success()
        if isinstance(value, HandlerResult):
            return value
        if isinstance(value, InvalidEventError):
            return cls.invalid_event(value.event, value.reason)
        if isinstance(value, Exception):
            return cls.failure(value)
        raise TypeError(f"unsupported handler result: {value!r}")

    @property
    def ok(self) -> bool:
        return self.outcome == HandlerOutcome.SUCCESS

    def as_invalid_event_error(self) -> InvalidEventError:
        return InvalidEventError(self.event, self.reason)
