from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqs_worker.app.constants import (
    DEFAULT_MAX_NUMBER_OF_MESSAGES,
    DEFAULT_WAIT_TIME_SECONDS,
    InvalidEventPolicy,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    queue_url: str = Field("", validation_alias="QUEUE_URL")
    queue_backend: str = Field("sqs", validation_alias="QUEUE_BACKEND")

    aws_region: str | None = Field(None, validation_alias="AWS_REGION")
    # For LocalStack / ElasticMQ; None means the regional AWS endpoint.
    sqs_endpoint_url: str | None = Field(None, validation_alias="SQS_ENDPOINT_URL")

    max_number_of_messages: int = Field(
        DEFAULT_MAX_NUMBER_OF_MESSAGES,
        validation_alias="MAX_NUMBER_OF_MESSAGES",
        ge=1,
        le=10,
    )
    wait_time_seconds: int = Field(
        DEFAULT_WAIT_TIME_SECONDS,
        validation_alias="WAIT_TIME_SECONDS",
        ge=0,
        le=20,
    )
    invalid_event_policy: InvalidEventPolicy = Field(
        InvalidEventPolicy.DELETE,
        validation_alias="INVALID_EVENT_POLICY",
    )

    # Receive failures are retried forever; backoff only spaces the attempts out.
    receive_retry_backoff: bool = Field(False, validation_alias="RECEIVE_RETRY_BACKOFF")
    initial_backoff_seconds: float = Field(1.0, validation_alias="INITIAL_BACKOFF_SECONDS")
    max_backoff_seconds: float = Field(30.0, validation_alias="MAX_BACKOFF_SECONDS")
    backoff_multiplier: float = Field(2.0, validation_alias="BACKOFF_MULTIPLIER")

    # Visibility timeout of the in-memory backend, in seconds.
    inmemory_visibility_timeout_seconds: float = Field(
        30.0,
        validation_alias="INMEMORY_VISIBILITY_TIMEOUT_SECONDS",
    )

    # "package.module:attribute" of the MessageHandler (or plain function) to run.
    worker_handler: str = Field("", validation_alias="WORKER_HANDLER")

    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_json: bool = Field(False, validation_alias="LOG_JSON")
