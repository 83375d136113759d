"""Lambda handler for the daily billing notification."""

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import settings
from .errors import InvalidEventError
from .logging import Timer, bind_invocation, configure_logging

configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()


class GreetingEvent(BaseModel):
    """Invocation payload sent by the schedule or a manual invoke."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")


def build_greeting(first_name: str) -> dict:
    return {"message": f"Hello, {first_name}!"}


def handler(event: dict, context) -> dict:
    """AWS Lambda handler for EventBridge scheduled events."""
    bind_invocation(context.aws_request_id)

    timer = Timer()
    try:
        with timer:
            try:
                payload = GreetingEvent.model_validate(event)
            except ValidationError as e:
                logger.error("Invalid event payload", errors=e.errors(include_url=False))
                raise InvalidEventError("Invalid event payload") from e

            if payload.first_name == "":
                logger.error("Empty first name in request")
                raise InvalidEventError("Empty first name")

            return build_greeting(payload.first_name)
    finally:
        logger.info("Handled event", duration_ms=timer.duration_ms)
