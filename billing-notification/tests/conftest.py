import json
import logging
from types import SimpleNamespace

import pytest

from billing_notification.logging import configure_logging


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="req-1234",
        function_name="aws-billing-notification",
    )


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def json_logs(capsys, restore_root_logger):
    """Configure real JSON logging on captured stdout and return a reader."""

    def configure(level: str = "INFO") -> None:
        configure_logging("billing-notification", level)

    def read() -> list[dict]:
        out = capsys.readouterr().out
        return [json.loads(line) for line in out.splitlines() if line.strip()]

    return SimpleNamespace(configure=configure, read=read)
