"""Deployment settings for the billing notification stack."""

from typing import Literal

from aws_cdk import aws_logs as logs
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class StackSettings(BaseSettings):
    """Stack settings loaded from BILLING_NOTIFICATION_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BILLING_NOTIFICATION_",
        case_sensitive=False,
    )

    # Function
    function_name: str = "aws-billing-notification"
    timeout_seconds: int = Field(default=10, ge=1, le=900)
    memory_size: int = Field(default=256, ge=128, le=10240)
    service_name: str = "billing-notification"
    log_level: LogLevel = "INFO"

    # Schedule - once daily at 01:00 UTC
    schedule_expression: str = "cron(0 1 * * ? *)"
    scheduled_first_name: str = "Billing"

    # Logs
    log_retention: str = "ONE_MONTH"

    # Parameter Store path readable by the function
    ssm_parameter_prefix: str = "billing-notification"

    @field_validator("schedule_expression")
    @classmethod
    def _check_schedule(cls, value: str) -> str:
        value = value.strip()
        if not (value.startswith(("cron(", "rate(")) and value.endswith(")")):
            raise ValueError("schedule_expression must be cron(...) or rate(...)")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @field_validator("log_retention")
    @classmethod
    def _check_retention(cls, value: str) -> str:
        value = value.upper()
        if value not in logs.RetentionDays.__members__:
            raise ValueError(f"unknown log retention: {value}")
        return value

    @field_validator("ssm_parameter_prefix")
    @classmethod
    def _strip_prefix(cls, value: str) -> str:
        value = value.strip("/")
        if not value:
            raise ValueError("ssm_parameter_prefix must not be empty")
        return value

    @property
    def retention_days(self) -> logs.RetentionDays:
        return logs.RetentionDays[self.log_retention]

    @property
    def log_group_name(self) -> str:
        return f"/aws/lambda/{self.function_name}"
