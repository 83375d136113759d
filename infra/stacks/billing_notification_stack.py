"""Billing Notification Stack - daily scheduled Lambda with its role and log group."""

from pathlib import Path

from aws_cdk import (
    BundlingOptions,
    CfnOutput,
    Duration,
    Stack,
)
from aws_cdk import (
    aws_events as events,
)
from aws_cdk import (
    aws_events_targets as targets,
)
from aws_cdk import (
    aws_iam as iam,
)
from aws_cdk import (
    aws_lambda as lambda_,
)
from aws_cdk import (
    aws_logs as logs,
)
from constructs import Construct

from .config import StackSettings

HANDLER_DIR = Path(__file__).resolve().parents[2] / "billing-notification"

RUNTIME = lambda_.Runtime.PYTHON_3_12


def bundled_handler_code(source_dir: Path = HANDLER_DIR) -> lambda_.Code:
    """Handler asset with its requirements installed next to the package."""
    return lambda_.Code.from_asset(
        str(source_dir),
        exclude=["tests", "**/__pycache__"],
        bundling=BundlingOptions(
            image=RUNTIME.bundling_image,
            command=[
                "bash",
                "-c",
                "pip install -r requirements.txt -t /asset-output"
                " && cp -au billing_notification /asset-output/",
            ],
        ),
    )


class BillingNotificationStack(Stack):
    """EventBridge cron rule + Lambda for the daily billing notification."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        settings: StackSettings | None = None,
        handler_code: lambda_.Code | None = None,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        self.settings = settings or StackSettings()
        cfg = self.settings

        # Execution role
        self.execution_role = iam.Role(
            self,
            "ExecutionRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            description="Execution role for the billing notification Lambda",
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                ),
                iam.ManagedPolicy.from_aws_managed_policy_name("CloudWatchReadOnlyAccess"),
            ],
            inline_policies={
                "SsmParameterStoreAccess": iam.PolicyDocument(
                    statements=[
                        iam.PolicyStatement(
                            actions=["ssm:GetParameter*"],
                            resources=[
                                f"arn:aws:ssm:{self.region}:{self.account}"
                                f":parameter/{cfg.ssm_parameter_prefix}/*"
                            ],
                        )
                    ]
                )
            },
        )

        # Log group with fixed retention
        self.log_group = logs.LogGroup(
            self,
            "LogGroup",
            log_group_name=cfg.log_group_name,
            retention=cfg.retention_days,
        )

        # Lambda function
        self.function = lambda_.Function(
            self,
            "BillingNotificationFunction",
            function_name=cfg.function_name,
            runtime=RUNTIME,
            handler="billing_notification.main.handler",
            code=handler_code or bundled_handler_code(),
            role=self.execution_role,
            environment={
                "SERVICE_NAME": cfg.service_name,
                "LOG_LEVEL": cfg.log_level,
            },
            timeout=Duration.seconds(cfg.timeout_seconds),
            memory_size=cfg.memory_size,
            log_group=self.log_group,
        )

        # EventBridge rule - daily cron
        self.schedule_rule = events.Rule(
            self,
            "ScheduleRule",
            rule_name=f"{cfg.function_name}-schedule",
            description="Triggers the billing notification Lambda once a day",
            schedule=events.Schedule.expression(cfg.schedule_expression),
        )

        self.schedule_rule.add_target(
            targets.LambdaFunction(
                self.function,
                event=events.RuleTargetInput.from_object(
                    {"firstName": cfg.scheduled_first_name}
                ),
                retry_attempts=2,
            )
        )

        CfnOutput(self, "FunctionName", value=self.function.function_name)
        CfnOutput(self, "FunctionArn", value=self.function.function_arn)
        CfnOutput(self, "LogGroupName", value=self.log_group.log_group_name)
