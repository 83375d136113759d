#!/usr/bin/env python3
"""CDK App for the AWS billing notification Lambda."""

import os

import aws_cdk as cdk

from stacks import BillingNotificationStack, StackSettings

app = cdk.App()

# Billing metrics are only published in us-east-1
env = cdk.Environment(
    account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
    region=os.environ.get("CDK_DEFAULT_REGION", "us-east-1"),
)

BillingNotificationStack(
    app,
    "AwsBillingNotificationStack",
    settings=StackSettings(),
    env=env,
)

app.synth()
