#!/usr/bin/env python3
import os

import aws_cdk as cdk

from ecs_task_dns.ecs_task_dns_stack import EcsTaskDnsStack

app = cdk.App()

EcsTaskDnsStack(
    app,
    "EcsTaskDnsStack",
    env=cdk.Environment(
        account=os.getenv("CDK_DEFAULT_ACCOUNT"),
        region=os.getenv("CDK_DEFAULT_REGION")
    ),
)

app.synth()
