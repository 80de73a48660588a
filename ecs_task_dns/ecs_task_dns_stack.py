from aws_cdk import (
    Duration,
    Stack,
    aws_lambda as lambda_,
    aws_iam as iam,
    aws_events as events,
    aws_events_targets as targets,
    CfnOutput
)
from constructs import Construct
import os
from ecs_task_dns.config import Config

LAMBDA_CODE_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src", "lambda", "update_task_dns")

class EcsTaskDnsStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Load configuration
        config = Config.get_config()

        # Lambda function that upserts the task's DNS record
        update_task_dns = lambda_.Function(
            self, "UpdateTaskDns",
            runtime=lambda_.Runtime.PYTHON_3_13,
            code=lambda_.Code.from_asset(LAMBDA_CODE_DIR),
            handler="handler.lambda_handler",
            timeout=Duration.seconds(int(config["LAMBDA_TIMEOUT_SECONDS"])),
            memory_size=int(config["LAMBDA_MEMORY_SIZE"]),
            environment={
                "DOMAIN_TAG_KEY": config["DOMAIN_TAG_KEY"],
                "HOSTED_ZONE_TAG_KEY": config["HOSTED_ZONE_TAG_KEY"],
                "DNS_RECORD_TTL": str(config["DNS_RECORD_TTL"]),
                "LOG_LEVEL": config["LOG_LEVEL"]
            },
            description="Lambda function to point a task's DNS record at its public IP"
        )

        # Tag and container instance lookups
        update_task_dns.add_to_role_policy(
            iam.PolicyStatement(
                actions=[
                    "ecs:ListTagsForResource",
                    "ecs:DescribeContainerInstances"
                ],
                resources=["*"]
            )
        )

        # Public IP lookups
        update_task_dns.add_to_role_policy(
            iam.PolicyStatement(
                actions=[
                    "ec2:DescribeNetworkInterfaces",
                    "ec2:DescribeInstances"
                ],
                resources=["*"]
            )
        )

        # Record upserts, zone comes from the task tags
        update_task_dns.add_to_role_policy(
            iam.PolicyStatement(
                actions=["route53:ChangeResourceRecordSets"],
                resources=[f"arn:{Stack.of(self).partition}:route53:::hostedzone/*"]
            )
        )

        detail = {
            "lastStatus": [config["TASK_LAST_STATUS"]]
        }
        if config["ECS_CLUSTER_NAME"]:
            detail["clusterArn"] = [
                f"arn:{Stack.of(self).partition}:ecs:{Stack.of(self).region}:{Stack.of(self).account}:cluster/{config['ECS_CLUSTER_NAME']}"
            ]

        # EventBridge rule to capture ECS task state change events
        task_event_rule = events.Rule(
            self, "EcsTaskEventRule",
            event_pattern=events.EventPattern(
                source=["aws.ecs"],
                detail_type=["ECS Task State Change"],
                detail=detail
            ),
            description="Rule to capture ECS task state change events for DNS updates"
        )

        # Add Lambda as target for EventBridge rule
        task_event_rule.add_target(
            targets.LambdaFunction(
                update_task_dns,
                event=events.RuleTargetInput.from_event_path("$")
            )
        )

        CfnOutput(
            self, "UpdateTaskDnsFunctionName",
            value=update_task_dns.function_name,
            description="Task DNS updater Lambda function name"
        )
