import copy

import pytest

CLUSTER_ARN = "arn:aws:ecs:us-east-1:123456789012:cluster/game-cluster"
TASK_ARN = "arn:aws:ecs:us-east-1:123456789012:task/game-cluster/0123456789abcdef0123456789abcdef"
CONTAINER_INSTANCE_ARN = "arn:aws:ecs:us-east-1:123456789012:container-instance/game-cluster/fedcba9876543210"

FARGATE_DETAIL = {
    "clusterArn": CLUSTER_ARN,
    "taskArn": TASK_ARN,
    "group": "service:minecraft",
    "launchType": "FARGATE",
    "lastStatus": "RUNNING",
    "attachments": [
        {
            "id": "1d2b3c4d",
            "type": "eni",
            "status": "ATTACHED",
            "details": [
                {"name": "subnetId", "value": "subnet-0abc"},
                {"name": "networkInterfaceId", "value": "eni-0123456789abcdef0"},
                {"name": "privateIPv4Address", "value": "10.0.1.25"}
            ]
        }
    ]
}

EC2_DETAIL = {
    "clusterArn": CLUSTER_ARN,
    "taskArn": TASK_ARN,
    "group": "service:minecraft",
    "launchType": "EC2",
    "lastStatus": "RUNNING",
    "containerInstanceArn": CONTAINER_INSTANCE_ARN,
    "attachments": []
}


@pytest.fixture
def fargate_detail():
    return copy.deepcopy(FARGATE_DETAIL)


@pytest.fixture
def ec2_detail():
    return copy.deepcopy(EC2_DETAIL)


@pytest.fixture
def task_event(fargate_detail):
    return {
        "version": "0",
        "id": "3317b2af-7005-947d-b652-f55e762e571a",
        "source": "aws.ecs",
        "detail-type": "ECS Task State Change",
        "account": "123456789012",
        "region": "us-east-1",
        "resources": [TASK_ARN],
        "detail": fargate_detail
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("DNS_RECORD_TTL", "DOMAIN_TAG_KEY", "HOSTED_ZONE_TAG_KEY", "LOG_LEVEL",
                "ECS_CLUSTER_NAME", "TASK_LAST_STATUS"):
        monkeypatch.delenv(key, raising=False)
