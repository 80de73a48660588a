import boto3
from common import logger, error_handler
from utils import tags_to_dict

class ECSService:
    """Service for ECS operations"""

    def __init__(self):
        """Initialize ECS service."""
        self.client = boto3.client('ecs')

    @error_handler
    def get_task_tags(self, task_arn):
        """
        Get the resource tags of a task.

        Args:
            task_arn (str): Task ARN

        Returns:
            dict: Tag values keyed by tag key
        """
        logger.info(f"[TAGS_REQUEST] Listing tags for {task_arn}")
        response = self.client.list_tags_for_resource(resourceArn=task_arn)
        tags = tags_to_dict(response.get('tags', []))
        logger.info(f"[TAGS_FETCHED] Found {len(tags)} tags for {task_arn}")
        return tags

    @error_handler
    def get_ec2_instance_id(self, cluster_arn, container_instance_arn):
        """
        Get the EC2 instance ID backing a container instance.

        Args:
            cluster_arn (str): ECS cluster ARN
            container_instance_arn (str): Container instance ARN

        Returns:
            str or None: EC2 instance ID if found, None otherwise
        """
        logger.info(f"[CONTAINER_INSTANCE_DESCRIBE] Describing {container_instance_arn} in {cluster_arn}")
        response = self.client.describe_container_instances(
            cluster=cluster_arn,
            containerInstances=[container_instance_arn]
        )

        if not response.get('containerInstances'):
            logger.warning(f"[CONTAINER_INSTANCE_EMPTY] Could not get information on container instance {container_instance_arn} for cluster {cluster_arn}")
            return None

        ec2_instance_id = response['containerInstances'][0].get('ec2InstanceId')
        logger.info(f"[CONTAINER_INSTANCE_SUCCESS] Fetched ec2InstanceId {ec2_instance_id}")
        return ec2_instance_id
