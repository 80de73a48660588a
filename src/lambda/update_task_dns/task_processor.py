from common import logger
from utils import build_record_change, get_cluster_name, get_eni_id, get_service_name

class TaskDnsProcessor:
    """Processor that points a task's DNS record at its public IP"""

    def __init__(self, ecs_service, ec2_service, route53_service, config):
        """
        Initialize task DNS processor.

        Args:
            ecs_service (ECSService): ECS service instance
            ec2_service (EC2Service): EC2 service instance
            route53_service (Route53Service): Route 53 service instance
            config (Config): Configuration
        """
        self.ecs_service = ecs_service
        self.ec2_service = ec2_service
        self.route53_service = route53_service
        self.config = config

    def process_task_state_change(self, detail):
        """
        Process ECS Task State Change event.

        Args:
            detail (dict): Event detail

        Returns:
            bool: True if a DNS record was upserted, False otherwise
        """
        cluster_arn = detail['clusterArn']
        task_arn = detail['taskArn']
        logger.info(f"[TASK_STATE_CHANGE] clusterArn: {cluster_arn}, taskArn: {task_arn}")

        cluster_name = get_cluster_name(cluster_arn)

        tags = self.ecs_service.get_task_tags(task_arn)
        domain = tags.get(self.config.domain_tag_key)
        hosted_zone_id = tags.get(self.config.hosted_zone_tag_key)
        logger.info(f"[TASK_TAGS] cluster: {cluster_name}, domain: {domain}, hostedZone: {hosted_zone_id}")

        if not domain or not hosted_zone_id:
            logger.info(
                f'[TASK_SKIP] Skipping. Reason: no "{self.config.domain_tag_key}" and/or '
                f'"{self.config.hosted_zone_tag_key}" tags found for task {task_arn} in cluster {cluster_arn}'
            )
            return False

        public_ip = self.resolve_public_ip(detail, cluster_arn)
        if not public_ip:
            logger.info(f"[TASK_SKIP] Could not fetch public IP for task {task_arn}")
            return False

        logger.info(f"[TASK_PUBLIC_IP] task: {get_service_name(detail)} public-ip: {public_ip}")

        change = build_record_change(domain, public_ip, self.config.dns_record_ttl)
        self.route53_service.upsert_record(
            hosted_zone_id,
            change,
            f"Auto generated Record for ECS cluster {cluster_name}"
        )
        logger.info(f"[DNS_UPDATE_COMPLETE] DNS record update finished for {domain} ({public_ip})")
        return True

    def resolve_public_ip(self, detail, cluster_arn):
        """
        Resolve the public IP of a task.

        Tasks with an ENI attachment (Fargate) use the ENI's address; other
        tasks use the address of the EC2 instance behind their container instance.

        Args:
            detail (dict): Event detail
            cluster_arn (str): ECS cluster ARN

        Returns:
            str or None: Public IP if resolved, None otherwise
        """
        eni_id = get_eni_id(detail)
        if eni_id:
            logger.info(f"[ENI_FOUND] Fetched eniId {eni_id}")
            public_ip = self.ec2_service.get_eni_public_ip(eni_id)
            logger.info(f"[ENI_PUBLIC_IP] Fetched taskPublicIp {public_ip}")
            return public_ip

        container_instance_arn = detail.get('containerInstanceArn')
        if container_instance_arn:
            logger.info(f"[CONTAINER_INSTANCE_FOUND] Fetched containerInstanceArn {container_instance_arn}")
            ec2_instance_id = self.ecs_service.get_ec2_instance_id(cluster_arn, container_instance_arn)
            if not ec2_instance_id:
                logger.info(f"[CONTAINER_INSTANCE_SKIP] Could not determine ec2InstanceId for container instance {container_instance_arn} in cluster {cluster_arn}")
                return None

            public_ip = self.ec2_service.get_instance_public_ip(ec2_instance_id)
            if not public_ip:
                logger.info(f"[INSTANCE_SKIP] Could not fetch public IP for instance {ec2_instance_id}")
                return None
            logger.info(f"[INSTANCE_PUBLIC_IP] Fetched taskPublicIp {public_ip}")
            return public_ip

        logger.info("[TASK_NO_NETWORK] Task has neither an ENI attachment nor a container instance")
        return None
