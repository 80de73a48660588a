import json
import boto3
from common import logger, error_handler

class EC2Service:
    """Service for EC2 address lookups"""

    def __init__(self):
        """Initialize EC2 service."""
        self.client = boto3.client('ec2')

    @error_handler
    def get_eni_public_ip(self, eni_id):
        """
        Get the public IP associated with a network interface.

        Args:
            eni_id (str): Network interface ID

        Returns:
            str or None: Public IP if the interface has one, None otherwise
        """
        logger.info(f"[ENI_DESCRIBE] Describing network interface {eni_id}")
        response = self.client.describe_network_interfaces(NetworkInterfaceIds=[eni_id])

        interfaces = response.get('NetworkInterfaces', [])
        if not interfaces:
            logger.warning(f"[ENI_DESCRIBE_EMPTY] No network interface found for {eni_id}")
            return None

        interface = interfaces[0]
        private_ips = interface.get('PrivateIpAddresses') or [{}]
        association = private_ips[0].get('Association') or interface.get('Association') or {}
        public_ip = association.get('PublicIp')
        if not public_ip:
            logger.warning(f"[ENI_NO_PUBLIC_IP] Network interface {eni_id} has no public IP association")
        return public_ip

    @error_handler
    def get_instance_public_ip(self, instance_id):
        """
        Get the public IP of an EC2 instance.

        Args:
            instance_id (str): EC2 instance ID

        Returns:
            str or None: Public IP if the instance has one, None otherwise
        """
        logger.info(f"[INSTANCE_DESCRIBE] Describing instance {instance_id}")
        response = self.client.describe_instances(InstanceIds=[instance_id])
        logger.info(f"[INSTANCE_DESCRIBE_RESPONSE] {json.dumps(response, default=str)}")

        reservations = response.get('Reservations', [])
        if not reservations or not reservations[0].get('Instances'):
            logger.warning(f"[INSTANCE_DESCRIBE_EMPTY] Error describing instance {instance_id}")
            return None

        public_ip = reservations[0]['Instances'][0].get('PublicIpAddress')
        logger.info(f"[INSTANCE_PUBLIC_IP] Got public IP address {public_ip} for {instance_id}")
        return public_ip
