import json
import boto3
from common import logger, error_handler

class Route53Service:
    """Service for Route 53 record changes"""

    def __init__(self):
        """Initialize Route 53 service."""
        self.client = boto3.client('route53')

    @error_handler
    def upsert_record(self, hosted_zone_id, change, comment):
        """
        Submit a single record change to a hosted zone.

        Args:
            hosted_zone_id (str): Hosted zone ID
            change (dict): Change entry, see utils.build_record_change
            comment (str): Change batch comment

        Returns:
            dict: Response from change_resource_record_sets API
        """
        record_name = change['ResourceRecordSet']['Name']
        logger.info(f"[DNS_UPSERT] Submitting {change['Action']} for {record_name} in zone {hosted_zone_id}")
        response = self.client.change_resource_record_sets(
            HostedZoneId=hosted_zone_id,
            ChangeBatch={
                'Comment': comment,
                'Changes': [change]
            }
        )
        logger.info(f"[DNS_UPSERT_RESPONSE] updateResult: {json.dumps(response.get('ChangeInfo', {}), default=str)}")
        return response
