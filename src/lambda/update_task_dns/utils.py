from common import logger

TASK_STATE_CHANGE = "ECS Task State Change"

def validate_ecs_task_event(event):
    """
    Validates that the event is an ECS Task State Change event with task identifiers.

    Args:
        event (dict): The event to validate

    Returns:
        str or None: Reason the event was rejected, None if valid
    """
    logger.info("[EVENT_VALIDATION] Validating event source and type")
    if event.get("source") != "aws.ecs":
        reason = "Function only supports input from events with a source type of: aws.ecs"
        logger.error(f"[EVENT_VALIDATION_FAILED] {reason}")
        return reason

    if event.get("detail-type") != TASK_STATE_CHANGE:
        reason = f"Function only supports {TASK_STATE_CHANGE} events"
        logger.error(f"[EVENT_VALIDATION_FAILED] {reason}")
        return reason

    detail = event.get("detail") or {}
    missing = [key for key in ('clusterArn', 'taskArn') if not detail.get(key)]
    if missing:
        reason = f"Event detail is missing: {', '.join(missing)}"
        logger.error(f"[EVENT_VALIDATION_FAILED] {reason}")
        return reason

    if ':cluster/' not in detail['clusterArn']:
        reason = f"Event clusterArn is not a cluster ARN: {detail['clusterArn']}"
        logger.error(f"[EVENT_VALIDATION_FAILED] {reason}")
        return reason

    logger.info("[EVENT_VALIDATION_SUCCESS] Event source and type are valid")
    return None

def get_cluster_name(cluster_arn):
    """Return the cluster name part of a cluster ARN."""
    return cluster_arn.split(':cluster/')[1]

def get_service_name(detail):
    """
    Get the service (or family) name from the task group, e.g. 'service:web' -> 'web'.

    Args:
        detail (dict): Task descriptor

    Returns:
        str or None: Name if the group has one, None otherwise
    """
    parts = (detail.get('group') or '').split(':')
    if len(parts) < 2:
        return None
    return parts[1]

def get_eni_id(detail):
    """
    Get the network interface ID of the task's ENI attachment.

    Args:
        detail (dict): Task descriptor

    Returns:
        str or None: First networkInterfaceId of the first ENI attachment
    """
    for attachment in detail.get('attachments', []):
        if attachment.get('type') != 'eni':
            continue
        for item in attachment.get('details', []):
            if item.get('name') == 'networkInterfaceId':
                return item.get('value')
        return None
    return None

def tags_to_dict(tags):
    """Turn ECS [{'key': ..., 'value': ...}] tags into a dict."""
    return {tag['key']: tag.get('value') for tag in tags or []}

def build_record_change(domain, public_ip, ttl):
    """
    Build the Route 53 UPSERT change for an A record.

    Args:
        domain (str): Record name
        public_ip (str): Address the record points at
        ttl (int): Record TTL in seconds

    Returns:
        dict: Change entry for change_resource_record_sets
    """
    return {
        'Action': 'UPSERT',
        'ResourceRecordSet': {
            'Name': domain,
            'Type': 'A',
            'TTL': ttl,
            'ResourceRecords': [
                {
                    'Value': public_ip
                }
            ]
        }
    }
