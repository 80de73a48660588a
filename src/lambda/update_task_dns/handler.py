import json
from common import logger
from config import Config
from ecs_service import ECSService
from ec2_service import EC2Service
from route53_service import Route53Service
from task_processor import TaskDnsProcessor
from utils import validate_ecs_task_event

def lambda_handler(event, context):
    """
    Lambda handler for ECS task events directly from EventBridge

    Args:
        event (dict): Lambda event from EventBridge
        context (LambdaContext): Lambda context

    Returns:
        dict: Response
    """
    logger.info('[LAMBDA_START] Task DNS updater invoked')
    logger.info(f'[EVENT_RECEIVED] Event: {json.dumps(event)}')

    # Initialize configuration
    config = Config()
    logger.setLevel(config.log_level)

    # Validate event
    reason = validate_ecs_task_event(event)
    if reason:
        logger.error('[VALIDATION_FAILED] Invalid event')
        return {
            'statusCode': 400,
            'body': reason
        }

    logger.info('[EVENT_PROCESSING] Processing ECS Task State Change event')
    processor = TaskDnsProcessor(ECSService(), EC2Service(), Route53Service(), config)
    updated = processor.process_task_state_change(event['detail'])

    logger.info('[LAMBDA_COMPLETE] Task DNS updater completed')
    return {
        'statusCode': 200,
        'body': 'DNS record updated' if updated else 'No DNS update performed'
    }
