import os
from typing import Dict, Any

class Config:
    """
    Centralized configuration for the ECS Task DNS CDK Stack.
    Configuration can be overridden using environment variables.
    """

    # ECS Configuration
    ECS_CLUSTER_NAME = ""  # If empty, events from every cluster are handled
    TASK_LAST_STATUS = "RUNNING"

    # Tag keys read from the task
    DOMAIN_TAG_KEY = "domain"
    HOSTED_ZONE_TAG_KEY = "hostedZoneId"

    # DNS Configuration
    DNS_RECORD_TTL = 180

    # Lambda Configuration
    LAMBDA_TIMEOUT_SECONDS = 30
    LAMBDA_MEMORY_SIZE = 128
    LOG_LEVEL = "INFO"

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """
        Returns the configuration with environment variable overrides.

        Environment variables take precedence over default values.
        """
        config = {}

        # Get all class variables (excluding methods and private variables)
        for key in dir(cls):
            if not key.startswith('_') and not callable(getattr(cls, key)):
                env_value = os.environ.get(key)
                if env_value is not None:
                    config[key] = env_value
                else:
                    config[key] = getattr(cls, key)

        return config
