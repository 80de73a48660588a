import logging
import os
from common import logger

DEFAULT_DNS_RECORD_TTL = 180

class Config:
    """Centralized configuration management"""

    def __init__(self):
        """Initialize configuration from environment variables"""
        self.domain_tag_key = os.environ.get('DOMAIN_TAG_KEY') or 'domain'
        self.hosted_zone_tag_key = os.environ.get('HOSTED_ZONE_TAG_KEY') or 'hostedZoneId'
        self.log_level = self._parse_log_level(os.environ.get('LOG_LEVEL'))
        self.dns_record_ttl = self._parse_ttl(os.environ.get('DNS_RECORD_TTL'))

    @staticmethod
    def _parse_log_level(value):
        """Return a valid logging level name, INFO when unset or unknown."""
        level = (value or 'INFO').upper()
        if not isinstance(logging.getLevelName(level), int):
            logger.error(f"[CONFIG_ERROR] Unknown LOG_LEVEL {value!r}; using INFO")
            return 'INFO'
        return level

    @staticmethod
    def _parse_ttl(value):
        """
        Parse the record TTL, falling back to the default on bad input.

        Args:
            value (str): Raw DNS_RECORD_TTL value, may be None

        Returns:
            int: TTL in seconds
        """
        if value is None or value == '':
            return DEFAULT_DNS_RECORD_TTL
        try:
            ttl = int(value)
        except ValueError:
            logger.error(f"[CONFIG_ERROR] DNS_RECORD_TTL must be an integer, got {value!r}; using {DEFAULT_DNS_RECORD_TTL}")
            return DEFAULT_DNS_RECORD_TTL
        if ttl <= 0:
            logger.error(f"[CONFIG_ERROR] DNS_RECORD_TTL must be positive, got {ttl}; using {DEFAULT_DNS_RECORD_TTL}")
            return DEFAULT_DNS_RECORD_TTL
        return ttl
