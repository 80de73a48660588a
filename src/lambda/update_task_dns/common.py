import logging
from functools import wraps

from botocore.exceptions import ClientError

# Configure logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

def error_handler(func):
    """
    Decorator for consistent error logging across AWS calls.

    The error is logged with the wrapped function's name and re-raised so the
    invocation fails visibly.

    Args:
        func: The function to wrap with error handling

    Returns:
        The wrapped function with error handling
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ClientError as e:
            error = e.response.get('Error', {})
            logger.error(f"[AWS_ERROR] {func.__name__}: {error.get('Code')} {error.get('Message')}")
            raise
        except Exception as e:
            logger.error(f"[ERROR] Error in {func.__name__}: {str(e)}")
            raise
    return wrapper
