"""
Handler decorators for error reporting, logging, and response formatting.
"""
import functools
import uuid
import traceback
from typing import Callable, Any, Dict
from logger_config import get_logger
from utils.exceptions import UnknownBlockError, ValidationError

logger = get_logger(__name__)


def _error_response(
    error_type: str,
    message: str,
    correlation_id: str,
    handler_name: str
) -> Dict[str, Any]:
    return {
        "error": {
            "type": error_type,
            "message": message,
            "correlation_id": correlation_id
        },
        "metadata": {
            "correlation_id": correlation_id,
            "handler": handler_name
        }
    }


def lambda_handler(
    func: Callable[[Any, Any], Any]
) -> Callable[[Any, Any], Dict[str, Any]]:
    """
    Decorator for Lambda entry points that run blocks.

    Blocks let every failure propagate; this wrapper is the invocation
    boundary that reports them. Provides:
    - Structured error responses (validation vs. execution failures)
    - Request correlation IDs for logging
    - Response formatting

    Args:
        func: The handler function to decorate

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(event: Any, context: Any) -> Dict[str, Any]:
        correlation_id = str(uuid.uuid4())

        logger.info(
            f"Handler {func.__name__} invoked",
            extra={
                "correlation_id": correlation_id,
                "handler": func.__name__,
                "request_id": getattr(context, "aws_request_id", None) if context else None
            }
        )

        try:
            result = func(event, context)

            if not isinstance(result, dict):
                logger.warning(
                    f"Handler {func.__name__} returned non-dict result, converting",
                    extra={"correlation_id": correlation_id}
                )
                if isinstance(result, (list, str)):
                    result = {"result": result}
                else:
                    result = {"data": result}

            if "metadata" not in result:
                result["metadata"] = {}
            result["metadata"]["correlation_id"] = correlation_id

            logger.info(
                f"Handler {func.__name__} completed successfully",
                extra={"correlation_id": correlation_id}
            )

            return result

        except (ValidationError, UnknownBlockError, ValueError) as e:
            logger.warning(
                f"Handler {func.__name__} validation error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response(
                "ValidationError", str(e), correlation_id, func.__name__
            )

        except Exception as e:
            error_traceback = traceback.format_exc()

            logger.error(
                f"Handler {func.__name__} failed: {str(e)}",
                extra={
                    "correlation_id": correlation_id,
                    "traceback": error_traceback
                },
                exc_info=True
            )

            return _error_response(
                type(e).__name__, str(e), correlation_id, func.__name__
            )

    return wrapper
