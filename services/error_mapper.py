# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.exceptions import ApiException, ValidationException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

GENERIC_ERROR = "An error occurred. Please try again."
CONNECTION_ERROR = "Could not reach the server. Check your connection and try again."
TIMEOUT_ERROR = "The server took too long to respond. Please try again."


def map_api_error(error: ApiException) -> str:
    """Map API exception to a user-facing message.

    The API's own "error" field is shown when present; the rest is logged.
    """
    status = error.status_code

    if status == 400:
        details = _extract_validation_details(error.response_data)
        if details:
            logger.warning(f"API validation error (400): {details}")
    elif status:
        logger.warning(f"API error ({status}): {error}")

    api_message = error.response_data.get("error") if error.response_data else None
    if isinstance(api_message, str) and api_message.strip():
        return api_message
    return GENERIC_ERROR


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-facing message."""
    msg = str(error.original_error) if error.original_error else error.message
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return TIMEOUT_ERROR
    return CONNECTION_ERROR


def map_validation_error(error: ValidationException) -> str:
    """List every validation problem, one per line."""
    if error.errors:
        logger.warning(f"Validation error: {error.errors}")
        return "\n".join(f"• {e}" for e in error.errors)
    return error.message or GENERIC_ERROR


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a user-facing message."""
    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    if isinstance(error, ValidationException):
        return map_validation_error(error)

    logger.warning(f"Unexpected error in {context or 'unknown'}: {error}")
    return GENERIC_ERROR


def _extract_validation_details(response_data: dict) -> str:
    """Extract validation error details from API response."""
    if not response_data:
        return ""

    details = response_data.get("details", {})
    if isinstance(details, dict):
        lines = []
        for field, messages in details.items():
            if isinstance(messages, list):
                for msg in messages:
                    lines.append(f"• {field}: {msg}")
            else:
                lines.append(f"• {field}: {messages}")
        return "\n".join(lines)

    if isinstance(details, list):
        return "\n".join(f"• {d}" for d in details)

    return str(response_data.get("error", ""))
