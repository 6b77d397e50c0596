"""Logging middleware."""
import uuid
import json
import logging
from typing import Dict, Any, Optional
from datetime import datetime, timezone

logger = logging.getLogger(__name__)


def log_interaction(
    request_id: str,
    interaction_type: int,
    command: Optional[str] = None,
    user_id: Optional[str] = None,
    response: Dict[str, Any] = None
):
    """
    Log a handled interaction with structured data.

    Args:
        request_id: Unique request ID
        interaction_type: Interaction type value
        command: Command name (optional)
        user_id: Invoking user ID (optional)
        response: Response body sent back to the platform
    """
    log_data = {
        "request_id": request_id,
        "interaction_type": interaction_type,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

    if command:
        log_data["command"] = command

    if user_id:
        log_data["user_id"] = user_id

    if response:
        log_data["response"] = response

    logger.info(json.dumps(log_data, ensure_ascii=False))


def log_rejection(request_id: str, error: Exception):
    """Log a request rejected before or during dispatch."""
    logger.error(json.dumps({
        "request_id": request_id,
        "error": type(error).__name__,
        "message": str(error),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }, ensure_ascii=False))


def generate_request_id() -> str:
    """Generate unique request ID."""
    return str(uuid.uuid4())
