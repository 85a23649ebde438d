"""
Event logger utility for authentication events.
"""
from fastapi import Request
from typing import Optional
import logging

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "signup",
    "login_success",
    "login_failure",
}


def client_ip(request: Request) -> Optional[str]:
    """Return the caller's address, falling back to X-Forwarded-For."""
    ip_address = None
    if request.client:
        ip_address = request.client.host

    # X-Forwarded-For can contain multiple IPs, take the first one
    if not ip_address and request.headers.get("x-forwarded-for"):
        ip_address = request.headers.get("x-forwarded-for").split(",")[0].strip()

    return ip_address


def log_auth_event(event_type: str, username: str, request: Request) -> None:
    """
    Log an authentication event.

    Args:
        event_type: One of: signup, login_success, login_failure
        username: Username the request was made for
        request: FastAPI Request object

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    level = logging.WARNING if event_type == "login_failure" else logging.INFO
    logger.log(
        level,
        "AUTH %s username=%s ip=%s user_agent=%s",
        event_type, username, client_ip(request), request.headers.get("user-agent")
    )
