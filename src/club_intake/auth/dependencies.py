"""Authentication dependencies for FastAPI"""

import secrets

from fastapi import Request

from club_intake.config import config
from club_intake.errors import Unauthorized
from club_intake.logging_config import get_logger

logger = get_logger(__name__)


def require_admin_token(request: Request) -> None:
    """
    FastAPI dependency checking the static admin bearer token.

    The Authorization header must be exactly "Bearer <ADMIN_SECRET_CODE>".
    The header is read manually so the check does not show up as an
    OAuth scheme in the OpenAPI spec.

    Raises:
        Unauthorized: If the header is absent, malformed or wrong, or no
            admin secret is configured
    """
    expected = config.get("admin_secret_code")
    auth_header = request.headers.get("Authorization")

    if not expected or not auth_header or not auth_header.startswith("Bearer "):
        logger.warning("Rejected dashboard request without a valid bearer token")
        raise Unauthorized()

    token = auth_header[7:]  # Remove "Bearer " prefix
    if not secrets.compare_digest(token.encode(), expected.encode()):
        logger.warning("Rejected dashboard request with a wrong bearer token")
        raise Unauthorized()
