#!/usr/bin/env python3
"""Club Intake - membership/feedback form backend and admin API"""

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from club_intake.config import config
from club_intake.errors import IntakeError
from club_intake.logging_config import get_logger, setup_logging
from club_intake.routers.cron import router as cron_router
from club_intake.routers.dashboard import router as dashboard_router
from club_intake.routers.health import health
from club_intake.routers.members import router as members_router
from club_intake.routers.responses import (
    intake_error_handler,
    request_validation_handler,
)
from club_intake.routers.submissions import router as submissions_router

# Configure logging (INFO -> stdout, WARNING/ERROR -> stderr)
setup_logging()
logger = get_logger(__name__)


app = FastAPI(
    title="Club Intake",
    description="Membership and feedback form intake with a small admin API",
    version="1.0.0",
)

# Trust proxy headers from the hosting platform's load balancer
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

# Every error leaves the API as {success: false, error, validationErrors?}
app.add_exception_handler(IntakeError, intake_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)

# Include routers
app.include_router(health)
app.include_router(submissions_router)
app.include_router(members_router)
app.include_router(dashboard_router)
app.include_router(cron_router)


if __name__ == "__main__":
    port = config.get("port")
    logger.info(f"Starting Club Intake on 0.0.0.0:{port}")
    logger.info("Health check available at /health")

    try:
        uvicorn.run(
            app, host="0.0.0.0", port=port, log_level=config["log_level"].lower()
        )
    except Exception as e:
        logger.error(f"Failed to start server: {e}")
        raise
