"""Endpoints invoked by the external scheduler"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header
from sqlmodel import Session

from club_intake.config import config
from club_intake.errors import IntakeError, StoreUnavailable
from club_intake.models.database import get_db
from club_intake.routers.responses import public_error_message, success_response
from club_intake.services.birthday_service import BirthdayService
from club_intake.services.email_service import EmailService, get_email_service

router = APIRouter(prefix="/cron", tags=["Cron"])

logger = logging.getLogger(__name__)


@router.post("/check-birthday", summary="Send today's birthday emails")
async def check_birthday(
    x_cron_secret: Optional[str] = Header(
        default=None, description="Shared secret configured as CRON_SECRET"
    ),
    db: Session = Depends(get_db),
    email_service: EmailService = Depends(get_email_service),
):
    try:
        service = BirthdayService(db, email_service, config.get("cron_secret"))
        results = await service.run_daily_check(x_cron_secret)
        return success_response(results, message="Birthday check completed")
    except IntakeError:
        raise
    except Exception as e:
        logger.error(f"Birthday check error: {type(e).__name__}: {e}")
        raise StoreUnavailable(
            public_error_message(e, "Error checking birthdays"), e
        ) from e
