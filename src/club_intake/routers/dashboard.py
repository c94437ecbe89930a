"""Admin dashboard listing"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from club_intake.auth.dependencies import require_admin_token
from club_intake.errors import IntakeError, StoreUnavailable
from club_intake.models.database import get_db
from club_intake.routers.responses import public_error_message, success_response
from club_intake.schemas.pagination import MAX_PAGE_NUMBER
from club_intake.services.query_service import QueryService

router = APIRouter(tags=["Admin"])

logger = logging.getLogger(__name__)


@router.get(
    "/dashboard",
    summary="Admin listing of submissions",
    dependencies=[Depends(require_admin_token)],
)
async def dashboard(
    status: Optional[str] = None,
    domain: Optional[str] = None,
    page: int = Query(1, le=MAX_PAGE_NUMBER),
    limit: int = 20,
    db: Session = Depends(get_db),
):
    """Requires Authorization: Bearer <ADMIN_SECRET_CODE>"""
    try:
        result = QueryService(db).list_submissions(
            status=status, domain=domain, page=page, limit=limit
        )
        return success_response(
            [s.to_document() for s in result.items],
            pagination=result.pagination(),
        )
    except IntakeError:
        raise
    except Exception as e:
        logger.error(f"Dashboard API error: {type(e).__name__}: {e}")
        raise StoreUnavailable(
            public_error_message(e, "Failed to load dashboard"), e
        ) from e
