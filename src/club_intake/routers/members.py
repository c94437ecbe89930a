"""Member registration endpoints"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from sqlmodel import Session

from club_intake.errors import IntakeError, StoreUnavailable
from club_intake.models.database import get_db
from club_intake.routers.responses import (
    public_error_message,
    read_json_body,
    success_response,
)
from club_intake.schemas.pagination import MAX_PAGE_NUMBER
from club_intake.services.member_service import MemberService

router = APIRouter(prefix="/members", tags=["Members"])

logger = logging.getLogger(__name__)


@router.post("", summary="Register a member")
async def create_member(request: Request, db: Session = Depends(get_db)):
    try:
        body = await read_json_body(request)
        member = MemberService(db).create_member(body)
        return success_response(
            member.to_document(),
            status_code=201,
            message="Registered successfully!",
        )
    except IntakeError:
        raise
    except Exception as e:
        logger.error(f"Member registration error: {type(e).__name__}: {e}")
        raise StoreUnavailable(
            public_error_message(e, "Failed to register member"), e
        ) from e


@router.get("", summary="List members")
async def list_members(
    page: int = Query(1, le=MAX_PAGE_NUMBER),
    limit: int = 50,
    db: Session = Depends(get_db),
):
    try:
        result = MemberService(db).list_members(page=page, limit=limit)
        return success_response(
            [m.to_document() for m in result.items],
            pagination=result.pagination(),
        )
    except IntakeError:
        raise
    except Exception as e:
        logger.error(f"Error fetching members: {type(e).__name__}: {e}")
        raise StoreUnavailable(
            public_error_message(e, "Failed to fetch members"), e
        ) from e
