"""Submission endpoints: create, list, review and delete"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError
from sqlmodel import Session

from club_intake.errors import IntakeError, StoreUnavailable, ValidationFailed
from club_intake.models.database import get_db
from club_intake.routers.responses import (
    public_error_message,
    read_json_body,
    success_response,
)
from club_intake.schemas.pagination import MAX_PAGE_NUMBER
from club_intake.schemas.submission import SubmissionReview
from club_intake.services.query_service import QueryService
from club_intake.services.review_service import ReviewService
from club_intake.services.submission_service import (
    SubmissionService,
    validate_section,
)
from club_intake.validation import flatten_errors

router = APIRouter(prefix="/submissions", tags=["Submissions"])

logger = logging.getLogger(__name__)


@router.post("", summary="Submit the feedback form")
async def create_submission(request: Request, db: Session = Depends(get_db)):
    """Store a new submission; 409 if the registration number was already used"""
    try:
        body = await read_json_body(request)
        submission = SubmissionService(db).create_submission(body)
        return success_response(
            submission.to_document(),
            status_code=201,
            message="Form submitted successfully!",
        )
    except IntakeError:
        raise
    except Exception as e:
        logger.error(f"Form submission error: {type(e).__name__}: {e}")
        raise StoreUnavailable(
            public_error_message(e, "Failed to submit form"), e
        ) from e


@router.get("", summary="List submissions")
async def list_submissions(
    status: Optional[str] = None,
    domain: Optional[str] = None,
    page: int = Query(1, le=MAX_PAGE_NUMBER),
    limit: int = 50,
    db: Session = Depends(get_db),
):
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
        logger.error(f"Error fetching form submissions: {type(e).__name__}: {e}")
        raise StoreUnavailable(
            public_error_message(e, "Failed to fetch form submissions"), e
        ) from e


@router.put("", summary="Update review status of a submission")
async def update_submission(request: Request, db: Session = Depends(get_db)):
    """Apply status, reviewedBy and notes; only supplied fields change"""
    try:
        body = await read_json_body(request)
        try:
            review = SubmissionReview.model_validate(body)
        except ValidationError as e:
            raise ValidationFailed(flatten_errors(e)) from e

        submission = ReviewService(db).update_submission(
            review.id,
            status=review.status,
            reviewed_by=review.reviewed_by,
            notes=review.notes,
        )
        return success_response(
            submission.to_document(), message="Submission updated successfully"
        )
    except IntakeError:
        raise
    except Exception as e:
        logger.error(f"Error updating submission: {type(e).__name__}: {e}")
        raise StoreUnavailable(
            public_error_message(e, "Failed to update submission"), e
        ) from e


@router.delete("", summary="Delete a submission")
async def delete_submission(id: Optional[str] = None, db: Session = Depends(get_db)):
    try:
        deleted = ReviewService(db).delete_submission(id)
        return success_response(deleted, message="Submission deleted successfully")
    except IntakeError:
        raise
    except Exception as e:
        logger.error(f"Error deleting submission: {type(e).__name__}: {e}")
        raise StoreUnavailable(
            public_error_message(e, "Failed to delete submission"), e
        ) from e


@router.post("/validate/{section}", summary="Validate one page of the form")
async def validate_form_section(section: str, request: Request):
    """Check a single page before the student moves on to the next one"""
    body = await read_json_body(request)
    validation_errors = validate_section(section, body)
    if validation_errors:
        raise ValidationFailed(validation_errors)
    return success_response({"section": section, "valid": True})
