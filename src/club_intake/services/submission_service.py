"""Submission service for handling new form submissions"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from club_intake.errors import (
    DuplicateIdentifier,
    MissingSection,
    NotFound,
    ValidationFailed,
)
from club_intake.models.submission import Submission, SubmissionStatus
from club_intake.schemas.submission import (
    REQUIRED_SECTIONS,
    SECTION_SCHEMAS,
    SubmissionCreate,
)
from club_intake.validation import flatten_errors

logger = logging.getLogger(__name__)


def is_reg_number_conflict(error: IntegrityError) -> bool:
    """True when an IntegrityError came from a reg_number unique index"""
    return "reg_number" in str(error.orig)


def validate_section(section: str, data: Any) -> Dict[str, str]:
    """
    Validate a single page of the multi-page form.

    Args:
        section: Section key as sent by the form, e.g. "personalInfo"
        data: The section payload

    Returns:
        Mapping of "section.field" to message; empty when the page is valid

    Raises:
        NotFound: If the section name is unknown
    """
    schema = SECTION_SCHEMAS.get(section)
    if schema is None:
        raise NotFound(f"Unknown form section: {section}")

    try:
        schema.model_validate(data)
    except ValidationError as e:
        return flatten_errors(e, prefix=section)
    return {}


class SubmissionService:
    """Service for accepting form submissions"""

    def __init__(self, db_session: Session):
        self.db = db_session

    def create_submission(self, candidate: Any) -> Submission:
        """
        Validate and persist a new submission.

        Args:
            candidate: Raw request body with personalInfo, journey and
                teamBonding sections (future is optional)

        Returns:
            Submission: The stored submission with status "submitted"

        Raises:
            MissingSection: If a required section is absent
            ValidationFailed: If any field breaks its rule
            DuplicateIdentifier: If the registration number is already stored
        """
        if not isinstance(candidate, dict):
            candidate = {}

        missing = [name for name in REQUIRED_SECTIONS if candidate.get(name) is None]
        if missing:
            logger.info(f"Rejected submission missing sections: {missing}")
            raise MissingSection(missing)

        try:
            form = SubmissionCreate.model_validate(candidate)
        except ValidationError as e:
            validation_errors = flatten_errors(e)
            logger.info(f"Submission failed validation: {list(validation_errors)}")
            raise ValidationFailed(validation_errors) from e

        personal_info = form.personal_info
        if self.get_submission_by_reg_number(personal_info.reg_number):
            logger.info(f"Duplicate submission for {personal_info.reg_number}")
            raise DuplicateIdentifier()

        now = datetime.now(timezone.utc)
        submission = Submission(
            reg_number=personal_info.reg_number,
            domain=personal_info.domain,
            personal_info=personal_info.model_dump(by_alias=True),
            journey=form.journey.model_dump(by_alias=True),
            team_bonding=form.team_bonding.model_dump(by_alias=True),
            future=(
                form.future.model_dump(by_alias=True, exclude_none=True)
                if form.future
                else None
            ),
            status=SubmissionStatus.SUBMITTED.value,
            submitted_at=now,
            created_at=now,
        )

        self.db.add(submission)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_reg_number_conflict(e):
                # Lost the race against a concurrent submission
                logger.info(
                    f"Duplicate submission for {personal_info.reg_number} caught by unique index"
                )
                raise DuplicateIdentifier() from e
            raise
        self.db.refresh(submission)

        logger.info(
            f"Created submission {submission.id} for {submission.reg_number}"
        )
        return submission

    def get_submission_by_reg_number(self, reg_number: str) -> Optional[Submission]:
        """Get a submission by registration number"""
        stmt = select(Submission).where(Submission.reg_number == reg_number)
        return self.db.exec(stmt).first()

    def get_submission_by_id(self, submission_id: uuid.UUID) -> Optional[Submission]:
        """Get a submission by ID"""
        return self.db.get(Submission, submission_id)
