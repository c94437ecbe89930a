"""Member Service - Handles member registrations"""

import logging
from typing import Any, List, Optional

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from club_intake.config import config
from club_intake.errors import DuplicateIdentifier, ValidationFailed
from club_intake.models.member import Member
from club_intake.schemas.member import MemberCreate
from club_intake.schemas.pagination import Page, PageRequest
from club_intake.services.submission_service import is_reg_number_conflict
from club_intake.validation import flatten_errors

logger = logging.getLogger(__name__)


class MemberService:
    """Service for handling member registrations"""

    def __init__(self, db_session: Session, max_page_size: Optional[int] = None):
        self.db = db_session
        self.max_page_size = max_page_size or config["max_page_size"]

    def create_member(self, candidate: Any) -> Member:
        """
        Register a new member.

        Raises:
            ValidationFailed: If any field breaks its rule
            DuplicateIdentifier: If the registration number is already registered
        """
        try:
            data = MemberCreate.model_validate(candidate)
        except ValidationError as e:
            raise ValidationFailed(flatten_errors(e)) from e

        if self.get_member_by_reg_number(data.reg_number):
            logger.info(f"Duplicate member registration for {data.reg_number}")
            raise DuplicateIdentifier("This registration number is already registered")

        member = Member(**data.model_dump())
        self.db.add(member)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if is_reg_number_conflict(e):
                raise DuplicateIdentifier(
                    "This registration number is already registered"
                ) from e
            raise
        self.db.refresh(member)

        logger.info(f"Member registered successfully: {member.id}")
        return member

    def get_member_by_reg_number(self, reg_number: str) -> Optional[Member]:
        stmt = select(Member).where(Member.reg_number == reg_number)
        return self.db.exec(stmt).first()

    def list_members(self, page: int = 1, limit: int = 50) -> Page:
        """List members newest first"""
        request = PageRequest.build(page, limit, self.max_page_size)
        stmt = (
            select(Member)
            .order_by(Member.created_at.desc(), Member.id)
            .offset(request.skip)
            .limit(request.limit)
        )
        items = list(self.db.exec(stmt).all())
        total_count = self.db.exec(select(func.count()).select_from(Member)).one()
        return Page(items=items, total_count=total_count, request=request)

    def get_all_members(self) -> List[Member]:
        """Every registered member, used by the birthday check"""
        return list(self.db.exec(select(Member)).all())
