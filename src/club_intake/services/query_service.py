"""Query service for listing submissions"""

import logging
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from club_intake.config import config
from club_intake.models.submission import Submission
from club_intake.schemas.pagination import Page, PageRequest

logger = logging.getLogger(__name__)


class QueryService:
    """Service for paginated submission listings"""

    def __init__(self, db_session: Session, max_page_size: Optional[int] = None):
        self.db = db_session
        self.max_page_size = max_page_size or config["max_page_size"]

    def list_submissions(
        self,
        status: Optional[str] = None,
        domain: Optional[str] = None,
        page: int = 1,
        limit: int = 50,
    ) -> Page:
        """
        List submissions newest first.

        Args:
            status: Only include submissions with this status
            domain: Only include submissions whose primary domain matches
            page: 1-based page number
            limit: Page size, capped at the configured maximum

        Returns:
            Page with the matching submissions and total count
        """
        request = PageRequest.build(page, limit, self.max_page_size)

        conditions = []
        if status:
            conditions.append(Submission.status == status)
        if domain:
            conditions.append(Submission.domain == domain)

        stmt = select(Submission)
        count_stmt = select(func.count()).select_from(Submission)
        for condition in conditions:
            stmt = stmt.where(condition)
            count_stmt = count_stmt.where(condition)

        stmt = (
            stmt.order_by(Submission.submitted_at.desc(), Submission.id)
            .offset(request.skip)
            .limit(request.limit)
        )
        items = list(self.db.exec(stmt).all())
        total_count = self.db.exec(count_stmt).one()

        logger.debug(
            f"Listed {len(items)} of {total_count} submissions "
            f"(status={status}, domain={domain}, page={request.page}, limit={request.limit})"
        )
        return Page(items=items, total_count=total_count, request=request)
