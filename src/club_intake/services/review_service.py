"""Review service for admin updates and deletions of submissions"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlmodel import Session

from club_intake.errors import MissingIdentifier, NotFound
from club_intake.models.submission import Submission, SubmissionStatus

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for reviewing submissions"""

    def __init__(self, db_session: Session):
        self.db = db_session

    def _get_or_raise(self, submission_id: Optional[str]) -> Submission:
        if not submission_id:
            raise MissingIdentifier()

        try:
            key = uuid.UUID(str(submission_id))
        except ValueError:
            raise NotFound("Submission not found") from None

        submission = self.db.get(Submission, key)
        if not submission:
            raise NotFound("Submission not found")
        return submission

    def update_submission(
        self,
        submission_id: Optional[str],
        status: Optional[SubmissionStatus] = None,
        reviewed_by: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Submission:
        """
        Apply review fields to a submission.

        Only the supplied values are written. Any status may follow any
        other; moving to a status other than "submitted" stamps reviewed_at.

        Args:
            submission_id: ID of the submission
            status: New workflow status
            reviewed_by: Name of the reviewer
            notes: Reviewer notes

        Returns:
            Submission: The updated submission

        Raises:
            MissingIdentifier: If no ID was given
            NotFound: If no submission has this ID
        """
        submission = self._get_or_raise(submission_id)

        if status:
            submission.status = SubmissionStatus(status).value
            if submission.status != SubmissionStatus.SUBMITTED.value:
                submission.reviewed_at = datetime.now(timezone.utc)
        if reviewed_by:
            submission.reviewed_by = reviewed_by
        if notes:
            submission.notes = notes

        try:
            self.db.add(submission)
            self.db.commit()
            self.db.refresh(submission)
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error updating submission {submission_id}: {e}")
            raise

        logger.info(
            f"Updated submission {submission.id}: status={submission.status}, reviewed_by={submission.reviewed_by}"
        )
        return submission

    def delete_submission(self, submission_id: Optional[str]) -> Dict[str, Any]:
        """
        Permanently delete a submission.

        Returns:
            Dictionary with the deleted submission ID

        Raises:
            MissingIdentifier: If no ID was given
            NotFound: If no submission has this ID
        """
        submission = self._get_or_raise(submission_id)
        deleted_id = str(submission.id)

        try:
            self.db.delete(submission)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(f"Error deleting submission {submission_id}: {e}")
            raise

        logger.info(f"Deleted submission {deleted_id}")
        return {"id": deleted_id}
