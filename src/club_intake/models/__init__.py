"""Database models for the club intake service"""

from club_intake.models.member import Member
from club_intake.models.submission import Submission, SubmissionStatus

__all__ = [
    "Member",
    "Submission",
    "SubmissionStatus",
]
