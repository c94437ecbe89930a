from club_intake.services.birthday_service import BirthdayService
from club_intake.services.email_service import EmailService
from club_intake.services.member_service import MemberService
from club_intake.services.query_service import QueryService
from club_intake.services.review_service import ReviewService
from club_intake.services.submission_service import SubmissionService

__all__ = [
    "BirthdayService",
    "EmailService",
    "MemberService",
    "QueryService",
    "ReviewService",
    "SubmissionService",
]
