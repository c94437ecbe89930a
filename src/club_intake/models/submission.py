"""SQLModel Submission model"""

import enum
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class SubmissionStatus(str, enum.Enum):
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    """Render a stored timestamp as ISO-8601 UTC (naive values are UTC)"""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class Submission(SQLModel, table=True):
    """Club feedback/application form submission.

    Form sections are kept as JSON documents. The registration number and
    domain are copied out of ``personal_info`` into their own columns so the
    database can enforce uniqueness and index the dashboard filters.
    """

    __tablename__ = "submissions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    reg_number: str = Field(unique=True, index=True, max_length=9)
    domain: str = Field(index=True)
    personal_info: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
    journey: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
    team_bonding: Dict[str, Any] = Field(sa_column=Column(JSON, nullable=False))
    future: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON))
    # Free transitions between SubmissionStatus values
    status: str = Field(default=SubmissionStatus.SUBMITTED.value, index=True)
    reviewed_by: Optional[str] = Field(default=None, max_length=100)
    reviewed_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime(timezone=True))
    )
    notes: Optional[str] = Field(default=None, max_length=1000)
    submitted_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    def to_document(self) -> Dict[str, Any]:
        """Serialize to the camelCase document returned by the API"""
        return {
            "id": str(self.id),
            "personalInfo": self.personal_info,
            "journey": self.journey,
            "teamBonding": self.team_bonding,
            "future": self.future,
            "status": self.status,
            "reviewedBy": self.reviewed_by,
            "reviewedAt": isoformat_utc(self.reviewed_at),
            "notes": self.notes,
            "submittedAt": isoformat_utc(self.submitted_at),
            "createdAt": isoformat_utc(self.created_at),
        }
