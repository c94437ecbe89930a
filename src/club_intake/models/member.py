"""SQLModel Member model"""

import uuid
from datetime import date, datetime, timezone
from typing import Any, Dict

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from club_intake.models.submission import isoformat_utc


class Member(SQLModel, table=True):
    """Registration-only member record used by the birthday check"""

    __tablename__ = "members"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    reg_number: str = Field(unique=True, index=True, max_length=9)
    name: str = Field(max_length=100)
    email: str
    phone_number: str
    quirky_detail: str = Field(max_length=500)
    birthdate: date
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
    )

    def to_document(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "regNumber": self.reg_number,
            "name": self.name,
            "email": self.email,
            "phoneNumber": self.phone_number,
            "quirkyDetail": self.quirky_detail,
            "birthdate": self.birthdate.isoformat(),
            "createdAt": isoformat_utc(self.created_at),
        }
