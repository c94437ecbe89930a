"""Request schema for the member registration form"""

from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from club_intake import validation


class MemberCreate(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    reg_number: str
    name: str
    email: str
    phone_number: str
    quirky_detail: str
    birthdate: date

    @field_validator("reg_number")
    @classmethod
    def _reg_number(cls, v: str) -> str:
        return validation.reg_number(v)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return validation.person_name(v)

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        return validation.email_address(
            v, "email", validation.EMAIL_PATTERN, "Please provide a valid email address"
        )

    @field_validator("phone_number")
    @classmethod
    def _phone_number(cls, v: str) -> str:
        return validation.phone_number(v)

    @field_validator("quirky_detail")
    @classmethod
    def _quirky_detail(cls, v: str) -> str:
        return validation.required_text(v, "quirkyDetail", 500, "Quirky detail")

    @field_validator("birthdate", mode="before")
    @classmethod
    def _birthdate_in_utc(cls, v):
        """Accept a plain date or a full timestamp; timestamps are read in UTC"""
        if isinstance(v, str) and "T" in v:
            try:
                parsed = datetime.fromisoformat(v.replace("Z", "+00:00"))
            except ValueError:
                raise ValueError("Please provide a valid birthdate") from None
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(timezone.utc)
            return parsed.date()
        if isinstance(v, datetime):
            if v.tzinfo is not None:
                v = v.astimezone(timezone.utc)
            return v.date()
        return v
