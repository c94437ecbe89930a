"""Request schemas for the feedback/application form"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from club_intake import validation
from club_intake.models.submission import SubmissionStatus


class FormSection(BaseModel):
    """Base for one page of the multi-page form"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class PersonalInfo(FormSection):
    name: str
    reg_number: str
    year_of_study: str
    phone_number: str
    branch_specialization: str
    gender: str
    vit_email: str
    personal_email: str
    domain: str
    additional_domains: str = ""
    join_month: str
    other_organizations: str
    cgpa: str

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return validation.person_name(v)

    @field_validator("reg_number")
    @classmethod
    def _reg_number(cls, v: str) -> str:
        return validation.reg_number(v)

    @field_validator("year_of_study")
    @classmethod
    def _year_of_study(cls, v: str) -> str:
        return validation.one_of(
            v,
            "yearOfStudy",
            validation.YEARS_OF_STUDY,
            "Please select a valid year of study",
        )

    @field_validator("phone_number")
    @classmethod
    def _phone_number(cls, v: str) -> str:
        return validation.phone_number(v)

    @field_validator("branch_specialization")
    @classmethod
    def _branch(cls, v: str) -> str:
        return validation.required_text(
            v, "branchSpecialization", 150, "Branch and specialization"
        )

    @field_validator("gender")
    @classmethod
    def _gender(cls, v: str) -> str:
        return validation.one_of(
            v, "gender", validation.GENDERS, "Please select a valid gender"
        )

    @field_validator("vit_email")
    @classmethod
    def _vit_email(cls, v: str) -> str:
        return validation.email_address(
            v,
            "vitEmail",
            validation.VIT_EMAIL_PATTERN,
            "Please provide a valid VIT email address (@vitstudent.ac.in)",
        )

    @field_validator("personal_email")
    @classmethod
    def _personal_email(cls, v: str) -> str:
        return validation.email_address(
            v,
            "personalEmail",
            validation.EMAIL_PATTERN,
            "Please provide a valid email address",
        )

    @field_validator("domain")
    @classmethod
    def _domain(cls, v: str) -> str:
        return validation.one_of(
            v, "domain", validation.DOMAINS, "Please select a valid domain"
        )

    @field_validator("additional_domains")
    @classmethod
    def _additional_domains(cls, v: str) -> str:
        return validation.max_text(v, 200, "Additional domains")

    @field_validator("join_month")
    @classmethod
    def _join_month(cls, v: str) -> str:
        return validation.one_of(
            v, "joinMonth", validation.JOIN_MONTHS, "Please select a valid month"
        )

    @field_validator("other_organizations")
    @classmethod
    def _other_organizations(cls, v: str) -> str:
        return validation.required_text(
            v, "otherOrganizations", 500, "Other organizations description"
        )

    @field_validator("cgpa", mode="before")
    @classmethod
    def _cgpa_to_text(cls, v):
        # The form sends a string but numbers are accepted too
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("cgpa")
    @classmethod
    def _cgpa(cls, v: str) -> str:
        return validation.cgpa(v)


class Journey(FormSection):
    contribution: str
    projects: str
    events: str
    skills_learned: str
    overall_contribution: int
    tech_contribution: int
    management_contribution: Optional[int] = None
    design_contribution: Optional[int] = None

    @field_validator("contribution", "projects", "events", "skills_learned")
    @classmethod
    def _text(cls, v: str, info) -> str:
        field = to_camel(info.field_name)
        label = info.field_name.replace("_", " ").capitalize() + " description"
        return validation.required_text(v, field, validation.TEXT_MAX_LENGTH, label)

    @field_validator("overall_contribution")
    @classmethod
    def _overall(cls, v: int) -> int:
        return validation.rating(v, "Overall contribution")

    @field_validator("tech_contribution")
    @classmethod
    def _tech(cls, v: int) -> int:
        return validation.rating(v, "Technical contribution")

    @field_validator("management_contribution")
    @classmethod
    def _management(cls, v: Optional[int]) -> Optional[int]:
        return validation.rating(v, "Management contribution")

    @field_validator("design_contribution")
    @classmethod
    def _design(cls, v: Optional[int]) -> Optional[int]:
        return validation.rating(v, "Design contribution")


class TeamBonding(FormSection):
    member_bonding: int
    likely_to_seek_help: int
    club_environment: str
    liked_characteristics: str

    @field_validator("member_bonding")
    @classmethod
    def _member_bonding(cls, v: int) -> int:
        return validation.rating(v, "Member bonding")

    @field_validator("likely_to_seek_help")
    @classmethod
    def _likely_to_seek_help(cls, v: int) -> int:
        return validation.rating(v, "Likely to seek help")

    @field_validator("club_environment")
    @classmethod
    def _club_environment(cls, v: str) -> str:
        return validation.required_text(
            v,
            "clubEnvironment",
            validation.TEXT_MAX_LENGTH,
            "Club environment description",
        )

    @field_validator("liked_characteristics")
    @classmethod
    def _liked_characteristics(cls, v: str) -> str:
        return validation.required_text(
            v,
            "likedCharacteristics",
            validation.TEXT_MAX_LENGTH,
            "Liked characteristics description",
        )


class Future(FormSection):
    """Optional closing page about plans for the coming year"""

    why_joined: Optional[str] = None
    wishlist_fulfillment: Optional[str] = None
    commitment_rating: Optional[int] = None
    commitment_justification: Optional[str] = None
    leadership_preference: Optional[str] = None
    immediate_changes: Optional[str] = None
    upcoming_year_changes: Optional[str] = None
    preferred_fellow_leaders: Optional[str] = None
    skills_to_learn: Optional[str] = None
    domains_to_explore: Optional[str] = None

    @field_validator(
        "why_joined",
        "wishlist_fulfillment",
        "commitment_justification",
        "immediate_changes",
        "upcoming_year_changes",
        "preferred_fellow_leaders",
        "skills_to_learn",
        "domains_to_explore",
    )
    @classmethod
    def _text(cls, v: Optional[str], info) -> Optional[str]:
        label = info.field_name.replace("_", " ").capitalize()
        return validation.max_text(v, validation.TEXT_MAX_LENGTH, label)

    @field_validator("commitment_rating")
    @classmethod
    def _commitment(cls, v: Optional[int]) -> Optional[int]:
        return validation.rating(v, "Commitment")

    @field_validator("leadership_preference")
    @classmethod
    def _leadership(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return validation.one_of(
            v,
            "leadershipPreference",
            validation.LEADERSHIP_PREFERENCES,
            "Please select a valid leadership preference",
        )


class SubmissionCreate(FormSection):
    """Full submission; review fields are never accepted from the submitter"""

    personal_info: PersonalInfo
    journey: Journey
    team_bonding: TeamBonding
    future: Optional[Future] = None


class SubmissionReview(BaseModel):
    """Body of PUT /submissions"""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: Optional[str] = None
    status: Optional[SubmissionStatus] = None
    reviewed_by: Optional[str] = Field(
        default=None, alias="reviewedBy", max_length=100
    )
    notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status(cls, v: Union[str, None]):
        # An empty status means "leave unchanged"
        return v or None


SECTION_SCHEMAS = {
    "personalInfo": PersonalInfo,
    "journey": Journey,
    "teamBonding": TeamBonding,
    "future": Future,
}

REQUIRED_SECTIONS = ("personalInfo", "journey", "teamBonding")
