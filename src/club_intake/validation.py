"""Field rules for the intake forms.

The same rules back the per-page checks of the multi-page form and the
validation performed before a record is written. Messages are the ones
shown to students next to the offending input, so they are keyed by the
camelCase field names the form sends.
"""

import math
import re
from typing import Dict, Iterable, Optional

from pydantic import ValidationError

REG_NUMBER_PATTERN = re.compile(r"^[0-9]{2}[A-Z]{3}[0-9]{4}$")
NAME_PATTERN = re.compile(r"^[a-zA-Z\s]+$")
PHONE_PATTERN = re.compile(r"^[6-9]\d{9}$")
VIT_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@vitstudent\.ac\.in$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

YEARS_OF_STUDY = ("1st Year", "2nd Year", "3rd Year", "4th Year", "Masters", "PhD")
GENDERS = ("Male", "Female", "Other")
DOMAINS = ("Technical", "Design", "Management")
JOIN_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
LEADERSHIP_PREFERENCES = ("board", "senior_core", "both", "neither")

TEXT_MAX_LENGTH = 1000

REQUIRED_MESSAGES = {
    # personalInfo
    "name": "Please provide your name",
    "regNumber": "Please provide your registration number",
    "yearOfStudy": "Please select your year of study",
    "phoneNumber": "Please provide your phone number",
    "branchSpecialization": "Please provide your branch and specialization",
    "gender": "Please select your gender",
    "vitEmail": "Please provide your VIT email",
    "personalEmail": "Please provide your personal email",
    "domain": "Please select your primary domain",
    "joinMonth": "Please select when you want to join",
    "otherOrganizations": 'Please mention other organizations (write "None" if not applicable)',
    "cgpa": "Please provide your CGPA",
    # journey
    "contribution": "Please describe your contribution to the club",
    "projects": "Please describe the projects you have worked on",
    "events": "Please describe the events you have participated in or organized",
    "skillsLearned": "Please describe the skills you have learned",
    "overallContribution": "Please rate your overall contribution",
    "techContribution": "Please rate your technical contribution",
    # teamBonding
    "memberBonding": "Please rate your bonding with team members",
    "likelyToSeekHelp": "Please rate how likely you are to seek help from team members",
    "clubEnvironment": "Please describe the club environment",
    "likedCharacteristics": "Please describe the characteristics you liked most",
    # member registration
    "email": "Please provide your email",
    "quirkyDetail": "Please tell us something quirky about yourself",
    "birthdate": "Please provide your birthdate",
}


def required_text(
    value: str, field: str, max_length: int, label: Optional[str] = None
) -> str:
    """Reject blank input and enforce a maximum length"""
    if not value:
        raise ValueError(REQUIRED_MESSAGES.get(field, "This field is required"))
    return max_text(value, max_length, label)


def max_text(value: Optional[str], max_length: int, label: Optional[str]) -> Optional[str]:
    if value is not None and len(value) > max_length:
        raise ValueError(f"{label} cannot be more than {max_length} characters")
    return value


def one_of(value: str, field: str, choices: Iterable[str], message: str) -> str:
    if not value:
        raise ValueError(REQUIRED_MESSAGES.get(field, "This field is required"))
    if value not in choices:
        raise ValueError(message)
    return value


def rating(value: Optional[int], label: str) -> Optional[int]:
    """Ratings are integers from 1 to 10 inclusive"""
    if value is not None and not 1 <= value <= 10:
        raise ValueError(f"{label} rating must be between 1 and 10")
    return value


def cgpa(value: str) -> str:
    if not value:
        raise ValueError(REQUIRED_MESSAGES["cgpa"])
    try:
        number = float(value)
    except ValueError:
        number = math.nan
    if math.isnan(number) or not 0 <= number <= 10:
        raise ValueError("CGPA must be a valid number between 0 and 10")
    return value


def reg_number(value: str) -> str:
    value = value.strip().upper()
    if not value:
        raise ValueError(REQUIRED_MESSAGES["regNumber"])
    if not REG_NUMBER_PATTERN.match(value):
        raise ValueError(
            "Registration number must be in the format XXYYYXXXX (e.g., 21BCE1234)"
        )
    return value


def person_name(value: str) -> str:
    value = required_text(value, "name", 100, "Name")
    if not NAME_PATTERN.match(value):
        raise ValueError("Name should only contain letters and spaces")
    return value


def phone_number(value: str) -> str:
    if not value:
        raise ValueError(REQUIRED_MESSAGES["phoneNumber"])
    if not PHONE_PATTERN.match(value):
        raise ValueError(
            "Phone number must be 10 digits and start with 6, 7, 8, or 9"
        )
    return value


def email_address(value: str, field: str, pattern: re.Pattern, message: str) -> str:
    value = value.strip().lower()
    if not value:
        raise ValueError(REQUIRED_MESSAGES[field])
    if not pattern.match(value):
        raise ValueError(message)
    return value


def flatten_errors(
    exc: ValidationError, prefix: Optional[str] = None
) -> Dict[str, str]:
    """Turn a pydantic ValidationError into {dotted.field.path: message}.

    Only the first message per field is kept.
    """
    errors: Dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error["loc"]]
        if prefix:
            loc.insert(0, prefix)
        path = ".".join(loc)

        if error["type"] == "missing":
            message = REQUIRED_MESSAGES.get(loc[-1], "This field is required")
        elif error["type"] == "value_error":
            message = str(error["ctx"]["error"])
        else:
            message = error["msg"]

        errors.setdefault(path, message)
    return errors
