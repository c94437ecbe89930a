"""Shared test configuration and fixtures for the club intake tests"""

import copy
import logging
import os
from datetime import timezone

import pytest

from tests.config import test_config

# Must be set before the application config module is imported
os.environ["DATABASE_URL"] = test_config["database_url"]
os.environ["ENVIRONMENT"] = test_config["environment"]
os.environ["ADMIN_SECRET_CODE"] = test_config["admin_secret_code"]
os.environ["CRON_SECRET"] = test_config["cron_secret"]
os.environ["BOARD_EMAIL"] = test_config["board_email"]

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

from club_intake.main import app  # noqa: E402
from club_intake.models.database import get_db  # noqa: E402
from club_intake.services.email_service import get_email_service  # noqa: E402
from club_intake.services.member_service import MemberService  # noqa: E402
from club_intake.services.query_service import QueryService  # noqa: E402
from club_intake.services.review_service import ReviewService  # noqa: E402
from club_intake.services.submission_service import SubmissionService  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


VALID_CANDIDATE = {
    "personalInfo": {
        "name": "Asha Verma",
        "regNumber": "21bce1234",
        "yearOfStudy": "3rd Year",
        "phoneNumber": "9876543210",
        "branchSpecialization": "CSE with AI and ML",
        "gender": "Female",
        "vitEmail": "Asha.Verma2021@vitstudent.ac.in",
        "personalEmail": "asha@example.com",
        "domain": "Technical",
        "additionalDomains": "Design",
        "joinMonth": "August",
        "otherOrganizations": "None",
        "cgpa": "8.7",
    },
    "journey": {
        "contribution": "Maintained the club website and mentored juniors.",
        "projects": "Event check-in app, recruitment portal.",
        "events": "Hack week 2024, design sprint.",
        "skillsLearned": "Next.js, public speaking, planning.",
        "overallContribution": 8,
        "techContribution": 9,
        "managementContribution": 6,
        "designContribution": 5,
    },
    "teamBonding": {
        "memberBonding": 9,
        "likelyToSeekHelp": 8,
        "clubEnvironment": "Friendly and focused on building things.",
        "likedCharacteristics": "Seniors are patient and generous with time.",
    },
}


@pytest.fixture
def _engine():
    """In-memory SQLite engine shared by every connection of one test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    yield engine

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def _db_session(_engine):
    """Private DB session for fixtures only.

    Prefer the service fixtures below in tests.
    """
    session = Session(_engine)

    yield session

    session.close()


@pytest.fixture
def make_candidate():
    """Factory for a valid submission payload with optional overrides"""

    def _make_candidate(reg_number=None, domain=None, **sections):
        candidate = copy.deepcopy(VALID_CANDIDATE)
        if reg_number:
            candidate["personalInfo"]["regNumber"] = reg_number
        if domain:
            candidate["personalInfo"]["domain"] = domain
        for section, values in sections.items():
            candidate[section].update(values)
        return candidate

    return _make_candidate


@pytest.fixture
def make_member_payload():
    def _make_member_payload(reg_number="22BIT0042", **overrides):
        payload = {
            "regNumber": reg_number,
            "name": "Rohan Iyer",
            "email": "rohan@example.com",
            "phoneNumber": "8123456789",
            "quirkyDetail": "Can solve a Rubik's cube blindfolded",
            "birthdate": "2000-03-15",
        }
        payload.update(overrides)
        return payload

    return _make_member_payload


@pytest.fixture
def submission_service(_db_session):
    return SubmissionService(_db_session)


@pytest.fixture
def query_service(_db_session):
    return QueryService(_db_session)


@pytest.fixture
def review_service(_db_session):
    return ReviewService(_db_session)


@pytest.fixture
def member_service(_db_session):
    return MemberService(_db_session)


@pytest.fixture
def backdate(_db_session):
    """Set submitted_at on a stored submission"""

    def _backdate(submission, submitted_at):
        submission.submitted_at = submitted_at.astimezone(timezone.utc)
        _db_session.add(submission)
        _db_session.commit()
        _db_session.refresh(submission)
        return submission

    return _backdate


class FakeEmailService:
    """Records birthday emails instead of calling Mailgun"""

    def __init__(self):
        self.greetings = []
        self.board_notifications = []
        self.fail_greeting_for = set()
        self.raise_board_for = set()

    async def send_birthday_email(self, member):
        if member.reg_number in self.fail_greeting_for:
            return False
        self.greetings.append(member.reg_number)
        return True

    async def send_board_notification(self, member):
        if member.reg_number in self.raise_board_for:
            raise RuntimeError("Mailgun unavailable")
        self.board_notifications.append(member.reg_number)
        return True


@pytest.fixture
def fake_email_service():
    return FakeEmailService()


@pytest.fixture
def client(_db_session, fake_email_service):
    """Test client using the test database and the fake email service"""

    original_overrides = app.dependency_overrides.copy()

    def get_test_db():
        return _db_session

    def get_test_email_service():
        return fake_email_service

    app.dependency_overrides.clear()
    app.dependency_overrides[get_db] = get_test_db
    app.dependency_overrides[get_email_service] = get_test_email_service

    yield TestClient(app)

    app.dependency_overrides.clear()
    app.dependency_overrides.update(original_overrides)
