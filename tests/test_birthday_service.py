"""Tests for the daily birthday check"""

from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from sqlmodel import Session

from club_intake.errors import Unauthorized
from club_intake.services.birthday_service import BirthdayService, is_birthday
from tests.config import test_config

CRON_SECRET = test_config["cron_secret"]


def _clock(*args, tz=timezone.utc):
    return lambda: datetime(*args, tzinfo=tz)


@pytest.fixture
def seeded_members(member_service, make_member_payload):
    march = member_service.create_member(
        make_member_payload(reg_number="20BCE0315", name="March Member", birthdate="2000-03-15")
    )
    july = member_service.create_member(
        make_member_payload(reg_number="19BCE0701", name="July Member", birthdate="1999-07-01")
    )
    return march, july


def _service(db_session, email_service, clock, secret=CRON_SECRET):
    return BirthdayService(db_session, email_service, secret, clock=clock)


@pytest.mark.asyncio
async def test_only_todays_birthday_matches(_db_session, fake_email_service, seeded_members):
    service = _service(_db_session, fake_email_service, _clock(2026, 3, 15, 9, 0))

    results = await service.run_daily_check(CRON_SECRET)

    assert results == [
        {"name": "March Member", "memberEmailSent": True, "boardEmailSent": True}
    ]
    assert fake_email_service.greetings == ["20BCE0315"]
    assert fake_email_service.board_notifications == ["20BCE0315"]


@pytest.mark.asyncio
async def test_birth_year_is_ignored(_db_session, fake_email_service, seeded_members):
    service = _service(_db_session, fake_email_service, _clock(2031, 7, 1, 0, 5))

    results = await service.run_daily_check(CRON_SECRET)

    assert [r["name"] for r in results] == ["July Member"]


@pytest.mark.asyncio
async def test_clock_is_compared_in_utc(_db_session, fake_email_service, seeded_members):
    """23:30 on March 14th in UTC-5 is March 15th in UTC"""
    service = _service(
        _db_session,
        fake_email_service,
        _clock(2026, 3, 14, 23, 30, tz=timezone(timedelta(hours=-5))),
    )

    results = await service.run_daily_check(CRON_SECRET)

    assert [r["name"] for r in results] == ["March Member"]


@pytest.mark.asyncio
async def test_no_birthdays_today(_db_session, fake_email_service, seeded_members):
    service = _service(_db_session, fake_email_service, _clock(2026, 12, 25, 8, 0))

    assert await service.run_daily_check(CRON_SECRET) == []
    assert fake_email_service.greetings == []


@pytest.mark.asyncio
async def test_failed_send_does_not_block_batch(
    _db_session, fake_email_service, member_service, make_member_payload
):
    for reg_number, name in [
        ("20BCE0001", "First Member"),
        ("20BCE0002", "Second Member"),
        ("20BCE0003", "Third Member"),
    ]:
        member_service.create_member(
            make_member_payload(reg_number=reg_number, name=name, birthdate="2001-03-15")
        )
    fake_email_service.fail_greeting_for.add("20BCE0001")
    fake_email_service.raise_board_for.add("20BCE0002")
    service = _service(_db_session, fake_email_service, _clock(2026, 3, 15, 6, 0))

    results = await service.run_daily_check(CRON_SECRET)

    by_name = {r["name"]: r for r in results}
    assert by_name["First Member"] == {
        "name": "First Member",
        "memberEmailSent": False,
        "boardEmailSent": True,
    }
    assert by_name["Second Member"] == {
        "name": "Second Member",
        "memberEmailSent": True,
        "boardEmailSent": False,
    }
    assert by_name["Third Member"]["memberEmailSent"] is True
    assert by_name["Third Member"]["boardEmailSent"] is True


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "configured, supplied",
    [
        (CRON_SECRET, None),
        (CRON_SECRET, "wrong-secret"),
        (None, None),
        (None, "anything"),
    ],
)
async def test_unauthorized_without_store_read(fake_email_service, configured, supplied):
    session = MagicMock(spec=Session)
    service = _service(session, fake_email_service, _clock(2026, 3, 15, 9, 0), configured)

    with pytest.raises(Unauthorized):
        await service.run_daily_check(supplied)

    session.exec.assert_not_called()
    session.get.assert_not_called()


def test_is_birthday_leap_day():
    leap = datetime(2000, 2, 29).date()

    assert is_birthday(leap, datetime(2024, 2, 29).date())
    assert not is_birthday(leap, datetime(2025, 3, 1).date())
