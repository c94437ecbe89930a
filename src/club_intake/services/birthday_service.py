"""Daily birthday check triggered by the external scheduler"""

import asyncio
import logging
import secrets
from datetime import date, datetime, timezone
from typing import Callable, Dict, List, Optional, Union

from sqlmodel import Session

from club_intake.errors import Unauthorized
from club_intake.models.member import Member
from club_intake.services.email_service import EmailService
from club_intake.services.member_service import MemberService

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_birthday(birthdate: date, today: date) -> bool:
    """Month and day match; the year is ignored"""
    return birthdate.month == today.month and birthdate.day == today.day


class BirthdayService:
    """Finds today's birthdays and sends the greeting and board emails"""

    def __init__(
        self,
        db_session: Session,
        email_service: EmailService,
        cron_secret: Optional[str],
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.member_service = MemberService(db_session)
        self.email_service = email_service
        self.cron_secret = cron_secret
        self.clock = clock

    def _authorize(self, secret: Optional[str]) -> None:
        if not self.cron_secret or not secret:
            raise Unauthorized("Not authorized")
        if not secrets.compare_digest(secret.encode(), self.cron_secret.encode()):
            raise Unauthorized("Not authorized")

    async def run_daily_check(
        self, secret: Optional[str]
    ) -> List[Dict[str, Union[str, bool]]]:
        """
        Send birthday emails for every member born on today's UTC month/day.

        Both emails for a member are sent independently and a failed send
        never stops the rest of the batch.

        Args:
            secret: Value of the x-cron-secret header

        Returns:
            One {name, memberEmailSent, boardEmailSent} entry per birthday

        Raises:
            Unauthorized: If the secret is missing or wrong
        """
        self._authorize(secret)

        today = self.clock().astimezone(timezone.utc).date()
        members = self.member_service.get_all_members()
        birthdays = [m for m in members if is_birthday(m.birthdate, today)]

        logger.info(f"Found {len(birthdays)} birthdays today ({today.isoformat()})")

        return list(await asyncio.gather(*(self._notify(m) for m in birthdays)))

    async def _notify(self, member: Member) -> Dict[str, Union[str, bool]]:
        results = await asyncio.gather(
            self.email_service.send_birthday_email(member),
            self.email_service.send_board_notification(member),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, Exception):
                logger.error(f"Birthday email for {member.reg_number} failed: {result}")
        member_sent, board_sent = (result is True for result in results)

        if not (member_sent and board_sent):
            logger.warning(
                f"Birthday emails for {member.reg_number}: member={member_sent}, board={board_sent}"
            )
        return {
            "name": member.name,
            "memberEmailSent": member_sent,
            "boardEmailSent": board_sent,
        }
