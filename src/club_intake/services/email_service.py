"""Email service for birthday greetings and board notifications"""

import logging
from typing import Dict, Optional

from club_intake.backends.email_client import EmailClient
from club_intake.config import config
from club_intake.models.member import Member

logger = logging.getLogger(__name__)


class EmailService:
    """Service for composing and sending member emails"""

    def __init__(self, email_client: EmailClient, email_config: dict):
        self.email_client = email_client
        self.board_email: Optional[str] = email_config.get("board_email")
        self.club_name: str = email_config.get("club_name") or "the club"

    async def send_birthday_email(self, member: Member) -> bool:
        """
        Send a birthday greeting to the member.

        Returns:
            bool: True if email was sent successfully, False otherwise
        """
        if not member.email:
            logger.info(f"No email for member {member.reg_number}, skipping greeting")
            return False

        subject = f"Happy Birthday, {member.name}! 🎉"
        body = f"""Hi {member.name},

Everyone at {self.club_name} wishes you a very happy birthday!

Thank you for being part of the family. Have a wonderful day.

Best regards,
{self.club_name}"""

        return await self._send_email(
            member.email, {"subject": subject, "body": body}, tag="birthday-greeting"
        )

    async def send_board_notification(self, member: Member) -> bool:
        """
        Let the board know it is a member's birthday today.

        Returns:
            bool: True if email was sent successfully, False otherwise
        """
        if not self.board_email:
            logger.warning("BOARD_EMAIL is not configured, skipping board notification")
            return False

        details = [
            f"Name: {member.name}",
            f"Registration number: {member.reg_number}",
            f"Email: {member.email}",
            f"Phone: {member.phone_number}",
            f"Birthdate: {member.birthdate.strftime('%B %d, %Y')}",
        ]
        member_details = "\n".join(details)
        subject = f"Birthday today: {member.name}"
        body = f"""It's {member.name}'s birthday today!

{member_details}

Something quirky about them:
{member.quirky_detail}

Don't forget to wish them!"""

        return await self._send_email(
            self.board_email,
            {"subject": subject, "body": body},
            tag="birthday-board-notification",
        )

    async def _send_email(
        self, to_email: str, email_content: Dict[str, str], tag: str
    ) -> bool:
        """Send email using the email client"""
        try:
            await self.email_client.send_email(
                to=to_email,
                text=email_content["body"],
                subject=email_content["subject"],
                tag=tag,
            )
            logger.info(f"Email sent successfully to {to_email}")
            return True
        except Exception as e:
            logger.error(f"Failed to send email to {to_email}: {e}")
            return False


def get_email_service() -> EmailService:
    """FastAPI dependency providing the Mailgun-backed email service"""
    return EmailService(EmailClient(config), config)
