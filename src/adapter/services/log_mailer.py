import logging

from src.app.services.mailer import IMailer

logger = logging.getLogger(__name__)


class LogMailer(IMailer):
    """Development mailer: writes the message to the log instead of sending it"""

    async def send_email(self, to: str, subject: str, html: str) -> None:
        logger.info(f"Email to {to} ({subject}): {html}")
