"""Console email provider for development.

Writes the message to the log instead of delivering it.
"""

from studyfi.core.logging import get_logger
from studyfi.infrastructure.services.email.email_provider import EmailProvider

logger = get_logger(__name__)


class ConsoleProvider(EmailProvider):
    """Logs emails instead of sending them."""

    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
    ) -> bool:
        logger.info(
            f"[EMAIL] To: {to}\n"
            f"From: {from_name} <{from_email}>\n"
            f"Subject: {subject}\n"
            f"Body:\n{text_body}\n"
            f"{'=' * 80}"
        )
        return True
