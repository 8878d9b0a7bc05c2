"""SMTP email provider implementation.

Uses aiosmtplib for asynchronous email sending via SMTP.
"""

from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib
from pydantic import BaseModel, ConfigDict

from studyfi.core.logging import get_logger
from studyfi.infrastructure.services.email.email_provider import EmailProvider

logger = get_logger(__name__)


class SMTPSettings(BaseModel):
    """Connection settings for the SMTP provider."""

    model_config = ConfigDict(from_attributes=True)

    host: str
    port: int = 587
    username: str = ""
    password: str = ""
    use_tls: bool = True
    use_ssl: bool = False
    timeout: int = 10


class SMTPProvider(EmailProvider):
    """Sends emails over SMTP, with STARTTLS or implicit TLS."""

    def __init__(self, settings: SMTPSettings) -> None:
        """Initialize the SMTP provider.

        Args:
            settings: SMTP configuration settings.
        """
        self.settings = settings

    def _build_message(
        self, to: str, subject: str, html_body: str, text_body: str, from_email: str, from_name: str
    ) -> MIMEMultipart:
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = f"{from_name} <{from_email}>"
        message["To"] = to
        message.attach(MIMEText(text_body, "plain"))
        message.attach(MIMEText(html_body, "html"))
        return message

    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
    ) -> bool:
        """Send an email via SMTP.

        Raises:
            aiosmtplib.SMTPException: If connection, login or sending fails.
        """
        message = self._build_message(to, subject, html_body, text_body, from_email, from_name)

        try:
            # aiosmtplib's use_tls means implicit TLS on connect
            async with aiosmtplib.SMTP(
                hostname=self.settings.host,
                port=self.settings.port,
                use_tls=self.settings.use_ssl,
                start_tls=False,
                timeout=self.settings.timeout,
            ) as smtp:
                if self.settings.use_tls and not self.settings.use_ssl:
                    await smtp.starttls()
                if self.settings.username:
                    await smtp.login(self.settings.username, self.settings.password)
                await smtp.send_message(message)
            return True
        except Exception as e:
            logger.error("Failed to send email via SMTP", host=self.settings.host, error=str(e))
            raise
