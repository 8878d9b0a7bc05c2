"""Email service for outbound mail.

Wraps an email provider with the configured sender address. Sending is best
effort: provider errors are logged and reported as ``False``, never raised.
"""

from studyfi.core.config import Settings
from studyfi.core.logging import get_logger
from studyfi.infrastructure.services.email.console_provider import ConsoleProvider
from studyfi.infrastructure.services.email.email_provider import EmailProvider
from studyfi.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings
from studyfi.infrastructure.services.email.template_renderer import TemplateRenderer

logger = get_logger(__name__)

PASSWORD_RESET_SUBJECT = "Password Reset Request"

PASSWORD_RESET_TEXT = """\
Hello {{ name }},

Click the following link to reset your password: {{ reset_link }}

This link expires in {{ expires_in_minutes }} minutes. If you did not request
a password reset, you can ignore this email.
"""

PASSWORD_RESET_HTML = """\
<p>Hello {{ name }},</p>
<p>Click the following link to reset your password:
<a href="{{ reset_link }}">{{ reset_link }}</a></p>
<p>This link expires in {{ expires_in_minutes }} minutes. If you did not request
a password reset, you can ignore this email.</p>
"""


class EmailService:
    """Service for sending emails."""

    def __init__(
        self,
        provider: EmailProvider,
        from_email: str,
        from_name: str,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        """Initialize the email service.

        Args:
            provider: Transport used to deliver messages.
            from_email: Sender address.
            from_name: Sender display name.
            renderer: Template renderer for message bodies.
        """
        self.provider = provider
        self.from_email = from_email
        self.from_name = from_name
        self.renderer = renderer or TemplateRenderer()

    async def send_email(self, to: str, subject: str, text_body: str, html_body: str) -> bool:
        """Send an email, swallowing delivery errors.

        Returns:
            True if the provider accepted the message, False otherwise.
        """
        try:
            sent = await self.provider.send_email(
                to=to,
                subject=subject,
                html_body=html_body,
                text_body=text_body,
                from_email=self.from_email,
                from_name=self.from_name,
            )
        except Exception as e:
            logger.error(
                "Error sending email",
                to=to,
                subject=subject,
                provider=type(self.provider).__name__,
                error=str(e),
            )
            return False

        if sent:
            logger.info("Email sent", to=to, subject=subject)
        else:
            logger.warning("Email provider did not accept message", to=to, subject=subject)
        return sent

    async def send_password_reset_email(
        self, to: str, name: str, reset_link: str, expires_in_minutes: int
    ) -> bool:
        """Render and send the password reset email.

        Args:
            to: Recipient address.
            name: Recipient display name.
            reset_link: Link carrying the raw reset token.
            expires_in_minutes: Token lifetime shown to the user.

        Returns:
            True if the email was sent, False otherwise.
        """
        variables = {
            "name": name,
            "reset_link": reset_link,
            "expires_in_minutes": str(expires_in_minutes),
        }
        return await self.send_email(
            to=to,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=self.renderer.render(PASSWORD_RESET_TEXT, variables),
            html_body=self.renderer.render(PASSWORD_RESET_HTML, variables, html=True),
        )


def build_email_service(settings: Settings) -> EmailService:
    """Create the email service for the configured provider.

    Args:
        settings: Application settings.

    Returns:
        EmailService backed by the console or SMTP provider.
    """
    provider: EmailProvider
    if settings.email_provider == "smtp":
        provider = SMTPProvider(
            SMTPSettings(
                host=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_username,
                password=settings.smtp_password,
                use_tls=settings.smtp_use_tls,
                use_ssl=settings.smtp_use_ssl,
                timeout=settings.smtp_timeout,
            )
        )
    else:
        provider = ConsoleProvider()

    return EmailService(
        provider=provider,
        from_email=settings.email_from,
        from_name=settings.email_from_name,
    )
