"""Abstract base class for email providers."""

from abc import ABC, abstractmethod


class EmailProvider(ABC):
    """Interface every email transport implements."""

    @abstractmethod
    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
    ) -> bool:
        """Send an email.

        Args:
            to: Recipient email address.
            subject: Email subject line.
            html_body: HTML email body.
            text_body: Plain text email body.
            from_email: Sender email address.
            from_name: Sender display name.

        Returns:
            True if the email was handed to the transport.

        Raises:
            Exception: If sending fails.
        """
        pass
