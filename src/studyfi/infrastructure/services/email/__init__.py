"""Email providers and template rendering."""

from studyfi.infrastructure.services.email.console_provider import ConsoleProvider
from studyfi.infrastructure.services.email.email_provider import EmailProvider
from studyfi.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings
from studyfi.infrastructure.services.email.template_renderer import TemplateRenderer

__all__ = [
    "ConsoleProvider",
    "EmailProvider",
    "SMTPProvider",
    "SMTPSettings",
    "TemplateRenderer",
]
