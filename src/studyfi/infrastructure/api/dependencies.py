"""FastAPI dependencies that assemble the domain services per request."""

from datetime import timedelta
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyfi.core.config import Settings, get_settings
from studyfi.domain.services import (
    GroupService,
    IdentityService,
    MembershipService,
    PasswordResetService,
)
from studyfi.infrastructure.persistence.database import get_db_session
from studyfi.infrastructure.persistence.repositories import AccountRepository
from studyfi.infrastructure.services.email_service import EmailService, build_email_service

DBSession = Annotated[AsyncSession, Depends(get_db_session)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_email_service(settings: AppSettings) -> EmailService:
    """Get the email service for the configured provider."""
    return build_email_service(settings)


def get_identity_service(session: DBSession) -> IdentityService:
    """Get the identity service."""
    return IdentityService(session)


def get_group_service(session: DBSession) -> GroupService:
    """Get the group service."""
    return GroupService(session)


def get_membership_service(session: DBSession) -> MembershipService:
    """Get the membership service."""
    return MembershipService(session)


def get_password_reset_service(
    session: DBSession,
    settings: AppSettings,
    email_service: Annotated[EmailService, Depends(get_email_service)],
) -> PasswordResetService:
    """Get the password reset service wired with the reset link settings."""
    return PasswordResetService(
        session=session,
        account_repo=AccountRepository(session),
        email_service=email_service,
        reset_password_url=settings.reset_password_url,
        token_ttl=timedelta(minutes=settings.reset_token_expire_minutes),
    )


IdentitySvc = Annotated[IdentityService, Depends(get_identity_service)]
GroupSvc = Annotated[GroupService, Depends(get_group_service)]
MembershipSvc = Annotated[MembershipService, Depends(get_membership_service)]
PasswordResetSvc = Annotated[PasswordResetService, Depends(get_password_reset_service)]
