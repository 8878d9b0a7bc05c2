"""User account API routes.

Registration, profile management, password reset and group membership.
Domain errors raised by the services are turned into HTTP responses by the
exception handlers registered in app.py.
"""

from fastapi import APIRouter, status

from studyfi.core.logging import get_logger
from studyfi.infrastructure.api.dependencies import (
    IdentitySvc,
    MembershipSvc,
    PasswordResetSvc,
)
from studyfi.infrastructure.api.schemas import (
    AccountRequest,
    AccountResponse,
    ForgotPasswordRequest,
    MembershipResponse,
    MessageResponse,
    ResetPasswordRequest,
    VerifyResetTokenResponse,
)
from studyfi.infrastructure.persistence.models import AccountModel

router = APIRouter()
logger = get_logger(__name__)


@router.post(
    "/register",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new account",
    responses={400: {"description": "Password fails the credential policy"}},
)
async def register(request: AccountRequest, identity_service: IdentitySvc) -> AccountModel:
    """Register a new account. The response never includes the password."""
    return await identity_service.register(request.to_profile())


@router.get(
    "",
    response_model=list[AccountResponse],
    summary="List accounts",
)
async def list_accounts(identity_service: IdentitySvc) -> list[AccountModel]:
    return await identity_service.list_accounts()


@router.post(
    "/forgot-password",
    response_model=MessageResponse,
    summary="Send a password reset link",
    responses={404: {"description": "No account with this email"}},
)
async def forgot_password(
    request: ForgotPasswordRequest, reset_service: PasswordResetSvc
) -> MessageResponse:
    """Issue a reset token and email the reset link.

    Succeeds once the token is stored, whether or not the email could be
    delivered.
    """
    await reset_service.request_reset(str(request.email))
    return MessageResponse(message=f"Password reset link sent to {request.email}")


@router.get(
    "/verify-reset-token/{token}",
    response_model=VerifyResetTokenResponse,
    summary="Check a password reset token",
)
async def verify_reset_token(token: str, reset_service: PasswordResetSvc) -> VerifyResetTokenResponse:
    is_valid, expires_at = await reset_service.verify_reset_token(token)
    return VerifyResetTokenResponse(valid=is_valid, expires_at=expires_at)


@router.post(
    "/reset-password",
    response_model=MessageResponse,
    summary="Reset a password with a token",
    responses={400: {"description": "Invalid or expired token, or password fails the policy"}},
)
async def reset_password(
    request: ResetPasswordRequest, reset_service: PasswordResetSvc
) -> MessageResponse:
    await reset_service.reset_password(request.token, request.new_password.get_secret_value())
    return MessageResponse(message="Password has been successfully reset.")


@router.get(
    "/{user_id}",
    response_model=AccountResponse,
    summary="Get an account",
    responses={404: {"description": "Account not found"}},
)
async def get_account(user_id: str, identity_service: IdentitySvc) -> AccountModel:
    return await identity_service.get_account(user_id)


@router.put(
    "/{user_id}/profile",
    response_model=AccountResponse,
    summary="Replace an account's profile",
    responses={
        400: {"description": "Password fails the credential policy"},
        404: {"description": "Account not found"},
    },
)
async def update_profile(
    user_id: str, request: AccountRequest, identity_service: IdentitySvc
) -> AccountModel:
    """Overwrite every profile field.

    The password must always be supplied; it is re-validated and re-hashed
    on every update.
    """
    return await identity_service.update_profile(user_id, request.to_profile())


@router.post(
    "/{user_id}/groups/{group_id}",
    response_model=MembershipResponse,
    summary="Add an account to a group",
    responses={404: {"description": "Account or group not found"}},
)
async def add_to_group(
    user_id: str, group_id: str, membership_service: MembershipSvc
) -> MembershipResponse:
    created = await membership_service.add_membership(user_id, group_id)
    message = "Account added to group" if created else "Account already in group"
    return MembershipResponse(message=message, created=created)


@router.delete(
    "/{user_id}/groups/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove an account from a group",
    responses={404: {"description": "Account or group not found"}},
)
async def remove_from_group(
    user_id: str, group_id: str, membership_service: MembershipSvc
) -> None:
    await membership_service.remove_membership(user_id, group_id)
