"""Pydantic schemas for account and password reset operations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, SecretStr

from studyfi.domain.entities.account import AccountProfile


class AccountRequest(BaseModel):
    """Request schema for registering an account or replacing its profile.

    The password is always required: profile updates re-validate and re-hash
    it even when it has not changed.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: SecretStr = Field(..., description="Plaintext password")
    phone_contact: str | None = Field(None, max_length=50)
    birth_date: str | None = Field(None, max_length=50)
    country: str | None = Field(None, max_length=100)
    about_me: str | None = Field(None, description="Free-text bio")
    current_address: str | None = Field(None, max_length=500)

    def to_profile(self) -> AccountProfile:
        """Convert to the domain profile entity."""
        return AccountProfile(
            name=self.name,
            email=str(self.email),
            password=self.password.get_secret_value(),
            phone_contact=self.phone_contact,
            birth_date=self.birth_date,
            country=self.country,
            about_me=self.about_me,
            current_address=self.current_address,
        )


class GroupSummary(BaseModel):
    """A group as listed on an account."""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class AccountResponse(BaseModel):
    """Response schema for an account.

    Never includes the password hash or reset token fields.
    """

    id: str
    name: str
    email: str
    phone_contact: str | None = None
    birth_date: str | None = None
    country: str | None = None
    about_me: str | None = None
    current_address: str | None = None
    groups: list[GroupSummary] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ForgotPasswordRequest(BaseModel):
    """Request schema for requesting a password reset link."""

    email: EmailStr = Field(..., description="Email address of the account")


class ResetPasswordRequest(BaseModel):
    """Request schema for resetting a password with a token."""

    token: str = Field(..., min_length=1, description="Token from the reset link")
    new_password: SecretStr = Field(..., description="New plaintext password")


class VerifyResetTokenResponse(BaseModel):
    """Response schema for a reset token check."""

    valid: bool
    expires_at: datetime | None = None


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class MembershipResponse(MessageResponse):
    """Response schema for adding a membership."""

    created: bool
