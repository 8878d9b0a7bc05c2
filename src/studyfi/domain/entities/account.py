"""Account profile entity.

Carries the fields a caller submits when registering or updating an account.
The password is plaintext here; it is validated and hashed by the identity
service and never stored in this form.
"""

from dataclasses import dataclass, field


@dataclass
class AccountProfile:
    """User-supplied account fields.

    Attributes:
        name: Display name.
        email: Email address used for password reset lookups.
        password: Plaintext password (validated, then hashed).
        phone_contact: Optional phone number.
        birth_date: Optional birth date, stored as supplied.
        country: Optional country.
        about_me: Optional free-text bio.
        current_address: Optional postal address.
    """

    name: str
    email: str
    password: str = field(repr=False)
    phone_contact: str | None = None
    birth_date: str | None = None
    country: str | None = None
    about_me: str | None = None
    current_address: str | None = None

    def __post_init__(self) -> None:
        """Validate profile data after initialization."""
        if not self.name:
            raise ValueError("Name is required")
        if not self.email:
            raise ValueError("Email is required")
