"""User-related Pydantic schemas."""

from pydantic import EmailStr, Field, field_validator

from stackit.models.user import Role

from .common import CamelModel


class RegisterRequest(CamelModel):
    """Schema for account registration."""

    username: str = Field(..., max_length=64, description="Unique username (3+ characters)")
    email: EmailStr = Field(..., description="Unique email address")
    password: str = Field(..., min_length=6, max_length=128, description="Plain password (6+ characters)")

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Trim the username and require at least three characters."""
        v = v.strip()
        if len(v) < 3:
            raise ValueError("Username must be at least 3 characters long")
        return v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Store addresses in lower case so uniqueness ignores case."""
        return v.lower()


class LoginRequest(CamelModel):
    """Schema for login submissions."""

    username: str
    password: str


class UserSummary(CamelModel):
    """Public view of an account."""

    id: int
    username: str
    email: str
    role: Role


class LoginResponse(CamelModel):
    """Response returned after successful login."""

    token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Token type")
    user: UserSummary


class RoleUpdate(CamelModel):
    """Payload for changing a user's role."""

    role: str = Field(..., description="One of guest, user, admin")
