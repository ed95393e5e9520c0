"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class LoginRequest(BaseModel):
    """Login request body. Any email string is looked up as-is."""
    email: str = Field(..., min_length=1, description="User email address")
    password: str = Field(..., min_length=1, description="User password")


class RegisterRequest(BaseModel):
    """Registration request body."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")
    password_confirmation: str = Field(
        ...,
        alias="passwordConfirmation",
        description="Password confirmation"
    )

    @field_validator("password")
    @classmethod
    def password_is_hashable(cls, value: str) -> str:
        """bcrypt cannot hash NUL bytes."""
        if "\x00" in value:
            raise ValueError("Password must not contain NUL characters")
        return value

    def passwords_match(self) -> bool:
        """Check if password and confirmation match."""
        return self.password == self.password_confirmation


class RegisterResponse(BaseModel):
    """Registration response."""
    message: str = Field(
        default="Account created",
        description="Success message"
    )
