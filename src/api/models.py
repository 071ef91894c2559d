"""
API request and response models.

Pydantic models for decoding request bodies and encoding responses, plus
the syntactic checks the transport runs before calling the domain.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from src.domain.exceptions import ValidationError
from src.domain.user import RegisterParams, User


class RegisterRequest(BaseModel):
    """
    Request body for user registration.

    Missing keys, null values and a null body decode as empty strings and
    are reported by validate_params(), so the client sees which field is
    wrong rather than a decode error.
    """

    email: str = Field(default="", description="Email address, must contain '@'")
    name: str = Field(default="", description="Display name")

    @model_validator(mode="before")
    @classmethod
    def _null_body_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("email", "name", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def validate_params(self) -> RegisterParams:
        """
        Check the fields in order and return the domain input.

        Raises:
            ValidationError: On the first violated rule
        """
        if not self.email:
            raise ValidationError("Email cannot be empty")
        if "@" not in self.email:
            raise ValidationError("Email must include an '@' symbol")
        if not self.name:
            raise ValidationError("Name cannot be empty")
        return RegisterParams(email=self.email, name=self.name)


class UserResponse(BaseModel):
    """Response model for a user lookup."""

    email: str
    name: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(email=user.email, name=user.name)


def validate_email(email: str) -> str:
    """
    Check an email taken from the query string.

    Raises:
        ValidationError: If the email is empty or has no '@'
    """
    if not email:
        raise ValidationError("Email must not be empty")
    if "@" not in email:
        raise ValidationError("Email must include an '@' symbol")
    return email
