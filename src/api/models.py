"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Request validation mirrors the registration form's rules so the API rejects
what the form would have rejected.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.config.settings import get_settings
from src.domain.models import ParticipantInput, Year

USN_PATTERN = re.compile(r"^[0-9][A-Z]{2}[0-9]{2}[A-Z]{2}[0-9]{3}$")
_EMAIL_LOCAL_PART = r"[a-zA-Z0-9._%+-]+"


class RegisterRequest(BaseModel):
    """Request model for workshop registration."""

    name: str = Field(..., description="Full name (min 2 characters)")
    usn: str = Field(..., description="University Seat Number, e.g. 4MW21CS043")
    email: str = Field(..., description="Institutional email address")
    year: Year = Field(..., description="Year of study (1-4)")
    phone: str = Field(
        ...,
        pattern=r"^[0-9]{10}$",
        description="10-digit phone number",
    )

    @field_validator("name")
    @classmethod
    def name_min_length(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Name must be at least 2 characters.")
        return value

    @field_validator("usn")
    @classmethod
    def usn_format(cls, value: str) -> str:
        value = value.strip().upper()
        if not USN_PATTERN.match(value):
            raise ValueError("USN must be in the format 4XX2YXX043.")
        return value

    @field_validator("email")
    @classmethod
    def institutional_email(cls, value: str) -> str:
        domain = get_settings().institutional_email_domain
        value = value.strip()
        if not re.fullmatch(rf"{_EMAIL_LOCAL_PART}@{re.escape(domain)}", value, re.IGNORECASE):
            raise ValueError(f"Email must end with @{domain}.")
        return value

    def to_input(self) -> ParticipantInput:
        return ParticipantInput(
            name=self.name,
            usn=self.usn,
            email=self.email,
            year=self.year.value,
            phone=self.phone,
        )


class RegisterResponse(BaseModel):
    """Response model for successful registration."""

    message: str


class RemainingSeatsResponse(BaseModel):
    """Response model for the remaining-seats query."""

    model_config = ConfigDict(populate_by_name=True)

    remaining_seats: int = Field(..., alias="remainingSeats", ge=0)


class ParticipantResponse(BaseModel):
    """One roster entry with its derived department."""

    id: str
    name: str
    email: str
    usn: str
    year: str
    phone: str
    department: str


class ParticipantsResponse(BaseModel):
    """Response model for the admin roster listing."""

    participants: list[ParticipantResponse]


class RosterSummaryResponse(BaseModel):
    """Response model for the admin roster summary."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    capacity: int
    remaining_seats: int = Field(..., alias="remainingSeats")
    departments: dict[str, int]


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str
