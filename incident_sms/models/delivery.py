"""Data models for credentials, tokens and delivery requests."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from incident_sms.utils.validators import format_event_date


class Credentials(BaseModel):
    """Username/password pair used to obtain tokens."""

    model_config = ConfigDict(validate_assignment=True)

    username: str
    password: str

    def apply_overrides(self, username: Optional[str] = None, password: Optional[str] = None) -> None:
        """Replace stored values with any non-empty overrides."""
        if username:
            self.username = username
        if password:
            self.password = password


class TokenState(BaseModel):
    """Tokens issued by the most recent successful authenticate/refresh call."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    client_id: Optional[str] = None


class DeliveryRequest(BaseModel):
    """A single SMS delivery request."""

    phone_number: str = Field(..., min_length=1)
    incident_id: str
    activity_code: str
    event_date: float = Field(..., description="UNIX time the incident was logged")

    @field_validator("incident_id", "activity_code", mode="before")
    @classmethod
    def coerce_to_string(cls, v: object) -> object:
        """Accept numeric identifiers and send them as strings."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def to_form_data(self) -> dict[str, str]:
        """Return the form-encoded payload expected by the delivery endpoint."""
        return {
            "phone_number": self.phone_number,
            "incident_id": self.incident_id,
            "activity_code": self.activity_code,
            "event_date": format_event_date(self.event_date),
        }


class ClientConfig(BaseModel):
    """Immutable client configuration."""

    model_config = ConfigDict(frozen=True)

    base_uri: str = Field(..., min_length=1)
    retry_attempts: int = Field(default=3, ge=0)
    timeout: float = Field(default=30.0, gt=0)
