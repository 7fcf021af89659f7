"""API schemas for client requests and responses."""
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from src.app.core.validation import require_text, validate_cuit, validate_email_syntax

# JSON bodies use camelCase; Python code may use either name.
_API_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ClientFields(BaseModel):
    """Mutable client fields shared by create and update requests."""
    first_name: str = Field(..., description="First name cannot be blank")
    last_name: str = Field(..., description="Last name cannot be blank")
    corporate_name: str = Field(..., description="Business or legal name")
    cuit: str = Field(..., description="Tax identifier, XX-XXXXXXXX-X", examples=["20-12345678-9"])
    birthdate: date
    cell_phone: str = Field(..., description="Format depends on the configured phone policy", examples=["1123456789"])
    email: str = Field(..., description="Email address is required")

    model_config = _API_CONFIG

    @field_validator("first_name", "last_name", "corporate_name")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure name fields are not just whitespace."""
        return require_text(v)

    @field_validator("cuit")
    @classmethod
    def validate_cuit_format(cls, v: str) -> str:
        return validate_cuit(v)

    @field_validator("cell_phone")
    @classmethod
    def validate_phone_present(cls, v: str) -> str:
        # The format check depends on the configured policy; the service applies it.
        return require_text(v)

    @field_validator("email")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        return validate_email_syntax(require_text(v))


class CreateClientRequest(ClientFields):
    """Request schema for creating a new client."""


class UpdateClientRequest(ClientFields):
    """Request schema for replacing an existing client. ``id`` must match the URL."""
    id: int


class ClientResponse(BaseModel):
    """Response schema for client data returned by the API."""
    id: int
    first_name: str
    last_name: str
    corporate_name: str
    cuit: str
    birthdate: date
    cell_phone: str
    email: str

    model_config = _API_CONFIG
