"""Domain models used in business logic."""
from datetime import date

from pydantic import BaseModel, EmailStr, Field

from src.shared.text import fold_text


class Client(BaseModel):
    """Domain model for Client used in business logic."""
    id: int | None = Field(default=None, description="Assigned by the store on creation")
    first_name: str = Field(..., min_length=1, description="First name cannot be blank")
    last_name: str = Field(..., min_length=1, description="Last name cannot be blank")
    corporate_name: str = Field(..., min_length=1, description="Business or legal name")
    cuit: str = Field(..., description="Tax identifier, XX-XXXXXXXX-X")
    birthdate: date
    cell_phone: str = Field(..., min_length=1)
    email: EmailStr = Field(..., description="Email address is required")

    model_config = {"from_attributes": True}

    @property
    def search_name(self) -> str:
        """Folded "first last corporate" text that name searches match against."""
        return fold_text(f"{self.first_name} {self.last_name} {self.corporate_name}")
