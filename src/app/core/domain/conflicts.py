"""Attribution of uniqueness conflicts to the field that caused them."""
from src.app.core.domain.models import Client
from src.shared.exceptions import ConflictingEntityFound

CUIT_FIELD = "CUIT"
EMAIL_FIELD = "email"


def conflict_error(existing: Client, cuit: str, email: str) -> ConflictingEntityFound:
    """
    Build the conflict raised when ``existing`` collides with a candidate record.

    When the existing record shares both the CUIT and the email, the CUIT is reported.
    """
    if existing.cuit == cuit:
        return ConflictingEntityFound("Client", CUIT_FIELD, cuit)
    return ConflictingEntityFound("Client", EMAIL_FIELD, email)
