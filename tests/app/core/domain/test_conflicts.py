from datetime import date

from src.app.core.domain.conflicts import conflict_error
from src.app.core.domain.models import Client


EXISTING = Client(
    id=1,
    first_name="Juan",
    last_name="Pérez",
    corporate_name="Pérez SRL",
    cuit="20-11111111-1",
    birthdate=date(1985, 3, 14),
    cell_phone="1123456789",
    email="j@t.com",
)


def test_cuit_collision_is_reported_as_cuit():
    error = conflict_error(EXISTING, "20-11111111-1", "new@t.com")

    assert error.field_name == "CUIT"
    assert str(error) == "Client with CUIT '20-11111111-1' already exists"


def test_email_collision_is_reported_as_email():
    error = conflict_error(EXISTING, "20-99999999-9", "j@t.com")

    assert error.field_name == "email"
    assert str(error) == "Client with email 'j@t.com' already exists"


def test_cuit_wins_when_both_fields_collide():
    error = conflict_error(EXISTING, "20-11111111-1", "j@t.com")

    assert error.field_name == "CUIT"


def test_search_name_is_folded():
    assert EXISTING.search_name == "juan perez perez srl"
