import pytest

from app.validation.models import FormValues


@pytest.fixture()
def valid_values() -> FormValues:
    """A fully well-formed registration."""
    return FormValues(
        name="João da Silva",
        document_number="111.444.777-35",
        birth_date="1990-05-17",
        email="joao.silva@example.com.br",
        postal_code="01310-930",
        street="Avenida Paulista",
        district="Bela Vista",
        city="São Paulo",
        state="SP",
    )
