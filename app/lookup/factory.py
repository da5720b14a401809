from app.config.settings import Settings
from app.lookup.base import BasePostalCodeLookup
from app.lookup.example_client_adapter import ExampleLookupAdapter
from app.lookup.viacep_client_adapter import ViaCepClientAdapter

_SUPPORTED_PROVIDERS = ("example", "viacep")


class PostalCodeLookupFactory:
    """Creates the configured postal-code lookup adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BasePostalCodeLookup:
        provider = settings.postal_lookup_provider.lower()
        if provider == "example":
            return ExampleLookupAdapter()
        if provider == "viacep":
            return ViaCepClientAdapter(
                base_url=settings.viacep_base_url,
                timeout_seconds=settings.viacep_timeout_seconds,
            )
        raise ValueError(
            f"Unknown postal lookup provider '{provider}'. "
            f"Choose from: {list(_SUPPORTED_PROVIDERS)}"
        )
