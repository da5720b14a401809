class PostalCodeLookupError(Exception):
    """Base exception for postal-code lookup failures."""


class PostalCodeNotFoundError(PostalCodeLookupError):
    """Raised when the service has no address for the postal code."""


class PostalCodeLookupNetworkError(PostalCodeLookupError):
    """Raised when the lookup service cannot be reached or answers with an error."""
