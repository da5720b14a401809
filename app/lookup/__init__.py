from app.lookup.base import BasePostalCodeLookup
from app.lookup.factory import PostalCodeLookupFactory
from app.lookup.models import Address

__all__ = ["Address", "BasePostalCodeLookup", "PostalCodeLookupFactory"]
