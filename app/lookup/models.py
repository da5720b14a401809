from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Address fields returned by a postal-code lookup."""

    street: str = ""
    district: str = ""
    city: str = ""
    state: str = ""
