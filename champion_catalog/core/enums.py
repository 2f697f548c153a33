"""Core enums for the champion catalog."""

from enum import Enum
from typing import List, Optional

from .errors import InvalidInputError


class Role(Enum):
    """Lane/position a champion can be played in."""

    SOLO = "SOLO"
    JUNGLE = "JUNGLE"
    MID = "MID"
    ADC = "ADC"
    SUPPORT = "SUPPORT"

    @classmethod
    def from_string(cls, value: str) -> Optional["Role"]:
        """Convert a string value to a Role.

        Returns None for unknown values. Matching is exact, so "mid" is
        not a valid role.
        """
        for role in cls:
            if role.value == value:
                return role
        return None


def parse_roles(csv: Optional[str]) -> List[Role]:
    """Parse a comma separated role list such as ``"MID, SUPPORT"``.

    Tokens are trimmed and order is preserved; duplicates are kept.

    Raises:
        InvalidInputError: If the list is empty or any token is not a Role.
    """
    if csv is None or not csv.strip():
        raise InvalidInputError("Invalid role(s) provided")

    tokens = [token.strip() for token in csv.split(",")]
    roles = [Role.from_string(token) for token in tokens]

    invalid = sorted({token for token, role in zip(tokens, roles) if role is None})
    if invalid:
        raise InvalidInputError("Invalid role(s) provided", details={"invalid_roles": invalid})

    return roles
