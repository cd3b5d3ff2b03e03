"""Client entity evaluated by the credit engine."""

from dataclasses import dataclass
from enum import Enum


class ClientTier(str, Enum):
    """Client classification driving score multiplier and limit formula."""

    STANDARD = "standard"
    PREMIUM = "premium"
    VIP = "vip"


@dataclass(frozen=True)
class Client:
    """
    Immutable representation of a credit applicant.

    Attributes:
        id: Unique client identifier
        name: Display name
        blocked: True if the client is administratively blocked
        tier: Client tier
    """

    id: str
    name: str
    blocked: bool = False
    tier: ClientTier = ClientTier.STANDARD
