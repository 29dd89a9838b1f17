from enum import Enum


class AuthType(str, Enum):
    """How a principal authenticates."""

    INTERNAL = "internal"  # username + password held by this system
    EXTERNAL = "external"  # federated login, no local password
