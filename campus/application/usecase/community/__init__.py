"""Community use cases."""

from .toggle_membership import (
    ToggleMembershipRequest,
    ToggleMembershipResponse,
    ToggleMembershipUseCase,
)

__all__ = [
    "ToggleMembershipRequest",
    "ToggleMembershipResponse",
    "ToggleMembershipUseCase",
]
