"""Optimistic toggle states and outcomes.

Per-key state machine:

    IdleState --toggle--> PendingState --success--> IdleState(server values)
                                       --failure--> IdleState(snapshot)
"""

from campus.domain.model.common import DomainModel
from campus.domain.value import RejectionReason
from campus.domain.value.common import ValueObject


class ToggleResult(ValueObject):
    """Authoritative state returned by the backend after a toggle."""

    active: bool
    count: int


class ToggleState(DomainModel):
    """State of one toggleable entity as the UI should render it."""

    active: bool
    count: int

    @property
    def pending(self) -> bool:
        return False


class IdleState(ToggleState):
    """No request in flight; values are the last known truth."""


class PendingState(ToggleState):
    """A toggle request is in flight.

    `active`/`count` hold the optimistic values; the `previous_*` fields
    hold the snapshot restored if the request fails.
    """

    previous_active: bool
    previous_count: int

    @property
    def pending(self) -> bool:
        return True

    def settle(self, result: ToggleResult) -> IdleState:
        """Adopt the server's values."""
        return IdleState(active=result.active, count=result.count)

    def rollback(self) -> IdleState:
        """Restore the pre-toggle snapshot."""
        return IdleState(active=self.previous_active, count=self.previous_count)


class ToggleOutcome(DomainModel):
    """Result of a `ToggleCoordinator.toggle` call."""


class Applied(ToggleOutcome):
    """The server accepted the toggle; values are authoritative."""

    active: bool
    count: int


class Rejected(ToggleOutcome):
    """The toggle was refused before any state change."""

    reason: RejectionReason


class Failed(ToggleOutcome):
    """The remote call failed; local state has already been rolled back."""

    error: Exception
