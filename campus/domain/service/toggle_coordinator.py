"""Optimistic toggle coordination.

Likes, memberships and similar on/off associations share one pattern:
flip the local state immediately, send the authoritative request, then
adopt the server's answer or restore the snapshot. `ToggleCoordinator`
owns the per-key state for one consumer (a page, a bot session, a
service) and allows at most one request in flight per key.

Usage:
    coordinator = ToggleCoordinator(client)
    coordinator.seed(post_id, active=False, count=3)

    pending = coordinator.toggle(post_id)  # already flipped here
    outcome = await pending
    if isinstance(outcome, Failed):
        ...  # state is already rolled back; outcome.error is the cause
"""

import asyncio
import functools
from abc import ABC, abstractmethod
from typing import Callable, Hashable

import logfire

from campus.domain.model.toggle import (
    Applied,
    Failed,
    IdleState,
    PendingState,
    Rejected,
    ToggleOutcome,
    ToggleResult,
    ToggleState,
)
from campus.domain.value import RejectionReason, UserId

from .base import Service

ToggleObserver = Callable[[Hashable, ToggleState], None]


class RemoteToggleClient(ABC):
    """Backend collaborator that performs the authoritative toggle."""

    @abstractmethod
    def current_actor(self) -> UserId | None:
        """Return the signed-in user's ID, or None when signed out."""
        pass

    @abstractmethod
    async def send_toggle(self, key: Hashable, actor: UserId) -> ToggleResult:
        """Toggle `key` for `actor` in persistent storage.

        One call reflects exactly one toggle.

        Args:
            key: Entity key (post ID, comment ID, community ID, ...)
            actor: User performing the toggle

        Returns:
            The new authoritative state

        Raises:
            Exception: Any transport or validation failure
        """
        pass


class ToggleCoordinator(Service):
    """Per-key optimistic toggle state machine.

    Unknown keys read as inactive with a zero count until seeded.
    """

    def __init__(
        self, client: RemoteToggleClient, timeout: float | None = None
    ) -> None:
        """Initialize toggle coordinator.

        Args:
            client: Remote toggle collaborator
            timeout: Seconds to wait for the remote toggle before rolling
                back. None waits indefinitely.
        """
        self.client = client
        self.timeout = timeout
        self._states: dict[Hashable, ToggleState] = {}
        self._observers: list[ToggleObserver] = []
        self._in_flight: dict[Hashable, asyncio.Task] = {}

    def current_state(self, key: Hashable) -> ToggleState:
        """Return the state the UI should render for `key`."""
        return self._states.get(key, IdleState(active=False, count=0))

    def is_pending(self, key: Hashable) -> bool:
        return self.current_state(key).pending

    def seed(self, key: Hashable, active: bool, count: int) -> ToggleState:
        """Install server-fetched state for `key`.

        Ignored while a toggle for `key` is in flight, since the pending
        request will settle the state.

        Returns:
            The state now held for `key`
        """
        current = self.current_state(key)
        if current.pending:
            return current
        state = IdleState(active=active, count=count)
        self._transition(key, state)
        return state

    def subscribe(self, observer: ToggleObserver) -> Callable[[], None]:
        """Register a callback invoked with (key, state) on every change.

        Returns:
            A callable that removes the observer
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def toggle(self, key: Hashable) -> "asyncio.Future[ToggleOutcome]":
        """Flip `key` optimistically and reconcile with the backend.

        The pending check and the optimistic flip happen before this
        returns, so `current_state` shows the flipped values right away and
        no other toggle can interleave. The returned future resolves once
        the backend answers. Must be called with a running event loop.

        Args:
            key: Entity key

        Returns:
            Future resolving to Applied with the server's values, Rejected
            when signed out or already pending, or Failed carrying the
            remote error after the state was rolled back
        """
        loop = asyncio.get_running_loop()

        actor = self.client.current_actor()
        if actor is None:
            logfire.debug("Toggle rejected, no actor", key=str(key))
            return _resolved(loop, Rejected(reason=RejectionReason.NOT_AUTHENTICATED))

        current = self.current_state(key)
        if current.pending:
            logfire.debug("Toggle rejected, already pending", key=str(key))
            return _resolved(loop, Rejected(reason=RejectionReason.ALREADY_PENDING))

        optimistic_active = not current.active
        optimistic_count = (
            current.count + 1 if optimistic_active else max(0, current.count - 1)
        )
        pending = PendingState(
            active=optimistic_active,
            count=optimistic_count,
            previous_active=current.active,
            previous_count=current.count,
        )
        self._transition(key, pending)

        task = loop.create_task(self._reconcile(key, actor, pending))
        self._in_flight[key] = task
        task.add_done_callback(functools.partial(self._on_done, key, pending))
        return task

    async def _reconcile(
        self, key: Hashable, actor: UserId, pending: PendingState
    ) -> ToggleOutcome:
        try:
            result = await self._send(key, actor)
        except asyncio.CancelledError:
            self._transition(key, pending.rollback())
            raise
        except Exception as e:
            logfire.warn(
                "Toggle failed, rolled back",
                key=str(key),
                error=str(e),
                error_type=type(e).__name__,
            )
            self._transition(key, pending.rollback())
            return Failed(error=e)

        self._transition(key, pending.settle(result))
        logfire.info(
            "Toggle applied",
            key=str(key),
            active=result.active,
            count=result.count,
            optimistic_count=pending.count,
        )
        return Applied(active=result.active, count=result.count)

    def _on_done(
        self,
        key: Hashable,
        pending: PendingState,
        task: "asyncio.Task[ToggleOutcome]",
    ) -> None:
        if self._in_flight.get(key) is task:
            del self._in_flight[key]
        # Cancelled before the request started, so _reconcile never ran
        if task.cancelled() and self._states.get(key) is pending:
            self._transition(key, pending.rollback())

    async def _send(self, key: Hashable, actor: UserId) -> ToggleResult:
        request = self.client.send_toggle(key, actor)
        if self.timeout is None:
            return await request
        return await asyncio.wait_for(request, timeout=self.timeout)

    def _transition(self, key: Hashable, state: ToggleState) -> None:
        self._states[key] = state
        self._notify(key, state)

    def _notify(self, key: Hashable, state: ToggleState) -> None:
        # A failing observer must not leave the key stuck in pending
        for observer in list(self._observers):
            try:
                observer(key, state)
            except Exception:
                logfire.exception("Toggle observer failed", key=str(key))


def _resolved(
    loop: asyncio.AbstractEventLoop, outcome: ToggleOutcome
) -> "asyncio.Future[ToggleOutcome]":
    future: asyncio.Future[ToggleOutcome] = loop.create_future()
    future.set_result(outcome)
    return future
