"""Unit tests for ToggleCoordinator."""

import asyncio
from typing import Hashable
from uuid import uuid4

import pytest

from campus.domain.model import (
    Applied,
    Failed,
    IdleState,
    PendingState,
    Rejected,
    ToggleResult,
)
from campus.domain.service import RemoteToggleClient, ToggleCoordinator
from campus.domain.value import RejectionReason, UserId


class GatedClient(RemoteToggleClient):
    """Client whose responses are released by the test."""

    def __init__(self, actor: UserId | None = None) -> None:
        self.actor = actor
        self.calls: list[tuple[Hashable, UserId]] = []
        self.gate: asyncio.Future = asyncio.get_running_loop().create_future()

    def current_actor(self) -> UserId | None:
        return self.actor

    async def send_toggle(self, key: Hashable, actor: UserId) -> ToggleResult:
        self.calls.append((key, actor))
        return await self.gate


@pytest.fixture
def actor() -> UserId:
    return UserId(uuid4())


async def start_toggle(coordinator: ToggleCoordinator, key: Hashable) -> asyncio.Future:
    """Start a toggle and let it run up to the remote call."""
    task = coordinator.toggle(key)
    await asyncio.sleep(0)
    return task


class TestOptimisticFlip:
    """Tests for the optimistic state while a request is in flight."""

    @pytest.mark.asyncio
    async def test_flip_visible_as_soon_as_toggle_returns(self, actor):
        """The optimistic state should be readable without awaiting anything."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=False, count=3)

        future = coordinator.toggle("post-1")

        state = coordinator.current_state("post-1")
        assert isinstance(state, PendingState)
        assert (state.active, state.count) == (True, 4)
        assert client.calls == []

        client.gate.set_result(ToggleResult(active=True, count=4))
        assert await future == Applied(active=True, count=4)

    @pytest.mark.asyncio
    async def test_rejection_resolves_without_suspending(self, actor):
        """A rejected toggle should come back as an already finished future."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        first = coordinator.toggle("post-1")

        second = coordinator.toggle("post-1")

        assert second.done()
        assert second.result() == Rejected(reason=RejectionReason.ALREADY_PENDING)

        client.gate.set_result(ToggleResult(active=True, count=1))
        await first

    @pytest.mark.asyncio
    async def test_flip_visible_before_response(self, actor):
        """Liking should show active with count+1 before the server answers."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=False, count=3)

        task = await start_toggle(coordinator, "post-1")

        state = coordinator.current_state("post-1")
        assert isinstance(state, PendingState)
        assert (state.active, state.count) == (True, 4)
        assert client.calls == [("post-1", actor)]

        client.gate.set_result(ToggleResult(active=True, count=4))
        await task

    @pytest.mark.asyncio
    async def test_second_toggle_while_pending_rejected(self, actor):
        """A second toggle on the same key should be refused untouched."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=False, count=3)
        task = await start_toggle(coordinator, "post-1")

        outcome = await coordinator.toggle("post-1")

        assert outcome == Rejected(reason=RejectionReason.ALREADY_PENDING)
        state = coordinator.current_state("post-1")
        assert (state.active, state.count, state.pending) == (True, 4, True)
        assert len(client.calls) == 1

        client.gate.set_result(ToggleResult(active=True, count=4))
        await task

    @pytest.mark.asyncio
    async def test_other_keys_do_not_contend(self, actor):
        """A pending toggle on one key should not block another key."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        first = await start_toggle(coordinator, "post-1")
        second = await start_toggle(coordinator, "post-2")

        assert coordinator.is_pending("post-1")
        assert coordinator.is_pending("post-2")

        client.gate.set_result(ToggleResult(active=True, count=1))
        assert await first == Applied(active=True, count=1)
        assert await second == Applied(active=True, count=1)

    @pytest.mark.asyncio
    async def test_unlike_at_zero_stays_at_zero(self, actor):
        """Unliking with a local count of zero should not go negative."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=True, count=0)

        task = await start_toggle(coordinator, "post-1")

        state = coordinator.current_state("post-1")
        assert (state.active, state.count) == (False, 0)

        client.gate.set_result(ToggleResult(active=False, count=0))
        await task


class TestReconciliation:
    """Tests for how the request's result is applied."""

    @pytest.mark.asyncio
    async def test_server_values_replace_optimistic_values(self, actor):
        """Final state should be the server's count, not the local guess."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=False, count=3)
        task = await start_toggle(coordinator, "post-1")

        client.gate.set_result(ToggleResult(active=True, count=7))
        outcome = await task

        assert outcome == Applied(active=True, count=7)
        assert coordinator.current_state("post-1") == IdleState(active=True, count=7)

    @pytest.mark.asyncio
    async def test_failure_restores_snapshot(self, actor):
        """A failed request should restore exactly the pre-toggle state."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=False, count=3)
        task = await start_toggle(coordinator, "post-1")

        error = ConnectionError("network down")
        client.gate.set_exception(error)
        outcome = await task

        assert isinstance(outcome, Failed)
        assert outcome.error is error
        assert coordinator.current_state("post-1") == IdleState(active=False, count=3)

    @pytest.mark.asyncio
    async def test_key_usable_again_after_failure(self, actor):
        """After a rollback the key should accept a new toggle."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        task = await start_toggle(coordinator, "post-1")
        client.gate.set_exception(RuntimeError("boom"))
        await task

        client.gate = asyncio.get_running_loop().create_future()
        retry = await start_toggle(coordinator, "post-1")
        assert coordinator.is_pending("post-1")

        client.gate.set_result(ToggleResult(active=True, count=1))
        assert await retry == Applied(active=True, count=1)


class TestRejections:
    """Tests for toggles refused before any state change."""

    @pytest.mark.asyncio
    async def test_signed_out_rejected(self):
        """Without an actor the toggle should be rejected, not raised."""
        client = GatedClient(actor=None)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=False, count=3)

        outcome = await coordinator.toggle("post-1")

        assert outcome == Rejected(reason=RejectionReason.NOT_AUTHENTICATED)
        assert coordinator.current_state("post-1") == IdleState(active=False, count=3)
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_unknown_key_reads_as_idle_zero(self):
        """Unseen keys should render as inactive with no count."""
        coordinator = ToggleCoordinator(GatedClient())

        assert coordinator.current_state("never-seen") == IdleState(
            active=False, count=0
        )


class TestTimeoutAndCancellation:
    """Tests for requests that never resolve."""

    @pytest.mark.asyncio
    async def test_no_timeout_by_default(self, actor):
        """Without a timeout the key stays pending until the response."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        task = await start_toggle(coordinator, "post-1")

        await asyncio.sleep(0.05)

        assert coordinator.is_pending("post-1")
        client.gate.set_result(ToggleResult(active=True, count=1))
        await task

    @pytest.mark.asyncio
    async def test_timeout_rolls_back(self, actor):
        """A configured timeout should fail the toggle and roll back."""
        coordinator = ToggleCoordinator(GatedClient(actor), timeout=0.01)
        coordinator.seed("post-1", active=False, count=3)

        outcome = await coordinator.toggle("post-1")

        assert isinstance(outcome, Failed)
        assert isinstance(outcome.error, asyncio.TimeoutError)
        assert coordinator.current_state("post-1") == IdleState(active=False, count=3)

    @pytest.mark.asyncio
    async def test_cancellation_rolls_back_and_propagates(self, actor):
        """Cancelling the caller should restore state and re-raise."""
        coordinator = ToggleCoordinator(GatedClient(actor))
        coordinator.seed("post-1", active=True, count=5)
        task = await start_toggle(coordinator, "post-1")

        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert coordinator.current_state("post-1") == IdleState(active=True, count=5)


class TestSeedAndObservers:
    """Tests for seeding and change notifications."""

    @pytest.mark.asyncio
    async def test_seed_ignored_while_pending(self, actor):
        """A stale seed should not overwrite an in-flight toggle."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=False, count=3)
        task = await start_toggle(coordinator, "post-1")

        state = coordinator.seed("post-1", active=False, count=100)

        assert state.pending
        assert state.count == 4

        client.gate.set_result(ToggleResult(active=True, count=4))
        await task

    @pytest.mark.asyncio
    async def test_observer_sees_every_transition(self, actor):
        """Observers should get the pending and settled states in order."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        seen = []
        coordinator.subscribe(lambda key, state: seen.append((key, state)))

        coordinator.seed("post-1", active=False, count=3)
        task = await start_toggle(coordinator, "post-1")
        client.gate.set_result(ToggleResult(active=True, count=4))
        await task

        assert [state.pending for _, state in seen] == [False, True, False]
        assert seen[-1] == ("post-1", IdleState(active=True, count=4))

    @pytest.mark.asyncio
    async def test_unsubscribe_stops_notifications(self, actor):
        """An unsubscribed observer should not be called again."""
        coordinator = ToggleCoordinator(GatedClient(actor))
        seen = []
        unsubscribe = coordinator.subscribe(lambda key, state: seen.append(key))

        coordinator.seed("post-1", active=False, count=0)
        unsubscribe()
        coordinator.seed("post-2", active=False, count=0)

        assert seen == ["post-1"]

    @pytest.mark.asyncio
    async def test_failing_observer_does_not_block_toggle(self, actor):
        """A raising observer should not stop the toggle from settling."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)

        def broken(key, state):
            raise RuntimeError("render failed")

        coordinator.subscribe(broken)
        task = await start_toggle(coordinator, "post-1")
        client.gate.set_result(ToggleResult(active=True, count=1))
        outcome = await task

        assert outcome == Applied(active=True, count=1)
        assert coordinator.current_state("post-1") == IdleState(active=True, count=1)


class TestCancelBeforeStart:
    """Tests for toggles cancelled before the request is sent."""

    @pytest.mark.asyncio
    async def test_immediate_cancel_rolls_back(self, actor):
        """Cancelling right after toggle() should still restore the snapshot."""
        client = GatedClient(actor)
        coordinator = ToggleCoordinator(client)
        coordinator.seed("post-1", active=False, count=3)

        future = coordinator.toggle("post-1")
        future.cancel()
        with pytest.raises(asyncio.CancelledError):
            await future

        assert coordinator.current_state("post-1") == IdleState(active=False, count=3)
        assert client.calls == []
