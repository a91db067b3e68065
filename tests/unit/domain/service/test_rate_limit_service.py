"""Unit tests for RateLimitService."""

from blog.domain.service import RateLimitService
from blog.persistence.repository import InMemoryRateLimitStore
from tests.conftest import FakeClock


def _service(clock: FakeClock) -> tuple[RateLimitService, InMemoryRateLimitStore]:
    store = InMemoryRateLimitStore()
    return RateLimitService(store, clock), store


class TestCheckAndConsume:
    """Tests for check_and_consume."""

    def test_allows_up_to_max_requests(self):
        """The first max requests in a window should be allowed."""
        # Arrange
        service, _ = _service(FakeClock())

        # Act
        decisions = [
            service.check_and_consume("auth:1.2.3.4", 5, 60_000) for _ in range(5)
        ]

        # Assert
        assert all(d.allowed for d in decisions)
        assert [d.remaining for d in decisions] == [4, 3, 2, 1, 0]

    def test_denies_request_over_the_limit(self):
        """The sixth request inside the window should be denied."""
        # Arrange
        clock = FakeClock()
        service, _ = _service(clock)
        for _ in range(5):
            service.check_and_consume("auth:1.2.3.4", 5, 60_000)

        # Act
        clock.advance(seconds=10)
        decision = service.check_and_consume("auth:1.2.3.4", 5, 60_000)

        # Assert
        assert not decision.allowed
        assert decision.remaining == 0
        assert decision.reset_in_ms == 50_000
        assert decision.retry_after_seconds == 50

    def test_window_resets_after_expiry(self):
        """A request after the window has elapsed should start a new window."""
        # Arrange
        clock = FakeClock()
        service, store = _service(clock)
        for _ in range(6):
            service.check_and_consume("auth:1.2.3.4", 5, 60_000)

        # Act
        clock.advance(seconds=61)
        decision = service.check_and_consume("auth:1.2.3.4", 5, 60_000)

        # Assert
        assert decision.allowed
        assert decision.remaining == 4
        assert store.get("auth:1.2.3.4").count == 1

    def test_request_at_window_boundary_still_counts(self):
        """The window is only reset strictly after its reset time."""
        # Arrange
        clock = FakeClock()
        service, _ = _service(clock)
        service.check_and_consume("k", 1, 1_000)

        # Act
        clock.advance(milliseconds=1_000)
        decision = service.check_and_consume("k", 1, 1_000)

        # Assert
        assert not decision.allowed

    def test_keys_are_counted_independently(self):
        """Different clients should not share a window."""
        # Arrange
        service, _ = _service(FakeClock())
        service.check_and_consume("auth:a", 1, 60_000)

        # Act
        decision = service.check_and_consume("auth:b", 1, 60_000)

        # Assert
        assert decision.allowed

    def test_denied_requests_do_not_extend_the_window(self):
        """Denials should not increment the count or move the reset time."""
        # Arrange
        clock = FakeClock()
        service, store = _service(clock)
        service.check_and_consume("k", 1, 60_000)
        reset_at = store.get("k").reset_at_ms

        # Act
        service.check_and_consume("k", 1, 60_000)
        service.check_and_consume("k", 1, 60_000)

        # Assert
        assert store.get("k").count == 1
        assert store.get("k").reset_at_ms == reset_at
