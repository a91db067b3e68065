"""Unit tests for the time sources."""

from datetime import datetime, timezone

import pytest

from blog.util.clock import Clock, SystemClock
from tests.conftest import FakeClock


class TestClock:
    """Tests for Clock and SystemClock."""

    def test_clock_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            Clock()

    def test_system_clock_is_utc(self):
        assert SystemClock().now().tzinfo is timezone.utc

    def test_derived_values_follow_now(self):
        clock = FakeClock(datetime(2024, 3, 1, 0, 0, 1, tzinfo=timezone.utc))

        assert clock.today().isoformat() == "2024-03-01"
        assert clock.now_ms() == 1709251201000
