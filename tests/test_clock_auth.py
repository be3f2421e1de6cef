"""Tests for ledger clocks and the identity authorizer."""

from unittest.mock import patch

import pytest

from share_ledger.auth import IdentityAuthorizer
from share_ledger.clock import ManualClock, SystemClock
from share_ledger.exceptions import NotAuthorizedError


class TestSystemClock:
    """Tests for SystemClock."""

    def test_returns_wall_time(self) -> None:
        with patch("share_ledger.clock.time.time", return_value=1_700_000_000.7):
            assert SystemClock().now() == 1_700_000_000

    def test_never_goes_backwards(self) -> None:
        clock = SystemClock()

        with patch("share_ledger.clock.time.time", side_effect=[2_000.0, 1_500.0, 2_100.0]):
            readings = [clock.now(), clock.now(), clock.now()]

        assert readings == [2_000, 2_000, 2_100]


class TestManualClock:
    """Tests for ManualClock."""

    def test_advance(self) -> None:
        clock = ManualClock(start=10)

        assert clock.advance(5) == 15
        assert clock.now() == 15

    def test_set_forward(self) -> None:
        clock = ManualClock()
        clock.set(100)

        assert clock.now() == 100

    def test_rejects_moving_backwards(self) -> None:
        clock = ManualClock(start=100)

        with pytest.raises(ValueError):
            clock.set(99)
        with pytest.raises(ValueError):
            clock.advance(-1)

    def test_rejects_negative_start(self) -> None:
        with pytest.raises(ValueError):
            ManualClock(start=-1)


class TestIdentityAuthorizer:
    """Tests for IdentityAuthorizer."""

    def test_fails_closed(self) -> None:
        with pytest.raises(NotAuthorizedError, match="GA"):
            IdentityAuthorizer().require_authorization("GA")

    def test_prove_and_revoke(self) -> None:
        authorizer = IdentityAuthorizer()
        authorizer.prove("GA", "GB")

        authorizer.require_authorization("GA")
        assert authorizer.is_proven("GB") is True

        authorizer.revoke("GA")
        assert authorizer.is_proven("GA") is False
        with pytest.raises(NotAuthorizedError):
            authorizer.require_authorization("GA")

    def test_initial_identities(self) -> None:
        authorizer = IdentityAuthorizer(["GA"])

        authorizer.require_authorization("GA")
