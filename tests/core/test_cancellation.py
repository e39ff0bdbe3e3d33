"""Tests for axon.core.cancellation module."""

import asyncio

import pytest

from axon.core.cancellation import CancellationToken, CancelledError


class TestCancelledError:
    """Tests for CancelledError."""

    def test_is_exception(self):
        """Test it's a regular exception, not asyncio's."""
        assert issubclass(CancelledError, Exception)
        assert CancelledError is not asyncio.CancelledError


class TestCancellationToken:
    """Tests for CancellationToken."""

    def test_initial_state(self):
        """Test initial state is not cancelled."""
        token = CancellationToken()
        assert token.is_cancelled is False

    def test_cancel_idempotent(self):
        """Test cancel can be called repeatedly."""
        token = CancellationToken()
        token.cancel()
        token.cancel()
        assert token.is_cancelled is True

    def test_check(self):
        """Test check raises only after cancel."""
        token = CancellationToken()
        token.check()

        token.cancel()
        with pytest.raises(CancelledError):
            token.check()

    def test_reset(self):
        """Test reset allows check to pass again."""
        token = CancellationToken()
        token.cancel()
        token.reset()

        assert token.is_cancelled is False
        token.check()

    @pytest.mark.asyncio
    async def test_wait_completes_on_cancel(self):
        """Test wait returns once cancel is called."""
        token = CancellationToken()

        async def cancel_soon():
            await asyncio.sleep(0.01)
            token.cancel()

        await asyncio.wait_for(asyncio.gather(token.wait(), cancel_soon()), timeout=1)
        assert token.is_cancelled is True
