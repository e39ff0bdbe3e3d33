"""Cooperative cancellation for step functions.

The execution loop never looks at the token on its own. A step that
wants to stop early calls ``ctx.check_cancelled()`` (or
``token.check()``) at points where stopping is safe, typically before
or after awaiting an external service.

Typical usage:
1. Create a CancellationToken before invoking the runnable
2. Pass it via ExecutionContext(cancellation=token)
3. Call token.cancel() from another task
4. The next step that checks the token raises CancelledError
"""

from __future__ import annotations

import asyncio


class CancelledError(Exception):
    """Raised by a step when cancellation was requested.

    Runnable.invoke lets this propagate unwrapped so callers can tell a
    cancelled run apart from a failed step.
    """

    pass


class CancellationToken:
    """Token for cooperative cancellation.

    Example:
        >>> token = CancellationToken()
        >>> context = ExecutionContext(cancellation=token)
        >>>
        >>> async def call_llm(ctx, state):
        ...     ctx.check_cancelled()
        ...     return state + [await client.complete(state)]
        >>>
        >>> task = asyncio.create_task(runnable.invoke(["hi"], context))
        >>> token.cancel()
        >>>
        >>> try:
        ...     await task
        ... except CancelledError:
        ...     print("Run was cancelled")
    """

    def __init__(self) -> None:
        self._cancelled = False
        self._event = asyncio.Event()

    def cancel(self) -> None:
        """Request cancellation. Safe to call multiple times."""
        self._cancelled = True
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        """True once cancel() has been called."""
        return self._cancelled

    def check(self) -> None:
        """Raise CancelledError if cancelled.

        Raises:
            CancelledError: If cancellation was requested.
        """
        if self._cancelled:
            raise CancelledError()

    async def wait(self) -> None:
        """Block until cancel() is called."""
        await self._event.wait()

    def reset(self) -> None:
        """Clear the cancelled flag so the token can be reused."""
        self._cancelled = False
        self._event.clear()
