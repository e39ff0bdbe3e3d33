"""ExecutionContext - runtime context handed to every step function.

ExecutionContext carries what a run needs besides the state itself:
- Cancellation token (checked by steps, never by the loop)
- Execution trace (optional observability)
- Run id for log correlation
- Optional step limit
- Free-form metadata for step functions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from axon.core.cancellation import CancellationToken
    from axon.core.trace import ExecutionTrace


@dataclass
class ExecutionContext:
    """Context passed to each step of a run.

    ExecutionContext is immutable by convention - use with_* methods
    to create modified copies rather than mutating fields directly.

    Attributes:
        cancellation: Token for cooperative cancellation (optional).
        trace: Execution trace to record steps into (optional).
        run_id: Identifier for the current run. Runnable.invoke fills it
            in when it is not set.
        max_steps: Maximum number of nodes a run may execute. None means
            unlimited.
        metadata: Caller data available to step functions.

    Example:
        >>> context = ExecutionContext(cancellation=CancellationToken())
        >>> result = await runnable.invoke(["hello"], context)
    """

    cancellation: CancellationToken | None = None
    trace: ExecutionTrace | None = None
    run_id: str | None = None
    max_steps: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.max_steps is not None and self.max_steps < 1:
            raise ValueError("max_steps must be >= 1")

    def with_run_id(self, run_id: str) -> ExecutionContext:
        """Create new context with the given run id."""
        return replace(self, run_id=run_id)

    def with_metadata(self, **metadata: Any) -> ExecutionContext:
        """Create new context with extra metadata merged in."""
        return replace(self, metadata={**self.metadata, **metadata})

    @property
    def is_cancelled(self) -> bool:
        """True if a cancellation token is set and was cancelled."""
        return self.cancellation is not None and self.cancellation.is_cancelled

    def check_cancelled(self) -> None:
        """Raise CancelledError if cancellation was requested.

        For use inside step functions.

        Raises:
            CancelledError: If cancellation was requested.
        """
        if self.cancellation:
            if self.cancellation.is_cancelled:
                logger.debug("cancellation_triggered: run_id=%s", self.run_id)
            self.cancellation.check()

    def record_step(
        self,
        index: int,
        node: str,
        input: Any,
        output: Any,
        start_time: datetime,
        end_time: datetime,
        error: str | None = None,
    ) -> None:
        """Record a node execution in the trace. No-op without a trace."""
        if self.trace is None:
            return

        from axon.core.trace import StepTrace

        self.trace.add_step(
            StepTrace(
                index=index,
                node=node,
                input=input,
                output=output,
                error=error,
                start_time=start_time,
                end_time=end_time,
                duration_ms=(end_time - start_time).total_seconds() * 1000,
            )
        )
