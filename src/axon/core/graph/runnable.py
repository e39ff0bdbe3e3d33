"""Runnable - compiled, executable handle over a message graph."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Generic, TypeVar

from axon.core.cancellation import CancelledError
from axon.core.context import ExecutionContext
from axon.core.graph.errors import (
    GraphError,
    NodeNotFoundError,
    NoOutgoingEdgeError,
    StepFailedError,
    StepLimitExceededError,
)
from axon.core.graph.node import END, Edge, Node
from axon.core.run_logging import (
    generate_run_id,
    log_complete,
    log_error,
    log_start,
    log_warning,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Runnable(Generic[T]):
    """Executes a compiled message graph.

    Created by ``MessageGraph.compile()``. Holds its own copy of the node
    mapping and the successor of every node (the target of the first
    edge declared from it), so one Runnable can be invoked concurrently
    and is unaffected by later changes to the graph it came from.

    Runs are sequential: each ``invoke`` walks from the entry point to
    END on the calling task, one step at a time. The loop never checks
    the cancellation token itself; steps do.
    """

    def __init__(
        self,
        entry_point: str,
        nodes: Mapping[str, Node[T]],
        edges: Sequence[Edge],
    ) -> None:
        self._entry_point = entry_point
        self._nodes = dict(nodes)

        # First declared edge from each node wins.
        self._successors: dict[str, str] = {}
        for edge in edges:
            self._successors.setdefault(edge.source, edge.target)

    @property
    def entry_point(self) -> str:
        return self._entry_point

    def successor(self, name: str) -> str | None:
        """Node that runs after ``name``, or None if it has no outgoing edge."""
        return self._successors.get(name)

    async def invoke(self, state: T, context: ExecutionContext | None = None) -> T:
        """Run the graph from the entry point until END.

        Args:
            state: Initial state.
            context: Execution context handed to every step. A default
                context is used if None; a run id is assigned if missing.

        Returns:
            The state returned by the last step before END.

        Raises:
            NodeNotFoundError: The current node name is not registered.
            NoOutgoingEdgeError: A node finished but has no outgoing edge.
            StepFailedError: A step function raised.
            StepLimitExceededError: context.max_steps was reached.
            CancelledError: A step observed cancellation (not wrapped).
        """
        context = context or ExecutionContext()
        if context.run_id is None:
            context = context.with_run_id(generate_run_id())
        run_id = context.run_id or ""

        log_start(logger, run_id, "graph_start", entry=self._entry_point, nodes=len(self._nodes))
        start_mono = time.monotonic()

        current = self._entry_point
        steps = 0
        try:
            while current != END:
                node = self._nodes.get(current)
                if node is None:
                    raise NodeNotFoundError(current, state)

                if context.max_steps is not None and steps >= context.max_steps:
                    raise StepLimitExceededError(current, context.max_steps, state)

                state = await self._run_step(node, steps, state, context)
                steps += 1

                successor = self._successors.get(current)
                if successor is None:
                    raise NoOutgoingEdgeError(current, state)
                current = successor
        except GraphError as e:
            duration = time.monotonic() - start_mono
            # Step failures were already logged at ERROR as node_failed.
            level = logging.DEBUG if isinstance(e, StepFailedError) else logging.ERROR
            log_error(
                logger,
                run_id,
                "graph_failed",
                e,
                level=level,
                steps=steps,
                duration_s=f"{duration:.1f}",
            )
            if context.trace is not None:
                context.trace.complete(error=str(e))
            raise
        except (CancelledError, asyncio.CancelledError):
            log_warning(logger, run_id, "graph_cancelled", node=current, steps=steps)
            if context.trace is not None:
                context.trace.cancel()
            raise

        log_complete(logger, run_id, "graph_complete", time.monotonic() - start_mono, steps=steps)
        if context.trace is not None:
            context.trace.complete()
        return state

    async def _run_step(self, node: Node[T], index: int, state: T, context: ExecutionContext) -> T:
        run_id = context.run_id or ""
        log_start(logger, run_id, "node_start", node=node.name, index=index)

        started_at = datetime.now()
        start_mono = time.monotonic()
        try:
            result = await node.run(context, state)
        except (CancelledError, asyncio.CancelledError):
            context.record_step(index, node.name, state, None, started_at, datetime.now(), "cancelled")
            raise
        except Exception as e:
            context.record_step(index, node.name, state, None, started_at, datetime.now(), str(e))
            log_error(
                logger,
                run_id,
                "node_failed",
                e,
                node=node.name,
                duration_s=f"{time.monotonic() - start_mono:.1f}",
            )
            raise StepFailedError(node.name, e, getattr(e, "state", None)) from e

        context.record_step(index, node.name, state, result, started_at, datetime.now())
        log_complete(logger, run_id, "node_complete", time.monotonic() - start_mono, node=node.name)
        return result

    def invoke_sync(self, state: T, context: ExecutionContext | None = None) -> T:
        """Blocking wrapper around invoke() for code without an event loop.

        Must not be called from inside a running event loop.
        """
        return asyncio.run(self.invoke(state, context))

    def __repr__(self) -> str:
        names = [name for name in self._nodes if name != END]
        return f"Runnable(entry={self._entry_point!r}, nodes={names})"
