"""Core - graph definition, compilation and execution.

Nothing here knows what the steps do. Steps are plain callables
``fn(ctx, state) -> state`` (sync or async) supplied by the caller,
typically wrapping calls to external services such as LLM APIs.

Architecture:
    graph/          MessageGraph builder, Runnable execution loop, errors
    context         ExecutionContext handed to every step
    cancellation    Cooperative cancellation token
    trace           Opt-in execution tracing
    run_logging     Run ids and log line helpers
    logging_config  Application-level logging setup
"""

from axon.core.cancellation import CancellationToken, CancelledError
from axon.core.context import ExecutionContext
from axon.core.graph import (
    END,
    Edge,
    EntryPointNotSetError,
    GraphError,
    MessageGraph,
    Node,
    NodeNotFoundError,
    NoOutgoingEdgeError,
    Runnable,
    StepFailedError,
    StepLimitExceededError,
)
from axon.core.trace import ExecutionTrace, StepTrace

__all__ = [
    # Graph
    "END",
    "Edge",
    "Node",
    "MessageGraph",
    "Runnable",
    # Context
    "ExecutionContext",
    "CancellationToken",
    "CancelledError",
    # Tracing
    "ExecutionTrace",
    "StepTrace",
    # Errors
    "GraphError",
    "EntryPointNotSetError",
    "NodeNotFoundError",
    "NoOutgoingEdgeError",
    "StepFailedError",
    "StepLimitExceededError",
]
