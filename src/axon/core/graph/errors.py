"""Errors raised while compiling or invoking a message graph.

Each class is a stable kind that callers can match with ``isinstance`` or
``pytest.raises``. Messages keep a fixed format so they can also be
compared as strings.

Errors raised by ``Runnable.invoke`` carry ``state``: the most recent
state value at the point of failure.
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for all message graph errors.

    Attributes:
        state: Most recent state when the error was raised (None for
            compile-time errors).
    """

    def __init__(self, message: str, state: Any = None) -> None:
        super().__init__(message)
        self.state = state


class EntryPointNotSetError(GraphError):
    """Raised by compile() when no entry point was configured."""

    def __init__(self) -> None:
        super().__init__("entry point not set")


class NodeNotFoundError(GraphError):
    """Raised when the current node name does not resolve.

    Happens for a bad entry point or an edge pointing at an unknown node.

    Attributes:
        node: The missing node name.
    """

    def __init__(self, node: str, state: Any = None) -> None:
        self.node = node
        super().__init__(f"node not found: {node}", state)


class NoOutgoingEdgeError(GraphError):
    """Raised when a non-terminal node has no outgoing edge.

    Attributes:
        node: Name of the node with no successor.
    """

    def __init__(self, node: str, state: Any = None) -> None:
        self.node = node
        super().__init__(f"no outgoing edge found for node: {node}", state)


class StepFailedError(GraphError):
    """Raised when a node's step function fails.

    The underlying exception is available as ``cause`` and ``__cause__``.

    Attributes:
        node: Name of the node whose step raised.
        cause: The underlying exception.
    """

    def __init__(self, node: str, cause: BaseException, state: Any = None) -> None:
        self.node = node
        self.cause = cause
        super().__init__(f"error in node {node}: {cause}", state)


class StepLimitExceededError(GraphError):
    """Raised when a run would execute more steps than ExecutionContext.max_steps.

    Attributes:
        node: The node that would have run next.
        limit: The configured step limit.
    """

    def __init__(self, node: str, limit: int, state: Any = None) -> None:
        self.node = node
        self.limit = limit
        super().__init__(f"step limit exceeded at node {node}: {limit}", state)
