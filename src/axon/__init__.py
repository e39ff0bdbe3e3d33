"""Axon - embeddable execution engine for single-path step pipelines.

Register named steps, wire them with unconditional edges, pick an entry
point and feed a state value through the chain until END.

Quick Start:
    >>> from axon import END, MessageGraph
    >>>
    >>> async def oracle(ctx, messages):
    ...     return messages + ["1 + 1 equals 2."]
    >>>
    >>> graph = MessageGraph[list[str]]()
    >>> graph.add_node("oracle", oracle)
    >>> graph.add_edge("oracle", END)
    >>> graph.set_entry_point("oracle")
    >>>
    >>> runnable = graph.compile()
    >>> await runnable.invoke(["What is 1 + 1?"])
    ['What is 1 + 1?', '1 + 1 equals 2.']
"""

from axon.__version__ import __version__
from axon.core import (
    END,
    CancellationToken,
    CancelledError,
    Edge,
    EntryPointNotSetError,
    ExecutionContext,
    ExecutionTrace,
    GraphError,
    MessageGraph,
    Node,
    NodeNotFoundError,
    NoOutgoingEdgeError,
    Runnable,
    StepFailedError,
    StepLimitExceededError,
    StepTrace,
)

__all__ = [
    "__version__",
    "END",
    "Edge",
    "Node",
    "MessageGraph",
    "Runnable",
    "ExecutionContext",
    "CancellationToken",
    "CancelledError",
    "ExecutionTrace",
    "StepTrace",
    "GraphError",
    "EntryPointNotSetError",
    "NodeNotFoundError",
    "NoOutgoingEdgeError",
    "StepFailedError",
    "StepLimitExceededError",
]
