"""Message graph: single-path step pipelines.

Build a MessageGraph, compile it, invoke the Runnable. No branching,
no parallelism: after each step the first edge declared from the current
node decides what runs next, until END is reached.

Classes:
    MessageGraph: Mutable graph definition.
    Runnable: Compiled, executable handle.
    Node: A named step function.
    Edge: An unconditional transition.

Example:
    >>> from axon.core.graph import END, MessageGraph
    >>>
    >>> graph = MessageGraph[list[str]]()
    >>> graph.add_node("node1", lambda ctx, s: s + ["Node 1"])
    >>> graph.add_node("node2", lambda ctx, s: s + ["Node 2"])
    >>> graph.chain("node1", "node2", END)
    >>> graph.set_entry_point("node1")
    >>>
    >>> runnable = graph.compile()
    >>> await runnable.invoke(["Input"])
    ['Input', 'Node 1', 'Node 2']
"""

from axon.core.graph.errors import (
    EntryPointNotSetError,
    GraphError,
    NodeNotFoundError,
    NoOutgoingEdgeError,
    StepFailedError,
    StepLimitExceededError,
)
from axon.core.graph.graph import MessageGraph
from axon.core.graph.node import END, Edge, Node, StepFn
from axon.core.graph.runnable import Runnable

__all__ = [
    "END",
    "Edge",
    "Node",
    "StepFn",
    "MessageGraph",
    "Runnable",
    # Errors
    "GraphError",
    "EntryPointNotSetError",
    "NodeNotFoundError",
    "NoOutgoingEdgeError",
    "StepFailedError",
    "StepLimitExceededError",
]
