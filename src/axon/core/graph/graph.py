"""MessageGraph - mutable builder for single-path pipelines."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from axon.core.graph.errors import EntryPointNotSetError
from axon.core.graph.node import END, Edge, Node, StepFn, identity
from axon.core.graph.runnable import Runnable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MessageGraph(Generic[T]):
    """Graph of named steps connected by unconditional edges.

    The graph is built incrementally and in any order. Nothing is checked
    while building: edges may name nodes that do not exist yet, and a
    node registered twice keeps only its latest step. ``compile()`` only
    requires an entry point; everything else is discovered lazily when
    the runnable walks the graph.

    Each run starts at the entry point and follows, after every step, the
    first edge declared from the current node. Reaching ``END`` stops the
    run. Later edges from the same node are never taken, so the walk is a
    single deterministic path.

    Example:
        >>> graph = MessageGraph[list[str]]()
        >>> graph.add_node("oracle", lambda ctx, msgs: msgs + ["1 + 1 equals 2."])
        >>> graph.add_edge("oracle", END)
        >>> graph.set_entry_point("oracle")
        >>>
        >>> runnable = graph.compile()
        >>> await runnable.invoke(["What is 1 + 1?"])
        ['What is 1 + 1?', '1 + 1 equals 2.']
    """

    def __init__(self) -> None:
        self._nodes: dict[str, Node[T]] = {}
        self._edges: list[Edge] = []
        self._entry_point = ""

        self.add_node(END, identity)

    def add_node(self, name: str, fn: StepFn[T]) -> MessageGraph[T]:
        """Register a step under ``name``, replacing any previous one.

        Args:
            name: Node name.
            fn: Step function ``fn(ctx, state) -> state`` (sync or async).

        Returns:
            Self for chaining.
        """
        if name in self._nodes and name != END:
            logger.debug("node_replaced: name=%s", name)
        self._nodes[name] = Node(name=name, fn=fn)
        return self

    def add_edge(self, source: str, target: str) -> MessageGraph[T]:
        """Append an edge. Neither end has to be registered.

        Returns:
            Self for chaining.
        """
        self._edges.append(Edge(source=source, target=target))
        return self

    def chain(self, *names: str) -> MessageGraph[T]:
        """Add edges between consecutive names: a -> b -> c.

        Example:
            >>> graph.chain("fetch", "summarize", END)

        Returns:
            Self for chaining.
        """
        for source, target in zip(names, names[1:]):
            self.add_edge(source, target)
        return self

    def set_entry_point(self, name: str) -> MessageGraph[T]:
        """Set the node a run starts at. The last call wins.

        Returns:
            Self for chaining.
        """
        self._entry_point = name
        return self

    @property
    def entry_point(self) -> str:
        """Name of the entry node ("" if not set)."""
        return self._entry_point

    @property
    def nodes(self) -> Mapping[str, Node[T]]:
        """Read-only view of registered nodes, END included."""
        return MappingProxyType(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        """Edges in declaration order."""
        return tuple(self._edges)

    def get_node(self, name: str) -> Node[T] | None:
        """Get a node by name, or None if not registered."""
        return self._nodes.get(name)

    def list_nodes(self) -> list[str]:
        """Names of registered nodes, excluding END."""
        return [name for name in self._nodes if name != END]

    def compile(self) -> Runnable[T]:
        """Compile the graph into a Runnable.

        The runnable works on a snapshot of the nodes and edges taken
        here; changing the graph afterwards does not affect it.

        Returns:
            A Runnable for this graph.

        Raises:
            EntryPointNotSetError: If no entry point was set.
        """
        if not self._entry_point:
            raise EntryPointNotSetError()

        logger.debug(
            "graph_compiled: entry=%s, nodes=%d, edges=%d",
            self._entry_point,
            len(self._nodes),
            len(self._edges),
        )
        return Runnable(
            entry_point=self._entry_point,
            nodes=dict(self._nodes),
            edges=list(self._edges),
        )

    def __len__(self) -> int:
        return len(self._nodes) - 1

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __repr__(self) -> str:
        return f"MessageGraph(entry={self._entry_point!r}, nodes={self.list_nodes()})"
