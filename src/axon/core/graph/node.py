"""Node and Edge - the building blocks of a message graph."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar, Union

if TYPE_CHECKING:
    from axon.core.context import ExecutionContext

T = TypeVar("T")

# Reserved terminal node. Reaching it ends the run; its step never runs.
END = "END"

StepFn = Callable[["ExecutionContext", T], Union[T, Awaitable[T]]]


@dataclass(frozen=True)
class Node(Generic[T]):
    """A named step in a message graph. Immutable once created.

    The step function receives the execution context and the current
    state and returns the next state, or an awaitable (coroutine, Task,
    Future) resolving to it. A step signals failure by raising.

    Attributes:
        name: Lookup key for the node.
        fn: Step function ``fn(ctx, state) -> state``.

    Example:
        >>> async def ask(ctx, messages):
        ...     return messages + [await llm.complete(messages)]
        >>> node = Node(name="oracle", fn=ask)
    """

    name: str
    fn: StepFn[T]

    async def run(self, context: ExecutionContext, state: T) -> T:
        """Call the step function, awaiting the result if needed."""
        result = self.fn(context, state)
        if inspect.isawaitable(result):
            result = await result
        return result  # type: ignore[return-value]

    def __repr__(self) -> str:
        fn_name = getattr(self.fn, "__name__", repr(self.fn))
        return f"Node(name={self.name!r}, fn={fn_name})"


@dataclass(frozen=True)
class Edge:
    """Directed, unconditional transition between two node names.

    Attributes:
        source: Name of the node the edge leaves.
        target: Name of the node the edge enters.
    """

    source: str
    target: str


def identity(context: ExecutionContext, state: T) -> T:
    """Step that returns the state unchanged. Registered for END."""
    return state
