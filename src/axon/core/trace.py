"""Execution tracing for message graph runs.

A trace records which nodes ran, in what order, with what state going in
and out, how long each took and where the run failed. Tracing is opt-in:
pass an ExecutionTrace through ExecutionContext(trace=...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

from rich.table import Table
from rich.text import Text


@dataclass
class StepTrace:
    """Trace record for a single node execution.

    Attributes:
        index: Position of this step in the run (0-based).
        node: Name of the node that ran.
        input: State passed to the node.
        output: State returned by the node (None if it raised).
        error: Error message if the step failed.
        start_time: When the step started.
        end_time: When the step finished.
        duration_ms: Execution time in milliseconds.
        metadata: Additional step data.
    """

    index: int
    node: str
    input: Any
    output: Any
    error: str | None
    start_time: datetime
    end_time: datetime
    duration_ms: float
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "index": self.index,
            "node": self.node,
            "input": _safe_repr(self.input),
            "output": _safe_repr(self.output),
            "error": self.error,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat(),
            "duration_ms": self.duration_ms,
            "metadata": self.metadata,
        }


@dataclass
class ExecutionTrace:
    """Trace record for one Runnable.invoke() call.

    Attributes:
        graph_id: Label for the traced graph (run id if not given).
        start_time: When the run started.
        end_time: When the run ended (None while running).
        status: Run status.
        steps: Step traces in execution order.
        error: Error message if the run failed.

    Example:
        >>> trace = ExecutionTrace(graph_id="summarize", start_time=datetime.now())
        >>> await runnable.invoke(state, ExecutionContext(trace=trace))
        >>> print(trace.explain())
    """

    graph_id: str
    start_time: datetime
    end_time: datetime | None = None
    status: Literal["running", "completed", "failed", "cancelled"] = "running"
    steps: list[StepTrace] = field(default_factory=list)
    error: str | None = None

    def add_step(self, step: StepTrace) -> None:
        self.steps.append(step)

    def complete(self, error: str | None = None) -> None:
        """Mark the run as finished, failed if an error message is given."""
        self.end_time = datetime.now()
        if error:
            self.status = "failed"
            self.error = error
        else:
            self.status = "completed"

    def cancel(self) -> None:
        """Mark the run as cancelled."""
        self.end_time = datetime.now()
        self.status = "cancelled"

    @property
    def duration_ms(self) -> float | None:
        """Total duration in milliseconds, None while running."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds() * 1000

    @property
    def path(self) -> list[str]:
        """Node names in the order they ran."""
        return [step.node for step in self.steps]

    def explain(self) -> str:
        """Generate a human-readable run summary.

        Returns:
            Multi-line string describing the run.
        """
        lines = [
            f"Graph: {self.graph_id}",
            f"Status: {self.status}",
        ]

        if self.duration_ms is not None:
            lines.append(f"Duration: {self.duration_ms:.0f}ms")

        lines.append(f"Steps: {len(self.steps)}")

        for step in self.steps:
            marker = "x" if step.error else "+"
            lines.append(f"  [{marker}] {step.index}: {step.node} {step.duration_ms:.0f}ms")
            if step.error:
                lines.append(f"      Error: {step.error}")

        if self.error:
            lines.append(f"Error: {self.error}")

        return "\n".join(lines)

    def to_table(self) -> Table:
        """Render the steps as a rich Table for console display."""
        table = Table(title=f"{self.graph_id} ({self.status})")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Node", style="bold cyan")
        table.add_column("Duration", justify="right")
        table.add_column("Result")

        for step in self.steps:
            if step.error:
                result = Text(step.error, style="bold red")
            else:
                result = Text("ok", style="bold green")
            table.add_row(str(step.index), step.node, f"{step.duration_ms:.0f}ms", result)

        if self.duration_ms is not None:
            table.caption = f"total {self.duration_ms:.0f}ms"
        return table

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "graph_id": self.graph_id,
            "start_time": self.start_time.isoformat(),
            "end_time": self.end_time.isoformat() if self.end_time else None,
            "status": self.status,
            "duration_ms": self.duration_ms,
            "steps": [step.to_dict() for step in self.steps],
            "error": self.error,
        }


def _safe_repr(value: Any) -> Any:
    """Convert a state value to a JSON-safe representation."""
    if value is None:
        return None
    if isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_safe_repr(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _safe_repr(v) for k, v in value.items()}
    return str(value)
