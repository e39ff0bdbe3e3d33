"""Tests for axon.core.graph.errors module."""

import pytest

from axon.core.graph.errors import (
    EntryPointNotSetError,
    GraphError,
    NodeNotFoundError,
    NoOutgoingEdgeError,
    StepFailedError,
    StepLimitExceededError,
)


class TestErrorMessages:
    """Error kinds keep a fixed message format."""

    @pytest.mark.parametrize(
        ("error", "message"),
        [
            (EntryPointNotSetError(), "entry point not set"),
            (NodeNotFoundError("node2"), "node not found: node2"),
            (NoOutgoingEdgeError("node1"), "no outgoing edge found for node: node1"),
            (StepFailedError("node1", RuntimeError("node error")), "error in node node1: node error"),
            (StepLimitExceededError("loop", 10), "step limit exceeded at node loop: 10"),
        ],
    )
    def test_message(self, error, message):
        """Test message format and common base class."""
        assert str(error) == message
        assert isinstance(error, GraphError)

    def test_equal_messages_compare_as_strings(self):
        """Two errors of the same kind and name render identically."""
        assert str(NodeNotFoundError("x")) == str(NodeNotFoundError("x"))


class TestErrorAttributes:
    """Error kinds expose the offending names."""

    def test_node_attributes(self):
        """Test node name is stored."""
        assert NodeNotFoundError("a").node == "a"
        assert NoOutgoingEdgeError("b").node == "b"

    def test_state_defaults_to_none(self):
        """Test state is None unless given."""
        assert EntryPointNotSetError().state is None
        assert NodeNotFoundError("a").state is None
        assert NoOutgoingEdgeError("a", state=[1]).state == [1]

    def test_step_failed_keeps_cause(self):
        """StepFailedError keeps the underlying exception."""
        cause = KeyError("missing")
        error = StepFailedError("lookup", cause)

        assert error.node == "lookup"
        assert error.cause is cause
        assert "missing" in str(error)

    def test_kinds_are_distinct(self):
        """Each kind only matches itself and GraphError."""
        with pytest.raises(NodeNotFoundError):
            raise NodeNotFoundError("a")

        assert not isinstance(NodeNotFoundError("a"), NoOutgoingEdgeError)
        assert not isinstance(StepFailedError("a", ValueError()), NodeNotFoundError)
