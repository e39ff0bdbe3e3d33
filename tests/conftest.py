"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def calls():
    """List that step functions record their node name into."""
    return []


@pytest.fixture
def recording_step(calls):
    """Factory for steps that record their name and append it to the state."""

    def make(name: str):
        def step(ctx, state):
            calls.append(name)
            return [*state, name]

        step.__name__ = f"step_{name}"
        return step

    return make
