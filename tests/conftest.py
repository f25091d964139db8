"""
Shared test fixtures for update graph tests.
"""

import pytest

from updater.dag.action import Action


@pytest.fixture
def calls():
    """Names of actions in the order their callbacks ran."""
    return []


@pytest.fixture
def make_action(calls):
    """Factory for actions whose callback records the action name."""

    def factory(name, *emits):
        return Action(callback=lambda: calls.append(name), emits=emits, name=name)

    return factory
