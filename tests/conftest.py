"""Shared fixtures for rulekit tests."""

from collections.abc import Callable

import pytest

from rulekit.agents import AgentMatrix
from rulekit.models import Agent, TemplateContext


@pytest.fixture(scope="session")
def matrix() -> AgentMatrix:
    """Agent matrix loaded from the bundled configuration."""
    return AgentMatrix()


@pytest.fixture
def make_context(matrix: AgentMatrix) -> Callable[..., TemplateContext]:
    """Build a render context for an agent name."""

    def _make(agent: str, has_development_skills: bool = True) -> TemplateContext:
        return matrix.build_context(
            Agent(agent),
            has_development_skills=has_development_skills,
        )

    return _make
