"""Tests for rulekit data models."""

import json

import pytest
from pydantic import ValidationError

from rulekit.exceptions import InvalidAgentError
from rulekit.models import (
    Agent,
    AgentCapabilities,
    AgentProfile,
    LinkStyle,
    OutputFormat,
    ProcessedTemplate,
    ScaffoldOutput,
    TemplateContext,
)


@pytest.fixture
def capabilities() -> AgentCapabilities:
    """Capabilities of a sandboxed multi-file agent."""
    return AgentCapabilities(
        has_sandbox=True,
        multi_file_rules=True,
        supports_slash_commands=True,
        supports_agents_md=False,
    )


class TestAgent:
    """Test agent name parsing."""

    def test_parse_valid_agent(self) -> None:
        """Test parsing a supported agent name."""
        assert Agent.parse("agents-md") is Agent.AGENTS_MD

    def test_parse_invalid_agent(self) -> None:
        """Test the error names the value and the valid choices."""
        with pytest.raises(InvalidAgentError, match='Invalid agent "not-a-real-agent"') as exc:
            Agent.parse("not-a-real-agent")

        assert "claude" in str(exc.value)
        assert exc.value.details["valid"] == Agent.names()

    def test_names_are_a_closed_set(self) -> None:
        """Test the supported agents."""
        assert Agent.names() == [
            "claude",
            "cursor",
            "factory",
            "copilot",
            "windsurf",
            "cline",
            "aider",
            "agents-md",
        ]


class TestTemplateContext:
    """Test TemplateContext immutability."""

    def test_context_is_frozen(self, capabilities: AgentCapabilities) -> None:
        """Test a context cannot change once built."""
        context = TemplateContext(
            agent=Agent.CLAUDE,
            capabilities=capabilities,
            rules_path=".claude/rules",
        )
        with pytest.raises(ValidationError):
            context.agent = Agent.CURSOR

    def test_development_skills_defaults_on(self, capabilities: AgentCapabilities) -> None:
        """Test the toolset flag defaults to True."""
        context = TemplateContext(
            agent=Agent.CLAUDE,
            capabilities=capabilities,
            rules_path=".claude/rules",
        )
        assert context.has_development_skills is True


class TestAgentProfile:
    """Test agent profile link metadata."""

    def test_link_style_from_literal(self, capabilities: AgentCapabilities) -> None:
        """Test link styles are parsed from their YAML literals."""
        profile = AgentProfile.model_validate(
            {
                "capabilities": capabilities.model_dump(),
                "rules_path": ".cursor/rules",
                "link_style": "agent-dir",
                "agent_dir": "cursor",
            },
        )

        assert profile.link_style is LinkStyle.AGENT_DIR
        assert profile.agent_dir == "cursor"

    def test_agent_dir_is_optional(self, capabilities: AgentCapabilities) -> None:
        """Test profiles without a directory name."""
        profile = AgentProfile(
            capabilities=capabilities,
            rules_path=".claude/rules",
            link_style=LinkStyle.MENTION,
        )
        assert profile.agent_dir is None


class TestScaffoldOutput:
    """Test ScaffoldOutput serialization."""

    def test_json_uses_camel_case(self) -> None:
        """Test serialized keys match the JSON contract."""
        output = ScaffoldOutput(
            agent=Agent.CLAUDE,
            rules_path=".claude/rules",
            format=OutputFormat.MULTI_FILE,
            supports_agents_md=False,
            templates={
                "testing": ProcessedTemplate(
                    filename="testing.md",
                    content="# Testing\n",
                    description="Development rule",
                ),
            },
        )

        data = json.loads(output.to_json())

        assert data == {
            "agent": "claude",
            "rulesPath": ".claude/rules",
            "format": "multi-file",
            "supportsAgentsMd": False,
            "templates": {
                "testing": {
                    "filename": "testing.md",
                    "content": "# Testing\n",
                    "description": "Development rule",
                },
            },
        }

    def test_json_includes_agents_md_content_when_set(self) -> None:
        """Test the optional AGENTS.md body is serialized when present."""
        output = ScaffoldOutput(
            agent=Agent.AGENTS_MD,
            rules_path=".plaited/rules",
            format=OutputFormat.AGENTS_MD,
            supports_agents_md=True,
            agents_md_content="# AGENTS.md\n",
        )

        data = json.loads(output.to_json())

        assert data["agentsMdContent"] == "# AGENTS.md\n"
        assert data["templates"] == {}
        assert list(data) == [
            "agent",
            "rulesPath",
            "format",
            "supportsAgentsMd",
            "templates",
            "agentsMdContent",
        ]
