"""Core data models for rulekit rule scaffolding."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .exceptions import InvalidAgentError


class Agent(str, Enum):
    """AI coding agents that rule documents can be rendered for."""

    CLAUDE = "claude"
    CURSOR = "cursor"
    FACTORY = "factory"
    COPILOT = "copilot"
    WINDSURF = "windsurf"
    CLINE = "cline"
    AIDER = "aider"
    AGENTS_MD = "agents-md"

    @classmethod
    def names(cls) -> list[str]:
        """Return every agent literal in declaration order."""
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value: str) -> Agent:
        """Look up an agent by its literal name.

        Raises:
            InvalidAgentError: If ``value`` is not a supported agent
        """
        try:
            return cls(value)
        except ValueError as e:
            valid = ", ".join(cls.names())
            msg = f'Invalid agent "{value}". Must be one of: {valid}'
            raise InvalidAgentError(
                msg,
                details={"agent": value, "valid": cls.names()},
            ) from e


class OutputFormat(str, Enum):
    """How an agent consumes its rules."""

    MULTI_FILE = "multi-file"
    SINGLE_FILE = "single-file"
    AGENTS_MD = "agents-md"


class LinkStyle(str, Enum):
    """How an agent references one rule from another."""

    MENTION = "mention"
    AGENT_DIR = "agent-dir"
    STANDARD = "standard"
    SECTION = "section"
    BARE = "bare"


class AgentCapabilities(BaseModel):
    """Static feature flags of an agent."""

    model_config = ConfigDict(frozen=True)

    has_sandbox: bool = Field(
        ...,
        description="Runs in a restricted environment (git commands, temp files)",
    )
    multi_file_rules: bool = Field(
        ...,
        description="Supports a directory of rule files instead of a single file",
    )
    supports_slash_commands: bool = Field(
        ...,
        description="Has /command syntax for invoking tools",
    )
    supports_agents_md: bool = Field(
        ...,
        description="Reads the AGENTS.md format",
    )


class AgentProfile(BaseModel):
    """Capabilities and rule storage metadata for one agent."""

    model_config = ConfigDict(frozen=True)

    capabilities: AgentCapabilities
    rules_path: str = Field(..., description="Where the agent reads its rules from")
    link_style: LinkStyle = Field(..., description="Cross-reference convention")
    agent_dir: str | None = Field(
        default=None,
        description="Dot-directory name used by the agent-dir link style",
    )


class TemplateContext(BaseModel):
    """Read-only context shared by every render of one invocation."""

    model_config = ConfigDict(frozen=True)

    agent: Agent
    capabilities: AgentCapabilities
    has_development_skills: bool = Field(
        default=True,
        description="Whether the development-skills toolset is available",
    )
    rules_path: str = Field(..., description="Resolved rules path for the agent")
    link_style: LinkStyle = LinkStyle.BARE
    agent_dir: str | None = None


class TemplateDocument(BaseModel):
    """Raw rule template as read from the catalog."""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    filename: str
    content: str


class ProcessedTemplate(BaseModel):
    """A rule template rendered for one agent."""

    filename: str
    content: str
    description: str


class ScaffoldOutput(BaseModel):
    """Everything an agent needs to install its rules."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    agent: Agent
    rules_path: str
    format: OutputFormat
    supports_agents_md: bool
    templates: dict[str, ProcessedTemplate] = Field(default_factory=dict)
    agents_md_content: str | None = None

    def to_json(self, indent: int = 2) -> str:
        """Serialize with camelCase keys, omitting absent optional fields."""
        return self.model_dump_json(indent=indent, by_alias=True, exclude_none=True)
