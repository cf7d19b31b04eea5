"""Agent capability matrix loader with schema validation."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from pydantic import ValidationError

from .exceptions import AgentConfigError
from .models import (
    Agent,
    AgentCapabilities,
    AgentProfile,
    OutputFormat,
    TemplateContext,
)

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_MATRIX_PATH = DATA_DIR / "agents.yaml"
DEFAULT_SCHEMA_PATH = DATA_DIR / "agents.schema.json"


class AgentMatrix:
    """Loads and answers questions about per-agent capabilities."""

    def __init__(
        self,
        matrix_path: Path = DEFAULT_MATRIX_PATH,
        schema_path: Path = DEFAULT_SCHEMA_PATH,
    ) -> None:
        """Initialize the matrix with its configuration files.

        Args:
            matrix_path: YAML file holding one profile per agent
            schema_path: JSON Schema the YAML file is validated against
        """
        self.matrix_path = Path(matrix_path)
        self.schema_path = Path(schema_path)
        self._profiles: dict[Agent, AgentProfile] | None = None

    def _load_schema(self) -> dict[str, Any]:
        if not self.schema_path.exists():
            msg = f"Schema file not found: {self.schema_path}"
            raise AgentConfigError(msg)

        try:
            with self.schema_path.open(encoding="utf-8") as f:
                return json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            msg = f"Failed to load agent schema: {e}"
            raise AgentConfigError(msg) from e

    def load(self) -> dict[Agent, AgentProfile]:
        """Load, validate and cache every agent profile.

        Returns:
            Mapping of each supported agent to its profile

        Raises:
            AgentConfigError: If the matrix cannot be read, fails validation,
                or does not cover every supported agent
        """
        if self._profiles is not None:
            return self._profiles

        if not self.matrix_path.exists():
            msg = f"Agent matrix not found: {self.matrix_path}"
            raise AgentConfigError(msg)

        try:
            with self.matrix_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            msg = f"Failed to parse agent matrix YAML: {e}"
            raise AgentConfigError(msg) from e
        except OSError as e:
            msg = f"Failed to read agent matrix: {e}"
            raise AgentConfigError(msg) from e

        try:
            jsonschema.validate(data, self._load_schema())
        except jsonschema.ValidationError as e:
            msg = f"Schema validation failed: {e.message}"
            raise AgentConfigError(
                msg,
                details={"path": list(e.absolute_path)},
            ) from e

        entries: dict[str, Any] = data["agents"]
        unknown = sorted(set(entries) - set(Agent.names()))
        if unknown:
            msg = f"Unknown agents in matrix: {', '.join(unknown)}"
            raise AgentConfigError(msg, details={"unknown": unknown})

        missing = [name for name in Agent.names() if name not in entries]
        if missing:
            msg = f"Agent matrix is missing: {', '.join(missing)}"
            raise AgentConfigError(msg, details={"missing": missing})

        profiles: dict[Agent, AgentProfile] = {}
        for name, entry in entries.items():
            try:
                profiles[Agent(name)] = AgentProfile.model_validate(entry)
            except ValidationError as e:
                msg = f"Invalid profile for agent '{name}': {e}"
                raise AgentConfigError(msg, details={"agent": name}) from e

        logger.debug("Loaded %d agent profiles from %s", len(profiles), self.matrix_path)
        self._profiles = profiles
        return profiles

    def profile(self, agent: Agent) -> AgentProfile:
        """Get the full profile of an agent."""
        return self.load()[agent]

    def capabilities(self, agent: Agent) -> AgentCapabilities:
        """Get the capability flags of an agent."""
        return self.profile(agent).capabilities

    def rules_path(self, agent: Agent) -> str:
        """Get where the agent reads its rules from."""
        return self.profile(agent).rules_path

    def supports_agents_md(self, agent: Agent) -> bool:
        """Whether the agent reads the AGENTS.md format."""
        return self.capabilities(agent).supports_agents_md

    def output_format(self, agent: Agent) -> OutputFormat:
        """Get the output format class for an agent."""
        if agent is Agent.AGENTS_MD:
            return OutputFormat.AGENTS_MD
        if self.capabilities(agent).multi_file_rules:
            return OutputFormat.MULTI_FILE
        return OutputFormat.SINGLE_FILE

    def build_context(
        self,
        agent: Agent,
        has_development_skills: bool = True,
    ) -> TemplateContext:
        """Build the render context for one invocation."""
        profile = self.profile(agent)
        return TemplateContext(
            agent=agent,
            capabilities=profile.capabilities,
            has_development_skills=has_development_skills,
            rules_path=profile.rules_path,
            link_style=profile.link_style,
            agent_dir=profile.agent_dir,
        )
