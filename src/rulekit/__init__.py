"""rulekit: Agent-specific development rules from shared templates."""

__version__ = "0.1.0"
__author__ = "rulekit Contributors"
__description__ = "Agent-specific development rules from shared templates"

from .agents import AgentMatrix
from .catalog import RuleCatalog
from .compiler import RuleCompiler, extract_description, generate_agents_md
from .models import (
    Agent,
    AgentCapabilities,
    LinkStyle,
    OutputFormat,
    ScaffoldOutput,
    TemplateContext,
)
from .renderer import TemplateRenderer, render_template

__all__ = [
    "Agent",
    "AgentCapabilities",
    "AgentMatrix",
    "LinkStyle",
    "OutputFormat",
    "RuleCatalog",
    "RuleCompiler",
    "ScaffoldOutput",
    "TemplateContext",
    "TemplateRenderer",
    "extract_description",
    "generate_agents_md",
    "render_template",
]
