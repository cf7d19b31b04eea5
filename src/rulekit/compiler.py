"""Rule compiler for assembling agent-specific rule bundles."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .catalog import RuleCatalog
from .links import STANDARD_RULES_DIR
from .models import (
    OutputFormat,
    ProcessedTemplate,
    ScaffoldOutput,
    TemplateContext,
    TemplateDocument,
)
from .renderer import TemplateRenderer

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Development rule"


def extract_description(content: str) -> str:
    """Extract a one-line summary from rendered rule content.

    Skips the title line, then returns the first non-empty line that is
    neither a heading nor bold text.
    """
    for line in content.split("\n")[1:]:
        stripped = line.strip()
        if stripped and not stripped.startswith(("#", "**")):
            return stripped
    return DEFAULT_DESCRIPTION


def generate_agents_md(templates: dict[str, ProcessedTemplate]) -> str:
    """Generate AGENTS.md content linking to every rendered rule.

    Args:
        templates: Rendered rules keyed by rule id

    Returns:
        Markdown for the AGENTS.md entry point
    """
    sections = [
        "# AGENTS.md",
        "",
        "Development rules for AI coding agents.",
        "",
        "## Rules",
        "",
        f"This project uses modular development rules stored in `{STANDARD_RULES_DIR}/`.",
        "Each rule file covers a specific topic:",
        "",
    ]

    for rule_id, template in templates.items():
        sections.append(
            f"- [{rule_id}]({STANDARD_RULES_DIR}/{template.filename}) - {template.description}",
        )

    sections.extend([
        "",
        "## Quick Reference",
        "",
        "For detailed guidance on each topic, see the linked rule files above.",
        "",
    ])

    return "\n".join(sections)


class RuleCompiler:
    """Compiles rule templates into an agent-specific scaffold."""

    def __init__(
        self,
        context: TemplateContext,
        output_format: OutputFormat,
        catalog: RuleCatalog | None = None,
    ) -> None:
        """Initialize compiler.

        Args:
            context: Render context for the target agent
            output_format: How the agent consumes its rules
            catalog: Template source, defaults to the bundled rules
        """
        self.context = context
        self.output_format = output_format
        self.catalog = catalog or RuleCatalog()
        self.renderer = TemplateRenderer(context)

    def process(self, document: TemplateDocument) -> ProcessedTemplate:
        """Render one template and derive its description."""
        content = self.renderer.render(document.content)
        return ProcessedTemplate(
            filename=document.filename,
            content=content,
            description=extract_description(content),
        )

    def compile(self, rule_ids: Iterable[str] | None = None) -> ScaffoldOutput:
        """Render the selected rules into a scaffold bundle.

        Args:
            rule_ids: Rules to include; all available rules when None

        Returns:
            Rendered rules plus agent metadata
        """
        templates: dict[str, ProcessedTemplate] = {}
        for document in self.catalog.select(rule_ids):
            templates[document.rule_id] = self.process(document)
            logger.debug("Rendered %s for %s", document.rule_id, self.context.agent.value)

        output = ScaffoldOutput(
            agent=self.context.agent,
            rules_path=self.context.rules_path,
            format=self.output_format,
            supports_agents_md=self.context.capabilities.supports_agents_md,
            templates=templates,
        )

        if self.output_format is OutputFormat.AGENTS_MD:
            output.agents_md_content = generate_agents_md(templates)

        return output
