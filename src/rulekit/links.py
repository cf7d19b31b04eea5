"""Agent-specific cross-references between rule documents."""

from __future__ import annotations

from collections.abc import Callable

from .models import LinkStyle, TemplateContext

STANDARD_RULES_DIR = ".plaited/rules"

_LINK_FORMATS: dict[LinkStyle, Callable[[str, TemplateContext], str]] = {
    # Claude Code uses @ syntax for file references
    LinkStyle.MENTION: lambda rule_id, ctx: f"@{ctx.rules_path}/{rule_id}.md",
    LinkStyle.AGENT_DIR: lambda rule_id, ctx: f".{ctx.agent_dir}/rules/{rule_id}.md",
    # AGENTS.md links into the shared rules directory
    LinkStyle.STANDARD: lambda rule_id, _: f"{STANDARD_RULES_DIR}/{rule_id}.md",
    # Single-file agents get every rule in one document
    LinkStyle.SECTION: lambda rule_id, _: f'See "{rule_id}" section',
    LinkStyle.BARE: lambda rule_id, _: f"{rule_id}.md",
}


def generate_cross_reference(rule_id: str, context: TemplateContext) -> str:
    """Generate a reference to another rule in the current agent's format."""
    if context.link_style is LinkStyle.AGENT_DIR and not context.agent_dir:
        return f"{rule_id}.md"
    return _LINK_FORMATS[context.link_style](rule_id, context)
