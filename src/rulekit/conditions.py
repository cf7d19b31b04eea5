"""Condition evaluation for template conditional blocks."""

from __future__ import annotations

from collections.abc import Callable

from .models import TemplateContext

DEVELOPMENT_SKILLS = "development-skills"
AGENT_PREFIX = "agent:"

CAPABILITY_CONDITIONS: dict[str, Callable[[TemplateContext], bool]] = {
    "has-sandbox": lambda ctx: ctx.capabilities.has_sandbox,
    "multi-file-rules": lambda ctx: ctx.capabilities.multi_file_rules,
    "supports-slash-commands": lambda ctx: ctx.capabilities.supports_slash_commands,
    "supports-agents-md": lambda ctx: ctx.capabilities.supports_agents_md,
}


def evaluate_condition(condition: str, context: TemplateContext) -> bool:
    """Evaluate a single condition name against the render context.

    Recognized names, matched exactly:

    - ``development-skills``: the toolset-presence flag
    - ``has-sandbox``, ``multi-file-rules``, ``supports-slash-commands``,
      ``supports-agents-md``: the agent's capability flags
    - ``agent:<name>``: true when ``<name>`` is the current agent

    Unknown conditions evaluate to False so a typo only drops content.
    """
    if condition == DEVELOPMENT_SKILLS:
        return context.has_development_skills

    check = CAPABILITY_CONDITIONS.get(condition)
    if check is not None:
        return check(context)

    if condition.startswith(AGENT_PREFIX):
        return condition[len(AGENT_PREFIX):] == context.agent.value

    return False
