"""Template rendering for agent-specific rule documents.

Template syntax:

- ``<!-- ... -->``: authoring header, removed
- ``{{#if condition}}...{{/if}}``: kept when the condition holds
- ``{{^if condition}}...{{/if}}``: kept when the condition does not hold
- ``{{LINK:rule-id}}``: cross-reference to another rule
- ``{{AGENT_NAME}}``: the agent name
- ``{{RULES_PATH}}``: where the agent reads its rules from

Blocks nest freely. Malformed syntax never raises: unmatched markers are
left in place as literal text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from .conditions import evaluate_condition
from .links import generate_cross_reference
from .models import TemplateContext

logger = logging.getLogger(__name__)

TEMPLATE_HEADER = re.compile(r"<!--.*?-->\n*", re.DOTALL)
BLOCK_MARKER = re.compile(
    r"\{\{(?:(?P<kind>[#^])if (?P<condition>[A-Za-z0-9_:-]+)|/if)\}\}",
)
LINK_TOKEN = re.compile(r"\{\{LINK:([A-Za-z0-9_.-]+)\}\}")
AGENT_NAME_TOKEN = "{{AGENT_NAME}}"
RULES_PATH_TOKEN = "{{RULES_PATH}}"
EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


@dataclass
class _Block:
    """An open conditional block collecting its resolved inner text."""

    opener: str
    condition: str
    inverse: bool
    parts: list[str] = field(default_factory=list)

    def keep(self, context: TemplateContext) -> bool:
        return evaluate_condition(self.condition, context) != self.inverse


def strip_template_headers(content: str) -> str:
    """Remove HTML comment headers and the newlines right after them."""
    return TEMPLATE_HEADER.sub("", content)


def resolve_conditionals(content: str, context: TemplateContext) -> str:
    """Resolve every conditional block, innermost first.

    Each ``{{/if}}`` closes the nearest open block, so sibling blocks are
    never merged and nesting depth is unbounded. A single left-to-right
    pass over the markers is enough.
    """
    root: list[str] = []
    stack: list[_Block] = []
    parts = root
    pos = 0

    for match in BLOCK_MARKER.finditer(content):
        parts.append(content[pos:match.start()])
        pos = match.end()

        if match.group("kind"):
            block = _Block(
                opener=match.group(0),
                condition=match.group("condition"),
                inverse=match.group("kind") == "^",
            )
            stack.append(block)
            parts = block.parts
        elif stack:
            block = stack.pop()
            parts = stack[-1].parts if stack else root
            if block.keep(context):
                parts.append("".join(block.parts))
        else:
            # Stray closing marker
            parts.append(match.group(0))

    parts.append(content[pos:])

    # Unterminated blocks stay literal, with their nested blocks resolved
    while stack:
        block = stack.pop()
        logger.debug("Unterminated conditional block: %s", block.opener)
        parts = stack[-1].parts if stack else root
        parts.append(block.opener + "".join(block.parts))

    return "".join(root)


def substitute_variables(content: str, context: TemplateContext) -> str:
    """Replace LINK, AGENT_NAME and RULES_PATH tokens."""
    result = LINK_TOKEN.sub(
        lambda m: generate_cross_reference(m.group(1), context),
        content,
    )
    result = result.replace(AGENT_NAME_TOKEN, context.agent.value)
    return result.replace(RULES_PATH_TOKEN, context.rules_path)


def normalize_whitespace(content: str) -> str:
    """Collapse three or more consecutive newlines into one blank line."""
    return EXTRA_BLANK_LINES.sub("\n\n", content)


def render_template(content: str, context: TemplateContext) -> str:
    """Render raw template text for the agent described by ``context``.

    The stages run in a fixed order, each over the full output of the
    previous one: header removal, conditionals, variables, whitespace.
    Conditions therefore never see substituted variables.
    """
    result = strip_template_headers(content)
    result = resolve_conditionals(result, context)
    result = substitute_variables(result, context)
    return normalize_whitespace(result)


class TemplateRenderer:
    """Renders templates against one fixed context."""

    def __init__(self, context: TemplateContext) -> None:
        self.context = context

    def render(self, content: str) -> str:
        """Render raw template text."""
        return render_template(content, self.context)
