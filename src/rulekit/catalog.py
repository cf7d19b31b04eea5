"""Rule template catalog backed by a directory of markdown files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .exceptions import CatalogError
from .models import TemplateDocument

logger = logging.getLogger(__name__)

BUNDLED_RULES_DIR = Path(__file__).parent / "rules"
TEMPLATE_SUFFIX = ".md"


class RuleCatalog:
    """Discovers and reads rule templates."""

    def __init__(self, rules_dir: Path = BUNDLED_RULES_DIR) -> None:
        """Initialize catalog with its template directory.

        Args:
            rules_dir: Directory holding one ``<rule-id>.md`` file per rule
        """
        self.root = Path(rules_dir)

    def list_rule_ids(self) -> list[str]:
        """List every available rule identifier, sorted.

        Raises:
            CatalogError: If the template directory cannot be listed
        """
        if not self.root.is_dir():
            msg = f"Rule template directory not found: {self.root}"
            raise CatalogError(msg, details={"path": str(self.root)})

        try:
            files = [p for p in self.root.iterdir() if p.suffix == TEMPLATE_SUFFIX]
        except OSError as e:
            msg = f"Failed to list rule templates: {e}"
            raise CatalogError(msg) from e

        rule_ids = sorted(p.stem for p in files if p.is_file())
        logger.debug("Found %d rule templates in %s", len(rule_ids), self.root)
        return rule_ids

    def load(self, rule_id: str) -> TemplateDocument:
        """Read the raw template for a rule.

        Raises:
            CatalogError: If the template cannot be read
        """
        filename = f"{rule_id}{TEMPLATE_SUFFIX}"
        path = self.root / filename
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            msg = f"Failed to read rule template {path}: {e}"
            raise CatalogError(msg, details={"rule_id": rule_id}) from e

        return TemplateDocument(rule_id=rule_id, filename=filename, content=content)

    def select(self, rule_ids: Iterable[str] | None = None) -> list[TemplateDocument]:
        """Load the requested templates, or all of them.

        Identifiers that match no template are ignored.
        """
        available = self.list_rule_ids()
        if rule_ids is None:
            selected = available
        else:
            wanted = set(rule_ids)
            ignored = sorted(wanted.difference(available))
            if ignored:
                logger.debug("Ignoring unknown rules: %s", ", ".join(ignored))
            selected = [rule_id for rule_id in available if rule_id in wanted]

        return [self.load(rule_id) for rule_id in selected]
