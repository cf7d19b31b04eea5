"""Tests for the rule template catalog."""

from pathlib import Path

import pytest

from rulekit.catalog import RuleCatalog
from rulekit.exceptions import CatalogError

BUNDLED_RULES = ["accuracy", "bun-apis", "code-review", "git-workflow", "github", "testing"]


@pytest.fixture
def rules_dir(tmp_path: Path) -> Path:
    """A small template directory with a non-template file."""
    (tmp_path / "alpha.md").write_text("# Alpha\n\nFirst rule.\n", encoding="utf-8")
    (tmp_path / "beta.md").write_text("# Beta\n\nSecond rule.\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not a rule", encoding="utf-8")
    return tmp_path


class TestRuleCatalog:
    """Test template discovery and selection."""

    def test_bundled_rules(self) -> None:
        """Test the rules shipped with the package."""
        assert RuleCatalog().list_rule_ids() == BUNDLED_RULES

    def test_lists_only_markdown(self, rules_dir: Path) -> None:
        """Test non-markdown files are not rules."""
        assert RuleCatalog(rules_dir).list_rule_ids() == ["alpha", "beta"]

    def test_load(self, rules_dir: Path) -> None:
        """Test loading one template."""
        document = RuleCatalog(rules_dir).load("alpha")

        assert document.rule_id == "alpha"
        assert document.filename == "alpha.md"
        assert document.content.startswith("# Alpha")

    def test_select_all(self, rules_dir: Path) -> None:
        """Test no filter selects every template."""
        documents = RuleCatalog(rules_dir).select()
        assert [d.rule_id for d in documents] == ["alpha", "beta"]

    def test_select_filters(self) -> None:
        """Test a filter keeps only the requested rules."""
        documents = RuleCatalog().select(["testing", "bun-apis"])
        assert sorted(d.rule_id for d in documents) == ["bun-apis", "testing"]

    def test_select_ignores_unknown_ids(self, rules_dir: Path) -> None:
        """Test unknown filter entries are ignored without error."""
        documents = RuleCatalog(rules_dir).select(["beta", "gamma"])
        assert [d.rule_id for d in documents] == ["beta"]

    def test_select_empty_filter(self, rules_dir: Path) -> None:
        """Test an empty filter selects nothing."""
        assert RuleCatalog(rules_dir).select([]) == []

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Test a missing catalog is an error."""
        catalog = RuleCatalog(tmp_path / "missing")
        with pytest.raises(CatalogError, match="Rule template directory not found"):
            catalog.list_rule_ids()

    def test_load_missing_template(self, rules_dir: Path) -> None:
        """Test loading an unknown rule directly is an error."""
        with pytest.raises(CatalogError, match="Failed to read rule template"):
            RuleCatalog(rules_dir).load("gamma")
