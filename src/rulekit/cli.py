"""rulekit command-line interface."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .agents import AgentMatrix
from .catalog import BUNDLED_RULES_DIR, RuleCatalog
from .compiler import RuleCompiler
from .exceptions import RuleKitError
from .models import Agent
from .paths import resolve_file_path

SUPPORTED_FORMATS = ("json",)

app = typer.Typer(
    name="rulekit",
    help="rulekit: Agent-specific development rules from shared templates",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _get_version_string() -> str:
    """Get version string from package metadata."""
    try:
        return get_version("rulekit")
    except PackageNotFoundError:
        return "unknown"


def _configure_logging(verbose: bool) -> None:
    """Send debug logs to stderr so stdout stays machine-readable."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True, highlight=False)
    raise typer.Exit(1)


def version_callback(value: bool) -> None:
    """Callback for --version flag."""
    if value:
        console.print(f"rulekit version {_get_version_string()}")
        raise typer.Exit


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """rulekit: Agent-specific development rules from shared templates."""


@app.command("scaffold-rules")
def scaffold_rules(
    agent: str = typer.Option(
        Agent.CLAUDE.value,
        "--agent",
        "-a",
        help=f"Target agent ({', '.join(Agent.names())})",
    ),
    output_format: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="Output format (json)",
    ),
    rules: list[str] | None = typer.Option(
        None,
        "--rules",
        "-r",
        help="Only include these rules (can be repeated)",
    ),
    rules_dir: Path = typer.Option(
        BUNDLED_RULES_DIR,
        "--rules-dir",
        help="Directory of rule templates (defaults to the bundled rules)",
        show_default=False,
    ),
    development_skills: bool = typer.Option(
        True,
        "--development-skills/--no-development-skills",
        help="Render content for the development-skills toolset",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log rendering details to stderr",
    ),
) -> None:
    """Render the rule templates for an agent and print them as JSON.

    Examples:
        rulekit scaffold-rules --agent=cursor
        rulekit scaffold-rules --agent=agents-md --rules testing --rules bun-apis
    """
    _configure_logging(verbose)

    try:
        target = Agent.parse(agent)
    except RuleKitError as e:
        _fail(str(e))

    if output_format not in SUPPORTED_FORMATS:
        _fail(
            f'Invalid format "{output_format}". '
            f"Must be one of: {', '.join(SUPPORTED_FORMATS)}",
        )

    try:
        matrix = AgentMatrix()
        context = matrix.build_context(target, has_development_skills=development_skills)
        compiler = RuleCompiler(
            context,
            matrix.output_format(target),
            catalog=RuleCatalog(rules_dir),
        )
        output = compiler.compile(rules or None)
    except RuleKitError as e:
        _fail(str(e))

    typer.echo(output.to_json())


@app.command()
def agents() -> None:
    """Show the capability matrix of every supported agent."""
    try:
        matrix = AgentMatrix()
        profiles = matrix.load()
    except RuleKitError as e:
        _fail(str(e))

    table = Table(title="Agent Capabilities")
    table.add_column("Agent", style="cyan")
    table.add_column("Rules Path", style="green")
    table.add_column("Format")
    table.add_column("Sandbox")
    table.add_column("Multi-file")
    table.add_column("Slash Commands")
    table.add_column("AGENTS.md")

    def mark(flag: bool) -> str:
        return "[green]yes[/green]" if flag else "[dim]no[/dim]"

    for agent, profile in profiles.items():
        caps = profile.capabilities
        table.add_row(
            agent.value,
            profile.rules_path,
            matrix.output_format(agent).value,
            mark(caps.has_sandbox),
            mark(caps.multi_file_rules),
            mark(caps.supports_slash_commands),
            mark(caps.supports_agents_md),
        )

    console.print(table)


@app.command("resolve-path")
def resolve_path(
    path: str = typer.Argument(..., help="File path or package specifier"),
) -> None:
    """Resolve a file path or package specifier to an absolute path."""
    typer.echo(resolve_file_path(path))


@app.command()
def version() -> None:
    """Show rulekit version information."""
    console.print(f"rulekit version {_get_version_string()}")


def main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
