"""Custom exceptions for rulekit."""

from typing import Any


class RuleKitError(Exception):
    """Base exception for all rulekit errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}


class CatalogError(RuleKitError):
    """Raised when the rule template catalog cannot be read."""


class AgentConfigError(RuleKitError):
    """Raised when the agent capability matrix is missing or invalid."""


class InvalidAgentError(RuleKitError):
    """Raised when an agent name is not one of the supported agents."""


class PathResolutionError(RuleKitError):
    """Raised when a package specifier cannot be resolved to a file."""
