"""Resolve file paths and package specifiers to absolute paths."""

from __future__ import annotations

import importlib.util
import os
import re
from pathlib import Path

from .exceptions import PathResolutionError

SOURCE_FILE = re.compile(r"\.(py|pyi|tsx?|jsx?|mjs|cjs|json)$")


def looks_like_file_path(path: str) -> bool:
    """Check if a path looks like a file path rather than a package specifier.

    File paths contain a ``/`` and end with a source file extension.
    Scoped specifiers starting with ``@`` never count as file paths.
    """
    if path.startswith("@"):
        return False
    return "/" in path and SOURCE_FILE.search(path) is not None


def resolve_package_path(specifier: str) -> str:
    """Resolve ``package`` or ``package/sub/file`` through the import system.

    Raises:
        PathResolutionError: If the package is not importable or the file
            does not exist inside it
    """
    package, _, rest = specifier.partition("/")
    if not package.isidentifier():
        msg = f"Not an importable package name: {package}"
        raise PathResolutionError(msg, details={"specifier": specifier})

    try:
        spec = importlib.util.find_spec(package)
    except (ImportError, ValueError) as e:
        msg = f"Failed to resolve package {package}: {e}"
        raise PathResolutionError(msg, details={"specifier": specifier}) from e

    if spec is None or spec.origin is None:
        msg = f"Package not found: {package}"
        raise PathResolutionError(msg, details={"specifier": specifier})

    if not rest:
        return str(Path(spec.origin).resolve())

    locations = list(spec.submodule_search_locations or [])
    for location in locations:
        candidate = Path(location) / rest
        if candidate.exists():
            return str(candidate.resolve())

    msg = f"File not found in package {package}: {rest}"
    raise PathResolutionError(msg, details={"specifier": specifier})


def resolve_file_path(path: str, cwd: str | None = None) -> str:
    """Resolve a file path to an absolute path.

    Handles three kinds of input:

    - Absolute paths (starting with ``/``): returned as-is
    - Relative paths (starting with ``.`` or looking like ``src/foo.py``):
      joined to the working directory
    - Package paths (e.g., ``rulekit/rules/testing.md``): resolved through
      the import system, falling back to the working directory
    """
    base = cwd if cwd is not None else os.getcwd()

    if path.startswith("/"):
        return path

    if path.startswith(".") or looks_like_file_path(path):
        return os.path.normpath(os.path.join(base, path))

    try:
        return resolve_package_path(path)
    except PathResolutionError:
        return os.path.normpath(os.path.join(base, path))
