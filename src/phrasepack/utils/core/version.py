"""
Version utilities for phrasepack.

Reads the installed distribution version, falling back to pyproject.toml
when running from a source checkout.
"""

import logging
import tomllib
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "phrasepack"


@lru_cache(maxsize=1)
def get_version() -> str:
    """
    Get the project version.

    Returns:
        Version string (e.g., "1.0.0"), or "unknown" if it cannot be determined
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug("importlib.metadata failed, falling back to pyproject.toml")

    try:
        return _read_version_from_pyproject()
    except RuntimeError as e:
        logger.debug(f"Could not read version: {e}")
        return "unknown"


def _read_version_from_pyproject() -> str:
    """Read the version field from the source checkout's pyproject.toml."""
    pyproject_path = Path(__file__).parents[4] / "pyproject.toml"

    if not pyproject_path.exists():
        raise RuntimeError("pyproject.toml not found")

    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)

        project_data = data.get("project")
        if not isinstance(project_data, dict):
            raise KeyError("project section not found or invalid")

        project_version = project_data.get("version")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        if not isinstance(project_version, str):
            raise KeyError("version field not found or not a string")

        return project_version
    except (KeyError, OSError, tomllib.TOMLDecodeError) as e:
        raise RuntimeError(f"Failed to read version from pyproject.toml: {e}") from e
