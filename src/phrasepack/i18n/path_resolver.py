"""
Discovery of phrase source files under configured lookup roots.

Order contract:
    1. lookups are expanded in the order they are configured
    2. within a lookup, patterns are expanded in the order given
    3. matches of one pattern are sorted by their POSIX path relative to root

The first occurrence of a file wins when several patterns or lookups match it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..config.schema import LookupConfig
from ..utils.core.exceptions import DiscoveryError

logger = logging.getLogger(__name__)

API_KEY_SEPARATOR = "."


@dataclass(frozen=True)
class Candidate:
    """A discovered phrase source and the scope it contributes to."""

    location: Path
    api_key: str

    def __str__(self) -> str:
        return str(self.location)


def derive_api_key(location: Path, root: Path, api_prefix: str | None = None) -> str:
    """
    Derive a scope name from a source path relative to its root.

    Examples:
        >>> derive_api_key(Path("/i18n/users/profile.yml"), Path("/i18n"))
        'users.profile'
        >>> derive_api_key(Path("/i18n/common.json"), Path("/i18n"), "forum")
        'forum.common'
    """
    relative = location.relative_to(root).with_suffix("")
    api_key = API_KEY_SEPARATOR.join(relative.parts)
    if api_prefix:
        api_key = f"{api_prefix}{API_KEY_SEPARATOR}{api_key}"
    return api_key


def _expand_lookup(lookup: LookupConfig) -> list[Candidate]:
    root = lookup.root

    if not root.exists():
        raise DiscoveryError(f"Lookup root does not exist: {root}", root=root)
    if not root.is_dir():
        raise DiscoveryError(f"Lookup root is not a directory: {root}", root=root)

    candidates: list[Candidate] = []
    try:
        # Path.glob skips unreadable directories silently
        with os.scandir(root):
            pass
        for pattern in lookup.patterns:
            matches = [path for path in root.glob(pattern) if path.is_file()]
            matches.sort(key=lambda path: path.relative_to(root).as_posix())
            for path in matches:
                candidates.append(
                    Candidate(
                        location=path,
                        api_key=derive_api_key(path, root, lookup.api_prefix),
                    )
                )
    except OSError as e:
        raise DiscoveryError(f"Failed to read lookup root {root}: {e}", root=root) from e

    return candidates


def resolve_paths(lookups: Iterable[LookupConfig]) -> list[Candidate]:
    """
    Expand lookup roots into an ordered, deduplicated list of candidates.

    Args:
        lookups: Lookup configurations for one package side

    Returns:
        Candidates in discovery order

    Raises:
        DiscoveryError: If any root is missing or unreadable
    """
    seen: set[Path] = set()
    candidates: list[Candidate] = []

    for lookup in lookups:
        for candidate in _expand_lookup(lookup):
            key = candidate.location.resolve()
            if key in seen:
                logger.debug(f"Skipping duplicate phrase source {candidate.location}")
                continue
            seen.add(key)
            candidates.append(candidate)

    logger.debug(f"Resolved {len(candidates)} phrase source(s)")
    return candidates
