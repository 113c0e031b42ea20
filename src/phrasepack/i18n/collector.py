"""
Aggregation of phrase sources into per-package locale tables.

collect_translations() folds one package side; collect_translations_tree()
runs it over every configured package. Both are strictly sequential: the
merge result depends on the order sources are discovered, and the first
failure stops the run so the error points at a single source.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..config.schema import LookupConfig, PackageConfig
from .path_resolver import resolve_paths
from .phrase_tree import SIDES, LocaleTable, deep_merge
from .source_loader import load_phrase_source

logger = logging.getLogger(__name__)

# package -> side ("client" | "server") -> locale table
PackageTree = dict[str, dict[str, LocaleTable]]


def collect_translations(lookups: Iterable[LookupConfig]) -> LocaleTable:
    """
    Collect every phrase source of one package side into a locale table.

    A later source for the same (locale, scope) is deep-merged over earlier
    ones, so a source may extend a scope partially.

    Args:
        lookups: Lookup configurations for the side

    Returns:
        Locale table: locale -> scope -> phrase tree

    Raises:
        DiscoveryError: If a lookup root cannot be read
        SourceLoadError: If any source fails to load
    """
    translations: LocaleTable = {}

    for candidate in resolve_paths(lookups):
        data = load_phrase_source(candidate)

        for locale, phrases in data.items():
            scopes = translations.setdefault(locale, {})
            _ = deep_merge(scopes.setdefault(candidate.api_key, {}), phrases)  # pyright: ignore[reportArgumentType]

    return translations


def collect_translations_tree(packages: Mapping[str, PackageConfig]) -> PackageTree:
    """
    Build the full package tree, packages in configuration order.

    Args:
        packages: Package configurations keyed by package name

    Returns:
        package -> {"client": LocaleTable, "server": LocaleTable}
    """
    tree: PackageTree = {}

    for package_name, package_config in packages.items():
        tree[package_name] = {side: {} for side in SIDES}

        for side in SIDES:
            lookups = package_config.lookups_for(side)
            if not lookups:
                continue

            logger.debug(f"Collecting {side} phrases for package '{package_name}'")
            _ = deep_merge(tree[package_name][side], collect_translations(lookups))  # pyright: ignore[reportArgumentType]

    return tree
