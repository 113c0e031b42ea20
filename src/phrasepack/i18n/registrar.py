"""Registration of collected phrases into the runtime phrase engine."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .engine import PhraseEngine
from .locales import LocaleSet
from .phrase_tree import LocaleTable, merged

logger = logging.getLogger(__name__)


def combine_package_sides(package_tree: Mapping[str, LocaleTable]) -> LocaleTable:
    """Merge a package's client table over its server table (client wins)."""
    return merged(package_tree.get("server", {}), package_tree.get("client", {}))  # pyright: ignore[reportReturnType]


def register_runtime_phrases(
    tree: Mapping[str, Mapping[str, LocaleTable]], locale_set: LocaleSet
) -> PhraseEngine:
    """
    Build the process-wide phrase engine from every package.

    Only enabled locales are registered. Packages are applied in tree order,
    so a later package extends or overrides an earlier one's scopes.

    Args:
        tree: The collected package tree
        locale_set: The resolved locale set

    Returns:
        A populated PhraseEngine scoped to the default locale
    """
    engine = PhraseEngine(locale_set.default)
    registered = 0

    for package_tree in tree.values():
        combined = combine_package_sides(package_tree)

        for locale in locale_set.enabled:
            for scope, phrases in combined.get(locale, {}).items():
                engine.add_phrase(locale, scope, phrases)
                registered += 1

    logger.info(f"Registered {registered} runtime phrase scope(s)")
    return engine
