"""Resolution and validation of the enabled locale set."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ..config.schema import LocalesConfig
from ..utils.core.exceptions import MergeConfigError
from .phrase_tree import LocaleTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocaleSet:
    """The default locale and the ordered enabled locales of a run."""

    default: str
    enabled: tuple[str, ...]

    def __contains__(self, locale: object) -> bool:
        return locale in self.enabled


def get_available_locales(tree: Mapping[str, Mapping[str, LocaleTable]]) -> list[str]:
    """
    Return every locale present in the tree, in first-seen order.

    Packages are visited in tree order, sides in tree order (client, then
    server), locales in table order.
    """
    locales: list[str] = []

    for package_tree in tree.values():
        for table in package_tree.values():
            for locale in table:
                if locale not in locales:
                    locales.append(locale)

    return locales


def resolve_locale_set(
    tree: Mapping[str, Mapping[str, LocaleTable]],
    config: LocalesConfig | None = None,
) -> LocaleSet:
    """
    Determine the enabled locales and the default locale.

    Explicitly configured values are used verbatim. Otherwise the enabled list
    is derived from the tree and the default is its first element.

    Args:
        tree: The collected package tree
        config: Optional explicit locale configuration

    Returns:
        Validated LocaleSet

    Raises:
        MergeConfigError: If no locale is available or the default is not enabled
    """
    config = config or LocalesConfig()

    enabled = list(config.enabled) if config.enabled else get_available_locales(tree)
    if not enabled:
        raise MergeConfigError(
            "No locales enabled: none configured and no phrase sources found"
        )

    default = config.default or enabled[0]
    if default not in enabled:
        raise MergeConfigError(
            f"Default locale <{default}> must be enabled",
            context={"default": default, "enabled": enabled},
        )

    locale_set = LocaleSet(default=default, enabled=tuple(enabled))
    logger.info(f"Locales: default={locale_set.default}, enabled={', '.join(locale_set.enabled)}")
    return locale_set
