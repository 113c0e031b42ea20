"""
In-process phrase lookup engine.

PhraseEngine stores phrase trees per locale, flattens them into compiled
tables for bundles, and resolves dotted keys at runtime with fallback to the
default locale.

Usage Examples:
    >>> engine = PhraseEngine("en")
    >>> engine.add_phrase("en", "users.profile", {"title": "Hello, {name}!"})
    >>> engine.translate("en", "users.profile.title", name="Alice")
    'Hello, Alice!'
    >>> engine.get_compiled_data("en")
    {'users.profile.title': 'Hello, {name}!'}
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from .phrase_tree import PhraseTree, deep_merge, is_tree

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "."


def serialize(data: object) -> str:
    """
    Deterministically serialize compiled phrase data.

    Keys are sorted and whitespace is compact, so equal data always yields
    byte-identical output.
    """
    return json.dumps(data, sort_keys=True, ensure_ascii=False, separators=(",", ":"))


def _split_key(key: str) -> list[str]:
    return [part for part in key.split(KEY_SEPARATOR) if part]


def _flatten(tree: Mapping[str, object], prefix: str, out: dict[str, object]) -> None:
    for key, value in tree.items():
        full_key = f"{prefix}{KEY_SEPARATOR}{key}" if prefix else key
        if is_tree(value):
            _flatten(value, full_key, out)  # pyright: ignore[reportArgumentType]
        else:
            out[full_key] = value


class PhraseEngine:
    """
    Phrase storage and lookup for a set of locales.

    Each instance is independent; the pipeline builds one for runtime lookups
    and a separate one per package for bundle compilation.
    """

    def __init__(self, default_locale: str) -> None:
        self.default_locale: str = default_locale
        self._phrases: dict[str, PhraseTree] = {}

    @property
    def locales(self) -> list[str]:
        """Locales that have at least one phrase registered."""
        return list(self._phrases)

    def add_phrase(self, locale: str, scope: str, phrases: object) -> None:
        """
        Register phrases for a locale under a dotted scope.

        A tree is deep-merged into anything already registered at that scope;
        a leaf replaces it.
        """
        parts = _split_key(scope)
        root = self._phrases.setdefault(locale, {})

        if not parts:
            if not is_tree(phrases):
                raise ValueError("Phrases without a scope must be a mapping")
            _ = deep_merge(root, phrases)  # pyright: ignore[reportArgumentType]
            return

        node: dict[str, object] = root  # pyright: ignore[reportAssignmentType]
        for part in parts[:-1]:
            child = node.get(part)
            if not is_tree(child):
                child = {}
                node[part] = child
            node = child  # pyright: ignore[reportAssignmentType]

        _ = deep_merge(node, {parts[-1]: phrases})

    def load(self, locale: str, compiled: Mapping[str, object]) -> None:
        """Install compiled (flat, dotted-key) data for a locale."""
        for key, value in compiled.items():
            self.add_phrase(locale, key, value)

    def get_compiled_data(self, locale: str) -> dict[str, object]:
        """
        Return the flat compiled table for a locale.

        Keys are full dotted phrase keys, sorted; values are leaves.
        """
        flat: dict[str, object] = {}
        _flatten(self._phrases.get(locale, {}), "", flat)
        return dict(sorted(flat.items()))

    def _lookup(self, locale: str, key: str) -> object | None:
        node: object = self._phrases.get(locale)
        for part in _split_key(key):
            if not is_tree(node):
                return None
            node = node.get(part)  # pyright: ignore[reportAttributeAccessIssue,reportUnknownMemberType,reportUnknownVariableType]
        if node is None or is_tree(node):
            return None
        return node

    def has_phrase(self, locale: str, key: str) -> bool:
        """Check whether a key resolves to a phrase in the locale itself."""
        return self._lookup(locale, key) is not None

    def translate(self, locale: str, key: str, **params: object) -> str:
        """
        Resolve a phrase and interpolate params.

        Falls back to the default locale; a plural form list is indexed by the
        ``count`` param (first form for one, second form otherwise).

        Returns:
            The translated string, or ``[locale].key`` if the key is missing
        """
        value = self._lookup(locale, key)
        if value is None and locale != self.default_locale:
            value = self._lookup(self.default_locale, key)

        if value is None:
            logger.warning(f"Missing phrase {key} for locale {locale}")
            return f"[{locale}].{key}"

        if isinstance(value, list):
            value = self._pick_plural(value, params.get("count"))  # pyright: ignore[reportUnknownArgumentType]

        text = str(value)
        if params:
            try:
                return text.format(**params)
            except (KeyError, IndexError, ValueError) as e:
                logger.warning(f"Phrase formatting error for '{key}': {e}")
        return text

    @staticmethod
    def _pick_plural(forms: list[object], count: object) -> object:
        if not forms:
            return ""
        if count == 1 or len(forms) == 1:
            return forms[0]
        return forms[1]
