"""
Phrase tree types and the recursive merge used by every aggregation stage.

A phrase tree is a nested mapping of string keys to either another phrase tree
or a leaf. Leaves (strings, numbers, plural form lists) are opaque here; their
grammar belongs to the phrase engine.

Merge policy:
    * mapping over mapping: merge key by key, recursively
    * anything else: the right-hand value replaces the left-hand one,
      including a leaf replacing a subtree and a subtree replacing a leaf
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import TypeAlias

PhraseLeaf: TypeAlias = str | int | float | bool | None | list[object]
PhraseValue: TypeAlias = "PhraseLeaf | PhraseTree"
PhraseTree: TypeAlias = dict[str, "PhraseValue"]

# locale -> scope -> phrase tree
LocaleTable: TypeAlias = dict[str, dict[str, PhraseTree]]

SIDES: tuple[str, str] = ("client", "server")


def is_tree(value: object) -> bool:
    """Return True if value is a nested phrase tree rather than a leaf."""
    return isinstance(value, Mapping)


def deep_merge(target: dict[str, object], source: Mapping[str, object]) -> dict[str, object]:
    """
    Merge source into target in place and return target.

    Values taken from source are deep-copied, so later merges into target
    never write through into the source tree.

    Args:
        target: Tree receiving the values
        source: Tree whose values win on conflict

    Returns:
        The updated target
    """
    for key, value in source.items():
        current = target.get(key)
        if is_tree(current) and is_tree(value):
            _ = deep_merge(current, value)  # pyright: ignore[reportArgumentType]
        elif is_tree(value):
            target[key] = deep_merge({}, value)  # pyright: ignore[reportArgumentType]
        else:
            target[key] = copy.deepcopy(value)
    return target


def merged(*trees: Mapping[str, object]) -> dict[str, object]:
    """Return a new tree with all trees merged left to right."""
    result: dict[str, object] = {}
    for tree in trees:
        _ = deep_merge(result, tree)
    return result
