"""
Loading of a single phrase source file.

Sources are parsed as data only (YAML or JSON); nothing in a source file is
ever executed. Each source maps locale codes to phrase trees:

    en:
      title: Hello
      users:
        count: ["{count} user", "{count} users"]
    ru:
      title: Привет
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable

import yaml

from ..config.schema import is_path_safe_name
from ..utils.core.exceptions import SourceLoadError
from .path_resolver import Candidate
from .phrase_tree import PhraseTree

logger = logging.getLogger(__name__)


def _parse_yaml(text: str) -> object:
    return yaml.safe_load(text)  # pyright: ignore[reportAny]


def _parse_json(text: str) -> object:
    return json.loads(text)  # pyright: ignore[reportAny]


PARSERS: dict[str, Callable[[str], object]] = {
    ".yml": _parse_yaml,
    ".yaml": _parse_yaml,
    ".json": _parse_json,
}


LEAF_TYPES = (str, int, float, bool, type(None))


def _normalize_value(value: object, candidate: Candidate, key_path: str) -> object:
    if isinstance(value, dict):
        return {
            str(key): _normalize_value(child, candidate, f"{key_path}.{key}")
            for key, child in value.items()  # pyright: ignore[reportUnknownVariableType]
        }
    if isinstance(value, list):
        return [_normalize_value(item, candidate, key_path) for item in value]  # pyright: ignore[reportUnknownVariableType]
    if isinstance(value, LEAF_TYPES):
        return value
    raise SourceLoadError(
        f"Failed read {candidate}: unsupported value of type {type(value).__name__} at {key_path}",
        location=candidate.location,
    )


def _validate_document(document: object, candidate: Candidate) -> dict[str, PhraseTree]:
    if document is None:
        return {}

    if not isinstance(document, dict):
        raise SourceLoadError(
            f"Failed read {candidate}: expected a mapping of locales, "
            f"got {type(document).__name__}",
            location=candidate.location,
        )

    translations: dict[str, PhraseTree] = {}
    for locale, phrases in document.items():  # pyright: ignore[reportUnknownVariableType]
        if isinstance(locale, bool):
            # YAML 1.1 reads unquoted yes/no/on/off keys as booleans
            raise SourceLoadError(
                f"Failed read {candidate}: invalid locale key {locale!r}; "
                f"quote the locale code (e.g. 'no':) so YAML keeps it a string",
                location=candidate.location,
            )
        if not isinstance(locale, str) or not is_path_safe_name(locale):
            raise SourceLoadError(
                f"Failed read {candidate}: invalid locale key {locale!r}",
                location=candidate.location,
            )
        if phrases is None:
            phrases = {}
        if not isinstance(phrases, dict):
            raise SourceLoadError(
                f"Failed read {candidate}: phrases for locale {locale!r} must be a mapping, "
                f"got {type(phrases).__name__}",  # pyright: ignore[reportUnknownArgumentType]
                location=candidate.location,
            )
        translations[locale] = _normalize_value(phrases, candidate, locale)  # pyright: ignore[reportAssignmentType]

    return translations


def load_phrase_source(candidate: Candidate) -> dict[str, PhraseTree]:
    """
    Read and parse one phrase source.

    Args:
        candidate: The discovered source to load

    Returns:
        Mapping of locale code to phrase tree, in document order

    Raises:
        SourceLoadError: If the file cannot be read, parsed, or has the wrong shape
    """
    parser = PARSERS.get(candidate.location.suffix.lower())
    if parser is None:
        raise SourceLoadError(
            f"Failed read {candidate}: unsupported phrase source type "
            f"'{candidate.location.suffix}'",
            location=candidate.location,
        )

    try:
        text = candidate.location.read_text(encoding="utf-8")
        document = parser(text)
    except (OSError, UnicodeDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise SourceLoadError(
            f"Failed read {candidate}: {e}", location=candidate.location
        ) from e

    translations = _validate_document(document, candidate)
    logger.debug(
        f"Loaded {candidate} ({candidate.api_key}): {', '.join(translations) or 'no locales'}"
    )
    return translations
