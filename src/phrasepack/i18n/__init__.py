"""Phrase collection, locale resolution, runtime registration and bundle compilation."""

from .bundle_compiler import CompilationResult, compile_all_bundles
from .collector import PackageTree, collect_translations, collect_translations_tree
from .engine import PhraseEngine, serialize
from .locales import LocaleSet, get_available_locales, resolve_locale_set
from .path_resolver import Candidate, resolve_paths
from .phrase_tree import deep_merge
from .registrar import register_runtime_phrases
from .source_loader import load_phrase_source

__all__ = [
    "Candidate",
    "CompilationResult",
    "LocaleSet",
    "PackageTree",
    "PhraseEngine",
    "collect_translations",
    "collect_translations_tree",
    "compile_all_bundles",
    "deep_merge",
    "get_available_locales",
    "load_phrase_source",
    "register_runtime_phrases",
    "resolve_locale_set",
    "resolve_paths",
    "serialize",
]
