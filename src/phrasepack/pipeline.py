"""
Translation aggregation pipeline.

A run builds the package tree, resolves the locale set, registers runtime
phrases and compiles bundles, in that order. All state produced by a run
lives on its PipelineContext; nothing is stored in module globals.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from .config.schema import PhrasePackConfig
from .i18n.bundle_compiler import CompilationResult, compile_all_bundles
from .i18n.collector import PackageTree, collect_translations_tree
from .i18n.engine import PhraseEngine
from .i18n.locales import LocaleSet, resolve_locale_set
from .i18n.phrase_tree import LocaleTable
from .i18n.registrar import register_runtime_phrases

logger = logging.getLogger(__name__)


class PipelineContext:
    """
    State of one pipeline run.

    Stage results are exposed through read-only properties, which raise
    RuntimeError when read before the stage producing them has run.
    """

    def __init__(self, config: PhrasePackConfig, output_dir: Path | None = None) -> None:
        self.config: PhrasePackConfig = config
        self.output_dir: Path = output_dir or config.output.directory
        self._tree: PackageTree | None = None
        self._locale_set: LocaleSet | None = None
        self._engine: PhraseEngine | None = None
        self._result: CompilationResult | None = None

    @property
    def tree(self) -> Mapping[str, Mapping[str, LocaleTable]]:
        """The collected package tree."""
        if self._tree is None:
            raise RuntimeError("Package tree has not been collected")
        return MappingProxyType(self._tree)  # pyright: ignore[reportReturnType]

    @property
    def locale_set(self) -> LocaleSet:
        """The resolved locale set."""
        if self._locale_set is None:
            raise RuntimeError("Locales have not been resolved")
        return self._locale_set

    @property
    def engine(self) -> PhraseEngine:
        """The runtime phrase engine."""
        if self._engine is None:
            raise RuntimeError("Runtime phrases have not been registered")
        return self._engine

    @property
    def result(self) -> CompilationResult:
        """The bundle compilation result."""
        if self._result is None:
            raise RuntimeError("Bundles have not been compiled")
        return self._result

    def collect(self) -> PackageTree:
        """Build the package tree from configured lookups."""
        self._tree = collect_translations_tree(self.config.packages)
        return self._tree

    def resolve_locales(self) -> LocaleSet:
        """Resolve and validate the locale set against the collected tree."""
        self._locale_set = resolve_locale_set(self.tree, self.config.locales)
        return self._locale_set

    def register(self) -> PhraseEngine:
        """Populate the runtime phrase engine."""
        self._engine = register_runtime_phrases(self.tree, self.locale_set)
        return self._engine

    def compile(self) -> CompilationResult:
        """Write per-package, per-locale bundles."""
        self._result = compile_all_bundles(
            self.tree,
            self.locale_set,
            self.output_dir,
            extension=self.config.output.extension,
            loader=self.config.output.loader,
        )
        return self._result


def run_pipeline(config: PhrasePackConfig, output_dir: Path | None = None) -> PipelineContext:
    """
    Run every pipeline stage in order.

    Args:
        config: Validated configuration
        output_dir: Overrides the configured bundle directory

    Returns:
        The completed PipelineContext

    Raises:
        PhrasePackError: From the first stage that fails
    """
    start = time.perf_counter()
    context = PipelineContext(config, output_dir)

    _ = context.collect()
    _ = context.resolve_locales()
    _ = context.register()
    _ = context.compile()

    elapsed = time.perf_counter() - start
    logger.info(f"Processed i18n sections in {elapsed:.3f}s")
    return context
