"""
Compilation of per-package, per-locale translation bundles.

Each package gets its own PhraseEngine holding only its client-side phrases,
so a bundle never carries phrases from another package. For every enabled
locale one self-loading artifact is written:

    <output_dir>/<package>/<locale>.<extension>

containing

    <loader>("<locale>",<compiled data>);
"""

from __future__ import annotations

import json
import logging
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import override

from ..utils.core.exceptions import OutputError
from .engine import PhraseEngine, serialize
from .locales import LocaleSet
from .phrase_tree import LocaleTable

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "js"
DEFAULT_LOADER = "N.runtime.i18n.load"


class CompilationResult:
    """Result of a bundle compilation run."""

    def __init__(self) -> None:
        self.compiled_files: list[Path] = []
        self.packages: list[str] = []

    @property
    def success_count(self) -> int:
        """Number of written bundles."""
        return len(self.compiled_files)

    @property
    def package_count(self) -> int:
        """Number of packages processed."""
        return len(self.packages)

    @override
    def __str__(self) -> str:
        return (
            f"Compilation Results: "
            f"{self.success_count} bundle(s) written "
            f"for {self.package_count} package(s)"
        )


def render_bundle(locale: str, compiled: object, loader: str = DEFAULT_LOADER) -> str:
    """Wrap compiled phrase data in a load statement for the locale."""
    return f"{loader}({json.dumps(locale)},{serialize(compiled)});\n"


def _write_atomic(path: Path, content: str) -> None:
    temp_file = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            _ = temp_file.write(content)
            temp_file.flush()
            temp_path = Path(temp_file.name)

        _ = temp_path.replace(path)

    except OSError:
        if temp_file and Path(temp_file.name).exists():
            Path(temp_file.name).unlink(missing_ok=True)
        raise


def build_package_engine(client_table: LocaleTable, locale_set: LocaleSet) -> PhraseEngine:
    """Create an engine holding one package's client phrases for enabled locales."""
    engine = PhraseEngine(locale_set.default)

    for locale in locale_set.enabled:
        for scope, phrases in client_table.get(locale, {}).items():
            engine.add_phrase(locale, scope, phrases)

    return engine


def compile_package_bundles(
    package_name: str,
    client_table: LocaleTable,
    locale_set: LocaleSet,
    output_dir: Path,
    extension: str = DEFAULT_EXTENSION,
    loader: str = DEFAULT_LOADER,
) -> list[Path]:
    """
    Write one bundle per enabled locale for a single package.

    Returns:
        Written bundle paths, in enabled-locale order

    Raises:
        OutputError: If the package directory or a bundle cannot be written
    """
    engine = build_package_engine(client_table, locale_set)
    package_dir = output_dir / package_name

    try:
        package_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(
            f"Failed to create bundle directory {package_dir} for package '{package_name}': {e}",
            package=package_name,
            path=package_dir,
        ) from e

    written: list[Path] = []
    for locale in locale_set.enabled:
        outfile = package_dir / f"{locale}.{extension}"
        script = render_bundle(locale, engine.get_compiled_data(locale), loader)

        try:
            _write_atomic(outfile, script)
        except OSError as e:
            raise OutputError(
                f"Failed to write bundle {outfile} for package '{package_name}', "
                f"locale '{locale}': {e}",
                package=package_name,
                locale=locale,
                path=outfile,
            ) from e

        logger.debug(f"Wrote {outfile}")
        written.append(outfile)

    return written


def compile_all_bundles(
    tree: Mapping[str, Mapping[str, LocaleTable]],
    locale_set: LocaleSet,
    output_dir: Path,
    extension: str = DEFAULT_EXTENSION,
    loader: str = DEFAULT_LOADER,
) -> CompilationResult:
    """
    Compile bundles for every package, in tree order.

    The first failure stops compilation; bundles already written for earlier
    packages are left in place.

    Args:
        tree: The collected package tree
        locale_set: The resolved locale set
        output_dir: Root directory for bundles
        extension: Bundle file extension, without the dot
        loader: Runtime expression that receives (locale, data)

    Returns:
        CompilationResult with the written files
    """
    result = CompilationResult()

    for package_name, package_tree in tree.items():
        written = compile_package_bundles(
            package_name,
            package_tree.get("client", {}),
            locale_set,
            output_dir,
            extension=extension,
            loader=loader,
        )
        result.compiled_files.extend(written)
        result.packages.append(package_name)

    logger.info(str(result))
    return result
