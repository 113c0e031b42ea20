"""
Command-line argument parsing for phrasepack.

This module parses the configuration file location, an optional bundle
output directory override, and logging options.
"""

import argparse
import sys
from pathlib import Path
from typing import NamedTuple

from ..core.version import get_version


class PathValidationError(Exception):
    """Raised when a path validation fails."""

    pass


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    config_file: Path
    output_dir: Path | None
    log_folder: Path | None
    verbose: bool


class DefaultPaths:
    """Default paths for phrasepack."""

    CONFIG_FILE: Path = Path("phrasepack.yml")


def validate_config_file_path(config_file_str: str) -> Path:
    """
    Validate configuration file path.

    Args:
        config_file_str: String path to configuration file

    Returns:
        Resolved Path object for the configuration file

    Raises:
        PathValidationError: If the configuration file path is invalid
    """
    try:
        config_file = Path(config_file_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid config file path: {e}") from e

    if not config_file.exists():
        raise PathValidationError(f"Config file does not exist: {config_file}")

    if not config_file.is_file():
        raise PathValidationError(
            f"Config file path exists but is not a file: {config_file}"
        )

    return config_file


def validate_folder_path(path_str: str, folder_name: str) -> Path:
    """
    Validate and resolve a folder path.

    Args:
        path_str: String representation of the folder path
        folder_name: Name of the folder (for error messages)

    Returns:
        Resolved absolute path to the folder

    Raises:
        PathValidationError: If the path is invalid
    """
    try:
        path = Path(path_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid {folder_name} path: {e}") from e

    if path.exists() and not path.is_dir():
        raise PathValidationError(
            f"{folder_name.capitalize()} path exists but is not a directory: {path}"
        )

    return path


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for phrasepack.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="phrasepack",
        description="Collect package phrase sources and compile per-locale translation bundles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  phrasepack
    Build bundles using ./phrasepack.yml

  phrasepack --config-file app/phrasepack.yml --output-dir public/i18n
    Use a custom config file and write bundles elsewhere

  phrasepack --verbose --log-folder logs
    Log every discovered source and written bundle, also to logs/phrasepack.log
""",
    )

    _ = parser.add_argument(
        "--config-file",
        type=str,
        default=str(DefaultPaths.CONFIG_FILE),
        help="Path to the configuration file (default: %(default)s)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for compiled bundles (overrides output.directory in the config)",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--log-folder",
        type=str,
        default=None,
        help="Also write logs to a rotating file in this folder",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs containing validated and resolved paths

    Raises:
        SystemExit: If argument parsing or path validation fails, or --help is requested
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    config_file_str: str = getattr(parsed, "config_file", "")
    output_dir_str: str | None = getattr(parsed, "output_dir", None)
    log_folder_str: str | None = getattr(parsed, "log_folder", None)
    verbose: bool = getattr(parsed, "verbose", False)

    try:
        config_file = validate_config_file_path(config_file_str)
        output_dir = (
            validate_folder_path(output_dir_str, "output folder") if output_dir_str else None
        )
        log_folder = (
            validate_folder_path(log_folder_str, "log folder") if log_folder_str else None
        )
    except PathValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    return ParsedArgs(
        config_file=config_file,
        output_dir=output_dir,
        log_folder=log_folder,
        verbose=verbose,
    )
