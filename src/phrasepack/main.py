"""
Main entry point for phrasepack.

This module sets up logging, loads the configuration, runs the translation
pipeline and maps failures to a process exit code.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .config.manager import ConfigManager
from .pipeline import run_pipeline
from .utils.cli.args import parse_arguments
from .utils.core.exceptions import PhrasePackError

LOG_FILE_NAME = "phrasepack.log"


def setup_logging(verbose: bool = False, log_folder: Path | None = None) -> None:
    """
    Configure console logging and, optionally, a rotating log file.

    Args:
        verbose: Log debug messages to the console
        log_folder: Folder for the rotating log file; no file logging if None
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    )
    simple_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    if log_folder is not None:
        log_folder.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_folder / LOG_FILE_NAME,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)


def main(argv: list[str] | None = None) -> int:
    """
    Run the pipeline from the command line.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.log_folder)

    logger = logging.getLogger(__name__)

    try:
        config = ConfigManager.load_config(args.config_file)
        context = run_pipeline(config, args.output_dir)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1
    except PhrasePackError as e:
        logger.error(f"Translation pipeline failed: {e}")
        if args.verbose:
            logger.exception("Full traceback:")
        return 1
    except (ValidationError, yaml.YAMLError, ValueError, OSError) as e:
        logger.error(f"Failed to load configuration {args.config_file}: {e}")
        return 1

    logger.info(
        f"Wrote {context.result.success_count} bundle(s) to {context.output_dir}"
    )
    return 0
