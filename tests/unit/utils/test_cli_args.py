"""Unit tests for CLI argument parsing."""

from pathlib import Path

import pytest

from src.phrasepack.utils.cli.args import (
    DefaultPaths,
    ParsedArgs,
    PathValidationError,
    create_argument_parser,
    parse_arguments,
    validate_config_file_path,
    validate_folder_path,
)


class TestDefaultPaths:
    """Test the DefaultPaths class."""

    def test_default_values(self) -> None:
        """Test that default paths are correctly set."""
        assert DefaultPaths.CONFIG_FILE == Path("phrasepack.yml")


class TestPathValidation:
    """Test path validation functions."""

    def test_validate_config_file_path_valid(self, tmp_path: Path) -> None:
        """Test validation of an existing config file."""
        config_file = tmp_path / "phrasepack.yml"
        _ = config_file.touch()

        assert validate_config_file_path(str(config_file)) == config_file.resolve()

    def test_validate_config_file_path_missing(self, tmp_path: Path) -> None:
        """Test that a missing config file is rejected."""
        with pytest.raises(PathValidationError, match="Config file does not exist"):
            _ = validate_config_file_path(str(tmp_path / "missing.yml"))

    def test_validate_config_file_path_is_directory(self, tmp_path: Path) -> None:
        """Test validation of a path that is a directory instead of a file."""
        with pytest.raises(PathValidationError, match="exists but is not a file"):
            _ = validate_config_file_path(str(tmp_path))

    def test_validate_config_file_path_invalid_characters(self) -> None:
        """Test validation of a path with invalid characters."""
        with pytest.raises(PathValidationError, match="Invalid config file path"):
            _ = validate_config_file_path("\0invalid\0path")

    def test_validate_folder_path_new(self, tmp_path: Path) -> None:
        """Test a folder that does not exist yet is accepted."""
        folder = tmp_path / "new"

        assert validate_folder_path(str(folder), "output folder") == folder.resolve()

    def test_validate_folder_path_is_file(self, tmp_path: Path) -> None:
        """Test a file in place of a folder is rejected."""
        file_path = tmp_path / "file.txt"
        _ = file_path.touch()

        with pytest.raises(PathValidationError, match="Output folder path exists but is not a directory"):
            _ = validate_folder_path(str(file_path), "output folder")


class TestParseArguments:
    """Test argument parsing."""

    def test_parse_all_arguments(self, tmp_path: Path) -> None:
        """Test parsing every option."""
        config_file = tmp_path / "phrasepack.yml"
        _ = config_file.touch()

        parsed = parse_arguments(
            [
                "--config-file", str(config_file),
                "--output-dir", str(tmp_path / "out"),
                "--log-folder", str(tmp_path / "logs"),
                "--verbose",
            ]
        )

        assert parsed == ParsedArgs(
            config_file=config_file.resolve(),
            output_dir=(tmp_path / "out").resolve(),
            log_folder=(tmp_path / "logs").resolve(),
            verbose=True,
        )

    def test_optional_arguments_default_to_none(self, tmp_path: Path) -> None:
        """Test optional folders are None when not given."""
        config_file = tmp_path / "phrasepack.yml"
        _ = config_file.touch()

        parsed = parse_arguments(["--config-file", str(config_file)])

        assert parsed.output_dir is None
        assert parsed.log_folder is None
        assert parsed.verbose is False

    def test_invalid_path_exits(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test path validation failures exit with code 1."""
        with pytest.raises(SystemExit) as exc_info:
            _ = parse_arguments(["--config-file", str(tmp_path / "missing.yml")])

        assert exc_info.value.code == 1
        assert "Config file does not exist" in capsys.readouterr().err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test --version prints the program name."""
        parser = create_argument_parser()

        with pytest.raises(SystemExit) as exc_info:
            _ = parser.parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "phrasepack" in capsys.readouterr().out
