"""Configuration schema for phrasepack using nested Pydantic models."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PATTERNS = ["**/*.yml", "**/*.yaml", "**/*.json"]


def is_path_safe_name(name: str) -> bool:
    """Whether a package or locale name can be used as a single path component."""
    return bool(name) and name not in {".", ".."} and "/" not in name and "\\" not in name


class LookupConfig(BaseModel):
    """A root directory and the glob patterns searched beneath it."""

    root: Path = Field(
        ...,
        description="Directory containing phrase sources",
    )
    patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PATTERNS),
        description="Glob patterns relative to root, expanded in order",
        min_length=1,
    )
    api_prefix: str | None = Field(
        default=None,
        description="Scope prefix prepended to every scope found under root",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @field_validator("patterns")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject empty and absolute patterns."""
        for pattern in v:
            if not pattern.strip():
                raise ValueError("Lookup patterns must not be empty")
            if pattern.startswith("/"):
                raise ValueError(f"Lookup pattern must be relative to root, got: {pattern}")
        return v

    @field_validator("api_prefix")
    @classmethod
    def validate_api_prefix(cls, v: str | None) -> str | None:
        """Normalize the prefix, treating blank as unset."""
        if v is None:
            return None
        v = v.strip().strip(".")
        return v or None


class PackageConfig(BaseModel):
    """Phrase source lookups for one package."""

    i18n_client: list[LookupConfig] | None = Field(
        default=None,
        description="Lookups for phrases shipped to the client",
    )
    i18n_server: list[LookupConfig] | None = Field(
        default=None,
        description="Lookups for phrases used only on the server",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    def lookups_for(self, side: str) -> list[LookupConfig]:
        """Return the lookups configured for a side, or an empty list."""
        match side:
            case "client":
                return list(self.i18n_client or [])
            case "server":
                return list(self.i18n_server or [])
            case _:
                raise ValueError(f"Unknown package side: {side}")


class LocalesConfig(BaseModel):
    """Explicit locale settings; anything left unset is derived from sources."""

    default: str | None = Field(
        default=None,
        description="Default locale; defaults to the first enabled locale",
    )
    enabled: list[str] | None = Field(
        default=None,
        description="Enabled locales in order; defaults to every locale found",
    )

    @field_validator("default")
    @classmethod
    def validate_default(cls, v: str | None) -> str | None:
        """Strip whitespace and reject blank locale codes."""
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("Default locale must not be blank")
        if not is_path_safe_name(v):
            raise ValueError(f"Invalid locale code: {v!r}")
        return v

    @field_validator("enabled")
    @classmethod
    def validate_enabled(cls, v: list[str] | None) -> list[str] | None:
        """Require a non-empty, duplicate-free list when given."""
        if v is None:
            return None
        locales = [locale.strip() for locale in v]
        if not locales:
            raise ValueError("Enabled locales must not be empty when specified")
        if any(not locale for locale in locales):
            raise ValueError("Enabled locales must not contain blank entries")
        unsafe = [locale for locale in locales if not is_path_safe_name(locale)]
        if unsafe:
            raise ValueError(f"Invalid locale code: {unsafe[0]!r}")
        duplicates = sorted({locale for locale in locales if locales.count(locale) > 1})
        if duplicates:
            raise ValueError(f"Duplicate enabled locales: {', '.join(duplicates)}")
        return locales


class OutputConfig(BaseModel):
    """Where and how compiled bundles are written."""

    directory: Path = Field(
        default=Path("build/i18n"),
        description="Root directory for compiled bundles",
    )
    extension: str = Field(
        default="js",
        description="File extension for bundles, without the leading dot",
        pattern=r"^[A-Za-z0-9]+$",
    )
    loader: str = Field(
        default="N.runtime.i18n.load",
        description="Runtime expression called with (locale, data) by each bundle",
        min_length=1,
    )

    @field_validator("extension", mode="before")
    @classmethod
    def validate_extension(cls, v: object) -> object:
        """Drop a leading dot from the extension."""
        if isinstance(v, str):
            return v.lstrip(".")
        return v


class PhrasePackConfig(BaseModel):
    """Root configuration model."""

    packages: dict[str, PackageConfig] = Field(
        default_factory=dict,
        description="Package configurations, processed in the order given",
    )
    locales: LocalesConfig = Field(default_factory=LocalesConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("packages")
    @classmethod
    def validate_package_names(cls, v: dict[str, PackageConfig]) -> dict[str, PackageConfig]:
        """Package names become directory names, so keep them path-safe."""
        for name in v:
            if not is_path_safe_name(name):
                raise ValueError(f"Invalid package name: {name!r}")
        return v
