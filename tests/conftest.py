"""
Shared pytest fixtures for phrasepack tests.

The sample project mirrors a typical layout:

    core/client/i18n/common.yml        en, ru
    core/client/i18n/users/profile.yml en
    core/server/i18n/common.yml        en
    forum/client/i18n/posts.json       en, ru
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.phrasepack.config.schema import (
    LocalesConfig,
    OutputConfig,
    PackageConfig,
    PhrasePackConfig,
)
from tests.utils.test_helpers import make_lookup, write_phrase_source


@pytest.fixture
def sample_sources(tmp_path: Path) -> Path:
    """Create the sample source tree and return its root directory."""
    root = tmp_path / "project"

    _ = write_phrase_source(
        root / "core" / "client" / "i18n" / "common.yml",
        {
            "en": {"hello": "Hey", "menu": {"home": "Home", "exit": "Exit"}},
            "ru": {"hello": "Привет", "menu": {"home": "Главная"}},
        },
    )
    _ = write_phrase_source(
        root / "core" / "client" / "i18n" / "users" / "profile.yml",
        {"en": {"title": "Profile of {name}", "posts": ["{count} post", "{count} posts"]}},
    )
    _ = write_phrase_source(
        root / "core" / "server" / "i18n" / "common.yml",
        {"en": {"hello": "Hi", "mail": {"subject": "Welcome"}}},
    )
    _ = write_phrase_source(
        root / "forum" / "client" / "i18n" / "posts.json",
        {"en": {"reply": "Reply"}, "ru": {"reply": "Ответить"}},
    )

    return root


@pytest.fixture
def sample_config(sample_sources: Path, tmp_path: Path) -> PhrasePackConfig:
    """Configuration for the sample project with derived locales."""
    return PhrasePackConfig(
        packages={
            "core": PackageConfig(
                i18n_client=[make_lookup(sample_sources / "core" / "client" / "i18n")],
                i18n_server=[make_lookup(sample_sources / "core" / "server" / "i18n")],
            ),
            "forum": PackageConfig(
                i18n_client=[make_lookup(sample_sources / "forum" / "client" / "i18n")],
            ),
        },
        locales=LocalesConfig(),
        output=OutputConfig(directory=tmp_path / "build" / "i18n"),
    )
