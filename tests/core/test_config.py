from pathlib import Path

import pytest

from quire.core.config import PathsSettings, QuireConfig, SiteSettings
from quire.core.exceptions import ConfigLoadError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for key in ("QUIRE_PATHS__POSTS_DIR", "QUIRE_SITE__TITLE", "QUIRE_SERVER__PORT"):
        monkeypatch.delenv(key, raising=False)


def test_load_defaults(tmp_path: Path):
    """It should load default settings when no config file or env vars are present."""
    config = QuireConfig.load(tmp_path)

    assert isinstance(config.paths, PathsSettings)
    assert isinstance(config.site, SiteSettings)
    assert config.paths.site_root == tmp_path
    assert config.paths.abs_posts_dir == tmp_path / "posts"
    assert config.paths.abs_output_dir == tmp_path / "public"
    assert config.paths.abs_templates_dir is None
    assert config.server.port == 8000
    assert config.logging.level == "INFO"


def test_load_from_toml_file(tmp_path: Path):
    """It should load settings from a .quire.toml file."""
    (tmp_path / ".quire.toml").write_text(
        """
[site]
title = "My Notebook"

[paths]
posts_dir = "content"
templates_dir = "theme"
"""
    )

    config = QuireConfig.load(tmp_path)

    assert config.site.title == "My Notebook"
    assert config.site.base_url == "/"  # Default is kept
    assert config.paths.abs_posts_dir == tmp_path / "content"
    assert config.paths.abs_templates_dir == tmp_path / "theme"


def test_env_vars_override_toml_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Environment variables should take precedence over the config file."""
    (tmp_path / ".quire.toml").write_text(
        """
[site]
title = "From file"
description = "Also from file"
"""
    )
    monkeypatch.setenv("QUIRE_SITE__TITLE", "From env")
    monkeypatch.setenv("QUIRE_SERVER__PORT", "9001")

    config = QuireConfig.load(tmp_path)

    assert config.site.title == "From env"
    assert config.site.description == "Also from file"
    assert config.server.port == 9001


def test_absolute_paths_are_not_resolved_against_site_root(tmp_path: Path):
    elsewhere = tmp_path / "elsewhere"
    paths = PathsSettings(site_root=tmp_path / "site", posts_dir=elsewhere)

    assert paths.abs_posts_dir == elsewhere


def test_invalid_toml_raises_config_load_error(tmp_path: Path):
    (tmp_path / ".quire.toml").write_text("[site\ntitle = ")

    with pytest.raises(ConfigLoadError) as excinfo:
        QuireConfig.load(tmp_path)

    assert excinfo.value.path.endswith(".quire.toml")


def test_invalid_values_raise_config_load_error(tmp_path: Path):
    (tmp_path / ".quire.toml").write_text('[server]\nport = "not-a-port"\n')

    with pytest.raises(ConfigLoadError):
        QuireConfig.load(tmp_path)
