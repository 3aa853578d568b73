import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from quire.core.exceptions import ConfigLoadError

CONFIG_FILENAME = ".quire.toml"


def _deep_merge(destination: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge source into destination, with source values overwriting."""
    for key, value in source.items():
        if isinstance(value, Mapping) and key in destination and isinstance(destination[key], Mapping):
            destination[key] = _deep_merge(dict(destination[key]), dict(value))
        else:
            destination[key] = value
    return destination


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to the 'site_root' unless absolute.
    site_root defaults to current working directory.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )
    posts_dir: Path = Field(default=Path("posts"), description="Directory holding the Markdown posts")
    output_dir: Path = Field(default=Path("public"), description="Static build output directory")
    templates_dir: Path | None = Field(default=None, description="Optional override for page templates")

    @property
    def abs_posts_dir(self) -> Path:
        return self._resolve(self.posts_dir)

    @property
    def abs_output_dir(self) -> Path:
        return self._resolve(self.output_dir)

    @property
    def abs_templates_dir(self) -> Path | None:
        if self.templates_dir is None:
            return None
        return self._resolve(self.templates_dir)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class SiteSettings(BaseModel):
    """Values exposed to page templates."""

    title: str = Field(default="Blog", description="Site title")
    description: str = Field(default="", description="Short site description")
    author: str = Field(default="", description="Default author shown in the footer")
    base_url: str = Field(default="/", description="URL prefix the site is served under")


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000


class LoggingSettings(BaseModel):
    level: str = "INFO"
    file: Path | None = None


class QuireConfig(BaseSettings):
    """Root configuration for Quire.

    Supports environment variable overrides with the pattern:
    QUIRE_SECTION__KEY (e.g., QUIRE_PATHS__POSTS_DIR)
    """

    paths: PathsSettings = Field(default_factory=PathsSettings)
    site: SiteSettings = Field(default_factory=SiteSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="QUIRE_",
        env_nested_delimiter="__",
    )

    @classmethod
    def load(cls, site_root: Path | None = None) -> "QuireConfig":
        """Loads configuration from .quire.toml and environment variables.

        Priority (highest to lowest):
        1. Environment variables (QUIRE_SECTION__KEY)
        2. Config file (.quire.toml)
        3. Defaults

        Raises:
            ConfigLoadError: If the config file cannot be read or fails validation.

        """
        root_path = site_root if site_root is not None else Path.cwd()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                raise ConfigLoadError(str(config_file), str(exc)) from exc

        try:
            # Instantiating with no arguments reads only the environment.
            env_settings = cls().model_dump(exclude_unset=True)

            merged_config = _deep_merge(file_settings, env_settings)
            merged_config.setdefault("paths", {})["site_root"] = root_path

            return cls.model_validate(merged_config)
        except ValidationError as exc:
            raise ConfigLoadError(str(config_file), str(exc)) from exc
