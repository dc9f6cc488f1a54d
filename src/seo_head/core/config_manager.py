"""Configuration management for the head pipeline.

This module handles loading and merging configuration from multiple TOML files
with proper precedence. Site options are exposed as a read-only key-value
store; host settings as HostCapabilities.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import (
    DEFAULT_OG_LOCALE,
    DEFAULT_SEPARATOR,
    DEFAULT_TITLE_TEMPLATE,
    DEFAULT_TWITTER_CARD_TYPE,
)
from .host import ConfiguredHost, HostConfig

logger = logging.getLogger(__name__)


class GlobalConfig(BaseSettings):
    """Global configuration (not site-specific).

    Values can also come from SEO_HEAD_* environment variables.
    """

    model_config = SettingsConfigDict(env_prefix="SEO_HEAD_", extra="ignore")

    verbosity: str = Field(
        default="normal",
        description="Output verbosity: quiet, normal, verbose, debug",
    )
    color: bool = Field(default=True, description="Enable colored output")


class SiteOptions(BaseModel):
    """Site options ([options] section). Unknown keys are kept for add-ons."""

    model_config = ConfigDict(extra="allow")

    opengraph: bool = Field(default=True, description="Output Open Graph tags")
    twitter: bool = Field(default=True, description="Output Twitter card tags")
    forcerewritetitle: bool = Field(
        default=False,
        description="Output <title> even when the theme prints its own",
    )
    website_name: str = Field(default="", description="Site name (%%sitename%%, og:site_name)")
    separator: str = Field(default=DEFAULT_SEPARATOR, description="Title separator (%%sep%%)")
    title_template: str = Field(
        default=DEFAULT_TITLE_TEMPLATE,
        description="Title used when a page has no explicit title",
    )
    og_locale: str = Field(default=DEFAULT_OG_LOCALE, description="og:locale")
    og_default_image: str = Field(default="", description="og:image for pages without one")
    fbadminapp: str = Field(default="", description="Facebook app ID (fb:app_id)")
    twitter_site: str = Field(default="", description="Twitter @username of the site")
    twitter_card_type: str = Field(
        default=DEFAULT_TWITTER_CARD_TYPE,
        description="twitter:card value",
    )
    show_debug_marker: bool = Field(default=True, description="Wrap output in HTML comments")
    base_url: str = Field(default="", description="Base URL for making relative URLs absolute")


class OptionsStore(Protocol):
    """Read-only key-value settings."""

    def get(self, key: str, default: Any = None) -> Any: ...


class Options:
    """OptionsStore backed by SiteOptions."""

    def __init__(self, site_options: SiteOptions | None = None):
        self._data = (site_options or SiteOptions()).model_dump()

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get an option value.

        Args:
            key: Option name
            default: Returned when the option is not set

        Returns:
            Option value or default
        """
        return self._data.get(key, default)


class ConfigManager:
    """
    Manages configuration loading.

    Loads from multiple sources with precedence (highest to lowest):
    1. Extra paths (passed programmatically, e.g. --config)
    2. Local config (./.seo-head.toml)
    3. Home config (~/.seo-head.toml)
    4. User config (~/.config/seo-head/config.toml)
    5. System config (/etc/seo-head/config.toml)
    6. Package defaults

    Example TOML structure:
        [global]
        verbosity = "normal"

        [options]
        opengraph = true
        twitter = true
        website_name = "Example"

        [host]
        theme_outputs_title_tag = false
    """

    def __init__(self, strict: bool = False):
        """
        Initialize ConfigManager.

        Args:
            strict: If True, raise exceptions on config errors.
                   If False (default), log warnings and use defaults.
        """
        self.strict = strict
        self.global_config = GlobalConfig()
        self.site_options = SiteOptions()
        self.host_config = HostConfig()

    @property
    def options(self) -> Options:
        """Site options as a key-value store."""
        return Options(self.site_options)

    @property
    def host(self) -> ConfiguredHost:
        """Host capabilities from the [host] section."""
        return ConfiguredHost(self.host_config)

    def load_from_files(self, extra_paths: list[Path] | None = None) -> None:
        """
        Load configuration from TOML files.

        Args:
            extra_paths: Additional config file paths to load
        """
        paths = self._get_config_paths()
        if extra_paths:
            paths.extend(extra_paths)

        merged_data: dict[str, Any] = {}

        for path in paths:
            if not path.exists():
                logger.debug(f"Config file not found: {path}")
                continue

            try:
                with open(path, "rb") as f:
                    file_data = tomllib.load(f)
                    merged_data = self._merge_dicts(merged_data, file_data)
                    logger.info(f"Loaded config from {path}")
            except (OSError, tomllib.TOMLDecodeError) as e:
                if self.strict:
                    raise RuntimeError(f"Failed to load config from {path}: {e}") from e
                logger.warning(f"Failed to load config from {path}: {e}")

        self.global_config = self._parse_section(merged_data, "global", GlobalConfig)
        self.site_options = self._parse_section(merged_data, "options", SiteOptions)
        self.host_config = self._parse_section(merged_data, "host", HostConfig)

    def _parse_section(self, data: dict[str, Any], section: str, model: type[BaseModel]) -> Any:
        """Validate one config section, falling back to defaults unless strict."""
        if section not in data:
            logger.debug(f"Using default config for [{section}]")
            return model()
        try:
            return model(**data[section])
        except ValidationError as e:
            if self.strict:
                raise
            logger.warning(f"Invalid config in [{section}]: {e}")
            return model()

    def export_to_toml(self, path: Path) -> None:
        """
        Export current config to TOML file.

        Args:
            path: Output file path
        """
        import tomli_w

        data = {
            "global": self.global_config.model_dump(exclude_none=True),
            "options": self.site_options.model_dump(exclude_none=True),
            "host": self.host_config.model_dump(exclude_none=True),
        }

        with open(path, "wb") as f:
            tomli_w.dump(data, f)
        logger.info(f"Exported config to {path}")

    @staticmethod
    def _get_config_paths() -> list[Path]:
        """
        Get configuration file paths in precedence order (lowest to highest).

        Returns:
            List of config file paths
        """
        paths = []

        # 1. Package default (if exists)
        package_dir = Path(__file__).parent.parent
        default_config = package_dir / "default_config.toml"
        if default_config.exists():
            paths.append(default_config)

        # 2. System-wide
        paths.append(Path("/etc/seo-head/config.toml"))

        # 3. User config
        paths.append(Path.home() / ".config" / "seo-head" / "config.toml")

        # 4. Home config
        paths.append(Path.home() / ".seo-head.toml")

        # 5. Local config (highest precedence)
        paths.append(Path.cwd() / ".seo-head.toml")

        return paths

    @staticmethod
    def _merge_dicts(base: dict, override: dict) -> dict:
        """
        Recursively merge dictionaries.

        Args:
            base: Base dictionary
            override: Dictionary to merge in (takes precedence)

        Returns:
            Merged dictionary
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigManager._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def create_default_config_file(self, path: Path) -> None:
        """
        Create a default config file.

        Args:
            path: Output file path
        """
        self.export_to_toml(path)
        logger.info(f"Created default config file: {path}")
