"""Repository configuration management for gitscm.

Handles reading and writing the .gitscm/config.yaml file in each repository.
"""

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Raised when there's an error with repository configuration."""

    pass


class ScmConfig(BaseModel):
    """Settings stored in .gitscm/config.yaml.

    Attributes:
        untracked_files: Passed to ``git status --untracked-files``.
        show_ignored: Ask git for ignored files too.
        original_scheme: Scheme used to address original (indexed) content.
        log_level: Default log level for the CLI.
    """

    untracked_files: Literal["all", "normal", "no"] = "all"
    show_ignored: bool = False
    original_scheme: str = "git-index"
    log_level: str = "WARNING"

    @field_validator("original_scheme")
    @classmethod
    def scheme_must_be_valid(cls, v: str) -> str:
        """Ensure the scheme is a usable URI scheme."""
        v = v.strip()
        if not v or not v[0].isalpha() or not all(c.isalnum() or c in "+-." for c in v):
            raise ValueError(f"Invalid URI scheme: {v!r}")
        if v == "file":
            raise ValueError("original_scheme must differ from 'file'")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def log_level_must_be_known(cls, v):
        """Normalize and validate the log level name."""
        v = str(v).upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v} (expected one of {', '.join(LOG_LEVELS)})")
        return v


DEFAULT_CONFIG = ScmConfig().model_dump()


def get_config_dir(repo_root: Path) -> Path:
    """Get the repository config directory.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .gitscm/
    """
    return repo_root / ".gitscm"


def get_config_file(repo_root: Path) -> Path:
    """Return path to the config.yaml file.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        Path to .gitscm/config.yaml.
    """
    return get_config_dir(repo_root) / "config.yaml"


def load_config(repo_root: Path) -> ScmConfig:
    """Load the gitscm configuration from config.yaml.

    Missing files and missing keys fall back to defaults. A corrupted
    or invalid file is ignored with a warning.

    Args:
        repo_root: The root directory of the git repository.

    Returns:
        The loaded configuration.
    """
    config_file = get_config_file(repo_root)

    if not config_file.exists():
        return ScmConfig()

    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("top level must be a mapping")
        # Merge with defaults for any missing keys
        return ScmConfig(**{**DEFAULT_CONFIG, **data})
    except (yaml.YAMLError, ValidationError, ValueError, TypeError) as e:
        logger.warning("Ignoring invalid config %s: %s", config_file, e)
        return ScmConfig()


def save_config(repo_root: Path, config: ScmConfig) -> None:
    """Save the configuration to config.yaml.

    Args:
        repo_root: The root directory of the git repository.
        config: Configuration to save.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = get_config_file(repo_root)

    try:
        config_file.parent.mkdir(exist_ok=True)
        with open(config_file, "w") as f:
            yaml.dump(
                config.model_dump(),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
    except OSError as e:
        raise ConfigError(f"Failed to save config to {config_file}: {e}") from e


def set_config_value(repo_root: Path, key: str, value: Any) -> ScmConfig:
    """Validate and store a single configuration value.

    Args:
        repo_root: The root directory of the git repository.
        key: Configuration key (e.g. "show_ignored").
        value: New value; strings are coerced by the model.

    Returns:
        The updated configuration.

    Raises:
        ConfigError: If the key is unknown or the value is invalid.
    """
    if key not in ScmConfig.model_fields:
        raise ConfigError(f"Unknown config key: {key} (expected one of {', '.join(ScmConfig.model_fields)})")

    current = load_config(repo_root)
    try:
        updated = ScmConfig(**{**current.model_dump(), key: value})
    except ValidationError as e:
        raise ConfigError(f"Invalid value for {key}: {value!r}\n{e}") from e

    save_config(repo_root, updated)
    return updated
