"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
import yaml

from icon_pipeline.core.config.models import ProjectConfig
from icon_pipeline.core.errors import ConfigError

logger = logging.getLogger(__name__)


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("icon-pipeline.json")
        'json'
        >>> detect_format("icon-pipeline.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            with path.open("r", encoding="utf-8") as f:
                content = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                # safe_load returns None for empty files
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if content is None:
            content = {}

    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}, got {type(content).__name__}")
    return content


def find_project_config(directory: Path | None = None) -> Path | None:
    """Return the first default project file present in ``directory``."""
    base = directory if directory is not None else Path.cwd()
    for candidate in ProjectConfig.default_paths():
        path = base / candidate
        if path.is_file():
            return path
    return None


def load_project_config(path: str | Path | None = None) -> ProjectConfig:
    """Load and validate a project config file.

    Relative ``source_dir`` / ``dest_dir`` values are anchored at the
    directory holding the config file, the way a Gruntfile's paths are.

    Args:
        path: Path to the project file. If None, the default filenames are
            looked up in the working directory and defaults are used when
            none exists.

    Returns:
        Validated ProjectConfig

    Raises:
        ConfigError: If the file is missing, unreadable, malformed or invalid
    """
    if path is None:
        path = find_project_config()
        if path is None:
            logger.debug("No project config found, using defaults")
            return ProjectConfig()

    path = Path(path)
    try:
        raw_config = load_config(path)
        config = ProjectConfig.model_validate(raw_config)
    except FileNotFoundError as e:
        raise ConfigError("Config file does not exist", path=path, cause=e) from e
    except (ValueError, OSError) as e:
        # pydantic's ValidationError is a ValueError subclass
        reason = "Config file failed validation" if isinstance(e, ValidationError) else str(e)
        raise ConfigError(reason, path=path, cause=e) from e

    logger.info(f"Loaded project config: {path}")
    return config.model_copy(
        update={"pipeline": config.pipeline.resolve_relative_to(path.parent)}
    )
