"""Project configuration loaded from ``.kssdoc.yaml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from kssdoc.schemas import ParseOptions
from kssdoc.traverse import DEFAULT_MASK

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".kssdoc.yaml"


@dataclass
class ProjectConfig:
    """Where to find stylesheets and how to parse them."""

    source: list[str] = field(default_factory=list)
    mask: str = DEFAULT_MASK
    options: ParseOptions = field(default_factory=ParseOptions)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectConfig:
        """Create config from a YAML mapping.

        Raises:
            ValueError: If a value has the wrong type.
        """
        source = data.get("source") or []
        if isinstance(source, str):
            source = [source]
        if not isinstance(source, list):
            raise ValueError(f"'source' must be a list of directories, got {source!r}")

        mask = data.get("mask", DEFAULT_MASK)
        if not isinstance(mask, str):
            raise ValueError(f"'mask' must be a string, got {mask!r}")

        return cls(
            source=[str(s) for s in source],
            mask=mask,
            options=ParseOptions.from_dict(data),
        )


def _read_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration in {path} must be a mapping")
    return data


def load_config(path: Path | str | None = None, project_root: Path | str = ".") -> ProjectConfig:
    """Load project configuration.

    Args:
        path: Explicit config file. Errors reading it propagate.
        project_root: Directory searched for ``.kssdoc.yaml`` when no path is given.

    Returns:
        ProjectConfig, with defaults when no config file is found.

    Raises:
        FileNotFoundError: If an explicit path does not exist.
    """
    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return ProjectConfig.from_dict(_read_yaml(path))

    default_path = Path(project_root) / CONFIG_FILENAME
    if not default_path.exists():
        return ProjectConfig()

    try:
        return ProjectConfig.from_dict(_read_yaml(default_path))
    except (yaml.YAMLError, OSError, ValueError) as e:
        # The default file is optional, so a broken one only warns.
        logger.warning("Could not load %s: %s", default_path, e)
        return ProjectConfig()
