# yaml_policy_adapter/config/loader.py
"""
Configuration Loader

Loads adapter configuration from a YAML file with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Adapter works without YAML

Example config.yml:

    encoding: utf-8
    atomic_write: true
    fsync: false
    strict: false
    sections: [p, g]
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdapterConfig:
    """
    Adapter configuration.

    All fields have code defaults - YAML is optional.
    """

    encoding: str = "utf-8"
    atomic_write: bool = True   # temp file + os.replace instead of in-place overwrite
    fsync: bool = False         # fsync the temp file before replacing
    strict: bool = False        # raise PreconditionFailure instead of returning False
    sections: Tuple[str, ...] = ("p", "g")  # model sections collected on save

    @classmethod
    def default(cls) -> "AdapterConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Union[str, Path]] = None) -> "AdapterConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. None means code defaults.

        Returns:
            AdapterConfig instance (always has code defaults as fallback)
        """
        config = cls.default()

        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return config

        known = {f.name for f in fields(cls)}
        updates: Dict[str, Any] = {}
        for key, value in yaml_data.items():
            if key not in known:
                logger.debug(f"Ignoring unknown config key {key!r}")
                continue
            updates[key] = value

        if "sections" in updates:
            sections = updates["sections"]
            if isinstance(sections, str):
                sections = [sections]
            updates["sections"] = tuple(str(s) for s in sections or ())

        return replace(config, **updates)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "encoding": self.encoding,
            "atomic_write": self.atomic_write,
            "fsync": self.fsync,
            "strict": self.strict,
            "sections": list(self.sections),
        }


def _load_yaml(config_path: Optional[Union[str, Path]]) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if not config_path:
        return None

    path = Path(config_path)
    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Cannot load adapter config {path}, using defaults: {e}")
        return None

    if data is not None and not isinstance(data, dict):
        logger.warning(f"Adapter config {path} is not a mapping, using defaults")
        return None
    return data


def load_config(config_path: Optional[Union[str, Path]] = None) -> AdapterConfig:
    """
    Load adapter configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        AdapterConfig instance

    Note:
        If YAML is not found or invalid, returns code defaults.
    """
    return AdapterConfig.from_yaml(config_path)


__all__ = [
    "AdapterConfig",
    "load_config",
]
