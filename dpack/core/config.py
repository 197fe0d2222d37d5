# -*- coding: utf-8 -*-
"""
Configuration Module - User settings and build descriptions for dpack.

Provides a DpackConfig dataclass with default values for worker counts
and log level, loaded from ~/.dpack/dpack_config.json if it exists.
Also provides BuildConfig, the per-project build description (version
file, pack pattern, platform overrides) read from a YAML file.

Dependencies
------------
pyyaml

Author
------
Steven Siebert

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-10-17
"""

# Standard library
import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Dict, Optional

# Third-party
import yaml

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".dpack"
_CONFIG_FILE = _CONFIG_DIR / "dpack_config.json"

BUILD_CONFIG_FILENAME = "dpack.yaml"

# camelCase keys accepted in build files.
_BUILD_KEY_ALIASES = {
    'versionFile': 'version_file',
    'osName': 'os_name',
    'osVersion': 'os_version',
}


@dataclass
class DpackConfig:
    """Global dpack configuration with defaults.

    Attributes
    ----------
    max_workers : int
        Worker threads for background catalog operations. One worker
        runs submitted jobs serially.
    log_level : str
        Logging level used by the command line interface.
    """

    max_workers: int = 1
    log_level: str = "WARNING"

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to JSON file."""
        path = path or _CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)


def load_config(path: Optional[Path] = None) -> DpackConfig:
    """Load configuration from file, or return defaults.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to ~/.dpack/dpack_config.json.

    Returns
    -------
    DpackConfig
        Loaded or default configuration.
    """
    path = path or _CONFIG_FILE
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return DpackConfig(**{
                k: v for k, v in data.items()
                if k in DpackConfig.__dataclass_fields__
            })
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)

    return DpackConfig()


@dataclass
class PackSettings:
    """Which files go into an archive and where it is written.

    Attributes
    ----------
    pattern : str
        Comma-separated glob patterns relative to the project directory.
    output : str
        Directory, relative to the project directory, receiving archives.
    """

    pattern: str = "**/*"
    output: str = "packages"


@dataclass
class BuildConfig:
    """Build description for packing a project.

    Attributes
    ----------
    version_file : Optional[str]
        File to read the version from, relative to the project
        directory. If None the project manifest is used.
    build : Optional[int]
        Build number. If None the commit count is used.
    platform, os_name, os_version, architecture : Optional[str]
        Overrides for the host platform facets.
    pack : PackSettings
    """

    version_file: Optional[str] = None
    build: Optional[int] = None
    platform: Optional[str] = None
    os_name: Optional[str] = None
    os_version: Optional[str] = None
    architecture: Optional[str] = None
    pack: PackSettings = field(default_factory=PackSettings)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'BuildConfig':
        """Deserialize from dictionary.

        Unknown keys are ignored; camelCase keys (``versionFile``,
        ``osName``, ``osVersion``) are accepted.

        Parameters
        ----------
        data : Optional[Dict[str, Any]]

        Returns
        -------
        BuildConfig

        Raises
        ------
        ValueError
            If ``pack`` is not a mapping or ``build`` is not an integer.
        """
        data = data or {}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            key = _BUILD_KEY_ALIASES.get(key, key)
            if key == 'pack' or key not in cls.__dataclass_fields__:
                continue
            values[key] = value
        if values.get('build') is not None:
            values['build'] = int(values['build'])

        pack = data.get('pack') or {}
        if not isinstance(pack, dict):
            raise ValueError(
                f"pack must be a mapping, got {type(pack).__name__}"
            )
        values['pack'] = PackSettings(**{
            k: str(v) for k, v in pack.items()
            if k in PackSettings.__dataclass_fields__
        })
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)


def load_build_config(path: Path) -> BuildConfig:
    """Load a build description from a YAML file.

    Parameters
    ----------
    path : Path
        YAML file. A missing file yields the defaults.

    Returns
    -------
    BuildConfig

    Raises
    ------
    ValueError
        If the file is not a YAML mapping.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No build config at %s, using defaults", path)
        return BuildConfig()

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is None:
        return BuildConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Build config {path} must be a YAML mapping")
    return BuildConfig.from_dict(data)
