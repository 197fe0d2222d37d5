# -*- coding: utf-8 -*-
"""
Root Path Resolver - Locate the dpack package, install and upload roots.

Each root is resolved using a priority chain:
1. Environment variable (``DPACK_PACKAGES_ROOT``, ``DPACK_INSTALL_ROOT``,
   ``DPACK_UPLOADS_ROOT``) (highest priority)
2. ~/.dpack/config.json field (``packages_root``, ``install_root``,
   ``uploads_root``)
3. ~/.dpack/<default directory> (default fallback)

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

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
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_CONFIG_DIR = ".dpack"
_CONFIG_FILE = "config.json"

# root name -> (env var, default directory under ~/.dpack)
_ROOTS = {
    'packages_root': ("DPACK_PACKAGES_ROOT", "packages"),
    'install_root': ("DPACK_INSTALL_ROOT", "installed"),
    'uploads_root': ("DPACK_UPLOADS_ROOT", "uploads"),
}


def _resolve_root(key: str) -> Path:
    env_var, default_dir = _ROOTS[key]

    # Priority 1: Environment variable
    env_path = os.environ.get(env_var)
    if env_path:
        return Path(env_path)

    config_dir = Path.home() / _CONFIG_DIR

    # Priority 2: Config file
    config_path = config_dir / _CONFIG_FILE
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
            value = config.get(key)
            if value:
                return Path(value)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable %s: %s", config_path, e)

    # Priority 3: Default location
    return config_dir / default_dir


def resolve_packages_root() -> Path:
    """Resolve the directory scanned for artifact files.

    Priority:
    1. ``DPACK_PACKAGES_ROOT`` environment variable
    2. ``~/.dpack/config.json`` → ``packages_root`` field
    3. ``~/.dpack/packages`` (default)

    Returns
    -------
    Path
    """
    return _resolve_root('packages_root')


def resolve_install_root() -> Path:
    """Resolve the directory versions are installed into.

    Priority:
    1. ``DPACK_INSTALL_ROOT`` environment variable
    2. ``~/.dpack/config.json`` → ``install_root`` field
    3. ``~/.dpack/installed`` (default)

    Returns
    -------
    Path
    """
    return _resolve_root('install_root')


def resolve_uploads_root() -> Path:
    """Resolve the directory uploaded artifacts are placed in.

    Priority:
    1. ``DPACK_UPLOADS_ROOT`` environment variable
    2. ``~/.dpack/config.json`` → ``uploads_root`` field
    3. ``~/.dpack/uploads`` (default)

    Returns
    -------
    Path
    """
    return _resolve_root('uploads_root')


def ensure_config_dir() -> Path:
    """Ensure the ~/.dpack/ configuration directory exists.

    Returns
    -------
    Path
        Path to the configuration directory.
    """
    config_dir = Path.home() / _CONFIG_DIR
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir
