# -*- coding: utf-8 -*-
"""
Manifest Reader - Read a project's name and version from its manifest.

Understands ``pyproject.toml`` (``[project]`` or ``[tool.poetry]``),
``package.json``, YAML manifests (``dpack.yaml`` and friends) and plain
text version files, where the first dotted version found is used.

Dependencies
------------
packaging
pyyaml

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
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
import json
import logging
import re
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Third-party
import yaml
from packaging.version import InvalidVersion, Version

logger = logging.getLogger(__name__)

# Manifests searched, in order, when no version file is configured.
MANIFEST_NAMES = ('pyproject.toml', 'package.json', 'dpack.yaml')

_TEXT_VERSION_RE = re.compile(r'(\d+\.\d+(?:\.\d+)?)')


class ManifestError(ValueError):
    """A manifest is missing, unreadable or carries no usable value."""


def normalize_version(text: str) -> str:
    """Normalize a version string to ``major.minor.patch``.

    Parameters
    ----------
    text : str
        Any PEP 440 or semver-like version (``1.2``, ``v1.2.3``,
        ``1.2.3rc1``).

    Returns
    -------
    str
        The release segment padded or truncated to three components.

    Raises
    ------
    ManifestError
        If ``text`` is not a version.
    """
    try:
        release = Version(text.strip()).release
    except InvalidVersion as e:
        raise ManifestError(f"Invalid version {text!r}") from e
    parts = (list(release) + [0, 0])[:3]
    return '.'.join(str(p) for p in parts)


def _load(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        if suffix == '.toml':
            with open(path, 'rb') as f:
                return tomllib.load(f)
        with open(path, 'r', encoding='utf-8') as f:
            if suffix == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}") from e
    return data if isinstance(data, dict) else {}


def _field(data: Dict[str, Any], key: str) -> Optional[str]:
    tool = data.get('tool')
    poetry = tool.get('poetry') if isinstance(tool, dict) else None
    for section in (data.get('project'), poetry, data):
        if isinstance(section, dict) and section.get(key):
            return str(section[key])
    return None


class ManifestReader:
    """Read names and versions from project manifests."""

    def read_version(self, manifest_path: Union[str, Path]) -> str:
        """Return the ``major.minor.patch`` version declared in a file.

        Parameters
        ----------
        manifest_path : str or Path
            Structured manifest (``.toml``, ``.json``, ``.yaml``/``.yml``)
            or any text file containing a dotted version.

        Returns
        -------
        str

        Raises
        ------
        ManifestError
            If the file cannot be read or holds no version.
        """
        path = Path(manifest_path)
        if path.suffix.lower() in ('.toml', '.json', '.yaml', '.yml'):
            version = _field(_load(path), 'version')
        else:
            try:
                text = path.read_text(encoding='utf-8')
            except OSError as e:
                raise ManifestError(f"Cannot read version file {path}: {e}") from e
            match = _TEXT_VERSION_RE.search(text)
            version = match.group(1) if match else None
        if not version:
            raise ManifestError(f"No version found in {path}")
        logger.debug("Read version %s from %s", version, path)
        return normalize_version(version)

    def read_name(self, manifest_path: Union[str, Path]) -> Optional[str]:
        """Return the project name declared in a manifest, if any."""
        path = Path(manifest_path)
        if path.suffix.lower() not in ('.toml', '.json', '.yaml', '.yml'):
            return None
        data = _load(path)
        if isinstance(data.get('project'), str):
            return data['project']
        return _field(data, 'name')

    def find_manifest(self, base_path: Union[str, Path]) -> Optional[Path]:
        """First of :data:`MANIFEST_NAMES` present in ``base_path``."""
        for name in MANIFEST_NAMES:
            candidate = Path(base_path) / name
            if candidate.is_file():
                return candidate
        return None
