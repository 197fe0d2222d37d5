# -*- coding: utf-8 -*-
"""
File Listing - Directory enumeration and glob matching.

Default FileLister and Globber collaborators. Both return sorted
results so that catalog order is stable across scans.

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
2026-10-17

Modified
--------
2026-10-17
"""

# Standard library
import fnmatch
import logging
import os
from pathlib import Path
from typing import Dict, List, Union

logger = logging.getLogger(__name__)


class FileLister:
    """Enumerate files beneath a directory."""

    def list(self, directory: Union[str, Path]) -> List[str]:
        """List every file under ``directory``, recursively.

        Files directly in a directory come before those of its
        subdirectories; names sort lexically at each level.

        Parameters
        ----------
        directory : str or Path

        Returns
        -------
        List[str]
            Absolute file paths.

        Raises
        ------
        FileNotFoundError
            If ``directory`` does not exist or is not a directory.
        """
        root = os.path.abspath(directory)
        if not os.path.isdir(root):
            raise FileNotFoundError(f"Directory not found: {directory}")

        def on_error(exc: OSError) -> None:
            raise exc

        paths: List[str] = []
        for current, dirnames, filenames in os.walk(root, onerror=on_error):
            dirnames.sort()
            for name in sorted(filenames):
                paths.append(os.path.join(current, name))
        logger.debug("Listed %d files under %s", len(paths), root)
        return paths

    def list_directories(self, directory: Union[str, Path]) -> List[str]:
        """Names of the immediate subdirectories of ``directory``.

        Raises
        ------
        FileNotFoundError
            If ``directory`` does not exist.
        """
        root = Path(directory)
        if not root.is_dir():
            raise FileNotFoundError(f"Directory not found: {directory}")
        return sorted(p.name for p in root.iterdir() if p.is_dir())


def _hidden(parts: tuple, dot_segments: List[str]) -> bool:
    return any(
        name.startswith('.')
        and not any(fnmatch.fnmatchcase(name, s) for s in dot_segments)
        for name in parts
    )


class Globber:
    """Match glob patterns relative to a base directory."""

    def match(self, pattern: str, base_path: Union[str, Path]) -> List[str]:
        """Return files matching ``pattern`` beneath ``base_path``.

        Parameters
        ----------
        pattern : str
            One or more comma-separated glob patterns. ``**`` matches
            any number of directories. Dotfiles and dot-directories are
            skipped unless a pattern segment names them with a leading
            dot (``.github/**/*``, ``.env``).
        base_path : str or Path

        Returns
        -------
        List[str]
            Sorted, de-duplicated POSIX paths relative to ``base_path``.
        """
        base = Path(base_path)
        found: Dict[str, None] = {}
        for part in pattern.split(','):
            part = part.strip()
            if part.startswith('./'):
                part = part[2:]
            if not part:
                continue
            dot_segments = [s for s in part.split('/') if s.startswith('.')]
            for path in base.glob(part):
                if not path.is_file():
                    continue
                relative = path.relative_to(base)
                if _hidden(relative.parts, dot_segments):
                    continue
                found.setdefault(relative.as_posix(), None)
        return sorted(found)
