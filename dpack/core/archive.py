# -*- coding: utf-8 -*-
"""
Archiver - gzip-compressed tar creation and extraction.

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
import logging
import os
import tarfile
from pathlib import Path
from typing import Iterable, Union

logger = logging.getLogger(__name__)

# dpack internal
from dpack.errors import ArchiveError


class Archiver:
    """Create and extract ``.tar.gz`` artifacts."""

    def compress(
        self,
        files: Iterable[str],
        output_path: Union[str, Path],
        base_path: Union[str, Path] = '.',
    ) -> None:
        """Write ``files`` into a gzip-compressed tar archive.

        Parameters
        ----------
        files : Iterable[str]
            Member paths relative to ``base_path``. Archive member names
            are these relative paths.
        output_path : str or Path
            Archive to create. Parent directories are created.
        base_path : str or Path
            Directory the member paths are relative to.

        Raises
        ------
        ArchiveError
            If a member cannot be read or the archive cannot be written.
        """
        output_path = Path(output_path)
        base = Path(base_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with tarfile.open(output_path, 'w:gz') as tar:
                for name in files:
                    tar.add(base / name, arcname=name, recursive=False)
        except (OSError, tarfile.TarError) as e:
            logger.error("Failed to create archive %s: %s", output_path, e)
            if output_path.exists():
                os.remove(output_path)
            raise ArchiveError(
                f"Could not create archive {output_path}: {e}"
            ) from e
        logger.info("Created archive %s", output_path)

    def extract(
        self,
        archive_path: Union[str, Path],
        destination: Union[str, Path],
    ) -> None:
        """Extract an archive into ``destination``.

        Members with absolute paths or paths leaving ``destination`` are
        refused.

        Raises
        ------
        ArchiveError
            If the archive is unreadable or a member cannot be written.
        """
        destination = Path(destination)
        try:
            destination.mkdir(parents=True, exist_ok=True)
            with tarfile.open(archive_path, 'r:*') as tar:
                tar.extractall(destination, filter='data')
        except (OSError, tarfile.TarError) as e:
            logger.error(
                "Failed to extract %s into %s: %s", archive_path, destination, e
            )
            raise ArchiveError(
                f"Could not extract {archive_path} into {destination}: {e}"
            ) from e
        logger.info("Extracted %s into %s", archive_path, destination)
