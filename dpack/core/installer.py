# -*- coding: utf-8 -*-
"""
Install Resolver - Unpack artifacts and find the installed version.

An install root holds one directory per installed version, named with
the ``major.minor.patch-build`` display form::

    install_root/
    ├── 0.1.0-1/
    └── 0.1.0-2/

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
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

# dpack internal
from dpack.catalog.codec import parse_filename
from dpack.catalog.models import PackageVersion
from dpack.catalog.query import QueryLike, as_query
from dpack.catalog.versions import latest, parse_version
from dpack.core.archive import Archiver
from dpack.core.files import FileLister
from dpack.errors import NotFoundError, ParseError

# Facets readable from an install directory name.
_VERSION_FACETS = ('version', 'build')


class InstallResolver:
    """Extract artifacts and report installed versions.

    Parameters
    ----------
    archiver : Optional[Archiver]
        Extracts archives.
    lister : Optional[FileLister]
        Lists install directories.
    """

    def __init__(
        self,
        archiver: Optional[Archiver] = None,
        lister: Optional[FileLister] = None,
    ) -> None:
        self._archiver = archiver or Archiver()
        self._lister = lister or FileLister()

    def installed_versions(
        self,
        install_root: Union[str, Path],
    ) -> List[PackageVersion]:
        """Versions installed under ``install_root``, in listing order.

        A missing root has no installs. Directories whose names are not
        versions are ignored.
        """
        try:
            names = self._lister.list_directories(install_root)
        except FileNotFoundError:
            logger.debug("No install root at %s", install_root)
            return []
        versions: List[PackageVersion] = []
        for name in names:
            try:
                versions.append(parse_version(name))
            except ParseError:
                logger.debug("Ignoring non-version directory %s", name)
        return versions

    def get_installed(
        self,
        query: QueryLike,
        install_root: Union[str, Path],
    ) -> Optional[str]:
        """Return the latest installed version matching ``query``.

        Parameters
        ----------
        query : PackageQuery, Mapping or None
            Only ``version`` and ``build`` constraints apply; other
            facets are not part of an install directory name.
        install_root : str or Path

        Returns
        -------
        Optional[str]
            ``major.minor.patch-build``, or None if nothing is installed.
        """
        query = as_query(query)
        versions = self.installed_versions(install_root)
        for facet, value in query.constraints():
            if facet not in _VERSION_FACETS:
                logger.debug("Install lookup ignores %s=%s", facet, value)
            elif facet == 'version':
                versions = [v for v in versions if str(v) == value]
            else:
                versions = [v for v in versions if str(v.build) == value]
        found = latest(versions)
        return str(found) if found is not None else None

    def unpack(
        self,
        archive_path: Union[str, Path],
        destination: Union[str, Path],
    ) -> str:
        """Extract an artifact into ``destination``.

        Parameters
        ----------
        archive_path : str or Path
            Artifact file; its name must follow the artifact convention.
        destination : str or Path
            Directory to extract into.

        Returns
        -------
        str
            The artifact's ``major.minor.patch-build`` version.

        Raises
        ------
        NotFoundError
            If ``archive_path`` does not exist.
        ParseError
            If the archive name is not an artifact name.
        ArchiveError
            If extraction fails.
        """
        archive_path = str(archive_path)
        if not os.path.isfile(archive_path):
            raise NotFoundError(archive_path)
        record = parse_filename(archive_path)
        self._archiver.extract(archive_path, destination)
        logger.info("Unpacked %s %s into %s", record.project, record.version, destination)
        return str(record.version)

    def install(
        self,
        archive_path: Union[str, Path],
        install_root: Union[str, Path],
    ) -> str:
        """Unpack into ``install_root/<version>`` and return the version."""
        archive_path = str(archive_path)
        if not os.path.isfile(archive_path):
            raise NotFoundError(archive_path)
        version = str(parse_filename(archive_path).version)
        return self.unpack(archive_path, Path(install_root) / version)
