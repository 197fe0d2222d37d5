# -*- coding: utf-8 -*-
"""
PackagePool - Thread pool for background catalog operations.

Provides a managed thread pool for running directory scans, packing,
unpacking and install lookups in the background. Each submission returns
a Future; failures surface as the Future's exception. With the default
single worker, submitted jobs run one after another.

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
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

# dpack internal
from dpack.catalog.catalog import PackageCatalog
from dpack.catalog.query import QueryLike
from dpack.core.builder import ArtifactBuilder
from dpack.core.config import BuildConfig, DpackConfig, load_config
from dpack.core.files import FileLister
from dpack.core.installer import InstallResolver


class PackagePool:
    """Manages a pool of worker threads for background catalog operations.

    Parameters
    ----------
    max_workers : int
        Maximum number of concurrent threads. Default 1.
    builder : Optional[ArtifactBuilder]
        Builder used by :meth:`submit_pack`.
    resolver : Optional[InstallResolver]
        Resolver used by :meth:`submit_unpack` and
        :meth:`submit_get_installed`.
    lister : Optional[FileLister]
        File lister used by :meth:`submit_scan`.
    """

    def __init__(
        self,
        max_workers: int = 1,
        builder: Optional[ArtifactBuilder] = None,
        resolver: Optional[InstallResolver] = None,
        lister: Optional[FileLister] = None,
    ) -> None:
        self._executor = ThreadPoolExecutor(max_workers=max_workers)
        self._builder = builder
        self._resolver = resolver or InstallResolver()
        self._lister = lister

    @classmethod
    def from_config(cls, config: Optional[DpackConfig] = None) -> 'PackagePool':
        """Create a pool sized by :class:`DpackConfig` (loaded if None)."""
        config = config or load_config()
        return cls(max_workers=config.max_workers)

    def submit_scan(self, root: Union[str, Path]) -> Future:
        """Submit a directory scan.

        Returns
        -------
        Future
            Future resolving to a PackageCatalog. A missing root fails
            the future with FileNotFoundError.
        """
        logger.debug("Submitting scan of %s", root)
        return self._executor.submit(PackageCatalog.scan, root, self._lister)

    def submit_pack(
        self,
        name: Optional[str],
        config: BuildConfig,
        base_path: Union[str, Path],
    ) -> Future:
        """Submit a pack job.

        Returns
        -------
        Future
            Future resolving to the archive path.
        """
        builder = self._builder or ArtifactBuilder()
        return self._executor.submit(builder.pack, name, config, base_path)

    def submit_unpack(
        self,
        archive_path: Union[str, Path],
        destination: Union[str, Path],
    ) -> Future:
        """Submit an unpack job.

        Returns
        -------
        Future
            Future resolving to the unpacked version string.
        """
        return self._executor.submit(
            self._resolver.unpack, archive_path, destination
        )

    def submit_get_installed(
        self,
        query: QueryLike,
        install_root: Union[str, Path],
    ) -> Future:
        """Submit an installed-version lookup.

        Returns
        -------
        Future
            Future resolving to a version string or None.
        """
        return self._executor.submit(
            self._resolver.get_installed, query, install_root
        )

    def shutdown(self, wait: bool = True) -> None:
        """Shut down the thread pool.

        Parameters
        ----------
        wait : bool
            If True, wait for running tasks to complete.
        """
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> 'PackagePool':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.shutdown()
        return False
