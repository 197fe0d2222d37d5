# -*- coding: utf-8 -*-
"""
Package Catalog - In-memory catalog of artifacts under a root directory.

Provides scan_directory and the PackageCatalog class for building,
extending and querying the list of PackageRecords parsed from the
artifact files beneath a root directory. The catalog is a snapshot:
it is rebuilt by rescanning, never persisted, and not synchronized.

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
import dataclasses
import logging
import os
import shutil
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)

# dpack internal
from dpack.catalog.codec import parse_filename
from dpack.catalog.models import PackageRecord
from dpack.catalog.query import QueryLike, find, terms
from dpack.core.files import FileLister
from dpack.errors import ArchiveError, ParseError


def scan_directory(
    root: Union[str, Path],
    lister: Optional[FileLister] = None,
) -> List[PackageRecord]:
    """Parse every artifact file beneath ``root``.

    Parameters
    ----------
    root : str or Path
        Catalog root directory.
    lister : Optional[FileLister]
        File enumeration collaborator. Defaults to :class:`FileLister`.

    Returns
    -------
    List[PackageRecord]
        Records in listing order. Files whose names do not parse are
        skipped.

    Raises
    ------
    FileNotFoundError
        If ``root`` does not exist.
    """
    lister = lister or FileLister()
    root = os.path.abspath(root)
    records: List[PackageRecord] = []
    for path in lister.list(root):
        try:
            records.append(parse_filename(path, root))
        except ParseError as e:
            logger.debug("Skipping %s: %s", path, e)
    logger.debug("Scanned %d artifacts under %s", len(records), root)
    return records


def add(
    root: Union[str, Path],
    records: List[PackageRecord],
    filename: str,
) -> PackageRecord:
    """Parse ``filename`` relative to ``root`` and append it to ``records``.

    The file itself is not touched.

    Raises
    ------
    ParseError
        If ``filename`` is not an artifact name.
    """
    record = parse_filename(filename, str(root))
    records.append(record)
    return record


def copy(
    uploads_root: Union[str, Path],
    temp_file: Union[str, Path],
    target_filename: str,
    records: List[PackageRecord],
) -> PackageRecord:
    """Move an uploaded file into the catalog and append its record.

    The file lands in ``<uploads_root>/<project>-<owner>-<branch>/``.

    Parameters
    ----------
    uploads_root : str or Path
        Catalog root receiving uploads.
    temp_file : str or Path
        Where the uploaded bytes currently are.
    target_filename : str
        Artifact filename to store the upload under.
    records : List[PackageRecord]
        Record list to append to.

    Returns
    -------
    PackageRecord
        The appended record. ``directory`` is the project subdirectory
        and ``path`` is None.

    Raises
    ------
    ParseError
        If ``target_filename`` is not an artifact name. The upload is
        left where it is.
    ArchiveError
        If the file cannot be moved.
    """
    root = os.path.abspath(uploads_root)
    parsed = parse_filename(os.path.basename(target_filename), root)
    subdir = os.path.join(
        root, f"{parsed.project}-{parsed.owner}-{parsed.branch}"
    )
    destination = os.path.join(subdir, parsed.file)
    try:
        os.makedirs(subdir, exist_ok=True)
        shutil.move(str(temp_file), destination)
    except OSError as e:
        logger.error("Failed to move upload %s to %s: %s", temp_file, destination, e)
        raise ArchiveError(
            f"Could not store upload {temp_file} as {destination}: {e}"
        ) from e

    record = dataclasses.replace(
        parsed,
        directory=subdir,
        relative=os.path.relpath(subdir, root),
        full_path=destination,
        path=None,
    )
    records.append(record)
    logger.info("Stored upload %s", destination)
    return record


class PackageCatalog:
    """Ordered, in-memory catalog of the artifacts under a root directory.

    Parameters
    ----------
    root : str or Path
        Catalog root directory.
    records : Optional[List[PackageRecord]]
        Initial records, in catalog order.
    """

    def __init__(
        self,
        root: Union[str, Path],
        records: Optional[List[PackageRecord]] = None,
    ) -> None:
        self._root = os.path.abspath(root)
        self._records: List[PackageRecord] = list(records or [])

    @classmethod
    def scan(
        cls,
        root: Union[str, Path],
        lister: Optional[FileLister] = None,
    ) -> 'PackageCatalog':
        """Build a catalog by scanning ``root``.

        Raises
        ------
        FileNotFoundError
            If ``root`` does not exist.
        """
        return cls(root, scan_directory(root, lister))

    @property
    def root(self) -> str:
        return self._root

    @property
    def records(self) -> List[PackageRecord]:
        """Copy of the records in catalog order."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[PackageRecord]:
        return iter(list(self._records))

    def add(self, filename: str) -> PackageRecord:
        """Append the record for an artifact file already under the root."""
        return add(self._root, self._records, filename)

    def copy(
        self,
        temp_file: Union[str, Path],
        target_filename: str,
    ) -> PackageRecord:
        """Move an uploaded file under the root and append its record."""
        return copy(self._root, temp_file, target_filename, self._records)

    def find(self, query: QueryLike = None) -> List[PackageRecord]:
        """Records matching ``query``, newest first."""
        return find(self._records, query)

    def terms(self) -> List[Dict[str, str]]:
        return terms(self._records)

    def __repr__(self) -> str:
        return f"PackageCatalog(root={self._root!r}, records={len(self._records)})"
