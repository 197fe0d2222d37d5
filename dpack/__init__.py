# -*- coding: utf-8 -*-
"""
dpack - Deployment artifact catalog, packer and installer.

Scans directories of artifacts named
``project~owner~branch~major.minor.patch~build~platform~osName~osVersion~architecture.tar.gz``,
answers faceted queries over them newest first, packs project
directories into such artifacts and installs them.

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

__version__ = "0.1.0"

from dpack.catalog.catalog import PackageCatalog, scan_directory
from dpack.catalog.codec import format_filename, format_version, parse_filename
from dpack.catalog.models import PackageQuery, PackageRecord, PackageVersion
from dpack.catalog.query import find, terms
from dpack.catalog.versions import compare_versions
from dpack.errors import (
    ArchiveError,
    DpackError,
    InfoError,
    NotFoundError,
    ParseError,
)

__all__: list = [
    "PackageCatalog",
    "PackageQuery",
    "PackageRecord",
    "PackageVersion",
    "scan_directory",
    "parse_filename",
    "format_filename",
    "format_version",
    "compare_versions",
    "find",
    "terms",
    "DpackError",
    "ParseError",
    "NotFoundError",
    "InfoError",
    "ArchiveError",
]
