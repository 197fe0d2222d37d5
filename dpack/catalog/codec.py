# -*- coding: utf-8 -*-
"""
Filename Codec - Parse and format delimited artifact filenames.

Artifact filenames carry nine ``~``-delimited tokens followed by the
archive extension::

    project~owner~branch~major.minor.patch~build~platform~osName~osVersion~architecture.tar.gz

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
import os
from typing import Optional, Union

# dpack internal
from dpack.catalog.models import PackageRecord, PackageVersion
from dpack.errors import ParseError


DELIMITER = '~'
ARCHIVE_EXTENSION = '.tar.gz'
_KNOWN_EXTENSIONS = ('.tar.gz', '.tgz')
_TOKEN_COUNT = 9


def _to_int(text: str, what: str, filename: str) -> int:
    # No signs, no leading zeros.
    canonical = text.isascii() and text.isdigit() and text == str(int(text))
    if not canonical:
        raise ParseError(
            f"Invalid {what} {text!r} in artifact filename {filename!r}"
        )
    return int(text)


def _strip_extension(token: str) -> str:
    for ext in _KNOWN_EXTENSIONS:
        if token.endswith(ext):
            return token[:-len(ext)]
    return token.split('.', 1)[0]


def parse_filename(filename: str, root: Optional[str] = None) -> PackageRecord:
    """Parse an artifact filename into a PackageRecord.

    Parameters
    ----------
    filename : str
        Bare filename or path to the artifact.
    root : Optional[str]
        Catalog root. When given, a bare ``filename`` is located directly
        under it and ``relative`` is computed against it.

    Returns
    -------
    PackageRecord

    Raises
    ------
    ParseError
        If the name does not have exactly nine tokens or the version or
        build are not canonical non-negative integers (no leading
        zeros).
    """
    name = os.path.basename(filename)
    tokens = name.split(DELIMITER)
    if len(tokens) != _TOKEN_COUNT:
        raise ParseError(
            f"Artifact filename {name!r} has {len(tokens)} fields, "
            f"expected {_TOKEN_COUNT}"
        )

    (project, owner, branch, release, build,
     platform, os_name, os_version, last) = tokens
    architecture = _strip_extension(last)
    if not all((project, owner, branch, platform, os_name, os_version,
                architecture)):
        raise ParseError(f"Artifact filename {name!r} has an empty field")

    parts = release.split('.')
    if len(parts) != 3:
        raise ParseError(
            f"Invalid version {release!r} in artifact filename {name!r}"
        )
    major, minor, patch = (_to_int(p, 'version', name) for p in parts)
    version = PackageVersion(major, minor, patch, _to_int(build, 'build', name))

    directory = relative = full_path = None
    has_dir = os.path.dirname(filename) != ''
    if has_dir or root is not None:
        base = os.path.abspath(root) if root is not None else None
        if has_dir:
            full_path = os.path.abspath(
                filename if base is None else os.path.join(base, filename)
            )
        else:
            full_path = os.path.join(base, name)
        directory = os.path.dirname(full_path)
        relative = os.path.relpath(directory, base or directory)

    return PackageRecord(
        project=project,
        owner=owner,
        branch=branch,
        version=version,
        platform=platform,
        os_name=os_name,
        os_version=os_version,
        architecture=architecture,
        file=name,
        directory=directory,
        relative=relative,
        full_path=full_path,
        path=full_path,
    )


def format_filename(record: PackageRecord) -> str:
    """Build the canonical artifact filename for a record.

    Parameters
    ----------
    record : PackageRecord

    Returns
    -------
    str
        Delimited filename ending in ``.tar.gz``.
    """
    return DELIMITER.join((
        record.project,
        record.owner,
        record.branch,
        record.version.release,
        str(record.version.build),
        record.platform,
        record.os_name,
        record.os_version,
        record.architecture,
    )) + ARCHIVE_EXTENSION


def format_version(value: Union[PackageRecord, PackageVersion]) -> str:
    """Format ``major.minor.patch-build`` for a record or version."""
    if isinstance(value, PackageRecord):
        value = value.version
    return str(value)


def is_artifact_name(filename: str) -> bool:
    try:
        parse_filename(filename)
    except ParseError:
        return False
    return True
