# -*- coding: utf-8 -*-
"""
Version Comparator - Order artifact versions newest first.

Versions compare component-wise as integers over
``(major, minor, patch, build)``, so ``0.10.0-1`` is newer than
``0.9.0-7``.

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
import re
from functools import cmp_to_key
from typing import Iterable, List, Optional, TypeVar, Union

# dpack internal
from dpack.catalog.models import PackageRecord, PackageVersion
from dpack.errors import ParseError


VersionLike = Union[PackageVersion, PackageRecord, str]
T = TypeVar('T', PackageVersion, PackageRecord, str)

_NUM = r'(0|[1-9]\d*)'
_VERSION_RE = re.compile(
    rf'^{_NUM}\.{_NUM}\.{_NUM}(?:[-~]{_NUM})?$', re.ASCII
)


def parse_version(text: str) -> PackageVersion:
    """Parse a version display string.

    Parameters
    ----------
    text : str
        ``major.minor.patch-build``, ``major.minor.patch~build`` or
        ``major.minor.patch`` (build 0).

    Returns
    -------
    PackageVersion

    Raises
    ------
    ParseError
        If ``text`` is not a version string.
    """
    match = _VERSION_RE.match(text.strip())
    if match is None:
        raise ParseError(f"Invalid version string {text!r}")
    major, minor, patch, build = match.groups()
    return PackageVersion(int(major), int(minor), int(patch), int(build or 0))


def as_version(value: VersionLike) -> PackageVersion:
    if isinstance(value, PackageVersion):
        return value
    if isinstance(value, PackageRecord):
        return value.version
    return parse_version(value)


def compare_versions(a: VersionLike, b: VersionLike) -> int:
    """Compare two versions.

    Parameters
    ----------
    a, b : PackageVersion, PackageRecord or str

    Returns
    -------
    int
        -1 if ``a`` is older, 1 if newer, 0 if all four components match.
    """
    left = as_version(a).as_tuple()
    right = as_version(b).as_tuple()
    for x, y in zip(left, right):
        if x != y:
            return 1 if x > y else -1
    return 0


def sort_newest_first(items: Iterable[T]) -> List[T]:
    """Sort versions (or records by version) in descending order.

    The sort is stable: items with identical versions keep their
    original relative order.
    """
    return sorted(items, key=cmp_to_key(compare_versions), reverse=True)


def latest(items: Iterable[T]) -> Optional[T]:
    ordered = sort_newest_first(items)
    return ordered[0] if ordered else None
