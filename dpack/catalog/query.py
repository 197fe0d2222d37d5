# -*- coding: utf-8 -*-
"""
Query Engine - Filter catalog records and index their facet terms.

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
from typing import Any, Dict, Iterable, List, Mapping, Set, Tuple, Union

# dpack internal
from dpack.catalog.models import FACET_LABELS, PackageQuery, PackageRecord
from dpack.catalog.versions import sort_newest_first


QueryLike = Union[PackageQuery, Mapping[str, Any], None]


def as_query(query: QueryLike) -> PackageQuery:
    if isinstance(query, PackageQuery):
        return query
    return PackageQuery.from_mapping(query)


def find(records: Iterable[PackageRecord], query: QueryLike = None) -> List[PackageRecord]:
    """Return the records matching every constrained facet, newest first.

    Parameters
    ----------
    records : Iterable[PackageRecord]
        Records to search.
    query : PackageQuery, Mapping[str, Any] or None
        Facet constraints. Values compare as exact strings; ``version``
        compares against ``major.minor.patch-build``. An empty query
        matches every record.

    Returns
    -------
    List[PackageRecord]
        Matches sorted by version, descending. Records with equal
        versions keep their input order.

    Raises
    ------
    ValueError
        If a mapping query names an unknown facet.
    """
    query = as_query(query)
    return sort_newest_first(r for r in records if query.matches(r))


def terms(records: Iterable[PackageRecord]) -> List[Dict[str, str]]:
    """Build the term index of a record list.

    Parameters
    ----------
    records : Iterable[PackageRecord]

    Returns
    -------
    List[Dict[str, str]]
        One ``{value: label}`` entry per distinct (value, facet) pair, in
        the order first seen. Labels are facet names, with ``osName`` and
        ``osVersion`` in camelCase. Path fields are never indexed.
    """
    seen: Set[Tuple[str, str]] = set()
    index: List[Dict[str, str]] = []
    for record in records:
        for facet, value in record.facets():
            if (value, facet) in seen:
                continue
            seen.add((value, facet))
            index.append({value: FACET_LABELS[facet]})
    return index

