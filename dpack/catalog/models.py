# -*- coding: utf-8 -*-
"""
Catalog Models - Data models for deployment artifact metadata.

Defines PackageVersion, PackageRecord, PackageQuery and InfoRecord, the
structured forms of the delimited artifact filename
``project~owner~branch~major.minor.patch~build~platform~osName~osVersion~architecture.tar.gz``
used by the catalog, query engine, builder and installer.

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
2026-02-06

Modified
--------
2026-10-17
"""

# Standard library
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional, Tuple


# Facet names in term-enumeration order.
FACETS: Tuple[str, ...] = (
    'project',
    'owner',
    'branch',
    'version',
    'build',
    'platform',
    'os_name',
    'os_version',
    'architecture',
)

# Fields that locate a file rather than describe it.
PATH_FIELDS: Tuple[str, ...] = ('path', 'full_path', 'directory', 'relative', 'file')

# camelCase spellings accepted from plain mappings.
FACET_ALIASES: Mapping[str, str] = {
    'osName': 'os_name',
    'osVersion': 'os_version',
}

# Term index labels, in the filename convention's camelCase.
FACET_LABELS: Mapping[str, str] = {
    facet: facet for facet in FACETS
} | {name: alias for alias, name in FACET_ALIASES.items()}


@dataclass(frozen=True, order=True)
class PackageVersion:
    """Structured artifact version ``major.minor.patch-build``.

    Ordering compares the four components numerically, in order.

    Parameters
    ----------
    major : int
    minor : int
    patch : int
    build : int
    """

    major: int
    minor: int
    patch: int
    build: int = 0

    def __post_init__(self) -> None:
        for name in ('major', 'minor', 'patch', 'build'):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"{name} must be a non-negative integer, got {value!r}"
                )

    @property
    def release(self) -> str:
        """Dotted ``major.minor.patch`` form used inside filenames."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.build)

    def __str__(self) -> str:
        return f"{self.release}-{self.build}"


@dataclass(frozen=True)
class PackageRecord:
    """Metadata parsed from one artifact filename.

    Parameters
    ----------
    project : str
    owner : str
    branch : str
    version : PackageVersion
        Version and build number.
    platform : str
        e.g. 'darwin', 'linux', 'win32'.
    os_name : str
        e.g. 'OSX', 'ubuntu'.
    os_version : str
        e.g. '10.9.2', '14.04LTS'.
    architecture : str
        e.g. 'x64'.
    file : str
        Filename without directory.
    directory : Optional[str]
        Absolute directory containing the file.
    relative : Optional[str]
        ``directory`` relative to the catalog root.
    full_path : Optional[str]
        Absolute path to the file.
    path : Optional[str]
        Path the record was scanned from. None for uploaded artifacts
        placed by the catalog.
    """

    project: str
    owner: str
    branch: str
    version: PackageVersion
    platform: str
    os_name: str
    os_version: str
    architecture: str
    file: str = ''
    directory: Optional[str] = None
    relative: Optional[str] = None
    full_path: Optional[str] = None
    path: Optional[str] = None

    @property
    def build(self) -> int:
        return self.version.build

    def facet(self, name: str) -> str:
        """Return the string value of a facet.

        Parameters
        ----------
        name : str
            Facet name (snake_case or camelCase alias).

        Returns
        -------
        str
            ``version`` is the formatted ``major.minor.patch-build``
            string and ``build`` the decimal build number.

        Raises
        ------
        KeyError
            If ``name`` is not a facet.
        """
        name = FACET_ALIASES.get(name, name)
        if name not in FACETS:
            raise KeyError(name)
        if name == 'version':
            return str(self.version)
        if name == 'build':
            return str(self.version.build)
        return getattr(self, name)

    def facets(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(facet, value)`` pairs in term-enumeration order."""
        for name in FACETS:
            yield name, self.facet(name)

    def identity(self) -> Tuple[str, str, str]:
        return (self.project, self.owner, self.branch)

    def __repr__(self) -> str:
        return (
            f"PackageRecord({self.project}~{self.owner}~{self.branch} "
            f"{self.version} {self.platform}/{self.os_name}/"
            f"{self.os_version}/{self.architecture})"
        )


@dataclass(frozen=True)
class PackageQuery:
    """Facet filter for :func:`dpack.catalog.query.find`.

    Each facet left as None is unconstrained. ``version`` matches the
    full ``major.minor.patch-build`` string exactly.
    """

    project: Optional[str] = None
    owner: Optional[str] = None
    branch: Optional[str] = None
    version: Optional[str] = None
    build: Optional[str] = None
    platform: Optional[str] = None
    os_name: Optional[str] = None
    os_version: Optional[str] = None
    architecture: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> 'PackageQuery':
        """Build a query from a plain mapping.

        Parameters
        ----------
        data : Optional[Mapping[str, Any]]
            Facet name to desired value. camelCase names (``osName``,
            ``osVersion``) are accepted. None values are dropped.

        Returns
        -------
        PackageQuery

        Raises
        ------
        ValueError
            If a key is not a recognized facet.
        """
        if not data:
            return cls()
        values = {}
        for key, value in data.items():
            name = FACET_ALIASES.get(key, key)
            if name not in FACETS:
                raise ValueError(
                    f"Unknown package facet {key!r}; expected one of "
                    f"{', '.join(FACETS)}"
                )
            if value is not None:
                values[name] = str(value)
        return cls(**values)

    def constraints(self) -> List[Tuple[str, str]]:
        """Return ``(facet, value)`` for every constrained facet."""
        return [
            (name, str(getattr(self, name)))
            for name in FACETS
            if getattr(self, name) is not None
        ]

    def is_empty(self) -> bool:
        return not self.constraints()

    def matches(self, record: PackageRecord) -> bool:
        """True if ``record`` satisfies every constrained facet."""
        return all(
            record.facet(name) == value for name, value in self.constraints()
        )

    def to_dict(self) -> dict:
        return dict(self.constraints())


@dataclass
class InfoRecord:
    """Metadata gathered for an artifact about to be packed.

    Parameters
    ----------
    project : str
    owner : str
    branch : str
    version : PackageVersion
    platform : str
    os_name : str
    os_version : str
    architecture : str
    base_path : str
        Directory the archive members are relative to.
    pattern : str
        Glob pattern(s) the members were selected with.
    files : List[str]
        Member paths relative to ``base_path``.
    output : str
        Absolute path the archive is written to.
    commit : Optional[str]
        Source control revision the artifact was built from.
    """

    project: str
    owner: str
    branch: str
    version: PackageVersion
    platform: str
    os_name: str
    os_version: str
    architecture: str
    base_path: str = ''
    pattern: str = ''
    files: List[str] = field(default_factory=list)
    output: str = ''
    commit: Optional[str] = None

    def record(self) -> PackageRecord:
        """The catalog record the output archive parses to."""
        return PackageRecord(
            project=self.project,
            owner=self.owner,
            branch=self.branch,
            version=self.version,
            platform=self.platform,
            os_name=self.os_name,
            os_version=self.os_version,
            architecture=self.architecture,
        )
