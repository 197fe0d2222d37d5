# -*- coding: utf-8 -*-
"""
Errors - Exception taxonomy for dpack.

``ParseError`` is recovered locally during directory scans. The other
errors reject the enclosing operation and are left to the caller.

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


class DpackError(Exception):
    """Base class for all dpack errors."""


class ParseError(DpackError, ValueError):
    """An artifact filename or version string is malformed."""


class NotFoundError(DpackError, FileNotFoundError):
    """An artifact file expected on disk does not exist.

    Parameters
    ----------
    path : str
        The missing artifact path.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f'The artifact file "{path}" could not be found.')
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class InfoError(DpackError):
    """Project metadata required to name an artifact is unavailable."""


class ArchiveError(DpackError):
    """Writing, extracting or moving an archive failed."""
