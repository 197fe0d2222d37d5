# -*- coding: utf-8 -*-
"""
Artifact Builder - Gather artifact metadata and pack a project directory.

Collects the project name, owner, branch, version, build number and
platform facets for a project directory, selects the files to pack and
writes the archive under its canonical delimited filename. Source
control, manifests, globbing and compression are delegated to
collaborators.

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
import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

# dpack internal
from dpack.catalog.codec import DELIMITER, format_filename
from dpack.catalog.models import InfoRecord
from dpack.catalog.versions import parse_version
from dpack.core.archive import Archiver
from dpack.core.config import BuildConfig
from dpack.core.files import Globber
from dpack.core.manifest import ManifestError, ManifestReader
from dpack.core.platform_info import PlatformInfo, resolve_platform
from dpack.core.scm import SourceControlError, SourceControlInfo
from dpack.errors import InfoError, ParseError

# Characters that would split a facet across filename fields or directories.
_RESERVED_CHARS = tuple(
    c for c in dict.fromkeys((DELIMITER, '/', os.sep, os.altsep)) if c
)


class ArtifactBuilder:
    """Build deployment artifacts from a project directory.

    Parameters
    ----------
    source_control : Optional[SourceControlInfo]
        Owner, branch and build number lookup.
    manifests : Optional[ManifestReader]
        Project name and version lookup.
    globber : Optional[Globber]
        Selects the files to pack.
    archiver : Optional[Archiver]
        Writes the archive.
    platform : Optional[PlatformInfo]
        Platform facets to use where the build config sets none.
        Detected from the host if None.
    """

    def __init__(
        self,
        source_control: Optional[SourceControlInfo] = None,
        manifests: Optional[ManifestReader] = None,
        globber: Optional[Globber] = None,
        archiver: Optional[Archiver] = None,
        platform: Optional[PlatformInfo] = None,
    ) -> None:
        self._scm = source_control or SourceControlInfo()
        self._manifests = manifests or ManifestReader()
        self._globber = globber or Globber()
        self._archiver = archiver or Archiver()
        self._platform = platform

    def _project_name(self, name: Optional[str], base: Path) -> str:
        if name:
            return name
        manifest = self._manifests.find_manifest(base)
        if manifest is not None:
            try:
                found = self._manifests.read_name(manifest)
            except ManifestError as e:
                raise InfoError(str(e)) from e
            if found:
                return found
        return base.name

    def _version(self, config: BuildConfig, base: Path) -> str:
        if config.version_file:
            manifest = base / config.version_file
        else:
            manifest = self._manifests.find_manifest(base)
            if manifest is None:
                raise InfoError(
                    f"No version file configured and no manifest found in {base}"
                )
        try:
            return self._manifests.read_version(manifest)
        except ManifestError as e:
            raise InfoError(str(e)) from e

    def get_info(
        self,
        name: Optional[str],
        config: BuildConfig,
        base_path: Union[str, Path],
    ) -> InfoRecord:
        """Collect the metadata needed to pack ``base_path``.

        Parameters
        ----------
        name : Optional[str]
            Project name. If None, taken from the project manifest, then
            the directory name.
        config : BuildConfig
            Build description.
        base_path : str or Path
            Project directory.

        Returns
        -------
        InfoRecord

        Raises
        ------
        InfoError
            If the owner, branch, version or build number cannot be
            determined, or a facet contains the filename delimiter or a
            path separator.
        """
        base = Path(base_path).resolve()

        try:
            owner, branch = self._scm.get_owner_and_branch(base)
        except SourceControlError as e:
            raise InfoError(f"Cannot determine owner and branch: {e}") from e
        if not owner or not branch:
            raise InfoError(f"Cannot determine owner and branch for {base}")

        release = self._version(config, base)
        if config.build is not None:
            build = config.build
        else:
            try:
                build = self._scm.get_build_number(base)
            except SourceControlError as e:
                raise InfoError(f"Cannot determine build number: {e}") from e

        try:
            version = parse_version(f"{release}-{build}")
        except ParseError as e:
            raise InfoError(str(e)) from e

        commit = None
        try:
            commit = self._scm.get_commit(base)
        except SourceControlError as e:
            logger.debug("No commit for %s: %s", base, e)

        plat = resolve_platform(
            config.platform, config.os_name, config.os_version,
            config.architecture, detected=self._platform,
        )

        info = InfoRecord(
            project=self._project_name(name, base),
            owner=owner,
            branch=branch,
            version=version,
            platform=plat.platform,
            os_name=plat.os_name,
            os_version=plat.os_version,
            architecture=plat.architecture,
            base_path=str(base),
            pattern=config.pack.pattern,
            commit=commit,
        )
        for facet in ('project', 'owner', 'branch', 'platform', 'os_name',
                      'os_version', 'architecture'):
            value = getattr(info, facet)
            for char in _RESERVED_CHARS:
                if char in value:
                    raise InfoError(f"{facet} {value!r} contains {char!r}")

        output_dir = base / config.pack.output
        info.output = str(output_dir / format_filename(info.record()))
        info.files = [
            f for f in self._globber.match(config.pack.pattern, base)
            if not (base / f).resolve().is_relative_to(output_dir.resolve())
        ]
        logger.debug(
            "Collected %d files for %s", len(info.files), os.path.basename(info.output)
        )
        return info

    def create(self, info: InfoRecord) -> str:
        """Write the archive described by ``info``.

        Returns
        -------
        str
            The archive path.

        Raises
        ------
        ArchiveError
            If the archive cannot be written. Not retried.
        """
        self._archiver.compress(info.files, info.output, info.base_path)
        logger.info("Packed %d files into %s", len(info.files), info.output)
        return info.output

    def pack(
        self,
        name: Optional[str],
        config: BuildConfig,
        base_path: Union[str, Path],
    ) -> str:
        """:meth:`get_info` followed by :meth:`create`."""
        return self.create(self.get_info(name, config, base_path))
