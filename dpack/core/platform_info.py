# -*- coding: utf-8 -*-
"""
Platform Info - Host platform facets for newly packed artifacts.

Maps the running interpreter's view of the host onto the ``platform``,
``osName``, ``osVersion`` and ``architecture`` filename facets.

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
import platform as _platform
import sys
from dataclasses import dataclass
from typing import Optional


_ARCHITECTURES = {
    'x86_64': 'x64',
    'amd64': 'x64',
    'i386': 'x86',
    'i686': 'x86',
    'x86': 'x86',
    'aarch64': 'arm64',
    'arm64': 'arm64',
}


@dataclass(frozen=True)
class PlatformInfo:
    """Platform facets of an artifact.

    Attributes
    ----------
    platform : str
        ``sys.platform`` style name ('darwin', 'linux', 'win32').
    os_name : str
        Operating system or distribution ('OSX', 'ubuntu', 'windows').
    os_version : str
        Operating system release.
    architecture : str
        CPU architecture ('x64', 'x86', 'arm64').
    """

    platform: str
    os_name: str
    os_version: str
    architecture: str


def normalize_architecture(machine: str) -> str:
    machine = machine.lower()
    return _ARCHITECTURES.get(machine, machine or 'unknown')


def _linux_release() -> tuple:
    try:
        release = _platform.freedesktop_os_release()
    except OSError:
        return 'linux', _platform.release()
    return release.get('ID', 'linux'), release.get('VERSION_ID', _platform.release())


def detect_platform() -> PlatformInfo:
    """Describe the host this interpreter runs on."""
    plat = sys.platform
    if plat.startswith('linux'):
        plat = 'linux'
        os_name, os_version = _linux_release()
    elif plat == 'darwin':
        os_name, os_version = 'OSX', _platform.mac_ver()[0]
    elif plat == 'win32':
        os_name, os_version = 'windows', _platform.release()
    else:
        os_name, os_version = _platform.system() or plat, _platform.release()
    return PlatformInfo(
        platform=plat,
        os_name=os_name or plat,
        os_version=os_version or 'unknown',
        architecture=normalize_architecture(_platform.machine()),
    )


def resolve_platform(
    platform: Optional[str] = None,
    os_name: Optional[str] = None,
    os_version: Optional[str] = None,
    architecture: Optional[str] = None,
    detected: Optional[PlatformInfo] = None,
) -> PlatformInfo:
    """Fill unset facets from the detected host platform."""
    detected = detected or detect_platform()
    return PlatformInfo(
        platform=platform or detected.platform,
        os_name=os_name or detected.os_name,
        os_version=os_version or detected.os_version,
        architecture=architecture or detected.architecture,
    )
