# -*- coding: utf-8 -*-
"""
Tests for dpack.core.platform_info — host platform facets.

Author
------
Steven Siebert

Created
-------
2026-10-17
"""

from unittest import mock

from dpack.core.platform_info import (
    PlatformInfo,
    detect_platform,
    normalize_architecture,
    resolve_platform,
)


HOST = PlatformInfo('linux', 'ubuntu', '22.04', 'x64')


class TestNormalizeArchitecture:

    def test_known(self):
        assert normalize_architecture('x86_64') == 'x64'
        assert normalize_architecture('AMD64') == 'x64'
        assert normalize_architecture('aarch64') == 'arm64'

    def test_unknown_passes_through(self):
        assert normalize_architecture('riscv64') == 'riscv64'


class TestDetectPlatform:

    def test_darwin(self):
        with mock.patch('dpack.core.platform_info.sys.platform', 'darwin'), \
                mock.patch('dpack.core.platform_info._platform.mac_ver',
                           return_value=('10.9.2', ('', '', ''), '')), \
                mock.patch('dpack.core.platform_info._platform.machine',
                           return_value='x86_64'):
            assert detect_platform() == PlatformInfo('darwin', 'OSX', '10.9.2', 'x64')

    def test_linux_os_release(self):
        with mock.patch('dpack.core.platform_info.sys.platform', 'linux'), \
                mock.patch('dpack.core.platform_info._platform.freedesktop_os_release',
                           return_value={'ID': 'ubuntu', 'VERSION_ID': '14.04'}), \
                mock.patch('dpack.core.platform_info._platform.machine',
                           return_value='x86_64'):
            assert detect_platform() == PlatformInfo('linux', 'ubuntu', '14.04', 'x64')

    def test_linux_without_os_release(self):
        with mock.patch('dpack.core.platform_info.sys.platform', 'linux'), \
                mock.patch('dpack.core.platform_info._platform.freedesktop_os_release',
                           side_effect=OSError), \
                mock.patch('dpack.core.platform_info._platform.release',
                           return_value='6.1.0'), \
                mock.patch('dpack.core.platform_info._platform.machine',
                           return_value='aarch64'):
            assert detect_platform() == PlatformInfo('linux', 'linux', '6.1.0', 'arm64')

    def test_returns_all_facets(self):
        info = detect_platform()
        assert info.platform and info.os_name and info.os_version and info.architecture


class TestResolvePlatform:

    def test_overrides(self):
        info = resolve_platform(os_name='debian', architecture='arm64', detected=HOST)
        assert info == PlatformInfo('linux', 'debian', '22.04', 'arm64')

    def test_defaults_to_detected(self):
        assert resolve_platform(detected=HOST) == HOST
