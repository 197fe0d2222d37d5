# -*- coding: utf-8 -*-
"""
Tests for dpack.core.installer — InstallResolver.

Author
------
Steven Siebert

Created
-------
2026-10-17
"""

import os
from unittest import mock

import pytest

from dpack.core.archive import Archiver
from dpack.core.installer import InstallResolver
from dpack.errors import ArchiveError, NotFoundError, ParseError


ARTIFACT = "proj1~owner1~branch1~0.1.0~2~linux~ubuntu~14.04LTS~x64.tar.gz"


@pytest.fixture
def archive(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "app.txt").write_text("app")
    path = tmp_path / ARTIFACT
    Archiver().compress(["app.txt"], path, src)
    return path


class TestUnpack:

    def test_missing_archive_message(self, tmp_path):
        missing = str(tmp_path / ARTIFACT)
        with pytest.raises(NotFoundError) as excinfo:
            InstallResolver().unpack(missing, tmp_path / "dest")
        assert str(excinfo.value) == f'The artifact file "{missing}" could not be found.'
        assert excinfo.value.path == missing

    def test_missing_archive_is_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            InstallResolver().unpack(tmp_path / "nope.tar.gz", tmp_path)

    def test_returns_version(self, archive, tmp_path):
        dest = tmp_path / "dest"
        assert InstallResolver().unpack(archive, dest) == "0.1.0-2"
        assert (dest / "app.txt").read_text() == "app"

    def test_delegates_to_archiver(self, archive, tmp_path):
        archiver = mock.Mock()
        InstallResolver(archiver=archiver).unpack(archive, tmp_path / "d")
        archiver.extract.assert_called_once_with(str(archive), tmp_path / "d")

    def test_bad_name_not_extracted(self, tmp_path):
        path = tmp_path / "random.tar.gz"
        path.write_bytes(b"")
        archiver = mock.Mock()
        with pytest.raises(ParseError):
            InstallResolver(archiver=archiver).unpack(path, tmp_path / "d")
        archiver.extract.assert_not_called()

    def test_archive_error_propagates(self, tmp_path):
        path = tmp_path / ARTIFACT
        path.write_bytes(b"corrupt")
        with pytest.raises(ArchiveError):
            InstallResolver().unpack(path, tmp_path / "d")


class TestInstall:

    def test_installs_into_version_directory(self, archive, tmp_path):
        root = tmp_path / "installed"
        resolver = InstallResolver()
        assert resolver.install(archive, root) == "0.1.0-2"
        assert (root / "0.1.0-2" / "app.txt").exists()
        assert resolver.get_installed({}, root) == "0.1.0-2"

    def test_missing_archive(self, tmp_path):
        with pytest.raises(NotFoundError):
            InstallResolver().install(tmp_path / ARTIFACT, tmp_path / "installed")


class TestGetInstalled:

    @pytest.fixture
    def install_root(self, tmp_path):
        root = tmp_path / "installed"
        for name in ("0.1.0-2", "0.10.0-1", "0.9.0-7", "0.10.0-1-backup", "logs"):
            (root / name).mkdir(parents=True)
        (root / "0.99.0-1").write_text("a file, not an install")
        return root

    def test_empty_directory(self, tmp_path):
        assert InstallResolver().get_installed({}, tmp_path) is None

    def test_missing_directory(self, tmp_path):
        assert InstallResolver().get_installed({}, tmp_path / "missing") is None

    def test_latest(self, install_root):
        assert InstallResolver().get_installed(None, install_root) == "0.10.0-1"

    def test_version_filter(self, install_root):
        resolver = InstallResolver()
        assert resolver.get_installed({'version': '0.9.0-7'}, install_root) == "0.9.0-7"
        assert resolver.get_installed({'version': '1.0.0-1'}, install_root) is None

    def test_build_filter(self, install_root):
        assert InstallResolver().get_installed({'build': 2}, install_root) == "0.1.0-2"

    def test_other_facets_ignored(self, install_root):
        query = {'project': 'proj1', 'osName': 'ubuntu'}
        assert InstallResolver().get_installed(query, install_root) == "0.10.0-1"

    def test_version_and_build_together(self, install_root):
        resolver = InstallResolver()
        query = {'version': '0.9.0-7', 'build': 7, 'architecture': 'x64'}
        assert resolver.get_installed(query, install_root) == "0.9.0-7"
        assert resolver.get_installed({'version': '0.9.0-7', 'build': 1}, install_root) is None
