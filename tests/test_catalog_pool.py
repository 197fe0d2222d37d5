# -*- coding: utf-8 -*-
"""
Tests for dpack.catalog.pool — PackagePool.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

Created
-------
2026-02-06
"""

from unittest import mock

import pytest

from dpack.catalog.catalog import PackageCatalog
from dpack.catalog.pool import PackagePool
from dpack.core.config import BuildConfig, DpackConfig
from dpack.errors import NotFoundError


class TestPackagePool:

    def test_submit_scan(self, artifact_root):
        with PackagePool() as pool:
            catalog = pool.submit_scan(artifact_root).result(timeout=10)
        assert isinstance(catalog, PackageCatalog)
        assert len(catalog) == 24

    def test_scan_of_missing_root_fails_future(self, tmp_path):
        with PackagePool() as pool:
            future = pool.submit_scan(tmp_path / "missing")
            with pytest.raises(FileNotFoundError):
                future.result(timeout=10)

    def test_submit_unpack_missing_archive(self, tmp_path):
        with PackagePool() as pool:
            future = pool.submit_unpack(tmp_path / "missing.tar.gz", tmp_path)
            with pytest.raises(NotFoundError):
                future.result(timeout=10)

    def test_submit_get_installed_empty(self, tmp_path):
        with PackagePool() as pool:
            assert pool.submit_get_installed({}, tmp_path).result(timeout=10) is None

    def test_submit_pack_uses_builder(self, tmp_path):
        builder = mock.Mock()
        builder.pack.return_value = "/out/archive.tar.gz"
        config = BuildConfig()
        with PackagePool(builder=builder) as pool:
            result = pool.submit_pack("proj", config, tmp_path).result(timeout=10)
        assert result == "/out/archive.tar.gz"
        builder.pack.assert_called_once_with("proj", config, tmp_path)

    def test_from_config(self):
        pool = PackagePool.from_config(DpackConfig(max_workers=2))
        try:
            assert pool._executor._max_workers == 2
        finally:
            pool.shutdown(wait=True)

    def test_shutdown_is_safe(self):
        pool = PackagePool(max_workers=1)
        pool.shutdown(wait=True)
        # Should not raise
