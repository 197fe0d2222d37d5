# -*- coding: utf-8 -*-
"""
Tests for dpack.core.config — DpackConfig, BuildConfig and loaders.

Author
------
Steven Siebert

Created
-------
2026-02-06
"""

import json

import pytest

from dpack.core.config import (
    BuildConfig,
    DpackConfig,
    PackSettings,
    load_build_config,
    load_config,
)


class TestDpackConfig:
    def test_defaults(self):
        cfg = DpackConfig()
        assert cfg.max_workers == 1
        assert cfg.log_level == "WARNING"

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        DpackConfig(max_workers=3).save(path)

        loaded = load_config(path)
        assert loaded.max_workers == 3
        assert loaded.log_level == "WARNING"

    def test_load_missing_file_returns_defaults(self, tmp_path):
        cfg = load_config(tmp_path / "nonexistent.json")
        assert cfg.max_workers == 1

    def test_load_corrupted_file_returns_defaults(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json {{{")
        assert load_config(path).max_workers == 1

    def test_load_ignores_unknown_fields(self, tmp_path):
        path = tmp_path / "config.json"
        with open(path, 'w') as f:
            json.dump({"log_level": "DEBUG", "unknown_field": 42}, f)
        assert load_config(path).log_level == "DEBUG"


class TestBuildConfig:
    def test_defaults(self):
        cfg = BuildConfig()
        assert cfg.version_file is None
        assert cfg.build is None
        assert cfg.pack == PackSettings(pattern="**/*", output="packages")

    def test_from_dict_camel_case(self):
        cfg = BuildConfig.from_dict({
            'versionFile': 'VERSION',
            'osName': 'ubuntu',
            'build': '12',
            'pack': {'pattern': './src/**/*,./README.md', 'ignored': 1},
            'unknown': True,
        })
        assert cfg.version_file == 'VERSION'
        assert cfg.os_name == 'ubuntu'
        assert cfg.build == 12
        assert cfg.pack.pattern == './src/**/*,./README.md'
        assert cfg.pack.output == 'packages'

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "dpack.yaml"
        path.write_text(
            "version_file: pyproject.toml\n"
            "architecture: arm64\n"
            "pack:\n"
            "  pattern: 'bin/**'\n"
            "  output: dist\n"
        )
        cfg = load_build_config(path)
        assert cfg.version_file == 'pyproject.toml'
        assert cfg.architecture == 'arm64'
        assert cfg.pack.output == 'dist'

    def test_load_missing_returns_defaults(self, tmp_path):
        assert load_build_config(tmp_path / "dpack.yaml") == BuildConfig()

    def test_load_empty_returns_defaults(self, tmp_path):
        path = tmp_path / "dpack.yaml"
        path.write_text("")
        assert load_build_config(path) == BuildConfig()

    def test_load_non_mapping_raises(self, tmp_path):
        path = tmp_path / "dpack.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError):
            load_build_config(path)

    def test_pack_must_be_mapping(self, tmp_path):
        path = tmp_path / "dpack.yaml"
        path.write_text('pack: "dist/**"\n')
        with pytest.raises(ValueError, match="pack must be a mapping"):
            load_build_config(path)
