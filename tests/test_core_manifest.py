# -*- coding: utf-8 -*-
"""
Tests for dpack.core.manifest — ManifestReader.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

Created
-------
2026-10-17
"""

import json

import pytest

from dpack.core.manifest import ManifestError, ManifestReader, normalize_version


class TestNormalizeVersion:

    @pytest.mark.parametrize("text, expected", [
        ("1.2.3", "1.2.3"),
        ("1.2", "1.2.0"),
        ("v1.2.3", "1.2.3"),
        ("1.2.3.4", "1.2.3"),
        ("1.2.3rc1", "1.2.3"),
        ("2", "2.0.0"),
    ])
    def test_normalize(self, text, expected):
        assert normalize_version(text) == expected

    def test_invalid(self):
        with pytest.raises(ManifestError):
            normalize_version("not.a.version")


class TestReadVersion:

    def test_package_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "proj1", "version": "0.2.1"}))
        assert ManifestReader().read_version(path) == "0.2.1"

    def test_pyproject_project_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "proj1"\nversion = "1.4.0"\n')
        assert ManifestReader().read_version(path) == "1.4.0"

    def test_pyproject_poetry_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.poetry]\nname = "proj1"\nversion = "0.9"\n')
        assert ManifestReader().read_version(path) == "0.9.0"

    def test_yaml(self, tmp_path):
        path = tmp_path / "dpack.yaml"
        path.write_text("project: proj1\nversion: '3.1.4'\n")
        assert ManifestReader().read_version(path) == "3.1.4"

    def test_plain_text(self, tmp_path):
        path = tmp_path / "version.py"
        path.write_text('__version__ = "0.3.7"\n')
        assert ManifestReader().read_version(path) == "0.3.7"

    def test_no_version(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "proj1"}))
        with pytest.raises(ManifestError):
            ManifestReader().read_version(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError):
            ManifestReader().read_version(tmp_path / "VERSION")

    def test_corrupt_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{nope")
        with pytest.raises(ManifestError):
            ManifestReader().read_version(path)


class TestReadName:

    def test_package_json(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text(json.dumps({"name": "proj1", "version": "0.2.1"}))
        assert ManifestReader().read_name(path) == "proj1"

    def test_yaml_project_key(self, tmp_path):
        path = tmp_path / "dpack.yaml"
        path.write_text("project: proj1\n")
        assert ManifestReader().read_name(path) == "proj1"

    def test_text_file_has_no_name(self, tmp_path):
        path = tmp_path / "VERSION"
        path.write_text("1.0.0")
        assert ManifestReader().read_name(path) is None


class TestFindManifest:

    def test_priority(self, tmp_path):
        (tmp_path / "package.json").write_text("{}")
        (tmp_path / "pyproject.toml").write_text("")
        assert ManifestReader().find_manifest(tmp_path) == tmp_path / "pyproject.toml"

    def test_none(self, tmp_path):
        assert ManifestReader().find_manifest(tmp_path) is None
