# -*- coding: utf-8 -*-
"""
Shared fixtures for the dpack test suite.

Author
------
Steven Siebert

Created
-------
2026-10-17
"""

import pytest

from dpack.catalog.catalog import scan_directory


OSX = "darwin~OSX~10.9.2~x64"
UBUNTU = "linux~ubuntu~14.04LTS~x64"

# 24 artifacts: owner1/branch1 (8 OSX + 2 ubuntu), owner1/branch2 (5 OSX),
# owner2/branch1 (5 OSX + 4 ubuntu).
ARTIFACT_NAMES = (
    [f"proj1~owner1~branch1~0.0.1~{b}~{OSX}.tar.gz" for b in range(1, 6)]
    + [f"proj1~owner1~branch1~0.0.2~{b}~{OSX}.tar.gz" for b in range(1, 4)]
    + [f"proj1~owner1~branch1~0.1.0~{b}~{UBUNTU}.tar.gz" for b in range(1, 3)]
    + [f"proj1~owner1~branch2~0.0.2~{b}~{OSX}.tar.gz" for b in range(1, 4)]
    + [f"proj1~owner1~branch2~0.1.0~{b}~{OSX}.tar.gz" for b in range(1, 3)]
    + [f"proj1~owner2~branch1~0.2.0~{b}~{OSX}.tar.gz" for b in range(1, 6)]
    + [f"proj1~owner2~branch1~0.2.0~{b}~{UBUNTU}.tar.gz" for b in range(1, 5)]
)


@pytest.fixture
def artifact_root(tmp_path):
    """Directory holding the 24 fixture artifacts and two stray files."""
    root = tmp_path / "packages"
    root.mkdir()
    for name in ARTIFACT_NAMES:
        (root / name).write_bytes(b"")
    (root / "README.md").write_text("not an artifact")
    (root / "proj1~owner1~branch1~latest~1~darwin~OSX~10.9.2~x64.tar.gz").write_bytes(b"")
    return root


@pytest.fixture
def artifact_list(artifact_root):
    """Records scanned from :func:`artifact_root`."""
    return scan_directory(artifact_root)
