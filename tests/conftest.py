"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filekit.filesystem import LocalFileSystem


@pytest.fixture
def fs(tmp_path: Path) -> LocalFileSystem:
    """Create a filesystem session rooted at a temporary directory."""
    return LocalFileSystem(cwd=tmp_path)


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a small text file."""
    path = tmp_path / "compatibility.ini"
    path.write_text("[Compatibility]\nLastVersion=1.0\n")
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a nested directory tree with a file at each level.

    roottree/
        fileInRootTree.txt
        subtree/
            fileInSubTree.txt
            subsubtree/
                fileInSubSubTree.txt
            subsubtree2/
        subtree2/
            fileInSubTree2.txt
    """
    root = tmp_path / "roottree"
    (root / "subtree" / "subsubtree").mkdir(parents=True)
    (root / "subtree" / "subsubtree2").mkdir(parents=True)
    (root / "subtree2").mkdir(parents=True)
    (root / "fileInRootTree.txt").write_text("Hello file in roottree")
    (root / "subtree" / "fileInSubTree.txt").write_text("Hello file in subtree")
    (root / "subtree2" / "fileInSubTree2.txt").write_text("Hello file in subtree2")
    (root / "subtree" / "subsubtree" / "fileInSubSubTree.txt").write_text(
        "Hello file in subsubtree"
    )
    return root


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.read.return_value = ""
    fs.working_directory.return_value = "/fake/cwd"
    fs.absolute.side_effect = lambda path: f"/fake/cwd/{path}"
    return fs
