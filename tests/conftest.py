"""Pytest configuration and fixtures."""
import pytest
from pathlib import Path


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small source tree with files to fix and files to skip."""
    project_path = tmp_path / "project"
    (project_path / "modules" / "custom").mkdir(parents=True)
    (project_path / "js").mkdir()
    (project_path / ".git").mkdir()

    (project_path / "modules" / "custom" / "custom.module").write_bytes(
        b"<?php\r\n"
        b"// $Id$\r\n"
        b"\r\n"
        b"//load the helpers   \r\n"
        b"function custom_init() {\r\n"
        b"  return 1;  \r\n"
        b"}\r\n\r\n\r\n"
    )
    (project_path / "js" / "app.js").write_text("//run on load:\nvar a = 1;\n", encoding="utf-8")
    (project_path / "js" / "jquery.min.js").write_text("//minified\n", encoding="utf-8")
    (project_path / ".git" / "hook.js").write_text("//hook\n", encoding="utf-8")
    (project_path / "README.txt").write_text("//not code\n", encoding="utf-8")

    yield project_path


@pytest.fixture
def write_file(tmp_path):
    """Write raw bytes to a file under tmp_path and return its path."""

    def _write(name: str, content: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write
