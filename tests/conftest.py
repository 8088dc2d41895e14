"""
Shared test fixtures — build pom.xml trees under tmp_path.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

POM_NS = "http://maven.apache.org/POM/4.0.0"


def make_pom(
    artifact_id: str,
    group_id: str | None = "org.acme",
    version: str | None = "1.0.0",
    packaging: str | None = None,
    parent: tuple[str, str, str] | None = None,
    modules: list[str] | None = None,
    build: str = "",
) -> str:
    """Render a minimal pom.xml."""
    parts = [f'<project xmlns="{POM_NS}">', "  <modelVersion>4.0.0</modelVersion>"]
    if parent:
        pg, pa, pv = parent
        parts.append(
            f"  <parent><groupId>{pg}</groupId><artifactId>{pa}</artifactId>"
            f"<version>{pv}</version></parent>"
        )
    if group_id:
        parts.append(f"  <groupId>{group_id}</groupId>")
    parts.append(f"  <artifactId>{artifact_id}</artifactId>")
    if version:
        parts.append(f"  <version>{version}</version>")
    if packaging:
        parts.append(f"  <packaging>{packaging}</packaging>")
    if modules:
        parts.append("  <modules>")
        parts.extend(f"    <module>{m}</module>" for m in modules)
        parts.append("  </modules>")
    if build:
        parts.append(f"  <build>{build}</build>")
    parts.append("</project>")
    return "\n".join(parts) + "\n"


@pytest.fixture
def write_pom() -> Callable[..., Path]:
    """Return a helper writing ``<directory>/pom.xml`` and returning the directory."""

    def _write(directory: Path, artifact_id: str, **kwargs) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        (directory / "pom.xml").write_text(make_pom(artifact_id, **kwargs), encoding="utf-8")
        return directory

    return _write


@pytest.fixture
def multi_module(tmp_path: Path, write_pom) -> Path:
    """root → [a, b], a → [a1]. Returns the root directory."""
    root = tmp_path / "root"
    write_pom(root, "root", packaging="pom", modules=["a", "b"])
    write_pom(root / "a", "a", group_id=None, version=None,
              parent=("org.acme", "root", "1.0.0"), packaging="pom", modules=["a1"])
    write_pom(root / "b", "b", group_id=None, parent=("org.acme", "root", "1.0.0"))
    write_pom(root / "a" / "a1", "a1", version="2.0.0")
    return root
