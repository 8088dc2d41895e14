"""
Descriptor reader — parses pom.xml into a Descriptor model.

Reads XML with ElementTree, flattens the elements the resolver cares
about into a dict, and validates it with Pydantic. The Maven POM
namespace is optional.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from pydantic import ValidationError

from localproject.core.errors import DescriptorReadError
from localproject.core.models.descriptor import Descriptor

logger = logging.getLogger(__name__)


def _local(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def _child(elem: ET.Element | None, name: str) -> ET.Element | None:
    if elem is None:
        return None
    for child in elem:
        if _local(child.tag) == name:
            return child
    return None


def _children(elem: ET.Element | None, name: str) -> list[ET.Element]:
    if elem is None:
        return []
    return [child for child in elem if _local(child.tag) == name]


def _text(elem: ET.Element | None, name: str) -> str | None:
    child = _child(elem, name)
    if child is None or child.text is None:
        return None
    value = child.text.strip()
    return value or None


def _parse(root: ET.Element) -> dict:
    data: dict = {
        "artifact_id": _text(root, "artifactId"),
        "group_id": _text(root, "groupId"),
        "version": _text(root, "version"),
        "name": _text(root, "name"),
        "modules": [
            m.text.strip()
            for m in _children(_child(root, "modules"), "module")
            if m.text and m.text.strip()
        ],
    }
    packaging = _text(root, "packaging")
    if packaging:
        data["packaging"] = packaging

    parent = _child(root, "parent")
    if parent is not None:
        data["parent"] = {
            "group_id": _text(parent, "groupId"),
            "artifact_id": _text(parent, "artifactId"),
            "version": _text(parent, "version"),
            "relative_path": _text(parent, "relativePath"),
        }

    build = _child(root, "build")
    if build is not None:
        data["build"] = {
            "directory": _text(build, "directory"),
            "output_directory": _text(build, "outputDirectory"),
            "source_directory": _text(build, "sourceDirectory"),
            "resources": [
                {"directory": d}
                for d in (
                    _text(r, "directory")
                    for r in _children(_child(build, "resources"), "resource")
                )
                if d
            ],
        }
    return data


def read_descriptor(path: Path) -> Descriptor:
    """Read and validate a descriptor file.

    Args:
        path: Path to the pom.xml file.

    Returns:
        The parsed Descriptor, with ``pom_file`` set to ``path``.

    Raises:
        DescriptorReadError: If the file is missing, unreadable, not
            well-formed XML, or lacks an artifactId.
    """
    if not path.is_file():
        raise DescriptorReadError(f"Descriptor not found: {path}", path)

    logger.debug("Reading descriptor %s", path)

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DescriptorReadError(f"Cannot read {path}: {e}", path) from e

    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise DescriptorReadError(f"Invalid XML in {path}: {e}", path) from e

    if _local(root.tag) != "project":
        raise DescriptorReadError(
            f"Expected a <project> root element in {path}, got <{_local(root.tag)}>",
            path,
        )

    try:
        descriptor = Descriptor.model_validate(_parse(root))
    except ValidationError as e:
        raise DescriptorReadError(f"Invalid descriptor {path}: {e}", path) from e

    descriptor.pom_file = path
    return descriptor
