"""Parse MSBuild project files and extract PackageReference declarations."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..errors import DecodeError
from ..models import DependencyDeclaration

PACKAGE_REFERENCE_TAG = "PackageReference"


def _local_name(tag: object) -> str:
    # Comments and processing instructions carry a callable tag.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def extract_dependencies(document: str) -> list[DependencyDeclaration]:
    """Return every PackageReference in document order.

    Elements are matched on their local tag name so both SDK-style projects
    and legacy projects using the MSBuild namespace are covered. Missing
    ``Include`` or ``Version`` attributes yield ``None`` for that field.

    Raises:
        DecodeError: if the document is not well-formed XML.
    """
    try:
        root = ET.fromstring(document.lstrip("\ufeff"))
    except ET.ParseError as exc:
        raise DecodeError(f"Invalid project file: {exc}") from exc

    declarations: list[DependencyDeclaration] = []
    for element in root.iter():
        if _local_name(element.tag) != PACKAGE_REFERENCE_TAG:
            continue
        declarations.append(
            DependencyDeclaration(
                name=element.get("Include"),
                version=element.get("Version"),
            )
        )

    return declarations
