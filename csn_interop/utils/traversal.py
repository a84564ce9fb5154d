"""
CSN traversal helpers shared by the transformation stages.
"""

from collections.abc import Iterator
from typing import Any

from csn_interop.utils.annotation_mapping import is_annotation


def iter_definitions(csn: dict[str, Any]) -> Iterator[tuple[str, dict[str, Any]]]:
    """Yield (qualified name, definition) pairs of a CSN document."""
    yield from csn["definitions"].items()


def iter_annotated(csn: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """
    Yield every object that can carry annotations.

    That is every definition and, for entities, each of their elements.
    Elements of non-entity definitions are not visited.
    """
    for _, definition in iter_definitions(csn):
        yield definition
        if definition.get("kind") == "entity":
            yield from (definition.get("elements") or {}).values()


def iter_annotations(obj: dict[str, Any]) -> Iterator[tuple[str, Any]]:
    """Yield (annotation, value) pairs of a definition or element."""
    for key, value in obj.items():
        if is_annotation(key):
            yield key, value
