"""
Annotation mapping and cleanup of CAP specific constructs.
"""

import logging
from typing import Any

from csn_interop.utils.annotation_mapping import ANNOTATION_REPLACEMENTS
from csn_interop.utils.traversal import iter_annotated, iter_definitions

logger = logging.getLogger(__name__)


def replace_annotations(obj: dict[str, Any]) -> int:
    """
    Replace legacy annotations of a single definition or element.

    Rules are applied in table order. An existing target is never
    overwritten, so the first rule that fills a target wins. The legacy
    annotation is removed in any case.

    Returns:
        Number of legacy annotations removed
    """
    removed = 0
    for old, new in ANNOTATION_REPLACEMENTS:
        if old not in obj:
            continue
        value = obj.pop(old)
        removed += 1
        if new and value and obj.get(new) is None:
            obj[new] = value
    return removed


def map_annotations(csn: dict[str, Any]) -> dict[str, Any]:
    """Rewrite legacy annotations of all definitions and entity elements."""
    removed = sum(replace_annotations(obj) for obj in iter_annotated(csn))
    logger.debug(f"Replaced or removed {removed} legacy annotations")
    return csn


def is_localized_association(entity_name: str, element_name: str, element: dict[str, Any]) -> bool:
    """
    Detect the generated ``localized`` association of an entity.

    It is named "localized", is a cds.Association to the entity's
    ".texts" companion and has an ON condition.
    """
    return (
        element_name == "localized"
        and element.get("type") == "cds.Association"
        and element.get("target") == f"{entity_name}.texts"
        and bool(element.get("on"))
    )


def remove_localized_associations(csn: dict[str, Any]) -> dict[str, Any]:
    """
    Remove the ``localized`` associations of entities.

    They refer to $user.locale and only make sense inside the CAP runtime.
    """
    for name, definition in iter_definitions(csn):
        if definition.get("kind") != "entity":
            continue
        elements = definition.get("elements") or {}
        for element_name in list(elements):
            if is_localized_association(name, element_name, elements[element_name]):
                logger.debug(f"Removing localized association of {name}")
                del elements[element_name]
    return csn
