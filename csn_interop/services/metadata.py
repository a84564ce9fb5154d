"""
Metadata deriver.

Stamps the interop format version and derives name, namespace and
semantic version of the document from its service definition.
"""

import logging
from typing import Any

from csn_interop.schemas.meta import CSN_INTEROP_VERSION, INTEROP_FLAVOR, InteropMeta
from csn_interop.utils.annotation_mapping import VERSION_SEGMENT
from csn_interop.utils.traversal import iter_definitions

logger = logging.getLogger(__name__)


def find_services(csn: dict[str, Any]) -> list[str]:
    """Get the qualified names of all service definitions."""
    return [name for name, definition in iter_definitions(csn) if definition.get("kind") == "service"]


def parse_service_name(qualified_name: str) -> InteropMeta:
    """
    Split a qualified service name into namespace, short name and version.

    The short name is the last dot-separated segment. A trailing ``vN``
    segment is read as major version N and the segment before it becomes
    the short name, e.g. "customer.namespace.MyService.v2" gives namespace
    "customer.namespace", name "MyService" and version "2.0.0".
    """
    segments = qualified_name.split(".")
    major = "1"
    srv = segments.pop()
    match = VERSION_SEGMENT.fullmatch(srv)
    if match:
        major = match.group(1)
        srv = segments.pop() if segments else None

    namespace = ".".join(segments) if segments else None
    return InteropMeta.from_version(major, srv, namespace)


def derive_meta(csn: Any) -> Any:
    """
    Add interop meta information to the CSN.

    Name, namespace and version are only derived when the CSN contains
    exactly one service. Non-dict input is returned unchanged.
    """
    if not isinstance(csn, dict):
        return csn

    csn["csnInteropEffective"] = CSN_INTEROP_VERSION
    if not isinstance(csn.get("meta"), dict):
        csn["meta"] = {}
    meta = csn["meta"]
    meta["flavor"] = INTEROP_FLAVOR
    # Compiler build details are not part of the interop document
    meta.pop("creator", None)

    services = find_services(csn)
    if len(services) != 1:
        logger.debug(f"Found {len(services)} services, skipping service meta information")
        return csn

    meta.update(parse_service_name(services[0]).to_csn())
    return csn
