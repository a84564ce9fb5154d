"""
Pydantic schemas for interop CSN output.
"""

from csn_interop.schemas.meta import (
    CSN_INTEROP_VERSION,
    INTEROP_FLAVOR,
    DocumentInfo,
    InteropMeta,
)

__all__ = [
    "CSN_INTEROP_VERSION",
    "INTEROP_FLAVOR",
    "DocumentInfo",
    "InteropMeta",
]
