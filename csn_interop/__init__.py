# CSN Interop
"""
Effective CSN to interop CSN transformation.

Turns a fully resolved CDS schema notation document into the variant
published for external consumers such as metadata discovery catalogs.

Architecture:
- Localization: keeps only i18n texts referenced by annotations
- Annotations: maps legacy annotations to interop annotations
- Metadata: derives document name, namespace and version
"""

from csn_interop.services.interop import InteropService, interop_csn

__version__ = "1.0.0"

__all__ = ["InteropService", "interop_csn"]
