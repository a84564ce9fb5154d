"""
Transformation services for interop CSN.

Pipeline stages:
- Localization: referenced i18n texts per locale
- Annotations: legacy to interop annotation mapping
- Metadata: interop version and service meta information
"""

from csn_interop.services.annotations import map_annotations, remove_localized_associations
from csn_interop.services.bundles import BundleFormatError, FolderBundleProvider
from csn_interop.services.interop import InteropService, interop_csn
from csn_interop.services.localization import reduce_i18n
from csn_interop.services.metadata import derive_meta

__all__ = [
    "InteropService",
    "FolderBundleProvider",
    "BundleFormatError",
    "interop_csn",
    "reduce_i18n",
    "remove_localized_associations",
    "map_annotations",
    "derive_meta",
]
