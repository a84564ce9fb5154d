"""
Interop CSN service.

Turns an effective CSN into an interop CSN by running, in order:
1. Localization reducer (referenced i18n texts only)
2. Removal of CAP ``localized`` associations
3. Annotation mapping to interop annotations
4. Meta information derivation
"""

import logging
from typing import Any

from csn_interop.config import get_settings
from csn_interop.services.annotations import map_annotations, remove_localized_associations
from csn_interop.services.localization import BundleLookup, LocaleBundles, reduce_i18n
from csn_interop.services.metadata import derive_meta

logger = logging.getLogger(__name__)


class InteropService:
    """
    Service for converting effective CSN documents into interop CSN.

    The CSN is transformed in place and returned; callers hand over the
    document for the duration of the call.
    """

    def __init__(
        self,
        bundles: BundleLookup | LocaleBundles | None = None,
        normalize_locale_separator: bool | None = None,
        remove_localized: bool | None = None,
    ):
        settings = get_settings()
        self.bundles = bundles
        self.normalize_locale_separator = (
            settings.normalize_locale_separator
            if normalize_locale_separator is None
            else normalize_locale_separator
        )
        self.remove_localized = (
            settings.remove_localized_associations if remove_localized is None else remove_localized
        )

    def to_interop(
        self, csn: Any, bundles: BundleLookup | LocaleBundles | None = None
    ) -> Any:
        """
        Transform an effective CSN into interop CSN.

        Args:
            csn: Effective CSN; non-dict input is returned unchanged
            bundles: Bundle lookup overriding the service's own

        Returns:
            The same, transformed CSN
        """
        if not isinstance(csn, dict):
            return csn

        reduce_i18n(
            csn,
            bundles if bundles is not None else self.bundles,
            normalize_locale_separator=self.normalize_locale_separator,
        )
        if self.remove_localized:
            remove_localized_associations(csn)
        map_annotations(csn)
        derive_meta(csn)

        meta = csn["meta"]
        if "__name" in meta:
            version = (meta.get("document") or {}).get("version")
            logger.info(f"Created interop CSN for service {meta['__name']} (version {version})")
        else:
            logger.info("Created interop CSN without service meta information")
        return csn


def interop_csn(csn: Any, bundles: BundleLookup | LocaleBundles | None = None) -> Any:
    """
    Transform an effective CSN into interop CSN.

    Uses the default service, which reads bundles from the configured
    i18n folders unless ``bundles`` is given.
    """
    from csn_interop.dependencies import get_interop_service

    return get_interop_service().to_interop(csn, bundles)
