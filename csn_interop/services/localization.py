"""
Localization reducer.

Collects the i18n text bundles of an application and keeps only the
texts that annotations of the CSN actually reference.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from csn_interop.utils.annotation_mapping import get_i18n_key
from csn_interop.utils.traversal import iter_annotated, iter_annotations

logger = logging.getLogger(__name__)

LocaleBundles = Iterable[tuple[str, dict[str, str]]]
BundleLookup = Callable[[dict[str, Any]], LocaleBundles | None]


def resolve_bundles(
    csn: dict[str, Any], bundles: BundleLookup | LocaleBundles | None
) -> list[tuple[str, dict[str, str]]]:
    """Resolve a bundle lookup function or value into (locale, texts) pairs."""
    if callable(bundles):
        bundles = bundles(csn)
    return list(bundles or [])


def collect_i18n_keys(csn: dict[str, Any]) -> set[str]:
    """
    Find all i18n keys referenced in annotations of definitions and
    entity elements.

    Only scalar string values are considered; structured or array-like
    annotation values are not drilled into.
    """
    keys: set[str] = set()
    for obj in iter_annotated(csn):
        for _, value in iter_annotations(obj):
            key = get_i18n_key(value)
            if key:
                keys.add(key)
    return keys


def reduce_i18n(
    csn: dict[str, Any],
    bundles: BundleLookup | LocaleBundles | None,
    normalize_locale_separator: bool = True,
) -> dict[str, Any]:
    """
    Add the referenced i18n texts to the CSN.

    Bundles without a locale (the default bundle) are dropped, a later
    bundle for the same locale replaces an earlier one, and locales left
    without texts are removed.

    Args:
        csn: Effective CSN, mutated in place
        bundles: (locale, texts) pairs or a function returning them for the CSN
        normalize_locale_separator: Publish "en_US" as "en-US"

    Returns:
        The same CSN with an ``i18n`` entry
    """
    i18n: dict[str, dict[str, str]] = {}
    for locale, texts in resolve_bundles(csn, bundles):
        if not locale:
            continue
        if normalize_locale_separator:
            locale = locale.replace("_", "-")
        # Work on a copy so the provider's bundles stay untouched
        i18n[locale] = dict(texts or {})

    keys = collect_i18n_keys(csn)

    for locale in list(i18n):
        texts = i18n[locale]
        for key in list(texts):
            if key not in keys:
                del texts[key]
        if not texts:
            del i18n[locale]

    logger.debug(
        f"Kept {sum(len(t) for t in i18n.values())} texts in {len(i18n)} locales "
        f"for {len(keys)} referenced keys"
    )
    csn["i18n"] = i18n
    return csn
