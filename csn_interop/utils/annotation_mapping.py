"""
Annotation mapping tables.

Maps legacy CDS annotations to their interoperable counterparts.
"""

import re

# Ordered (old, new) rules. A target of None removes the annotation.
# Order matters: the first rule that fills a target wins.
ANNOTATION_REPLACEMENTS: list[tuple[str, str | None]] = [
    ("@Common.Label", "@EndUserText.label"),
    ("@title", "@EndUserText.label"),
    ("@label", "@EndUserText.label"),
    ("@description", "@EndUserText.quickInfo"),
    ("@cds.autoexpose", None),
]

ANNOTATION_PREFIX = "@"

# Used with fullmatch: whole string only, e.g. "{i18n>service.title}"
I18N_REFERENCE = re.compile(r"\{i18n>(.*)\}")

# Used with fullmatch: a trailing version segment of a service name, e.g. "v2"
VERSION_SEGMENT = re.compile(r"v([0-9]+)")


def is_annotation(key: str) -> bool:
    """Check whether a CSN key is an annotation."""
    return key.startswith(ANNOTATION_PREFIX)


def get_i18n_key(value: object) -> str | None:
    """
    Extract the text key from an i18n reference value.

    Only scalar strings of the exact form ``{i18n>KEY}`` are recognized.
    """
    if not isinstance(value, str) or not value.startswith("{i18n>"):
        return None
    match = I18N_REFERENCE.fullmatch(value)
    if match and match.group(1):
        return match.group(1)
    return None
