"""
Utility modules for CSN traversal and annotation handling.
"""

from csn_interop.utils.annotation_mapping import ANNOTATION_REPLACEMENTS, get_i18n_key
from csn_interop.utils.properties import parse_properties

__all__ = ["ANNOTATION_REPLACEMENTS", "get_i18n_key", "parse_properties"]
