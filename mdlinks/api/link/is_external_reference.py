"""External reference classifier."""

import re

from ._constants import MALFORMED_CHARS, OPAQUE_SCHEMES

# Two or more scheme characters so Windows drive letters (C:/) stay local
_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]+://")
_OPAQUE_PATTERN = re.compile(r"^(?:" + "|".join(OPAQUE_SCHEMES) + r"):", re.IGNORECASE)


def is_malformed_reference(target: str) -> bool:
    """Return True if the target cannot be a local path typed into a document."""
    return any(ch in target for ch in MALFORMED_CHARS)


def is_external_reference(target: str) -> bool:
    """Return True if target points outside the local project.

    Recognizes absolute URIs (``scheme://...``), protocol-relative references
    (``//host/...``) and scheme-only forms such as ``mailto:`` and ``file:``.
    Malformed targets are reported as external so callers treat them as opaque.
    """
    if not target:
        return False
    if is_malformed_reference(target):
        return True
    if target.startswith("//"):
        return True
    return bool(_SCHEME_PATTERN.match(target) or _OPAQUE_PATTERN.match(target))
