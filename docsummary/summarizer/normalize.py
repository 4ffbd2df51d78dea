"""Text normalization for extracted document text."""
from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
# \w is Unicode-aware: accented and non-Latin letters survive (an ASCII-only \w would drop them).
_DISALLOWED_RE = re.compile(r"[^\w\s.,;:?!\-()]")


def normalize(raw: str) -> str:
    """Drop characters outside the allow-list, collapse whitespace, trim."""
    if not raw:
        return ""
    # Strip before collapsing: "a $ b" becomes "a b", not "a  b".
    text = _DISALLOWED_RE.sub("", raw)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def word_count(text: str) -> int:
    return len(text.split())
