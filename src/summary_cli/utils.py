from __future__ import annotations
from urllib.parse import urlparse
from typing import Tuple
import re

_HTML_HINT = re.compile(r"<\s*(!doctype\s+html|html|body|p|div|article)\b", re.I)

def is_url(source: str) -> bool:
    return urlparse(source).scheme.lower() in ("http", "https")

def looks_like_html(text: str) -> bool:
    return bool(_HTML_HINT.search(text[:2048]))

def clip_utf8(text: str, max_bytes: int) -> Tuple[str, bool]:
    """Cut text to at most max_bytes of UTF-8 without splitting a character."""
    raw = text.encode("utf-8", "surrogatepass")
    if len(raw) <= max_bytes:
        return text, False
    cut = max_bytes
    # back off to a lead byte so the kept prefix decodes whole
    while cut > 0 and (raw[cut] & 0xC0) == 0x80:
        cut -= 1
    return raw[:cut].decode("utf-8", "surrogatepass"), True
