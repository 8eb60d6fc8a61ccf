from __future__ import annotations
from pathlib import Path
from typing import Optional
import logging
import httpx
from .config import SummaryConfig
from .parser import html_to_text
from .utils import is_url, looks_like_html

logger = logging.getLogger(__name__)

_HTML_SUFFIXES = (".html", ".htm", ".xhtml")

class SourceUnavailable(Exception):
    """The document could not be read or fetched."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"cannot open '{source}': {reason}")
        self.source = source
        self.reason = reason

def fetch_url(url: str, cfg: SummaryConfig, client: Optional[httpx.Client] = None) -> str:
    headers = {"User-Agent": cfg.user_agent, **(cfg.headers or {})}
    own_client = client is None
    if own_client:
        client = httpx.Client(timeout=httpx.Timeout(cfg.timeout_s), follow_redirects=True)
    try:
        r = client.get(url, headers=headers)
        r.raise_for_status()
    except httpx.HTTPStatusError as ex:
        raise SourceUnavailable(url, f"HTTP {ex.response.status_code}") from ex
    except httpx.HTTPError as ex:
        raise SourceUnavailable(url, repr(ex)) from ex
    finally:
        if own_client:
            client.close()

    ct = r.headers.get("Content-Type", "")
    logger.debug("Fetched %s (%s, %d bytes)", url, ct or "no content-type", len(r.content))
    if "text/html" in ct or "application/xhtml+xml" in ct or (ct == "" and looks_like_html(r.text)):
        return html_to_text(r.text)
    return r.text

def read_file(path: Path) -> str:
    try:
        raw = path.read_bytes()
    except FileNotFoundError as ex:
        raise SourceUnavailable(str(path), "no such file") from ex
    except IsADirectoryError as ex:
        raise SourceUnavailable(str(path), "is a directory") from ex
    except OSError as ex:
        raise SourceUnavailable(str(path), ex.strerror or repr(ex)) from ex

    text = raw.decode("utf-8", "replace")
    if path.suffix.lower() in _HTML_SUFFIXES or looks_like_html(text):
        return html_to_text(text)
    return text

def load_document(source: str, cfg: Optional[SummaryConfig] = None, client: Optional[httpx.Client] = None) -> str:
    """Return the text of a local file or an http(s) URL."""
    cfg = cfg or SummaryConfig()
    if is_url(source):
        return fetch_url(source, cfg, client)
    return read_file(Path(source))
