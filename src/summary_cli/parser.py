from __future__ import annotations
from typing import List
from bs4 import BeautifulSoup
from bs4.builder import builder_registry

_DROP_TAGS = ["script", "style", "noscript", "template"]
_BLOCK_TAGS = [
    "title", "p", "div", "li", "ul", "ol", "section", "article", "header", "footer",
    "blockquote", "pre", "table", "tr", "td", "th",
    "h1", "h2", "h3", "h4", "h5", "h6",
]

def _soup(html: str) -> BeautifulSoup:
    if builder_registry.lookup("lxml") is not None:
        return BeautifulSoup(html, "lxml")
    return BeautifulSoup(html, "html.parser")

def html_to_text(html: str) -> str:
    """Visible text of an HTML page, one block element per line."""
    soup = _soup(html)
    for el in soup.find_all(_DROP_TAGS):
        if not el.decomposed:  # nested inside one already dropped
            el.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for el in soup.find_all(_BLOCK_TAGS):
        el.insert_before("\n")
        el.insert_after("\n")

    lines: List[str] = []
    for line in soup.get_text().splitlines():
        line = " ".join(line.split())
        if line:
            lines.append(line)
    return "\n".join(lines)
