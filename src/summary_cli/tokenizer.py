from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List
import re

_BOUNDARY = re.compile(r"[.?!\n]")
# \w minus underscore: unicode letters and digits
_TOKEN = re.compile(r"[^\W_]+")

@dataclass(frozen=True)
class Sentence:
    index: int
    text: str

def split_sentences(text: str) -> Iterator[Sentence]:
    """
    Yield sentences in document order.

    A sentence ends at '.', '?', '!' or a newline (inclusive). Spans that are
    blank after stripping are skipped; a trailing unterminated span still counts.
    """
    index = 0
    start = 0
    for m in _BOUNDARY.finditer(text):
        span = text[start:m.end()].strip()
        start = m.end()
        if span:
            yield Sentence(index, span)
            index += 1
    tail = text[start:].strip()
    if tail:
        yield Sentence(index, tail)

def tokenize(sentence: str, max_length: int = 63, max_tokens: int = 2048) -> List[str]:
    tokens: List[str] = []
    for m in _TOKEN.finditer(sentence):
        if len(tokens) >= max_tokens:
            break
        tok = m.group(0).lower()
        if not tok.isalnum():
            # lower() can emit combining marks (e.g. 'İ')
            tok = "".join(ch for ch in tok if ch.isalnum())
        tokens.append(tok[:max_length])
    return tokens
