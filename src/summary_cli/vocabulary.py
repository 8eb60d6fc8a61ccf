from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from itertools import islice
from typing import Dict, Iterable, Iterator, List, Optional
import logging
from .config import Limits
from .tokenizer import Sentence, tokenize

logger = logging.getLogger(__name__)

@dataclass
class VocabularyEntry:
    term: str
    document_frequency: int = 0
    total_occurrences: int = 0

@dataclass(frozen=True)
class ResourceBound:
    kind: str  # "input" | "sentences" | "vocabulary" | "tokens"
    limit: int

    @property
    def message(self) -> str:
        what = {
            "input": "input bytes",
            "sentences": "sentences",
            "vocabulary": "distinct terms",
            "tokens": "tokens per sentence",
        }.get(self.kind, self.kind)
        return f"limit of {self.limit} {what} reached; summary built from the partial text"

class Vocabulary:
    """Term table: one index per normalized term, stable for the table's lifetime."""

    def __init__(self, max_terms: Optional[int] = None):
        self.max_terms = max_terms
        self.entries: List[VocabularyEntry] = []
        self._index: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[VocabularyEntry]:
        return iter(self.entries)

    def __getitem__(self, idx: int) -> VocabularyEntry:
        return self.entries[idx]

    def lookup(self, term: str) -> Optional[int]:
        return self._index.get(term)

    def add(self, term: str) -> Optional[int]:
        """Return the term's index, inserting it if needed; None when the table is full."""
        idx = self._index.get(term)
        if idx is not None:
            return idx
        if self.max_terms is not None and len(self.entries) >= self.max_terms:
            return None
        idx = len(self.entries)
        self.entries.append(VocabularyEntry(term))
        self._index[term] = idx
        return idx

@dataclass
class Corpus:
    sentences: List[Sentence] = field(default_factory=list)
    vocabulary: Vocabulary = field(default_factory=Vocabulary)
    # per sentence: term index -> in-sentence count
    term_vectors: List[Dict[int, int]] = field(default_factory=list)
    notices: List[ResourceBound] = field(default_factory=list)

    def note(self, kind: str, limit: int) -> None:
        if any(n.kind == kind for n in self.notices):
            return
        bound = ResourceBound(kind, limit)
        self.notices.append(bound)
        logger.warning("Resource bound: %s", bound.message)

    def most_common(self, n: int = 10) -> List[VocabularyEntry]:
        # sorted() is stable, so ties keep first-appearance order
        return sorted(self.vocabulary, key=lambda e: e.total_occurrences, reverse=True)[:n]

def build_corpus(sentences: Iterable[Sentence], limits: Optional[Limits] = None) -> Corpus:
    """
    Scan sentences once, filling the vocabulary and one term vector per sentence.

    document_frequency rises once per sentence a term appears in;
    total_occurrences rises once per token.
    """
    limits = limits or Limits()
    corpus = Corpus(vocabulary=Vocabulary(limits.max_vocabulary))
    stream = iter(sentences)
    vocab = corpus.vocabulary

    for sent in islice(stream, limits.max_sentences):
        tokens = tokenize(
            sent.text,
            max_length=limits.max_token_length,
            max_tokens=limits.max_tokens_per_sentence + 1,
        )
        if len(tokens) > limits.max_tokens_per_sentence:
            corpus.note("tokens", limits.max_tokens_per_sentence)
            tokens = tokens[: limits.max_tokens_per_sentence]

        counts: Counter = Counter()
        for tok in tokens:
            idx = vocab.add(tok)
            if idx is None:
                corpus.note("vocabulary", limits.max_vocabulary)
                continue
            vocab[idx].total_occurrences += 1
            counts[idx] += 1

        for idx in counts:
            vocab[idx].document_frequency += 1

        corpus.sentences.append(sent)
        corpus.term_vectors.append(dict(counts))

    if next(stream, None) is not None:
        corpus.note("sentences", limits.max_sentences)

    logger.debug(
        "Corpus: %d sentences, %d terms", len(corpus.sentences), len(corpus.vocabulary)
    )
    return corpus
