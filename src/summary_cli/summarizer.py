from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import logging
import math
import time
from .config import SummaryConfig
from .tokenizer import Sentence, split_sentences
from .utils import clip_utf8
from .vocabulary import Corpus, ResourceBound, Vocabulary, build_corpus

logger = logging.getLogger(__name__)

# depth -> number of sentences; anything deeper gets the last value
DEPTH_SENTENCES = {1: 1, 2: 3, 3: 5}
MAX_DEPTH_SENTENCES = 10

@dataclass(frozen=True)
class SentenceScore:
    index: int
    score: float

@dataclass
class SummaryResult:
    depth: int
    sentences: List[Sentence] = field(default_factory=list)
    total_sentences: int = 0
    elapsed_seconds: Optional[float] = None
    notices: List[ResourceBound] = field(default_factory=list)

    @property
    def text(self) -> str:
        return render_summary(self.sentences)

    @property
    def empty(self) -> bool:
        return not self.sentences

def compute_idf(vocabulary: Vocabulary, total_sentences: int) -> List[float]:
    # ln(N / (1 + df)); may dip below zero when N is tiny
    n = float(total_sentences)
    return [math.log(n / (1.0 + e.document_frequency)) for e in vocabulary]

def score_sentences(term_vectors: Sequence[Dict[int, int]], idf: Sequence[float]) -> List[SentenceScore]:
    return [
        SentenceScore(i, sum(count * idf[t] for t, count in vec.items()))
        for i, vec in enumerate(term_vectors)
    ]

def target_count(depth: int, total_sentences: int) -> int:
    if depth <= 1:
        k = DEPTH_SENTENCES[1]
    else:
        k = DEPTH_SENTENCES.get(depth, MAX_DEPTH_SENTENCES)
    return min(k, total_sentences)

def select_sentences(scores: Iterable[SentenceScore], k: int) -> List[int]:
    """
    Greedy top-k: k passes, each taking the best unselected sentence.
    Equal scores go to the earlier sentence. Returns indices in document order.
    """
    remaining = list(scores)
    chosen: List[int] = []
    for _ in range(min(k, len(remaining))):
        best = None
        for cand in remaining:
            if best is None or cand.score > best.score or (
                cand.score == best.score and cand.index < best.index
            ):
                best = cand
        chosen.append(best.index)
        remaining.remove(best)
    return sorted(chosen)

def render_summary(sentences: Iterable[Sentence]) -> str:
    return "".join(f"{s.text}\n\n" for s in sorted(sentences, key=lambda s: s.index))

def analyze(document: str, config: Optional[SummaryConfig] = None) -> Corpus:
    """Segment, tokenize and index a document, honoring the configured limits."""
    limits = (config or SummaryConfig()).limits
    text, clipped = clip_utf8(document or "", limits.max_input_bytes)
    corpus = build_corpus(split_sentences(text), limits)
    if clipped:
        corpus.note("input", limits.max_input_bytes)
    return corpus

def summarize(
    document: str,
    depth: int = 1,
    want_timing: bool = False,
    config: Optional[SummaryConfig] = None,
) -> SummaryResult:
    """
    Extractive TF-IDF summary of one document.

    Sentences are ranked by the sum of count x idf over their terms, the top
    ones for the requested depth are kept and returned in document order.
    Nothing is cached between calls.
    """
    t0 = time.perf_counter()
    corpus = analyze(document, config)
    n = len(corpus.sentences)
    result = SummaryResult(depth=depth, total_sentences=n, notices=list(corpus.notices))

    if n == 0:
        logger.info("Nothing to summarize (empty or no sentences)")
    else:
        idf = compute_idf(corpus.vocabulary, n)
        scores = score_sentences(corpus.term_vectors, idf)
        k = target_count(depth, n)
        result.sentences = [corpus.sentences[i] for i in select_sentences(scores, k)]
        logger.debug("Selected %d of %d sentences (depth=%d)", k, n, depth)

    if want_timing:
        result.elapsed_seconds = time.perf_counter() - t0
    return result

def summarize_text(
    document: str,
    depth: int = 1,
    want_timing: bool = False,
    config: Optional[SummaryConfig] = None,
) -> Tuple[str, Optional[float]]:
    res = summarize(document, depth, want_timing, config)
    return res.text, res.elapsed_seconds
