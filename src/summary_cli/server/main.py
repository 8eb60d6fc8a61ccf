from fastapi import Depends, FastAPI, HTTPException
from functools import lru_cache
from .models import SummaryRequest, SummaryDTO, SentenceDTO
from ..config import SummaryConfig
from ..summarizer import summarize
from pathlib import Path
import logging
import os

logger = logging.getLogger(__name__)

@lru_cache(maxsize=1)
def get_config() -> SummaryConfig:
    path = Path(os.environ.get("SUMMARY_CLI_CONFIG", "config.json"))
    if not path.exists():
        return SummaryConfig()
    logger.info("Loading config from %s", path)
    try:
        return SummaryConfig.load(path)
    except (OSError, ValueError, TypeError) as ex:
        logger.error("Bad config %s: %s", path, ex)
        raise HTTPException(status_code=500, detail=f"bad config {path}: {ex}")

app = FastAPI(title="Summary Service", version="0.1")

@app.get("/health")
def health():
    return {"ok": True}

# plain def: FastAPI runs it in the threadpool, one engine state per request
@app.post("/summaries", response_model=SummaryDTO)
def create_summary(req: SummaryRequest, config: SummaryConfig = Depends(get_config)):
    res = summarize(req.document, depth=req.depth, want_timing=req.timing, config=config)
    return SummaryDTO(
        summary=res.text,
        sentences=[SentenceDTO(index=s.index, text=s.text) for s in res.sentences],
        total_sentences=res.total_sentences,
        depth=res.depth,
        elapsed_seconds=res.elapsed_seconds,
        notices=[n.message for n in res.notices],
    )
