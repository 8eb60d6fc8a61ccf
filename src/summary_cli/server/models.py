from pydantic import BaseModel, Field
from typing import List, Optional

class SummaryRequest(BaseModel):
    document: str
    depth: int = Field(1, ge=1)
    timing: bool = False

class SentenceDTO(BaseModel):
    index: int
    text: str

class SummaryDTO(BaseModel):
    summary: str
    sentences: List[SentenceDTO]
    total_sentences: int
    depth: int
    elapsed_seconds: Optional[float] = None
    notices: List[str] = Field(default_factory=list)
