from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict
import json
from pathlib import Path

@dataclass
class Limits:
    max_input_bytes: int = 256 * 1024
    max_sentences: int = 2048
    max_tokens_per_sentence: int = 2048
    max_token_length: int = 63  # code points
    max_vocabulary: int = 65536

    def __post_init__(self):
        for f in fields(self):
            if getattr(self, f.name) < 1:
                raise ValueError(f"limits.{f.name} must be >= 1, got {getattr(self, f.name)}")

@dataclass
class SummaryConfig:
    name: str = "summary"
    default_depth: int = 1
    user_agent: str = "SummaryCLI/0.1"
    timeout_s: float = 10.0
    headers: Dict[str, str] = field(default_factory=dict)
    limits: Limits = field(default_factory=Limits)

    def __post_init__(self):
        if self.default_depth < 1:
            raise ValueError(f"default_depth must be >= 1, got {self.default_depth}")
        if self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be > 0, got {self.timeout_s}")

    @staticmethod
    def load(path: Path) -> "SummaryConfig":
        return SummaryConfig.from_json(Path(path).read_text(encoding="utf-8"))

    @staticmethod
    def from_json(s: str) -> "SummaryConfig":
        data = json.loads(s) or {}
        if not isinstance(data, dict):
            raise ValueError("config must be a JSON object")
        lim = data.get("limits", {}) or {}
        headers = data.get("headers", {}) or {}
        if not isinstance(lim, dict):
            raise ValueError("limits must be a JSON object")
        if not isinstance(headers, dict):
            raise ValueError("headers must be a JSON object")
        # Simple dict→dataclass conversion
        defaults = Limits()
        return SummaryConfig(
            name=data.get("name", "summary"),
            default_depth=int(data.get("default_depth", 1)),
            user_agent=data.get("user_agent", "SummaryCLI/0.1"),
            timeout_s=float(data.get("timeout_s", 10.0)),
            headers=dict(headers),
            limits=Limits(
                max_input_bytes=int(lim.get("max_input_bytes", defaults.max_input_bytes)),
                max_sentences=int(lim.get("max_sentences", defaults.max_sentences)),
                max_tokens_per_sentence=int(
                    lim.get("max_tokens_per_sentence", defaults.max_tokens_per_sentence)
                ),
                max_token_length=int(lim.get("max_token_length", defaults.max_token_length)),
                max_vocabulary=int(lim.get("max_vocabulary", defaults.max_vocabulary)),
            ),
        )

    def dump(self) -> str:
        data: Dict[str, Any] = {
            "name": self.name,
            "default_depth": self.default_depth,
            "user_agent": self.user_agent,
            "timeout_s": self.timeout_s,
            "headers": self.headers,
            "limits": {
                "max_input_bytes": self.limits.max_input_bytes,
                "max_sentences": self.limits.max_sentences,
                "max_tokens_per_sentence": self.limits.max_tokens_per_sentence,
                "max_token_length": self.limits.max_token_length,
                "max_vocabulary": self.limits.max_vocabulary,
            },
        }
        return json.dumps(data, indent=2)

def write_default_config(path: Path) -> None:
    if path.exists():
        raise FileExistsError(f"{path} already exists")
    path.write_text(SummaryConfig().dump(), encoding="utf-8")
