from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    model: str = os.getenv("GROQ_MODEL", "openai/gpt-oss-120b")
    timeout: float = 30.0
    max_tokens: int = 8192
    review_site: str = "tabelog.com/en/"
    min_rating: float = 3.3
    max_results: int = 40


DEFAULT_LLM_CONFIG = LLMConfig()
