from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class SearchConfig:
    page_size: int = 9
    current_location_label: str = "My Current Location"
    default_query: str = "Tokyo Station"
    # Highest floor first; the last one is also the hard minimum
    rating_tiers: tuple[float, ...] = (4.0, 3.8, 3.5, 3.3)
    location_timeout_ms: int = 10000
    # Empty disables the country check on located positions
    expected_country: str = os.getenv("EXPECTED_COUNTRY", "Japan")


DEFAULT_SEARCH_CONFIG = SearchConfig()
