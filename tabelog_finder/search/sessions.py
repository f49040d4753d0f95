from __future__ import annotations

import threading
import time
from typing import Any

from .orchestrator import SearchOrchestrator

# Search state is kept in-process and never persisted; the session cookie
# only carries the id. Idle sessions expire and the registry is capped,
# dropping the least recently used entry first.
_sessions: dict[str, dict[str, Any]] = {}
_lock = threading.Lock()
_DEFAULT_TTL = 1800  # 30 minutes idle
_MAX_SESSIONS = 1000


def _expire(now: float) -> None:
    expired = [sid for sid, entry in _sessions.items() if now - entry["last_used"] >= _DEFAULT_TTL]
    for sid in expired:
        del _sessions[sid]


def get_orchestrator(session_id: str) -> SearchOrchestrator:
    """Return the orchestrator for *session_id*, creating it on first use."""
    now = time.time()
    with _lock:
        _expire(now)
        entry = _sessions.pop(session_id, None)
        if entry is None:
            entry = {"orchestrator": SearchOrchestrator()}
            while len(_sessions) >= _MAX_SESSIONS:
                # Dicts keep insertion order, so the first key is the least recently used
                del _sessions[next(iter(_sessions))]
        entry["last_used"] = now
        _sessions[session_id] = entry
        return entry["orchestrator"]


def get_session_count() -> int:
    return len(_sessions)


def clear_sessions() -> None:
    with _lock:
        _sessions.clear()
