from __future__ import annotations

import uuid

from fastapi import Request

from .orchestrator import SearchOrchestrator
from .sessions import get_orchestrator


def get_session_search(request: Request) -> SearchOrchestrator:
    """Return this browser session's orchestrator, issuing a session id if needed."""
    session_id = request.session.get("sid")
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session["sid"] = session_id
    return get_orchestrator(session_id)
