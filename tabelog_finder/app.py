from __future__ import annotations

import os
from pathlib import Path

from fastapi import Depends, FastAPI
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from .search.dependencies import get_session_search
from .search.geolocation import reported_locator
from .search.models import (
    ClientConfig,
    LocationReport,
    QueryTextRequest,
    SearchRequest,
    SearchView,
)
from .search.orchestrator import SearchOrchestrator
from .search.view import build_view, client_config

app = FastAPI(title="Tabelog Restaurant Finder API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "tabelog-finder-secret-change-in-production"),
)

_STATIC_DIR = Path(__file__).resolve().parent / "static"


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/config", response_model=ClientConfig)
def config() -> ClientConfig:
    return client_config()


# ── Search endpoints ─────────────────────────────────────────────────────


@app.get("/search", response_model=SearchView)
def search_state(search: SearchOrchestrator = Depends(get_session_search)) -> SearchView:
    return build_view(search.state, search.config)


@app.put("/search/query", response_model=SearchView)
def set_query(
    body: QueryTextRequest,
    search: SearchOrchestrator = Depends(get_session_search),
) -> SearchView:
    return build_view(search.set_query_text(body.query_text), search.config)


@app.post("/search", response_model=SearchView)
def run_search(
    body: SearchRequest,
    search: SearchOrchestrator = Depends(get_session_search),
) -> SearchView:
    # Failures come back inside the view; the page shows view.error
    return build_view(search.trigger_search(body.query_text), search.config)


@app.post("/search/locate", response_model=SearchView)
def locate(
    body: LocationReport,
    search: SearchOrchestrator = Depends(get_session_search),
) -> SearchView:
    state = search.request_location_lookup(reported_locator(body))
    return build_view(state, search.config)


@app.post("/search/more", response_model=SearchView)
def load_more(search: SearchOrchestrator = Depends(get_session_search)) -> SearchView:
    return build_view(search.advance_page(), search.config)


# ── Static ───────────────────────────────────────────────────────────────


app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")


@app.get("/")
def root():
    return FileResponse(str(_STATIC_DIR / "index.html"))
