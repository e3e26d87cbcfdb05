"""Sowing advisor web app: FastAPI backend serving the advice page + JSON API."""

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel

from advisor.config.loader import config_hash, load_config
from advisor.config.schema import AdvisorConfig
from advisor.pipeline.advisory_pipeline import AdvisoryPipeline
from advisor.pipeline.request_tracker import RequestTracker
from advisor.reporting.formatters import report_to_dict, state_to_dict

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ADVISOR_CONFIG"
ADVISOR_HTML = Path(__file__).parent / "static" / "advisor.html"


class CheckRequest(BaseModel):
    postcode: str


def create_app(
    config: AdvisorConfig | None = None,
    pipeline: AdvisoryPipeline | None = None,
) -> FastAPI:
    """Build the app. Config comes from $ADVISOR_CONFIG when not given."""
    if config is None:
        config = load_config(os.environ.get(CONFIG_ENV_VAR))
    if pipeline is None:
        pipeline = AdvisoryPipeline(config)
    tracker = RequestTracker()

    app = FastAPI(title="Grass Sowing Advisor", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.config = config
    app.state.pipeline = pipeline
    app.state.tracker = tracker
    logger.info("Advisor app ready, config=%s", config_hash(config))

    # ── Advice endpoints ────────────────────────────────────────────

    @app.get("/api/advice")
    def get_advice(postcode: str = Query(..., description="UK postcode")):
        """One-shot advisory for a postcode."""
        if not postcode.strip():
            raise HTTPException(422, "Postcode is required")
        outcome = pipeline.run(postcode)
        if outcome.report is None:
            raise HTTPException(502, outcome.error)
        return report_to_dict(outcome.report)

    @app.post("/api/check")
    def check(body: CheckRequest):
        """Advisory through the shared request state; refused while one is running."""
        request_id = tracker.begin(body.postcode)
        if request_id is None:
            raise HTTPException(409, "A request is already in flight")
        outcome = pipeline.run(body.postcode)
        tracker.finish(request_id, outcome)
        return state_to_dict(tracker.state)

    @app.get("/api/state")
    def get_state():
        return state_to_dict(tracker.state)

    # ── Ops endpoints ──────────────────────────────────────────────

    @app.get("/api/health")
    def get_health():
        """Quick health check."""
        return {
            "status": "ok",
            "config_hash": config_hash(config),
            "timestamp": datetime.now(UTC).isoformat(),
        }

    @app.get("/api/config")
    def get_config():
        return config.model_dump()

    # ── Serve page ──────────────────────────────────────────────────

    @app.get("/")
    def serve_page():
        if ADVISOR_HTML.exists():
            return FileResponse(ADVISOR_HTML, media_type="text/html")
        return HTMLResponse("<h1>Advisor page not found</h1>", status_code=404)

    return app


if __name__ == "__main__":
    import uvicorn

    _config = load_config(os.environ.get(CONFIG_ENV_VAR))
    uvicorn.run(create_app(_config), host=_config.server.host, port=_config.server.port)
