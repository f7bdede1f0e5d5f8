from __future__ import annotations

import logging
import os
import time
import uuid
from pathlib import Path

from dotenv import load_dotenv

# Load .env from backend directory so DATABASE_URL etc. are available
load_dotenv(Path(__file__).resolve().parent / ".env")

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from documents.assets import LETTERHEAD_DIR, get_letterhead
from documents.errors import DocumentError
from documents.pdf_renderer import check_runtime
from layouts import DEFAULT_LAYOUT_ID
from routes.api import router as api_router

_LOG = logging.getLogger("uvicorn.error")

VERSION = (os.environ.get("GIT_COMMIT") or "").strip() or "unknown"

app = FastAPI(title="Termosign Backend", version="0.1.0")

# CORS: use ALLOWED_ORIGINS env (comma-separated) if set, else allow any origin
_origins_env = os.environ.get("ALLOWED_ORIGINS", "").strip()
if _origins_env:
    ALLOWED_ORIGINS = [o.strip() for o in _origins_env.split(",") if o.strip()]
else:
    ALLOWED_ORIGINS = ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=ALLOWED_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition", "X-Request-Id"],
)


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        _LOG.info(
            "request_id=%s method=%s path=%s status=%s duration_ms=%.0f",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        response.headers["X-Request-Id"] = request_id
        return response


app.add_middleware(RequestLogMiddleware)
app.include_router(api_router)


@app.on_event("startup")
def startup_log() -> None:
    port = os.environ.get("PORT", "3000")
    host = os.environ.get("HOST", "127.0.0.1")
    try:
        get_letterhead()
        letterhead_ok = True
    except DocumentError as e:
        letterhead_ok = False
        _LOG.warning("Letterhead not loaded from %s: %s. Term generation will fail until it is present.", LETTERHEAD_DIR, e.message)
    _LOG.info(
        "Backend starting on http://%s:%s (letterhead loaded: %s, default layout: %s) version=%s",
        host, port, letterhead_ok, DEFAULT_LAYOUT_ID, VERSION,
    )


@app.get("/health")
def health():
    return {"status": "ok", "version": VERSION, "default_layout": DEFAULT_LAYOUT_ID}


@app.get("/health/pdf")
def health_pdf():
    """
    Runtime check for Playwright PDF dependencies.
    Returns 200 only when Chromium can launch successfully.
    """
    try:
        check_runtime()
    except DocumentError as e:
        raise HTTPException(status_code=503, detail=e.message) from e
    return {"status": "ok", "pdf_runtime": "ready"}


def get_app() -> FastAPI:
    """
    Convenience accessor for ASGI servers.
    """
    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "3000")),
        reload=True,
    )
