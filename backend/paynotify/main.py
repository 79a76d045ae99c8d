from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import json
import logging
import os
import time
from dotenv import load_dotenv

# Load environment variables from .env (project or backend directory) BEFORE importing settings
load_dotenv()
_env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")
if os.path.exists(_env_path):
    load_dotenv(_env_path)

from paynotify import __version__
from paynotify.api.transactions import router as transactions_router
from paynotify.config import DEFAULT_API

logging.basicConfig(level=getattr(logging, DEFAULT_API.log_level.upper(), logging.INFO), format="%(message)s")
access_log = logging.getLogger("paynotify.access")

app = FastAPI(title="PayNotify Extraction", version=__version__)

# CORS from env ALLOWED_ORIGINS (comma-separated). Defaults to dev permissive if not set
allowed = DEFAULT_API.allowed_origins
allow_origins = [o.strip() for o in allowed.split(",") if o.strip()] if allowed else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Structured logging with request_id and correlation_id
@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start = time.time()
    req_id = request.headers.get("X-Request-ID") or hex(int(start * 1e9))[-12:]
    corr = request.headers.get("X-Correlation-ID") or request.query_params.get("correlation_id")
    try:
        response = await call_next(request)
    except Exception as e:
        access_log.error(json.dumps({
            "level": "error",
            "msg": "request_error",
            "method": request.method,
            "path": request.url.path,
            "duration_ms": int((time.time() - start) * 1000),
            "request_id": req_id,
            "correlation_id": corr,
            "error": str(e),
        }, ensure_ascii=False))
        raise
    access_log.info(json.dumps({
        "level": "info",
        "msg": "request",
        "method": request.method,
        "path": request.url.path,
        "status": response.status_code,
        "duration_ms": int((time.time() - start) * 1000),
        "request_id": req_id,
        "correlation_id": corr,
    }, ensure_ascii=False))
    response.headers["X-Request-ID"] = req_id
    if corr:
        response.headers["X-Correlation-ID"] = corr
    return response


app.include_router(transactions_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "version": app.version}
