from __future__ import annotations

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from risk_engine.api.routes import health_router, router
from risk_engine.config.settings import get_settings

APP_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.get_settings()
    print(f"[SERVER][startup] addr={settings.RISK_ADDR} version={app.version}", flush=True)
    try:
        yield
    finally:
        uptime_secs = int(time.monotonic() - app.state.started_at)
        print(f"[SERVER][shutdown] uptime_secs={uptime_secs}", flush=True)


app = FastAPI(title="Risk Engine", version=APP_VERSION, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(health_router)
app.include_router(router, prefix="/api/v1/risk")

# NOTE: lazy-loaded so app import does not read env during tests.
app.state.get_settings = get_settings
app.state.started_at = time.monotonic()


@app.middleware("http")
async def trace_requests(request: Request, call_next):
    started_ns = time.perf_counter_ns()
    response = await call_next(request)
    if app.state.get_settings().RISK_HTTP_TRACE:
        elapsed_us = (time.perf_counter_ns() - started_ns) // 1000
        print(
            f"[HTTP][request] method={request.method} path={request.url.path} "
            f"status={response.status_code} elapsed_us={elapsed_us}",
            flush=True,
        )
    return response
