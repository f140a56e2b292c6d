"""FastAPI application exposing host system information."""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request

from .aggregator import collect_system_snapshot
from .sampler import CpuSampler
from .state import MonitorState


def create_app(state: Optional[MonitorState] = None, sampler: Optional[CpuSampler] = None) -> FastAPI:
    state = state or MonitorState.create()
    sampler = sampler or CpuSampler(state.cpu)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        sampler.start()
        try:
            yield
        finally:
            sampler.stop()

    app = FastAPI(
        title="System Info Service",
        description="Live snapshot of host CPU, memory, disk and network usage.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.monitor = state
    app.state.sampler = sampler

    @app.get("/api/system-info", summary="Return a snapshot of host resources", tags=["system"])
    def system_info(request: Request) -> Dict[str, Any]:
        return collect_system_snapshot(request.app.state.monitor).to_dict()

    @app.get("/health", summary="Service health check", tags=["system"])
    async def health():
        return {"status": "ok"}

    return app
