"""FastAPI application entrypoint for buildplan service mode."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI
from pydantic import BaseModel

from ..planner import detect_builders_async


class DetectRequest(BaseModel):
    files: List[str]
    package: Optional[Dict[str, Any]] = None


class BuilderModel(BaseModel):
    src: str
    use: str
    config: Dict[str, Any]


class ErrorModel(BaseModel):
    code: str
    message: str


class DetectResponse(BaseModel):
    builders: Optional[List[BuilderModel]] = None
    errors: Optional[List[ErrorModel]] = None


class HealthResponse(BaseModel):
    status: str


def create_app() -> FastAPI:
    """Create the FastAPI application exposing builder detection."""
    app = FastAPI(title="Buildplan Service", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/detect", response_model=DetectResponse)
    async def detect(payload: DetectRequest) -> DetectResponse:
        result = await detect_builders_async(payload.files, payload.package)
        return DetectResponse.model_validate(result.to_dict())

    return app


def run_service(host: str = "0.0.0.0", port: int = 8000) -> None:  # pragma: no cover - integration path
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
