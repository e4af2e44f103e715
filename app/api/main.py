"""
VentureScope FastAPI main

Run locally:
    python -m app.api.main
or, with loguru's default sink:
    uvicorn app.api.main:app --reload --port 8000
"""

import math
import sys
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.routes import router
from app.config import settings


def configure_logging(level: Optional[str] = None) -> int:
    """Replace loguru's sinks with one stderr sink at LOG_LEVEL"""
    logger.remove()
    return logger.add(sys.stderr, level=level or settings.LOG_LEVEL)


app = FastAPI(
    title="VentureScope",
    description="Startup success probability estimation",
    version="0.1.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


def _error_details(exc: RequestValidationError) -> list:
    # inf/nan inputs (e.g. 1e999) cannot be rendered as JSON
    details = []
    for error in exc.errors():
        value = error.get("input")
        if isinstance(value, float) and not math.isfinite(value):
            error = {**error, "input": str(value)}
        details.append(error)
    return jsonable_encoder(details)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Invalid input is a 400, not FastAPI's default 422"""
    logger.info(f"Rejected request to {request.url.path}: {len(exc.errors())} validation errors")
    return JSONResponse(
        status_code=400,
        content={"detail": _error_details(exc)},
    )


@app.get("/")
async def root():
    """Health check"""
    return {
        "name": "VentureScope",
        "status": "running",
        "version": "0.1.0",
    }


@app.get("/health")
async def health():
    """Detailed health check"""
    from app.llm import get_llm_client
    from app.storage import get_prediction_store

    return {
        "status": "healthy",
        "llm_available": get_llm_client().is_available,
        "predictions": get_prediction_store().count(),
    }


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
