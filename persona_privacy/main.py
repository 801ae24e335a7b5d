"""
Server entry point: FastAPI app exposing the privacy analyzer.

The analyzer is a library; this module is a thin HTTP surface for
applications that embed it in a service.  Nothing is persisted:
every request is analysed from the personas in its body and the
result is returned to the caller.
"""

from __future__ import annotations

import contextlib
from collections.abc import AsyncGenerator, Sequence

import dotenv
import fastapi
import pydantic
import uvicorn
from fastapi.middleware import cors
from starlette import responses

from persona_privacy import config
from persona_privacy.analysis import analyzer, graph, report
from persona_privacy.models import persona as persona_models
from persona_privacy.models import privacy
from persona_privacy.utils import errors, logger

dotenv.load_dotenv()

log = logger.create_logger("Server")


class GraphRequest(pydantic.BaseModel):
    """Body of ``POST /api/privacy/graph``.

    When ``warnings`` is omitted they are computed from ``personas``.
    """

    personas: list[persona_models.Persona]
    warnings: list[privacy.PrivacyWarning] | None = None


@contextlib.asynccontextmanager
async def lifespan(_app: fastapi.FastAPI) -> AsyncGenerator[None]:
    """Log server start on startup."""
    settings = config.get_settings()
    log.section("Persona Privacy Server Started")
    log.info(
        "Environment",
        {"env": settings.environment, "maxPersonas": settings.max_personas},
    )
    yield


app = fastapi.FastAPI(title="Persona Privacy Analyzer", lifespan=lifespan)

# ============================================================================
# Middleware
# ============================================================================

app.add_middleware(
    cors.CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================================================
# Error handling
# ============================================================================


@app.exception_handler(errors.PersonaLimitExceededError)
async def persona_limit_handler(
    _request: fastapi.Request, exc: errors.PersonaLimitExceededError
) -> responses.JSONResponse:
    """Reject oversized persona sets with 413."""
    log.warn("Persona limit exceeded", {"count": exc.count, "limit": exc.limit})
    return responses.JSONResponse(
        status_code=413,
        content={"detail": errors.get_error_message(exc)},
    )


def _enforce_limit(personas: Sequence[persona_models.Persona]) -> None:
    """Raise when *personas* exceeds the configured bound."""
    limit = config.get_settings().max_personas
    if len(personas) > limit:
        raise errors.PersonaLimitExceededError(len(personas), limit)


# ============================================================================
# API Routes
# ============================================================================


@app.get("/api/health")
def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}


@app.post("/api/privacy/analyze", response_model=privacy.PrivacyReport)
def analyze_endpoint(personas: list[persona_models.Persona]) -> privacy.PrivacyReport:
    """
    Analyse a persona set for cross-persona leaks.
    """
    log.info("Incoming analysis request", {"personas": len(personas)})
    _enforce_limit(personas)
    return report.analyze_personas(personas)


@app.post("/api/privacy/graph", response_model=privacy.PrivacyGraph)
def graph_endpoint(body: GraphRequest) -> privacy.PrivacyGraph:
    """
    Build the persona link graph, analysing first if no warnings are given.
    """
    log.info(
        "Incoming graph request",
        {"personas": len(body.personas), "warningsSupplied": body.warnings is not None},
    )
    _enforce_limit(body.personas)
    warnings = body.warnings if body.warnings is not None else analyzer.analyze_privacy(body.personas)
    return graph.generate_privacy_graph(body.personas, warnings)


# ============================================================================
# Start Server
# ============================================================================


def main() -> None:
    """Entry point for running the server."""
    settings = config.get_settings()
    log.success(f"Server listening on {settings.host}:{settings.port}")

    uvicorn.run(
        "persona_privacy.main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )


if __name__ == "__main__":
    main()
