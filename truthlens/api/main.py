import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from truthlens.api.v1.endpoints import router as v1_router
from truthlens.core.config import config
from truthlens.core.errors import TruthLensError
from truthlens.core.logging_config import configure_logging

configure_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=config.PROJECT_NAME,
    description="Simulated content credibility analysis for the TruthLens demo",
    version=config.VERSION,
    openapi_url=f"{config.API_PREFIX}/openapi.json"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.exception_handler(TruthLensError)
async def truthlens_error_handler(request: Request, exc: TruthLensError) -> JSONResponse:
    # Raised outside an endpoint's own try block, e.g. while building the orchestrator
    logger.error(f"Request to {request.url.path} failed: {str(exc)}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/")
async def root():
    return {"message": "Welcome to the TruthLens API! Check /docs for API documentation."}


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    logger.info(f"Starting {config.PROJECT_NAME} on {config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
