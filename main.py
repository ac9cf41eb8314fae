from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before configuration is read
load_dotenv()

from app.config import config
from app.schemas import HealthResponse
from app.api.v1 import router as v1_router
from app.api.personalization import router as personalization_router
from app.utils.logging import get_logger
from app.utils.metrics import get_metrics

structured_logger = get_logger()

app = FastAPI(
    title="Chromalens",
    description="Color inspection, palette generation and export API",
    version=config.VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"]
)

app.include_router(v1_router)
app.include_router(personalization_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Chromalens service health check."""
    return HealthResponse(
        ok=True,
        version=config.VERSION,
        service=config.SERVICE_NAME
    )


@app.get("/metrics")
def metrics():
    """In-process request counters and timing statistics."""
    if not config.METRICS_ENABLED:
        raise HTTPException(status_code=404, detail="Metrics are disabled")
    return get_metrics().get_summary()


structured_logger.info("Chromalens API initialized", extra={
    "version": config.VERSION,
    "origins": config.allowed_origins()
})


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
