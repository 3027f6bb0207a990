import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from trip_planner.routers import personality, trip
from trip_planner.config import settings, cloud_config

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Personality Trip Planner API",
    version="0.1.0",
    description="Big Five personality assessment and personality-matched itinerary generation"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins if not cloud_config.IS_CLOUD_RUN else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies with the same single-field error shape as every other failure"""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else err.get("msg", ""))
    message = "Invalid request: " + "; ".join(problems)
    logger.warning(f"{request.url.path} rejected: {message}")
    return JSONResponse(status_code=400, content={"error": message})


# Include routers
app.include_router(personality.router, prefix="/api/v1")
app.include_router(trip.router, prefix="/api/v1")

@app.get("/health")
def health_check():
    """Health check endpoint for Cloud Run and monitoring"""
    return {
        "status": "ok",
        "message": "Personality Trip Planner API is running",
        "environment": "cloud-run" if cloud_config.IS_CLOUD_RUN else "local",
        "modelConfigured": bool(settings.google_api_key)
    }

@app.get("/")
def root():
    """Root endpoint with API information"""
    return {
        "name": "Personality Trip Planner API",
        "version": "0.1.0",
        "docs_url": "/docs",
        "health_url": "/health"
    }

# For Cloud Run, the port is set via environment variable
if __name__ == "__main__":
    import uvicorn
    port = cloud_config.PORT if cloud_config.IS_CLOUD_RUN else settings.port
    uvicorn.run(app, host="0.0.0.0", port=port)
