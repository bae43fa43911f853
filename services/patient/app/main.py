import logging
from contextlib import asynccontextmanager
from typing import Annotated, Dict, Any

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.dependencies import get_queue_service, get_patient_store
from app.queue_service import QueueService
from app.routers import patients
from app.schemas.patient import StorageCheckResponse
from triage import InvalidInput, NotFound

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Service health state
service_state: Dict[str, Any] = {
    "storage": False,
    "startup_complete": False,
}


async def check_storage_connection(app: FastAPI) -> bool:
    """Check patient storage connection status."""
    get_store = app.dependency_overrides.get(get_patient_store, get_patient_store)
    try:
        await get_store().ping()
        return True
    except Exception as e:
        logger.warning(f"Storage connection check failed: {e}")
        return False


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle."""
    logger.info("=" * 50)
    logger.info("Emergency Waitlist Patient Service Starting...")
    logger.info("=" * 50)

    service_state["storage"] = await check_storage_connection(app)
    logger.info(
        f"  Storage ({settings.STORAGE_BACKEND}): "
        f"{'Connected' if service_state['storage'] else 'Not available'}"
    )
    logger.info(f"  Average service time: {settings.AVG_SERVICE_MINUTES} min")

    service_state["startup_complete"] = True
    logger.info(f"  CORS Origins: {settings.CORS_ORIGINS}")
    logger.info("=" * 50)

    yield

    logger.info("Patient service shutting down...")
    service_state["startup_complete"] = False


app = FastAPI(
    title=settings.APP_NAME,
    description="Emergency department walk-in triage queue",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(patients.router)


@app.get("/health")
async def health_check():
    """Basic health check for load balancers."""
    return {"status": "healthy", "service": "patient"}


@app.get("/ready")
async def readiness_check():
    """Detailed readiness check."""
    return {
        "status": "ready" if service_state["startup_complete"] else "starting",
        "services": {
            "storage": service_state["storage"],
        },
        "config": {
            "storage_backend": settings.STORAGE_BACKEND,
            "avg_service_minutes": settings.AVG_SERVICE_MINUTES,
        },
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "Emergency Waitlist Patient Service",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/api/test-db", response_model=StorageCheckResponse)
async def test_db(service: Annotated[QueueService, Depends(get_queue_service)]):
    """Round trip to patient storage."""
    try:
        now = await service.check_storage()
    except Exception as e:
        logger.error(f"DB test error: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"ok": False, "error": "DB connection failed"},
        )
    return StorageCheckResponse(ok=True, time=now)


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput):
    return JSONResponse(status_code=400, content={"error": exc.message})


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return JSONResponse(status_code=404, content={"error": exc.message})


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "Server error",
            "detail": str(exc) if settings.DEBUG else None,
        },
    )
