from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.v1.api import api_router
from app.api.v1.error_handlers import register_exception_handlers
from app.core.config import get_settings
from app.core.metrics import instrument_app
from app.core.logging import get_logger
from app.db.models import Base
from app.db.session import engine
from app.utils.decorators import log_request

logger = get_logger(__name__)

settings = get_settings()
app = FastAPI(title=settings.APP_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Translate domain errors (not found, email unavailable) into HTTP responses
register_exception_handlers(app)

# Instrument the app with Prometheus metrics
instrument_app(app)

app.include_router(api_router, prefix="/api/v1")

@app.on_event("startup")
async def startup_event():
    logger.info(f"Application startup (storage backend: {settings.STORAGE_BACKEND})")
    if settings.STORAGE_BACKEND == "sqlalchemy" and settings.CREATE_TABLES_ON_STARTUP:
        Base.metadata.create_all(bind=engine)

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")

@app.get("/")
@log_request
async def read_root():
    return {"message": f"Welcome to the {settings.APP_TITLE}"}
