import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from runtracker.api.analytics import router as analytics_router
from runtracker.api.imports import router as imports_router
from runtracker.core.config import settings
from runtracker.core.log_config import configure_logging


configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Run Tracker")

# Allow CORS for the static dashboard
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analytics_router)
app.include_router(imports_router)

logger.info("Run tracker API ready (timezone=%s)", settings.timezone)


@app.get("/")
def root():
    return {"message": "Run tracker backend is running"}
