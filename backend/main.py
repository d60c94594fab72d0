import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from config import settings
from routers import health, countries, explore
from services.university_service import get_university_service

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="University Explorer", version="0.1.0")

app.state.limiter = explore.limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)
app.include_router(explore.router)


@app.get("/")
async def root():
    return {
        "name": "University Explorer API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/api/explore"],
    }


@app.on_event("startup")
async def startup():
    service = get_university_service()
    if settings.preload_datasets:
        for summary in service.available_countries():
            logger.info("Preloaded %s: %d universities", summary.code, summary.count)
    logger.info("University Explorer API is running")
