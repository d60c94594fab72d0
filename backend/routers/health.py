import time
from fastapi import APIRouter, Depends

from services.university_service import UniversityService, get_university_service

router = APIRouter()

_start_time = time.time()


@router.get("/health")
def health_check(service: UniversityService = Depends(get_university_service)):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "cached_countries": len(service.cache),
    }
