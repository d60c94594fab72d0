import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.explore import ExploreResponse, SearchFilters, UniversityDetailResponse
from services.university_service import UniversityService, get_university_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["explore"])

limiter = Limiter(key_func=get_remote_address)


@router.get("/explore", response_model=ExploreResponse | UniversityDetailResponse)
@limiter.limit(settings.explore_rate_limit)
def explore(
    request: Request,
    country: str | None = None,
    slug: str | None = None,
    q: str = "",
    gre: str | None = None,
    visa: str | None = None,
    program: str | None = None,
    service: UniversityService = Depends(get_university_service),
):
    try:
        # Single university lookup
        if country and slug:
            uni = service.get_by_slug(country, slug)
            if uni is None:
                raise HTTPException(status_code=404, detail="University not found")
            return UniversityDetailResponse(university=uni)

        # List / search
        universities = service.search(
            country or None,
            q,
            SearchFilters(
                gre_required=gre or None,
                visa_risk=visa or None,
                program_keyword=program or None,
            ),
        )
        return ExploreResponse(
            universities=universities,
            countries=service.available_countries(),
            total=len(universities),
        )

    except HTTPException:
        raise
    except Exception:
        logger.exception("Explore universities failed")
        raise HTTPException(status_code=500, detail="Internal server error")
