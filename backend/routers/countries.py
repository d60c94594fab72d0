from fastapi import APIRouter, Depends, HTTPException

from models.country import CountrySummary
from services.university_service import UniversityService, get_university_service

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[CountrySummary])
def list_countries(service: UniversityService = Depends(get_university_service)):
    return service.available_countries()


@router.get("/{code}", response_model=CountrySummary)
def get_country(code: str, service: UniversityService = Depends(get_university_service)):
    country = service.registry.get_by_code(code)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return CountrySummary(
        code=country.code,
        name=country.name,
        flag=country.flag,
        count=len(service.get_by_country(country.code)),
    )
