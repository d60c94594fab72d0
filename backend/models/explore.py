from pydantic import BaseModel

from models.country import CountrySummary
from models.university import University


class SearchFilters(BaseModel):
    gre_required: str | None = None
    visa_risk: str | None = None
    program_keyword: str | None = None


class ExploreResponse(BaseModel):
    universities: list[University]
    countries: list[CountrySummary]
    total: int


class UniversityDetailResponse(BaseModel):
    university: University
