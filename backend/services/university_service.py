import json
import logging
from collections import Counter
from pathlib import Path

from config import settings
from models.country import CountrySummary
from models.explore import SearchFilters
from models.university import University
from services.cache_service import DatasetCache
from services.country_registry import CountryRegistry, get_registry
from services.filter_service import apply_filters
from utils.text_helpers import slugify

logger = logging.getLogger(__name__)


class UniversityService:
    """Loads per-country datasets through a cache and answers search/lookup queries."""

    def __init__(self, registry: CountryRegistry, cache: DatasetCache, data_dir: Path):
        self.registry = registry
        self.cache = cache
        self.data_dir = Path(data_dir)

    def _read_dataset(self, code: str) -> list[University] | None:
        entry = self.registry.get_by_code(code)
        path = self.data_dir / entry.file
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise ValueError(f"expected a list of records, got {type(raw).__name__}")
            universities = [
                University(
                    **{**record, "country": code, "slug": slugify(record.get("university_name", ""))}
                )
                for record in raw
            ]
        except (OSError, ValueError, TypeError, AttributeError):
            logger.exception("Failed to load university data for %s from %s", code, path)
            return None

        _warn_duplicate_slugs(code, universities)
        logger.info("Loaded %d universities for %s", len(universities), code)
        return universities

    def get_by_country(self, country: str) -> list[University]:
        code = country.strip().lower()
        if self.registry.get_by_code(code) is None:
            return []
        universities = self.cache.get_or_load(code, lambda: self._read_dataset(code))
        # copy so callers cannot reorder or extend the cached list
        return list(universities or [])

    def get_all(self) -> list[University]:
        results: list[University] = []
        for code in self.registry.codes():
            results.extend(self.get_by_country(code))
        return results

    def get_by_slug(self, country: str, slug: str) -> University | None:
        return next((u for u in self.get_by_country(country) if u.slug == slug), None)

    def search(
        self,
        country: str | None,
        query: str = "",
        filters: SearchFilters | None = None,
    ) -> list[University]:
        base = self.get_by_country(country) if country else self.get_all()
        return apply_filters(base, query, filters)

    def available_countries(self) -> list[CountrySummary]:
        return [
            CountrySummary(
                code=c.code,
                name=c.name,
                flag=c.flag,
                count=len(self.get_by_country(c.code)),
            )
            for c in self.registry.get_all()
        ]


def _warn_duplicate_slugs(code: str, universities: list[University]) -> None:
    counts = Counter(u.slug for u in universities)
    for slug, n in counts.items():
        if n > 1:
            logger.warning(
                "Slug %r appears %d times in %s; lookups will return the first record",
                slug, n, code,
            )


_service: UniversityService | None = None


def get_university_service() -> UniversityService:
    global _service
    if _service is None:
        _service = UniversityService(get_registry(), DatasetCache(), settings.data_dir)
    return _service
