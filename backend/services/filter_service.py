from models.explore import SearchFilters
from models.university import University


def _any_program_contains(uni: University, needle: str) -> bool:
    return any(needle in p.lower() for p in uni.popular_english_programs)


def matches_query(uni: University, query: str) -> bool:
    q = query.lower()
    return (
        q in uni.university_name.lower()
        or q in uni.city.lower()
        or _any_program_contains(uni, q)
    )


def matches_gre(uni: University, gre_required: str) -> bool:
    # Only "yes"/"no" restrict anything
    if gre_required not in ("yes", "no"):
        return True
    return uni.gre_required.lower().startswith(gre_required)


def matches_visa_risk(uni: University, visa_risk: str) -> bool:
    return uni.visa_risk.lower() == visa_risk.lower()


def matches_program(uni: University, keyword: str) -> bool:
    return _any_program_contains(uni, keyword.lower())


def apply_filters(
    universities: list[University],
    query: str = "",
    filters: SearchFilters | None = None,
) -> list[University]:
    """Narrow a record list by the text query and every filter that is set.

    All conditions are ANDed; input order is preserved.
    """
    filters = filters or SearchFilters()
    results = universities

    if query:
        results = [u for u in results if matches_query(u, query)]

    if filters.gre_required:
        results = [u for u in results if matches_gre(u, filters.gre_required)]

    if filters.visa_risk:
        results = [u for u in results if matches_visa_risk(u, filters.visa_risk)]

    if filters.program_keyword:
        results = [u for u in results if matches_program(u, filters.program_keyword)]

    return list(results)
