from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # The limiter is created at import time; give tests plenty of headroom.
    os.environ["EXPLORE_RATE_LIMIT"] = "10000/minute"
    os.environ["PRELOAD_DATASETS"] = "false"


def make_record(name: str, **overrides: Any) -> dict[str, Any]:
    record = {
        "rank": 1,
        "university_name": name,
        "city": "",
        "type": "Public",
        "popular_english_programs": [],
        "min_cgpa": "7.0 (out of 10)",
        "ielts_requirement": "6.5",
        "gre_required": "No",
        "annual_tuition_fee_inr": "20,00,000 (approx)",
        "estimated_annual_living_cost_inr": "10,00,000 (approx)",
        "program_duration_years": "2",
        "avg_starting_salary_inr": "40,00,000 (approx)",
        "employment_rate": "90%",
        "post_study_work_visa": "3 years",
        "visa_risk": "Low",
        "website": "https://example.edu",
        "source": "test fixture",
    }
    record.update(overrides)
    return record


CANADA = [
    make_record(
        "University of Toronto",
        rank=1,
        city="Toronto",
        popular_english_programs=["MS Computer Science", "MBA", "Master of Information"],
        gre_required="No (optional)",
        visa_risk="Low",
    ),
    make_record(
        "McGill University",
        rank=2,
        city="Montreal",
        popular_english_programs=["MEng Mechanical Engineering", "MBA"],
        gre_required="Yes, required",
        visa_risk="Medium",
    ),
    make_record(
        "Simon Fraser University",
        rank=3,
        city="Burnaby",
        popular_english_programs=["MS Data Science"],
        gre_required="No (recommended)",
        visa_risk="High",
    ),
]

GERMANY = [
    make_record(
        "Technical University of Munich",
        rank=1,
        city="Munich",
        popular_english_programs=["MSc Informatics", "MSc Data Engineering"],
        gre_required="Yes, required for some programs",
        visa_risk="Low",
    ),
    make_record(
        "Humboldt University of Berlin",
        rank=2,
        city="Berlin",
        popular_english_programs=["MA Economics", "MSc Statistics"],
        gre_required="No",
        visa_risk="low",
    ),
]


def write_json(path: Path, payload: Any) -> Path:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture()
def data_dir(tmp_path: Path) -> Path:
    d = tmp_path / "University_data"
    d.mkdir()
    write_json(d / "Canada_uni.txt", CANADA)
    write_json(d / "Germany_uni.txt", GERMANY)
    return d


@pytest.fixture()
def registry() -> Any:
    from models.country import CountryInfo
    from services.country_registry import CountryRegistry

    return CountryRegistry([
        CountryInfo(code="canada", name="Canada", flag="🇨🇦", file="Canada_uni.txt"),
        CountryInfo(code="germany", name="Germany", flag="🇩🇪", file="Germany_uni.txt"),
    ])


@pytest.fixture()
def service(registry: Any, data_dir: Path) -> Any:
    from services.cache_service import DatasetCache
    from services.university_service import UniversityService

    return UniversityService(registry, DatasetCache(), data_dir)


@pytest.fixture()
def client(service: Any) -> Any:
    from main import app
    from routers.explore import limiter
    from services.university_service import get_university_service

    limiter.reset()
    app.dependency_overrides[get_university_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
