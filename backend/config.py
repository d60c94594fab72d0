import json
from typing import Annotated

from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator
from pathlib import Path

_BACKEND_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    data_dir: Path = _BACKEND_DIR / "data" / "University_data"
    countries_file: Path = _BACKEND_DIR / "data" / "countries.json"
    cors_origins: Annotated[list[str], NoDecode] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    explore_rate_limit: str = "120/minute"
    preload_datasets: bool = False
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("data_dir", "countries_file")
    @classmethod
    def resolve_relative_paths(cls, v: Path) -> Path:
        # Relative to the installed backend, not the process cwd
        if not v.is_absolute():
            return _BACKEND_DIR / v
        return v

    model_config = {
        "env_file": str(_BACKEND_DIR.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
