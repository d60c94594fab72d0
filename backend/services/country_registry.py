import json
from pathlib import Path

from config import settings
from models.country import CountryInfo


class CountryRegistry:
    """Read-only table of the countries that have a dataset."""

    def __init__(self, entries: list[CountryInfo]):
        self._entries = tuple(entries)
        self._by_code = {c.code: c for c in self._entries}

    @classmethod
    def from_file(cls, path: Path) -> "CountryRegistry":
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls([CountryInfo(**c) for c in raw])

    def get_all(self) -> list[CountryInfo]:
        return list(self._entries)

    def get_by_code(self, code: str) -> CountryInfo | None:
        return self._by_code.get(code.strip().lower())

    def codes(self) -> list[str]:
        return [c.code for c in self._entries]


_registry: CountryRegistry | None = None


def get_registry() -> CountryRegistry:
    global _registry
    if _registry is None:
        _registry = CountryRegistry.from_file(settings.countries_file)
    return _registry
