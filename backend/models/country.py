from pydantic import BaseModel, field_validator, model_validator

DEFAULT_FLAG = "🌍"


class CountryInfo(BaseModel):
    """One row of the country registry table."""

    code: str
    file: str
    name: str = ""
    flag: str = ""

    @field_validator("code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        return v.strip().lower()

    @model_validator(mode="after")
    def fill_display_defaults(self):
        if not self.name:
            self.name = self.code
        if not self.flag:
            self.flag = DEFAULT_FLAG
        return self


class CountrySummary(BaseModel):
    code: str
    name: str
    flag: str
    count: int
