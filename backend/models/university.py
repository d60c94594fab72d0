from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from utils.text_helpers import strip_qualifier

_TEXT_FIELDS = (
    "city",
    "type",
    "min_cgpa",
    "ielts_requirement",
    "gre_required",
    "annual_tuition_fee_inr",
    "estimated_annual_living_cost_inr",
    "program_duration_years",
    "avg_starting_salary_inr",
    "employment_rate",
    "post_study_work_visa",
    "visa_risk",
    "website",
    "source",
)


class University(BaseModel):
    model_config = ConfigDict(frozen=True)

    rank: int | None = None
    university_name: str = Field(min_length=1)
    city: str = ""
    type: str = ""
    popular_english_programs: tuple[str, ...] = ()
    min_cgpa: str = ""
    ielts_requirement: str = ""
    gre_required: str = ""
    annual_tuition_fee_inr: str = ""
    estimated_annual_living_cost_inr: str = ""
    program_duration_years: str = ""
    avg_starting_salary_inr: str = ""
    employment_rate: str = ""
    post_study_work_visa: str = ""
    visa_risk: str = ""
    website: str = ""
    source: str = ""
    # derived at load time
    country: str = ""
    slug: str = ""

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def null_text_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("popular_english_programs", mode="before")
    @classmethod
    def null_programs_to_empty(cls, v):
        return () if v is None else v

    @computed_field
    @property
    def display_fields(self) -> dict[str, str]:
        return {
            "annual_tuition_fee_inr": strip_qualifier(self.annual_tuition_fee_inr),
            "avg_starting_salary_inr": strip_qualifier(self.avg_starting_salary_inr),
            "min_cgpa": strip_qualifier(self.min_cgpa),
            "gre_required": strip_qualifier(self.gre_required),
        }

    @computed_field
    @property
    def featured_programs(self) -> list[str]:
        return list(self.popular_english_programs[:2])
