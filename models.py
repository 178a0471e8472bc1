# models.py
# The analysis result returned by the model, validated strictly.

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    # Wire names are camelCase, attributes are snake_case.
    model_config = ConfigDict(
        frozen=True,
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Suggestion(_Frozen):
    title: str
    description: str


class DetailedMetric(_Frozen):
    label: str
    value: float = Field(ge=0, le=100)


class AnalysisResult(_Frozen):
    """One complete analysis. Either every field is present or there is no result."""

    ai_score: float = Field(ge=0, le=100)
    human_score: float = Field(ge=0, le=100)
    readability: str
    tone: str
    key_findings: tuple[str, ...]
    suggestions: tuple[Suggestion, ...]
    detailed_metrics: tuple[DetailedMetric, ...]

    def to_payload(self):
        return self.model_dump(mode="json", by_alias=True)
