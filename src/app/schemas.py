import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AnalyzeRequest(BaseModel):
    # Both fields are optional here so that a missing field is reported as our
    # own 400 instead of FastAPI's 422.
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    ticker: Optional[str] = None
    research_prompt: Optional[str] = Field(None, alias="researchPrompt")

    def is_complete(self) -> bool:
        return bool(self.ticker and self.ticker.strip()) and bool(
            self.research_prompt and self.research_prompt.strip()
        )


class HealthResponse(BaseModel):
    status: str = "Backend is running!"


class ExecutiveSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    recommendation: Optional[str] = None
    target_price: Optional[str] = None
    current_price: Optional[str] = None
    conviction_level: Optional[str] = None
    key_thesis: Optional[str] = None
    primary_catalysts: List[Any] = []
    key_risks: List[Any] = []
    time_horizon: Optional[str] = None


class DetailedAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    # Usually prose, but some answers nest objects or lists per section.
    financial_analysis: Any = None
    competitive_positioning: Any = None
    valuation_analysis: Any = None
    risk_assessment: Any = None
    alpha_thesis: Any = None
    contrarian_insights: Any = None

    def sections(self) -> Dict[str, Any]:
        """Every populated section, including ones the model added on its own."""
        return {k: v for k, v in self.model_dump().items() if v not in (None, "", [], {})}


class AnalysisResult(BaseModel):
    """Typed view over the model's JSON answer plus the stamped metadata.

    The upstream payload has no enforced schema, so every field is optional
    and unknown keys are kept.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    created_at: Optional[str] = None
    ticker: Optional[str] = None
    analysis_date: Optional[str] = None
    executive_summary: ExecutiveSummary = Field(default_factory=ExecutiveSummary)
    detailed_analysis: DetailedAnalysis = Field(default_factory=DetailedAnalysis)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "AnalysisResult":
        data = dict(payload)
        raw_id = data.get("id")
        data["id"] = raw_id if isinstance(raw_id, int) and not isinstance(raw_id, bool) else None
        for key in _RESULT_TEXT_FIELDS:
            if key in data:
                data[key] = _as_text(data[key])

        summary = data.get("executive_summary")
        summary = dict(summary) if isinstance(summary, dict) else {}
        for key in _SUMMARY_TEXT_FIELDS:
            if key in summary:
                summary[key] = _as_text(summary[key])
        for key in _SUMMARY_LIST_FIELDS:
            if key in summary:
                summary[key] = _as_list(summary[key])
        data["executive_summary"] = summary

        details = data.get("detailed_analysis")
        data["detailed_analysis"] = details if isinstance(details, dict) else {}
        return cls.model_validate(data)


_RESULT_TEXT_FIELDS = ("created_at", "ticker", "analysis_date")
_SUMMARY_TEXT_FIELDS = (
    "recommendation",
    "target_price",
    "current_price",
    "conviction_level",
    "key_thesis",
    "time_horizon",
)
_SUMMARY_LIST_FIELDS = ("primary_catalysts", "key_risks")


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
