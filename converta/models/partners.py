"""
Partner directory models and the context used to rank them.
"""
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from converta.models.results import MarketabilityMetrics, MarketabilityResult


class PartnerCategory(str, Enum):
    """Known partner directory categories."""
    ACCOUNTING = "accounting"
    LEGAL = "legal"
    MARKETING = "marketing"
    BUSINESS_DEVELOPMENT = "business_development"
    COMPLIANCE = "compliance"
    LOGISTICS = "logistics"
    CONSULTING = "consulting"


class Urgency(str, Enum):
    """How pressing a category of help is for the business."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Partner(BaseModel):
    """
    A partner directory entry.

    Field names follow the directory table (snake_case); unknown columns
    are ignored. The category is kept as a plain string because the
    directory may hold categories the engine has no rules for.
    """
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: str = ""
    category: str = ""
    specialties: list[str] = Field(default_factory=list)
    website_url: str | None = None
    contact_email: str | None = None
    phone: str | None = None
    location: str | None = None
    logo_url: str | None = None
    verification_status: str = "pending"
    verified_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value: Any) -> str:
        return str(value)

    @field_validator("description", "category", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("specialties", mode="before")
    @classmethod
    def _specialties(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return [str(item) for item in value if item is not None]

    @property
    def searchable_text(self) -> str:
        """Lower-cased description and specialties, as matched against business text."""
        return f"{self.description} {' '.join(self.specialties)}".lower()


class PartnerWithScore(Partner):
    """A partner annotated with its relevance to one business."""

    relevance_score: int = 0
    match_reasons: list[str] = Field(default_factory=list)


class PartnerRecommendation(BaseModel):
    """A category of help with its best-matching partners."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    category: str
    partners: list[Partner] = Field(default_factory=list)
    reason: str
    urgency: Urgency | None = None
    match_score: float | None = None


_BREAKDOWN_KEYS = ("scoreBreakdown", "score_breakdown", "metrics")


class ScoreBreakdown(BaseModel):
    """
    Prior analysis scores consulted by the ranker.

    Any metric may be missing; a missing metric never triggers a bonus.
    `investment_readiness` is only present when an upstream analysis
    supplied it explicitly. Otherwise the budget-driven
    `founder_advantage` stands in for it.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    overall_score: float | None = None
    product_market_fit: float | None = None
    regulatory_compatibility: float | None = None
    logistics_viability: float | None = None
    digital_readiness: float | None = None
    scalability_potential: float | None = None
    founder_advantage: float | None = None
    investment_readiness: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, data: Any) -> Any:
        if isinstance(data, MarketabilityResult):
            return {"overall_score": data.overall_score, **data.metrics.model_dump()}
        if isinstance(data, MarketabilityMetrics):
            return data.model_dump()
        if isinstance(data, Mapping):
            for key in _BREAKDOWN_KEYS:
                nested = data.get(key)
                if isinstance(nested, Mapping):
                    merged = dict(nested)
                    for outer in ("overallScore", "overall_score"):
                        if outer in data:
                            merged.setdefault(outer, data[outer])
                    return merged
        return data

    @property
    def investment_score(self) -> float | None:
        """Score used for accounting urgency."""
        if self.investment_readiness is not None:
            return self.investment_readiness
        return self.founder_advantage


class BusinessContext(BaseModel):
    """What the ranker knows about the business being matched."""
    model_config = ConfigDict(extra="ignore")

    industry: str | None = None
    company_size: str | None = None
    business_description: str | None = None
    analysis_scores: ScoreBreakdown | None = None

    @field_validator("industry", "company_size", "business_description", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str | None:
        if value is None:
            return None
        return str(value.value if isinstance(value, Enum) else value)
