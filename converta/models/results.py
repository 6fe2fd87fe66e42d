"""
Result models produced by the scorer and the compliance generator.
"""
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ConfidenceLevel(str, Enum):
    """Confidence in the overall readiness score."""
    HIGH = "High"      # overall >= 75
    MEDIUM = "Medium"  # 50-74
    LOW = "Low"        # < 50


class MarketabilityMetrics(BaseModel):
    """The six sub-scores, each an integer in [0, 100]."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    product_market_fit: int = Field(ge=0, le=100)
    regulatory_compatibility: int = Field(ge=0, le=100)
    logistics_viability: int = Field(ge=0, le=100)
    digital_readiness: int = Field(ge=0, le=100)
    scalability_potential: int = Field(ge=0, le=100)
    founder_advantage: int = Field(ge=0, le=100)


class MarketabilityResult(BaseModel):
    """Overall readiness score with the insights derived from it."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    overall_score: int = Field(ge=0, le=100)
    metrics: MarketabilityMetrics
    risk_factors: tuple[str, ...] = ()
    opportunities: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    confidence_level: ConfidenceLevel


class ComplianceEvent(BaseModel):
    """A dated or recurring obligation on the compliance calendar."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    description: str
    deadline: str
    frequency: Literal["once", "monthly", "quarterly", "annually"]
    priority: Literal["high", "medium", "low"]
    category: Literal["tax", "filing", "registration", "compliance", "customs", "trade"]


class CustomsRequirement(BaseModel):
    """A UK import/export requirement."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str
    required: bool
    applicable_to: Literal["all", "goods", "services", "manufacturer", "reseller"]
    estimated_cost: str | None = None
    time_to_complete: str | None = None
    link: str | None = None


class ProductStandard(BaseModel):
    """A UK product standard or approval tied to industries."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    description: str
    applicable_industries: list[str] = Field(default_factory=list)
    required: bool
    link: str | None = None


class ComplianceRecommendation(BaseModel):
    """Recommended UK legal structure plus the obligations that come with it."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    recommended_company_type: str
    tax_obligations: list[str] = Field(default_factory=list)
    compliance_calendar: list[ComplianceEvent] = Field(default_factory=list)
    required_registrations: list[str] = Field(default_factory=list)
    estimated_setup_cost: str
    reasoning: str
    customs_requirements: list[CustomsRequirement] = Field(default_factory=list)
    product_standards: list[ProductStandard] = Field(default_factory=list)
