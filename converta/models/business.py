"""
Business profile models.

The profile arrives as a loosely-typed form payload. Every field is optional
and every categorical bucket falls back to None when the value is missing or
not one we recognise, so downstream lookups can apply their documented
defaults instead of failing.
"""
import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CompanySize(str, Enum):
    """Employee-count bucket."""
    MICRO = "1-10"
    SMALL = "11-50"
    MEDIUM = "51-200"
    LARGE = "200+"


class RevenueBand(str, Enum):
    """Annual revenue bucket."""
    UNDER_50K = "0-50k"
    UP_TO_250K = "50k-250k"
    UP_TO_1M = "250k-1m"
    UP_TO_5M = "1m-5m"
    OVER_5M = "5m+"


class Timeline(str, Enum):
    """How soon the business wants to enter the UK."""
    SHORT = "3-6 months"
    MEDIUM = "6-12 months"
    LONG = "1-2 years"
    EXTENDED = "2+ years"


class Budget(str, Enum):
    """Market-entry budget bucket."""
    UNDER_10K = "0-10k"
    UP_TO_50K = "10k-50k"
    UP_TO_100K = "50k-100k"
    OVER_100K = "100k+"


class BusinessType(str, Enum):
    """What the business does with goods."""
    MANUFACTURER = "manufacturer"
    RESELLER = "reseller"
    BOTH = "both"
    SERVICES = "services"


_TRUTHY = {"true", "yes", "y", "1", "on"}


def normalize_industry(industry: str | None) -> str:
    """
    Reduce an industry label to a comparable slug.

    "Food & Beverage" -> "food-beverage", "Technology" -> "technology".
    """
    if not industry:
        return ""
    slug = re.sub(r"[\s&_/]+", "-", str(industry).strip().lower())
    return re.sub(r"-{2,}", "-", slug).strip("-")


def _coerce_bucket(enum_cls: type[Enum], value: Any) -> Enum | None:
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return None
    try:
        return enum_cls(str(value).strip())
    except ValueError:
        return None


def _coerce_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item is not None]
    return []


def _coerce_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


class BusinessProfile(BaseModel):
    """Business attributes collected by the assessment form."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    industry: str | None = None
    company_size: CompanySize | None = None
    annual_revenue: RevenueBand | None = None
    description: str = ""
    products: str = ""
    current_markets: list[str] = Field(default_factory=list)
    digital_presence: list[str] = Field(default_factory=list)
    has_online_store: bool = False
    has_ecommerce_platform: bool = False
    has_english_website: bool = False
    website: str | None = None
    regulatory_compliance: list[str] = Field(default_factory=list)
    quality_certifications: list[str] = Field(default_factory=list)
    timeline: Timeline | None = None
    budget: Budget | None = None
    year_established: int | str | None = None

    # Only consulted by the customs/trade part of the compliance generator
    sells_goods: bool | None = None
    business_type: BusinessType = BusinessType.BOTH

    @field_validator("company_size", mode="before")
    @classmethod
    def _company_size(cls, value: Any) -> CompanySize | None:
        return _coerce_bucket(CompanySize, value)

    @field_validator("annual_revenue", mode="before")
    @classmethod
    def _annual_revenue(cls, value: Any) -> RevenueBand | None:
        return _coerce_bucket(RevenueBand, value)

    @field_validator("timeline", mode="before")
    @classmethod
    def _timeline(cls, value: Any) -> Timeline | None:
        return _coerce_bucket(Timeline, value)

    @field_validator("budget", mode="before")
    @classmethod
    def _budget(cls, value: Any) -> Budget | None:
        return _coerce_bucket(Budget, value)

    @field_validator("business_type", mode="before")
    @classmethod
    def _business_type(cls, value: Any) -> BusinessType:
        return _coerce_bucket(BusinessType, value) or BusinessType.BOTH

    @field_validator(
        "current_markets",
        "digital_presence",
        "regulatory_compliance",
        "quality_certifications",
        mode="before",
    )
    @classmethod
    def _lists(cls, value: Any) -> list[str]:
        return _coerce_list(value)

    @field_validator(
        "has_online_store",
        "has_ecommerce_platform",
        "has_english_website",
        mode="before",
    )
    @classmethod
    def _flags(cls, value: Any) -> bool:
        return _coerce_flag(value)

    @field_validator("sells_goods", mode="before")
    @classmethod
    def _sells_goods(cls, value: Any) -> bool | None:
        return None if value is None else _coerce_flag(value)

    @field_validator("industry", "website", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("description", "products", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("year_established", mode="before")
    @classmethod
    def _year(cls, value: Any) -> int | str | None:
        if isinstance(value, (int, str)) or value is None:
            return value
        return str(value)

    @property
    def industry_key(self) -> str:
        """Normalized industry slug used by every industry lookup."""
        return normalize_industry(self.industry)

    def years_in_business(self, current_year: int) -> int:
        """
        Years since establishment.

        Only the leading integer of the stored value counts; a missing,
        zero or unparsable year means the business started this year.
        """
        established = 0
        if isinstance(self.year_established, int):
            established = self.year_established
        elif isinstance(self.year_established, str):
            match = re.match(r"\s*([+-]?\d+)", self.year_established)
            if match:
                established = int(match.group(1))
        if not established:
            established = current_year
        return current_year - established
