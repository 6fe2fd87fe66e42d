"""
UK compliance recommendation generator.

Derives the legal structure, tax obligations, compliance calendar and
registrations a business needs to trade in the UK from its profile.
"""
from collections.abc import Mapping
from typing import Any

from converta.compliance.uk_requirements import get_customs_requirements, get_product_standards
from converta.models.business import BusinessProfile, BusinessType, CompanySize, RevenueBand
from converta.models.results import ComplianceEvent, ComplianceRecommendation
from converta.utils.logging import get_logger

logger = get_logger(__name__)


PRIVATE_LIMITED_COMPANY = "Private Limited Company"
PUBLIC_LIMITED_COMPANY = "Public Limited Company (PLC)"

DEFAULT_SETUP_COST = "$1,000 - $3,000"
REGULATED_SETUP_COST = "$5,000 - $15,000"
PLC_SETUP_COST = "$10,000 - $25,000"

# Industry slugs (see normalize_industry)
TRADE_DUTY_INDUSTRIES = frozenset({"manufacturing", "technology"})
FOOD_INDUSTRIES = frozenset({"food-beverage"})
HEALTHCARE_INDUSTRIES = frozenset({"healthcare", "healthcare-medical"})
FINANCIAL_INDUSTRIES = frozenset({"financial-services"})
HIGH_COST_INDUSTRIES = HEALTHCARE_INDUSTRIES | FINANCIAL_INDUSTRIES

BASELINE_REGISTRATIONS = (
    "Companies House registration (or UK branch registration)",
    "HMRC tax registration (Corporation Tax)",
    "ICO Data Protection registration (if processing personal data)",
)


def _select_company_type(profile: BusinessProfile) -> tuple[str, str]:
    """First matching rule wins: (company type, reasoning)."""
    if (
        profile.annual_revenue == RevenueBand.UNDER_50K
        and profile.company_size == CompanySize.MICRO
    ):
        return (
            PRIVATE_LIMITED_COMPANY,
            "Ideal for small businesses with limited liability protection and tax efficiency. "
            "Lower administrative burden.",
        )
    if (
        profile.annual_revenue == RevenueBand.OVER_5M
        or profile.company_size == CompanySize.LARGE
    ):
        return (
            PUBLIC_LIMITED_COMPANY,
            "Suitable for larger businesses planning significant growth and potential public investment",
        )
    return (
        PRIVATE_LIMITED_COMPANY,
        "Standard choice for most SMEs entering the UK market with limited liability protection",
    )


def _needs_vat(profile: BusinessProfile) -> bool:
    # A missing revenue band is not the smallest band, so it counts
    return profile.has_online_store or profile.annual_revenue != RevenueBand.UNDER_50K


def _tax_obligations(profile: BusinessProfile) -> list[str]:
    obligations = [
        "Corporation Tax (19-25% on profits)",
        "PAYE (if employing UK staff)",
        "National Insurance contributions",
    ]
    if _needs_vat(profile):
        obligations.append("VAT Registration (mandatory if UK turnover exceeds £90,000)")
    if profile.sells_goods:
        obligations.append("Customs Duty (varies by HS code and origin)")
        obligations.append("Import VAT (20% standard rate, reclaimable if VAT registered)")
    if profile.industry_key in TRADE_DUTY_INDUSTRIES:
        obligations.append("Import/Export duties (based on trade agreements)")
    return obligations


def _compliance_calendar(profile: BusinessProfile) -> list[ComplianceEvent]:
    events = [
        ComplianceEvent(
            title="Company Registration",
            description="Register company with Companies House",
            deadline="Before trading begins",
            frequency="once",
            priority="high",
            category="registration",
        ),
        ComplianceEvent(
            title="Tax Registration",
            description="Register for Corporation Tax, PAYE, and VAT (if applicable) with HMRC",
            deadline="Within 3 months of incorporation",
            frequency="once",
            priority="high",
            category="tax",
        ),
        ComplianceEvent(
            title="Annual Return",
            description="Submit annual confirmation statement to Companies House",
            deadline="Annually, within 14 days of the review date",
            frequency="annually",
            priority="medium",
            category="filing",
        ),
        ComplianceEvent(
            title="Tax Return",
            description="Submit CT600 Corporation Tax return to HMRC",
            deadline="12 months after accounting period end",
            frequency="annually",
            priority="high",
            category="tax",
        ),
    ]

    if profile.has_online_store:
        events.append(ComplianceEvent(
            title="VAT Return",
            description="Submit quarterly VAT return to HMRC",
            deadline="Quarterly (1 month + 7 days after quarter end)",
            frequency="quarterly",
            priority="high",
            category="tax",
        ))

    if profile.sells_goods:
        events.append(ComplianceEvent(
            title="UK EORI Number Application",
            description="Apply for an EORI number before any import/export activity",
            deadline="Before first shipment",
            frequency="once",
            priority="high",
            category="customs",
        ))
        events.append(ComplianceEvent(
            title="Customs Declarations",
            description="Submit customs declarations through CDS for each shipment",
            deadline="Per shipment",
            frequency="monthly",
            priority="high",
            category="customs",
        ))

    return events


def _required_registrations(profile: BusinessProfile) -> list[str]:
    registrations = list(BASELINE_REGISTRATIONS)
    industry = profile.industry_key

    if profile.sells_goods:
        registrations.append("UK EORI Number (essential for customs)")
        registrations.append("UK Responsible Person (for regulated products)")
        registrations.append("Trade Tariff Classification (HS codes for products)")
    if industry in FOOD_INDUSTRIES:
        registrations.append("Food safety registration")
    if industry in HEALTHCARE_INDUSTRIES:
        registrations.append("Healthcare regulatory approval")
    if industry in FINANCIAL_INDUSTRIES:
        registrations.append("FCA authorisation")
        registrations.append("AML supervision registration with HMRC")

    return registrations


def _setup_cost(industry: str, company_type: str) -> str:
    if industry in HIGH_COST_INDUSTRIES:
        return REGULATED_SETUP_COST
    if company_type == PUBLIC_LIMITED_COMPANY:
        return PLC_SETUP_COST
    return DEFAULT_SETUP_COST


def generate_compliance_recommendation(
    profile: BusinessProfile | Mapping[str, Any],
) -> ComplianceRecommendation:
    """
    Build the UK compliance recommendation for a business.

    Args:
        profile: Business profile, or the raw form payload for one

    Returns:
        A fresh ComplianceRecommendation
    """
    if not isinstance(profile, BusinessProfile):
        profile = BusinessProfile.model_validate(profile)

    company_type, reasoning = _select_company_type(profile)
    # Only an explicit "no goods" narrows customs to the service subset
    customs_profile = (
        BusinessType.SERVICES if profile.sells_goods is False else profile.business_type
    )

    recommendation = ComplianceRecommendation(
        recommended_company_type=company_type,
        tax_obligations=_tax_obligations(profile),
        compliance_calendar=_compliance_calendar(profile),
        required_registrations=_required_registrations(profile),
        estimated_setup_cost=_setup_cost(profile.industry_key, company_type),
        reasoning=reasoning,
        customs_requirements=get_customs_requirements(customs_profile),
        product_standards=get_product_standards(profile.industry),
    )

    logger.info(
        "compliance_recommended",
        industry=profile.industry,
        company_type=company_type,
        calendar_events=len(recommendation.compliance_calendar),
        registrations=len(recommendation.required_registrations),
    )

    return recommendation
