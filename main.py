"""
Example usage of the UK market-readiness engine.

Assesses a sample business against the partner directory configured in
settings (PARTNER_CATALOG_FILE), or a small built-in directory.

Location: project root (run with `python main.py`)
"""
import sys

from converta import assess_business
from converta.config import settings
from converta.core.exceptions import ConvertaError
from converta.data_sources import load_partner_catalog
from converta.matching import apply_filters
from converta.utils.logging import get_logger

logger = get_logger(__name__)


SAMPLE_PROFILE = {
    "industry": "Food & Beverage",
    "companySize": "11-50",
    "annualRevenue": "250k-1m",
    "description": "Organic olive oil and artisan preserves for delivery across Europe",
    "products": "olive oil, preserves, tapenade",
    "currentMarkets": ["Turkey", "Germany"],
    "digitalPresence": ["instagram", "facebook"],
    "hasOnlineStore": True,
    "hasEnglishWebsite": True,
    "website": "https://olives.example.com.tr",
    "regulatoryCompliance": ["HACCP"],
    "timeline": "6-12 months",
    "budget": "10k-50k",
    "yearEstablished": "2014",
    "sellsGoods": True,
    "businessType": "reseller",
}

SAMPLE_PARTNERS = [
    {
        "id": "demo-legal",
        "name": "Thames Legal Partners",
        "description": "Company formation and food labelling law for SME importers",
        "category": "legal",
        "specialties": ["company formation", "contracts", "food law", "trademarks"],
        "location": "London, UK",
        "verification_status": "verified",
    },
    {
        "id": "demo-accounting",
        "name": "Northbridge Accountants",
        "description": "VAT and import VAT for small business food importers",
        "category": "accounting",
        "specialties": ["vat", "payroll"],
        "location": "Manchester, UK",
        "verification_status": "verified",
    },
    {
        "id": "demo-logistics",
        "name": "Channel Freight",
        "description": "Chilled food freight and customs brokerage",
        "category": "logistics",
        "specialties": ["customs", "cold chain", "warehousing", "fulfilment"],
        "location": "Dover, UK",
        "verification_status": "verified",
    },
    {
        "id": "demo-compliance",
        "name": "SafePlate Compliance",
        "description": "Food safety registration and FSA audits for food & beverage exporters",
        "category": "compliance",
        "specialties": ["fsa", "haccp"],
        "location": "Leeds, England",
        "verification_status": "verified",
    },
]


def load_partners() -> list:
    """Configured directory if there is one, otherwise the built-in sample."""
    if settings.partner_catalog_file:
        print(f"Loading partners from {settings.partner_catalog_file}")
        return load_partner_catalog(settings.partner_catalog_file, verified_only=True)
    print("No PARTNER_CATALOG_FILE configured, using built-in sample directory")
    return SAMPLE_PARTNERS


def print_report(report) -> None:
    result = report.marketability
    print("\n=== Marketability ===\n")
    print(f"✓ Overall score: {result.overall_score} ({result.confidence_level.value} confidence)")
    for name, value in result.metrics.model_dump().items():
        print(f"  {name.replace('_', ' ').title():<28} {value:>3}")
    for risk in result.risk_factors:
        print(f"  ✗ Risk: {risk}")
    for opportunity in result.opportunities:
        print(f"  ✓ Opportunity: {opportunity}")
    for recommendation in result.recommendations:
        print(f"  → {recommendation}")

    compliance = report.compliance
    print("\n=== UK Compliance ===\n")
    print(f"✓ Company type: {compliance.recommended_company_type}")
    print(f"  {compliance.reasoning}")
    print(f"  Estimated setup cost: {compliance.estimated_setup_cost}")
    print("  Tax obligations:")
    for line in compliance.tax_obligations:
        print(f"    - {line}")
    print("  Calendar:")
    for event in compliance.compliance_calendar:
        print(f"    - [{event.priority}] {event.title}: {event.deadline}")
    print(f"  Registrations: {len(compliance.required_registrations)}")
    print(f"  Customs requirements: {len(compliance.customs_requirements)}")
    print(f"  Product standards: {', '.join(std.name for std in compliance.product_standards) or 'none'}")

    print("\n=== Partner Matches ===\n")
    relevant = apply_filters(report.ranked_partners, only_relevant=True)
    print(f"✓ {len(relevant)} of {len(report.ranked_partners)} partners above the relevance threshold")
    for partner in relevant:
        print(f"  {partner.relevance_score:>3}  {partner.name} ({partner.category})")
    print()
    for rec in report.recommendations:
        urgency = rec.urgency.value if rec.urgency else "low"
        print(f"  [{urgency}] {rec.category}: {', '.join(p.name for p in rec.partners)}")
        print(f"         {rec.reason}")


def main() -> None:
    print("=" * 60)
    print("UK Market Readiness Assessment")
    print("=" * 60)

    try:
        partners = load_partners()
        report = assess_business(SAMPLE_PROFILE, partners)
    except ConvertaError as e:
        logger.error("assessment_failed", error=str(e), error_type=type(e).__name__)
        print(f"\n✗ Assessment failed: {e}")
        sys.exit(1)

    print_report(report)


if __name__ == "__main__":
    main()
