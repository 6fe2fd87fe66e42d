"""
Unit tests for the UK compliance recommendation generator.
"""
import pytest

from converta.compliance import (
    UK_CUSTOMS_REQUIREMENTS,
    generate_compliance_recommendation,
    get_customs_requirements,
    get_product_standards,
)
from converta.models import BusinessProfile, BusinessType


def _titles(recommendation):
    return [event.title for event in recommendation.compliance_calendar]


class TestCompanyType:
    """Test company type selection and setup cost."""

    def test_large_business_gets_plc(self):
        """Top revenue band and 200+ employees."""
        rec = generate_compliance_recommendation({"annualRevenue": "5m+", "companySize": "200+"})

        assert rec.recommended_company_type == "Public Limited Company (PLC)"
        assert rec.estimated_setup_cost == "$10,000 - $25,000"
        assert rec.reasoning.startswith("Suitable for larger businesses")

    @pytest.mark.parametrize("payload", [
        {"annualRevenue": "5m+", "companySize": "11-50"},
        {"annualRevenue": "50k-250k", "companySize": "200+"},
    ])
    def test_either_large_signal_gets_plc(self, payload):
        rec = generate_compliance_recommendation(payload)

        assert rec.recommended_company_type == "Public Limited Company (PLC)"

    def test_micro_business(self, financial_consultancy):
        rec = generate_compliance_recommendation(financial_consultancy)

        assert rec.recommended_company_type == "Private Limited Company"
        assert rec.reasoning.startswith("Ideal for small businesses")

    def test_default_is_private_limited(self):
        rec = generate_compliance_recommendation({})

        assert rec.recommended_company_type == "Private Limited Company"
        assert rec.reasoning.startswith("Standard choice for most SMEs")
        assert rec.estimated_setup_cost == "$1,000 - $3,000"

    def test_regulated_industry_cost_wins_over_plc(self):
        rec = generate_compliance_recommendation({
            "industry": "Healthcare",
            "annualRevenue": "5m+",
            "companySize": "200+",
        })

        assert rec.recommended_company_type == "Public Limited Company (PLC)"
        assert rec.estimated_setup_cost == "$5,000 - $15,000"

    @pytest.mark.parametrize("industry", ["Healthcare", "Healthcare & Medical", "Financial Services"])
    def test_regulated_setup_cost(self, industry):
        rec = generate_compliance_recommendation({"industry": industry})

        assert rec.estimated_setup_cost == "$5,000 - $15,000"


class TestTaxObligations:
    """Test tax lines and the VAT rule."""

    def test_base_lines_always_present(self):
        rec = generate_compliance_recommendation({"annualRevenue": "0-50k"})

        assert rec.tax_obligations == [
            "Corporation Tax (19-25% on profits)",
            "PAYE (if employing UK staff)",
            "National Insurance contributions",
        ]

    def test_online_store_requires_vat(self):
        rec = generate_compliance_recommendation({"annualRevenue": "0-50k", "hasOnlineStore": True})

        assert "VAT Registration (mandatory if UK turnover exceeds £90,000)" in rec.tax_obligations

    def test_revenue_above_smallest_band_requires_vat(self):
        rec = generate_compliance_recommendation({"annualRevenue": "50k-250k"})

        assert "VAT Registration (mandatory if UK turnover exceeds £90,000)" in rec.tax_obligations

    def test_missing_revenue_requires_vat(self):
        rec = generate_compliance_recommendation({})

        assert "VAT Registration (mandatory if UK turnover exceeds £90,000)" in rec.tax_obligations

    @pytest.mark.parametrize("industry", ["Manufacturing", "technology"])
    def test_trade_duty_industries(self, industry):
        rec = generate_compliance_recommendation({"industry": industry})

        assert rec.tax_obligations[-1] == "Import/Export duties (based on trade agreements)"

    def test_goods_seller_tax_lines(self, enterprise_manufacturer):
        rec = generate_compliance_recommendation(enterprise_manufacturer)

        assert rec.tax_obligations == [
            "Corporation Tax (19-25% on profits)",
            "PAYE (if employing UK staff)",
            "National Insurance contributions",
            "VAT Registration (mandatory if UK turnover exceeds £90,000)",
            "Customs Duty (varies by HS code and origin)",
            "Import VAT (20% standard rate, reclaimable if VAT registered)",
            "Import/Export duties (based on trade agreements)",
        ]


class TestComplianceCalendar:
    """Test calendar events."""

    def test_baseline_events(self):
        rec = generate_compliance_recommendation({})

        assert _titles(rec) == ["Company Registration", "Tax Registration", "Annual Return", "Tax Return"]
        assert [event.frequency for event in rec.compliance_calendar] == [
            "once", "once", "annually", "annually",
        ]

    def test_online_store_adds_quarterly_vat_return(self):
        rec = generate_compliance_recommendation({"hasOnlineStore": True})

        vat_return = rec.compliance_calendar[4]
        assert vat_return.title == "VAT Return"
        assert vat_return.frequency == "quarterly"
        assert vat_return.priority == "high"
        assert vat_return.category == "tax"

    def test_revenue_alone_does_not_add_vat_return(self):
        rec = generate_compliance_recommendation({"annualRevenue": "1m-5m"})

        assert "VAT Return" not in _titles(rec)

    def test_goods_seller_customs_events(self, food_exporter):
        rec = generate_compliance_recommendation(food_exporter)

        assert _titles(rec) == [
            "Company Registration",
            "Tax Registration",
            "Annual Return",
            "Tax Return",
            "VAT Return",
            "UK EORI Number Application",
            "Customs Declarations",
        ]
        assert {event.category for event in rec.compliance_calendar[-2:]} == {"customs"}


class TestRegistrations:
    """Test required registrations."""

    def test_baseline_registrations(self):
        rec = generate_compliance_recommendation({"industry": "Retail"})

        assert rec.required_registrations == [
            "Companies House registration (or UK branch registration)",
            "HMRC tax registration (Corporation Tax)",
            "ICO Data Protection registration (if processing personal data)",
        ]

    def test_food_registration(self, food_exporter):
        rec = generate_compliance_recommendation(food_exporter)

        assert len(rec.required_registrations) == 7
        assert "UK EORI Number (essential for customs)" in rec.required_registrations
        assert rec.required_registrations[-1] == "Food safety registration"

    def test_healthcare_registration(self):
        rec = generate_compliance_recommendation({"industry": "healthcare"})

        assert rec.required_registrations[-1] == "Healthcare regulatory approval"

    def test_financial_services_registrations(self, financial_consultancy):
        rec = generate_compliance_recommendation(financial_consultancy)

        assert rec.required_registrations[-2:] == [
            "FCA authorisation",
            "AML supervision registration with HMRC",
        ]


class TestCustomsAndStandards:
    """Test the customs catalog and product standard filtering."""

    def test_services_only_get_general_requirements(self, financial_consultancy):
        rec = generate_compliance_recommendation(financial_consultancy)

        assert [req.id for req in rec.customs_requirements] == [
            "companies-house",
            "vat-registration",
            "uk-bank-account",
            "vat-representative",
        ]
        assert rec.product_standards == []

    def test_goods_business_gets_full_catalog(self, enterprise_manufacturer):
        rec = generate_compliance_recommendation(enterprise_manufacturer)

        assert len(rec.customs_requirements) == len(UK_CUSTOMS_REQUIREMENTS)

    def test_sells_goods_false_narrows_to_services(self):
        rec = generate_compliance_recommendation({"sellsGoods": False, "businessType": "manufacturer"})

        assert all(req.applicable_to in ("all", "services") for req in rec.customs_requirements)

    def test_customs_requirements_by_type(self):
        services = get_customs_requirements(BusinessType.SERVICES)
        reseller = get_customs_requirements(BusinessType.RESELLER)

        assert all(req.applicable_to != "goods" for req in services)
        assert len(reseller) > len(services)

    def test_food_product_standards(self, food_exporter):
        rec = generate_compliance_recommendation(food_exporter)

        assert [std.id for std in rec.product_standards] == [
            "labelling-compliance",
            "fsa-registration",
            "defra-approval",
        ]

    def test_manufacturing_product_standards(self):
        ids = [std.id for std in get_product_standards("manufacturing")]

        assert ids == [
            "ukca-marking",
            "ce-marking",
            "labelling-compliance",
            "reach-compliance",
            "rohs-compliance",
        ]

    def test_no_industry_no_standards(self):
        assert get_product_standards(None) == []
        assert get_product_standards("") == []


class TestRecommendationContract:
    """Test inputs and outputs of the generator as a whole."""

    def test_accepts_profile_and_payload(self, food_exporter, fixture_loader):
        from_model = generate_compliance_recommendation(food_exporter)
        from_payload = generate_compliance_recommendation(
            fixture_loader.get_business_profile("food_exporter")
        )

        assert from_model == from_payload

    def test_fresh_result_each_call(self):
        first = generate_compliance_recommendation({})
        first.tax_obligations.append("mutated")

        second = generate_compliance_recommendation({})

        assert "mutated" not in second.tax_obligations

    def test_camel_case_serialization(self):
        data = generate_compliance_recommendation(BusinessProfile()).model_dump(by_alias=True)

        assert data["recommendedCompanyType"] == "Private Limited Company"
        assert "estimatedSetupCost" in data
        assert "complianceCalendar" in data
