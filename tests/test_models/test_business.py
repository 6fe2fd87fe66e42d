"""
Unit tests for the business profile and score breakdown models.
"""
import pytest

from converta.models import (
    BusinessContext,
    BusinessProfile,
    BusinessType,
    CompanySize,
    RevenueBand,
    ScoreBreakdown,
    normalize_industry,
)
from converta.scoring import score_marketability


class TestBusinessProfile:
    """Test permissive validation of form payloads."""

    def test_camel_case_payload(self, tech_startup_payload):
        profile = BusinessProfile.model_validate(tech_startup_payload)

        assert profile.company_size == CompanySize.MICRO
        assert profile.annual_revenue == RevenueBand.UNDER_50K
        assert profile.digital_presence == ["instagram"]

    def test_snake_case_names_accepted(self):
        profile = BusinessProfile(company_size="11-50", has_online_store=True)

        assert profile.company_size == CompanySize.SMALL
        assert profile.has_online_store is True

    def test_unknown_buckets_become_none(self):
        profile = BusinessProfile.model_validate({
            "companySize": "enormous",
            "annualRevenue": 12,
            "timeline": "",
            "budget": None,
        })

        assert profile.company_size is None
        assert profile.annual_revenue is None
        assert profile.timeline is None
        assert profile.budget is None

    def test_bucket_whitespace_is_ignored(self):
        assert BusinessProfile(company_size=" 200+ ").company_size == CompanySize.LARGE

    @pytest.mark.parametrize("value,expected", [
        ("instagram", ["instagram"]),
        ("", []),
        (None, []),
        (("a", None, "b"), ["a", "b"]),
        (42, []),
    ])
    def test_list_coercion(self, value, expected):
        assert BusinessProfile(digital_presence=value).digital_presence == expected

    @pytest.mark.parametrize("value,expected", [
        (True, True),
        ("yes", True),
        ("On", True),
        ("false", False),
        ("", False),
        (None, False),
        (0, False),
    ])
    def test_flag_coercion(self, value, expected):
        assert BusinessProfile(has_english_website=value).has_english_website is expected

    def test_sells_goods_stays_unknown_when_missing(self):
        assert BusinessProfile().sells_goods is None
        assert BusinessProfile(sells_goods="no").sells_goods is False

    def test_business_type_defaults_to_both(self):
        assert BusinessProfile().business_type == BusinessType.BOTH
        assert BusinessProfile(business_type="wholesaler").business_type == BusinessType.BOTH
        assert BusinessProfile(business_type="services").business_type == BusinessType.SERVICES

    def test_every_profile_fixture_validates(self, fixture_loader):
        names = fixture_loader.list_fixtures("profiles")

        assert names == ["enterprise_manufacturer", "financial_consultancy", "food_exporter", "tech_startup"]
        for name in names:
            BusinessProfile.model_validate(fixture_loader.get_business_profile(name))

    def test_unknown_fields_ignored(self):
        profile = BusinessProfile.model_validate({"industry": "Retail", "favouriteColour": "teal"})

        assert profile.industry == "Retail"

    @pytest.mark.parametrize("established,years", [
        (2000, 26),
        ("2020", 6),
        (" 2016-04-01", 10),
        ("est. 2010", 0),
        (None, 0),
    ])
    def test_years_in_business(self, established, years):
        assert BusinessProfile(year_established=established).years_in_business(2026) == years


class TestNormalizeIndustry:
    """Test industry slugs."""

    @pytest.mark.parametrize("label,slug", [
        ("Food & Beverage", "food-beverage"),
        ("food_beverage", "food-beverage"),
        ("  Technology ", "technology"),
        ("Healthcare & Medical", "healthcare-medical"),
        ("Retail/E-commerce", "retail-e-commerce"),
        (None, ""),
        ("", ""),
    ])
    def test_slugs(self, label, slug):
        assert normalize_industry(label) == slug


class TestScoreBreakdown:
    """Test the different shapes analysis scores arrive in."""

    def test_from_marketability_result(self, tech_startup, current_year):
        result = score_marketability(tech_startup, current_year=current_year)

        breakdown = ScoreBreakdown.model_validate(result)

        assert breakdown.overall_score == 48
        assert breakdown.regulatory_compatibility == 50
        assert breakdown.investment_readiness is None
        assert breakdown.investment_score == 45

    def test_from_metrics(self, tech_startup, current_year):
        metrics = score_marketability(tech_startup, current_year=current_year).metrics

        breakdown = ScoreBreakdown.model_validate(metrics)

        assert breakdown.overall_score is None
        assert breakdown.digital_readiness == 28

    def test_from_flat_mapping(self):
        breakdown = ScoreBreakdown.model_validate({"digitalReadiness": 33, "logistics_viability": 70})

        assert breakdown.digital_readiness == 33
        assert breakdown.logistics_viability == 70

    def test_from_nested_metrics_key(self):
        breakdown = ScoreBreakdown.model_validate({
            "overall_score": 61,
            "metrics": {"productMarketFit": 44},
        })

        assert breakdown.overall_score == 61
        assert breakdown.product_market_fit == 44

    def test_explicit_investment_readiness_wins(self):
        breakdown = ScoreBreakdown(investment_readiness=90, founder_advantage=20)

        assert breakdown.investment_score == 90


class TestBusinessContext:
    """Test ranker context coercion."""

    def test_enum_values_become_strings(self):
        context = BusinessContext(company_size=CompanySize.LARGE, industry="Retail")

        assert context.company_size == "200+"

    def test_accepts_marketability_result(self, tech_startup, current_year):
        result = score_marketability(tech_startup, current_year=current_year)

        context = BusinessContext(analysis_scores=result)

        assert context.analysis_scores.founder_advantage == 45
