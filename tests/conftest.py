"""
Shared pytest fixtures for all tests.
Provides reusable business profiles, partner catalogs and score breakdowns.
"""
import pytest

from tests.fixtures import FixtureLoader

# Pin the year so years-in-business is stable across test runs
CURRENT_YEAR = 2026


@pytest.fixture
def fixture_loader():
    """Provide the JSON fixture loader."""
    return FixtureLoader()


@pytest.fixture
def current_year():
    return CURRENT_YEAR


@pytest.fixture
def tech_startup_payload(fixture_loader):
    """Form payload for a small technology startup."""
    return fixture_loader.get_business_profile("tech_startup")


@pytest.fixture
def tech_startup(tech_startup_payload):
    """Provide the tech startup as a BusinessProfile."""
    from converta.models import BusinessProfile

    return BusinessProfile.model_validate(tech_startup_payload)


@pytest.fixture
def enterprise_manufacturer(fixture_loader):
    """Provide a large goods-exporting manufacturer."""
    from converta.models import BusinessProfile

    return BusinessProfile.model_validate(
        fixture_loader.get_business_profile("enterprise_manufacturer")
    )


@pytest.fixture
def food_exporter(fixture_loader):
    """Provide a mid-sized food business with an online store."""
    from converta.models import BusinessProfile

    return BusinessProfile.model_validate(fixture_loader.get_business_profile("food_exporter"))


@pytest.fixture
def financial_consultancy(fixture_loader):
    """Provide a micro financial services firm that sells no goods."""
    from converta.models import BusinessProfile

    return BusinessProfile.model_validate(
        fixture_loader.get_business_profile("financial_consultancy")
    )


@pytest.fixture
def partner_rows(fixture_loader):
    """Raw partner directory rows."""
    return fixture_loader.get_partner_catalog("uk_directory")


@pytest.fixture
def partner_catalog(partner_rows):
    """Provide the partner directory as Partner objects."""
    from converta.models import Partner

    return [Partner.model_validate(row) for row in partner_rows]


@pytest.fixture
def make_partner():
    """Factory for one-off partners; only the fields a test cares about need passing."""
    from converta.models import Partner

    def _make(**overrides):
        data = {
            "id": "p-test",
            "name": "Test Partner",
            "description": "",
            "category": "legal",
            "specialties": [],
            "location": None,
        }
        data.update(overrides)
        return Partner.model_validate(data)

    return _make


@pytest.fixture
def weak_scores():
    """Score breakdown with every metric in its high-urgency band."""
    from converta.models import ScoreBreakdown

    return ScoreBreakdown(
        overall_score=45,
        product_market_fit=37,
        regulatory_compatibility=40,
        logistics_viability=50,
        digital_readiness=28,
        scalability_potential=55,
        founder_advantage=45,
    )


@pytest.fixture
def strong_scores():
    """Score breakdown with every metric comfortably healthy."""
    from converta.models import ScoreBreakdown

    return ScoreBreakdown(
        overall_score=85,
        product_market_fit=88,
        regulatory_compatibility=90,
        logistics_viability=92,
        digital_readiness=86,
        scalability_potential=80,
        founder_advantage=85,
    )


# Pytest markers for test categorization
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests that exercise several components together"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (fast, no I/O)"
    )
