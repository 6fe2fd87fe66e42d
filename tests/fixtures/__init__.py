"""
Test fixtures for realistic assessment testing.

This package provides:
- Business profile fixtures (form payloads)
- Partner directory fixtures
- Fixture loader utilities

Usage:
    from tests.fixtures import FixtureLoader

    loader = FixtureLoader()
    profile = loader.get_business_profile("tech_startup")
    partners = loader.get_partner_catalog("uk_directory")
"""
from tests.fixtures.loader import FixtureLoader

__all__ = ["FixtureLoader"]
