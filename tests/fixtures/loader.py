"""
Fixture loader utility for test fixtures.
Provides access to realistic business profiles and partner directory exports.
"""
import json
from pathlib import Path
from typing import Any


class FixtureLoader:
    """
    Load test fixtures from the fixtures directory.

    Supports loading:
    - Business profiles (camelCase form payloads)
    - Partner catalogs (snake_case directory rows)
    """

    def __init__(self):
        self.fixtures_dir = Path(__file__).parent
        self.profiles_dir = self.fixtures_dir / "profiles"
        self.partners_dir = self.fixtures_dir / "partners"

    def _read(self, fixture_path: Path, kind: str) -> dict[str, Any]:
        if not fixture_path.exists():
            raise FileNotFoundError(f"{kind} fixture not found: {fixture_path}")

        with open(fixture_path, "r", encoding="utf-8") as f:
            return json.load(f)

    def get_business_profile(self, fixture_name: str) -> dict[str, Any]:
        """
        Get a business profile payload.

        Args:
            fixture_name: Name of the fixture (e.g., "tech_startup", "food_exporter")

        Returns:
            Profile dict as submitted by the assessment form
        """
        data = self._read(self.profiles_dir / f"{fixture_name}.json", "Profile")
        return data.get("profile", {})

    def get_partner_catalog(self, fixture_name: str) -> list[dict[str, Any]]:
        """
        Get a partner catalog as raw directory rows.

        Args:
            fixture_name: Name of the fixture (e.g., "uk_directory")

        Returns:
            List of partner dicts matching the Partner model
        """
        data = self._read(self.partners_dir / f"{fixture_name}.json", "Partner")
        return data.get("partners", [])

    def get_partner_catalog_path(self, fixture_name: str) -> Path:
        """Path to a partner catalog fixture, for loader tests."""
        return self.partners_dir / f"{fixture_name}.json"

    def list_fixtures(self, category: str) -> list[str]:
        """
        List available fixtures in a category.

        Args:
            category: "profiles" or "partners"

        Returns:
            List of fixture names (without .json extension)
        """
        dir_map = {
            "profiles": self.profiles_dir,
            "partners": self.partners_dir,
        }

        if category not in dir_map:
            raise ValueError(f"Unknown category: {category}")

        target_dir = dir_map[category]
        if not target_dir.exists():
            return []

        return sorted(f.stem for f in target_dir.glob("*.json"))
