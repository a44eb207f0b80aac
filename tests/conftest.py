"""Shared pytest helpers."""

from pathlib import Path

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(relative_path: str) -> str:
    """Load a fixture file from tests/fixtures as text."""
    return (FIXTURES_DIR / relative_path).read_text(encoding="utf-8")
