"""Configure import path and shared fixtures for coopcodec tests."""

import sys
from pathlib import Path

import pytest

# Add backend/src to path for imports
project_root = Path(__file__).parent.parent
backend_src = project_root / "backend" / "src"
sys.path.insert(0, str(backend_src))

from coopcodec.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from a developer's .env and cached settings."""
    for name in (
        "OGM_PREFIX",
        "DEFAULT_WITHHOLDING_TAX_RATE",
        "EPC_BIC",
        "EPC_BENEFICIARY_NAME",
        "EPC_IBAN",
        "QR_BOX_SIZE",
        "QR_BORDER",
        "DEBUG",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(project_root / "tests")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
