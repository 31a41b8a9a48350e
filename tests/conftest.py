import pytest

from content_creator.utils.config import settings


@pytest.fixture(autouse=True)
def no_simulated_latency(monkeypatch):
    # Generation otherwise waits settings.SIMULATED_LATENCY_SECONDS per request
    monkeypatch.setattr(settings, "SIMULATED_LATENCY_SECONDS", 0.0)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {settings.API_KEY}"}
