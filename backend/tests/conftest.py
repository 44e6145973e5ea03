"""
Test fixtures shared across the test suite.

Architecture:
- Layout tests use a FakeMeasurer (every character is CHAR_WIDTH mm wide)
  so wrapping is predictable without depending on font metrics.
- PDF tests use the real ReportLab backend — it's fast and local.
- HTTP tests use the real FastAPI app through httpx's ASGITransport.
  The Claude call is replaced with a FakePlanService via FastAPI's
  dependency_overrides, so no network or API key is needed.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from study_planner.main import app
from study_planner.models import FallbackReason, PlanOutcome
from study_planner.services.plan_generation import get_plan_generation_service
from study_planner.services.text_metrics import wrap_words

CHAR_WIDTH = 2.0

SAMPLE_OUTLINE = """1. Fundamentos
Tempo Estimado: 10-15 horas
1.1.1. Intro: O que é o assunto.

2. Avançado"""


class FakeMeasurer:
    """Fixed-advance text measurer: width = len(text) * char_width."""

    def __init__(self, char_width: float = CHAR_WIDTH):
        self.char_width = char_width
        self.wrap_calls = []

    def measure(self, text: str, font: str, size: float) -> float:
        return len(text) * self.char_width

    def wrap_to_width(self, text, font, size, max_width):
        self.wrap_calls.append((text, font, size, max_width))
        return wrap_words(text, max_width, lambda s: self.measure(s, font, size))


class FakePlanService:
    """Stands in for PlanGenerationService in HTTP tests."""

    def __init__(self, outcome: PlanOutcome):
        self.outcome = outcome
        self.subjects = []

    def generate(self, subject: str) -> PlanOutcome:
        self.subjects.append(subject)
        return self.outcome


@pytest.fixture
def sample_outline() -> str:
    return SAMPLE_OUTLINE


@pytest.fixture
def fake_measurer() -> FakeMeasurer:
    return FakeMeasurer()


@pytest_asyncio.fixture
async def client():
    """Async HTTP test client against the real FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def ok_plan_service():
    """Override generation with a service that returns SAMPLE_OUTLINE."""
    service = FakePlanService(PlanOutcome.ok(SAMPLE_OUTLINE, model="fake-model"))
    app.dependency_overrides[get_plan_generation_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_plan_generation_service, None)


@pytest.fixture
def fallback_plan_service():
    """Override generation with a service that always falls back."""
    service = FakePlanService(PlanOutcome.fallback(FallbackReason.GENERATION_ERROR))
    app.dependency_overrides[get_plan_generation_service] = lambda: service
    yield service
    app.dependency_overrides.pop(get_plan_generation_service, None)
