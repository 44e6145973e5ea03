"""
Integration tests for the Study Plan API.

Generation is swapped for a FakePlanService (see conftest), so these
tests cover the HTTP layer: validation, fallbacks, layout JSON and PDF
downloads.
"""

import pytest
from httpx import AsyncClient

from study_planner.models import FALLBACK_MESSAGES, FallbackReason
from study_planner.services import pdf_report


@pytest.mark.asyncio
async def test_create_plan_success(client: AsyncClient, ok_plan_service, sample_outline):
    """POST /api/v1/plans returns the generated outline."""
    response = await client.post("/api/v1/plans", json={"subject": "  Física Quântica "})

    assert response.status_code == 200
    data = response.json()
    assert data["subject"] == "Física Quântica"
    assert data["outline_text"] == sample_outline
    assert data["status"] == "ok"
    assert data["fallback_reason"] is None
    assert data["filename"] == "plano-de-estudo-física-quântica.pdf"
    assert ok_plan_service.subjects == ["Física Quântica"]


@pytest.mark.asyncio
async def test_create_plan_fallback_is_not_an_error(client: AsyncClient, fallback_plan_service):
    """Generation failures come back as a readable placeholder, still 200."""
    response = await client.post("/api/v1/plans", json={"subject": "React"})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "fallback"
    assert data["fallback_reason"] == "generation_error"
    assert data["outline_text"] == FALLBACK_MESSAGES[FallbackReason.GENERATION_ERROR]


@pytest.mark.asyncio
async def test_create_plan_blank_subject(client: AsyncClient, ok_plan_service):
    """POST /api/v1/plans rejects a whitespace-only subject."""
    response = await client.post("/api/v1/plans", json={"subject": "   "})

    assert response.status_code == 422
    assert ok_plan_service.subjects == []


@pytest.mark.asyncio
async def test_create_plan_missing_subject(client: AsyncClient, ok_plan_service):
    response = await client.post("/api/v1/plans", json={})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_layout_plan(client: AsyncClient, sample_outline):
    """POST /api/v1/plans/document returns the laid-out pages."""
    response = await client.post(
        "/api/v1/plans/document",
        json={"subject": "Assunto", "outline_text": sample_outline},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Plano de Estudo Expert"
    assert data["page_width"] == 210.0
    assert len(data["pages"]) == 1

    roles = [op["role"] for op in data["pages"][0]["ops"] if op["line"] is not None]
    assert roles == [
        "section_header",
        "time_estimate",
        "topic_with_description",
        "topic_with_description",
        "blank",
        "section_header",
    ]


@pytest.mark.asyncio
async def test_download_plan_pdf(client: AsyncClient, sample_outline):
    """POST /api/v1/plans/pdf returns a PDF attachment."""
    response = await client.post(
        "/api/v1/plans/pdf",
        json={"subject": "Teoria Musical", "outline_text": sample_outline},
    )

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert "attachment" in response.headers["content-disposition"]
    assert "plano-de-estudo-teoria-musical.pdf" in response.headers["content-disposition"]
    # PDF files start with %PDF
    assert response.content[:5] == b"%PDF-"


@pytest.mark.asyncio
async def test_download_plan_pdf_with_accented_subject(client: AsyncClient, sample_outline):
    response = await client.post(
        "/api/v1/plans/pdf",
        json={"subject": "Física Quântica", "outline_text": sample_outline},
    )

    assert response.status_code == 200
    assert "filename*=UTF-8''" in response.headers["content-disposition"]


@pytest.mark.asyncio
async def test_download_plan_pdf_rendering_failure(client: AsyncClient, monkeypatch):
    """Rendering failures surface as one generic notice."""
    def broken_write(self, document):
        raise pdf_report.RenderingError("backend unavailable")

    monkeypatch.setattr(pdf_report.StudyPlanPDFGenerator, "write", broken_write)

    response = await client.post(
        "/api/v1/plans/pdf",
        json={"subject": "Assunto", "outline_text": "1. Fundamentos"},
    )

    assert response.status_code == 500
    assert response.json()["detail"] == "Não foi possível gerar o PDF. Tente novamente."


@pytest.mark.asyncio
async def test_download_plan_pdf_requires_subject(client: AsyncClient):
    response = await client.post(
        "/api/v1/plans/pdf",
        json={"subject": "", "outline_text": "1. Fundamentos"},
    )

    assert response.status_code == 422
