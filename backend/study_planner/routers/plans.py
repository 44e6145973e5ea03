"""
Study plan API endpoints.

1. POST /plans          — Generate a plan for a subject (calls Claude)
2. POST /plans/document — Lay out a plan and return the pages as JSON
3. POST /plans/pdf      — Download a plan as a PDF

Nothing is stored. The client keeps the plan text it got from step 1
and sends it back for steps 2 and 3, so exporting never changes what
the user is looking at. If rendering fails the client gets one generic
notice and keeps its plan.
"""

import asyncio

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from study_planner.schemas.plans import (
    DocumentResponse,
    PlanRequest,
    PlanResponse,
    RenderRequest,
)
from study_planner.services.pdf_report import RenderingError, StudyPlanPDFGenerator
from study_planner.services.plan_generation import (
    PlanGenerationService,
    get_plan_generation_service,
)
from study_planner.services.session import content_disposition, export_filename

router = APIRouter(prefix="/api/v1/plans", tags=["plans"])

RENDERING_FAILED_DETAIL = "Não foi possível gerar o PDF. Tente novamente."


@router.post("", response_model=PlanResponse)
async def create_plan(
    request: PlanRequest,
    service: PlanGenerationService = Depends(get_plan_generation_service),
):
    """Generate a study plan outline.

    Always answers 200: generation failures come back as a fallback
    sentence (status="fallback") that the client shows like any plan.
    The Anthropic SDK is blocking, so it runs in a thread pool.
    """
    outcome = await asyncio.to_thread(service.generate, request.subject)

    return PlanResponse(
        subject=request.subject,
        outline_text=outcome.text,
        status=outcome.status,
        fallback_reason=outcome.reason.value if outcome.reason else None,
        filename=export_filename(request.subject),
    )


@router.post("/document", response_model=DocumentResponse)
async def layout_plan(request: RenderRequest):
    """Lay out the plan and return every page's draw operations."""
    generator = StudyPlanPDFGenerator()
    try:
        document = generator.build_document(request.subject, request.outline_text)
    except RenderingError:
        raise HTTPException(status_code=500, detail=RENDERING_FAILED_DETAIL)

    return DocumentResponse.model_validate(document)


@router.post("/pdf")
async def download_plan_pdf(request: RenderRequest):
    """Download the plan as a PDF.

    Generated on the fly — ReportLab renders a plan in well under a
    second, so there's nothing to cache.
    """
    generator = StudyPlanPDFGenerator()
    try:
        pdf_bytes = generator.generate_study_plan(
            subject=request.subject,
            outline_text=request.outline_text,
        )
    except RenderingError:
        raise HTTPException(status_code=500, detail=RENDERING_FAILED_DETAIL)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": content_disposition(request.subject)},
    )
