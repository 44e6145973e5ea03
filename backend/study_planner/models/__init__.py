from study_planner.models.document import DrawOp, Document, Page, RenderCursor
from study_planner.models.outline import ClassifiedLine, LineRole
from study_planner.models.plan import FALLBACK_MESSAGES, FallbackReason, PlanOutcome

__all__ = [
    "ClassifiedLine",
    "LineRole",
    "DrawOp",
    "Page",
    "Document",
    "RenderCursor",
    "FallbackReason",
    "FALLBACK_MESSAGES",
    "PlanOutcome",
]
