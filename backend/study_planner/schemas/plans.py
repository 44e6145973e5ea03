"""
Pydantic schemas for the Study Plan API.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from study_planner.models import LineRole


class PlanRequest(BaseModel):
    """Request to generate a study plan."""
    subject: str = Field(..., min_length=1, max_length=200)

    @field_validator("subject")
    @classmethod
    def subject_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("subject must not be blank")
        return v


class PlanResponse(BaseModel):
    """Generated plan text (a real outline or a fallback sentence)."""
    subject: str
    outline_text: str
    status: str                          # "ok" | "fallback"
    fallback_reason: Optional[str] = None
    filename: str


class RenderRequest(BaseModel):
    """A plan the client already has, to be laid out or exported."""
    subject: str = Field(..., min_length=1, max_length=200)
    outline_text: str

    @field_validator("subject")
    @classmethod
    def subject_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("subject must not be blank")
        return v


class DrawOpResponse(BaseModel):
    kind: str
    x: float
    y: float
    text: str = ""
    font: Optional[str] = None
    size: Optional[float] = None
    color: Optional[str] = None
    align: str = "left"
    role: Optional[LineRole] = None
    line: Optional[int] = None
    x_end: Optional[float] = None
    height: float = 0.0

    model_config = {"from_attributes": True}


class PageResponse(BaseModel):
    number: int
    ops: list[DrawOpResponse]

    model_config = {"from_attributes": True}


class DocumentResponse(BaseModel):
    """Laid-out document (millimetres, top-left origin)."""
    title: str
    subject: str
    page_width: float
    page_height: float
    pages: list[PageResponse]

    model_config = {"from_attributes": True}
