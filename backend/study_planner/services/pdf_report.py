"""
PDF study plan generator — converts outline text into a paginated PDF.

Pipeline:
1. outline_parser classifies each line (header, time estimate, topic, ...)
2. PlanLayoutEngine places every line on A4 pages (positions, fonts, colors)
3. This module replays the resulting Document onto a ReportLab canvas

Why a canvas and not Platypus? Platypus decides its own pagination.
Here the layout engine owns pagination (so it can be tested without a
PDF backend), and the PDF side only has to draw what it's told.

Key ReportLab concepts:
- canvas.Canvas: a low-level page you draw strings and lines on
- Coordinates are in points with the origin at the BOTTOM-left, so we
  flip the layout's top-left millimetre coordinates when drawing
- showPage(): finishes the current page and starts a new one
- invariant=1: no timestamps/random IDs in the output, so the same
  plan always produces the same bytes
"""

import traceback
from io import BytesIO
from typing import Optional, Protocol

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from study_planner.models import Document, DrawOp
from study_planner.services.layout import PlanLayoutEngine, PlanStyle
from study_planner.services.text_metrics import ReportLabTextMeasurer

BRAND_MUTED = colors.HexColor("#718096")    # Medium gray, page numbers
FOOTER_OFFSET_MM = 7.0


class RenderingError(Exception):
    """Raised when a Document can't be produced or written as a PDF."""


class PageBackend(Protocol):
    def draw_text(self, op: DrawOp) -> None: ...
    def draw_rule(self, op: DrawOp) -> None: ...
    def new_page(self) -> None: ...
    def finish(self) -> bytes: ...


class ReportLabCanvasBackend:
    """Draws DrawOps onto a ReportLab canvas.

    All inputs are millimetres, top-left origin. Outputs PDF bytes.
    """

    def __init__(self, document: Document, page_numbers: bool = True):
        self.buffer = BytesIO()
        self.page_size = (document.page_width * mm, document.page_height * mm)
        self.page_numbers = page_numbers
        self.page_number = 1

        self.canvas = canvas.Canvas(self.buffer, pagesize=self.page_size, invariant=1)
        self.canvas.setTitle(f"{document.title} - {document.subject}")
        self.canvas.setAuthor("Gerador de Plano de Estudo Expert")
        self.canvas.setSubject(document.subject)

    def _y(self, y_mm: float) -> float:
        """Flip a top-left millimetre y into a bottom-left point y."""
        return self.page_size[1] - y_mm * mm

    def draw_text(self, op: DrawOp) -> None:
        c = self.canvas
        c.setFont(op.font, op.size)
        c.setFillColor(colors.HexColor(op.color))
        if op.align == "center":
            c.drawCentredString(op.x * mm, self._y(op.y), op.text)
        else:
            c.drawString(op.x * mm, self._y(op.y), op.text)

    def draw_rule(self, op: DrawOp) -> None:
        c = self.canvas
        c.setStrokeColor(colors.HexColor(op.color))
        c.line(op.x * mm, self._y(op.y), op.x_end * mm, self._y(op.y))

    def new_page(self) -> None:
        self._finish_page()
        self.page_number += 1

    def finish(self) -> bytes:
        self._finish_page()
        self.canvas.save()
        return self.buffer.getvalue()

    def _finish_page(self) -> None:
        if self.page_numbers:
            self._add_page_number()
        self.canvas.showPage()

    def _add_page_number(self) -> None:
        """Add the page number below the bottom margin."""
        c = self.canvas
        c.saveState()
        c.setFont("Helvetica", 8)
        c.setFillColor(BRAND_MUTED)
        c.drawCentredString(
            self.page_size[0] / 2, FOOTER_OFFSET_MM * mm,
            f"Página {self.page_number}",
        )
        c.restoreState()


class StudyPlanPDFGenerator:
    """Generates the study plan PDF from raw outline text.

    Usage:
        generator = StudyPlanPDFGenerator()
        pdf_bytes = generator.generate_study_plan(
            subject="React com TypeScript",
            outline_text="1. Fundamentos\\nTempo Estimado: 10-15 horas\\n...",
        )

    Any failure (layout, font metrics, canvas) surfaces as RenderingError.
    Callers show one generic notice; the outline itself is untouched.
    """

    def __init__(self, style: Optional[PlanStyle] = None, page_numbers: bool = True):
        self.engine = PlanLayoutEngine(ReportLabTextMeasurer(), style)
        self.page_numbers = page_numbers

    # ------------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------------

    def build_document(self, subject: str, outline_text: str) -> Document:
        """Lay out the plan without producing bytes (used for previews)."""
        try:
            return self.engine.layout(subject, outline_text)
        except Exception as e:
            print(f"❌ Study plan layout failed: {str(e)}")
            traceback.print_exc()
            raise RenderingError(f"Layout failed: {str(e)}") from e

    def generate_study_plan(self, subject: str, outline_text: str) -> bytes:
        """Lay out and write the plan. Returns raw PDF bytes."""
        document = self.build_document(subject, outline_text)
        return self.write(document)

    def write(self, document: Document) -> bytes:
        """Replay a laid-out Document onto a ReportLab canvas."""
        try:
            return self.replay(document, ReportLabCanvasBackend(document, self.page_numbers))
        except RenderingError:
            raise
        except Exception as e:
            print(f"❌ PDF rendering failed: {str(e)}")
            traceback.print_exc()
            raise RenderingError(f"PDF rendering failed: {str(e)}") from e

    @staticmethod
    def replay(document: Document, backend: PageBackend) -> bytes:
        """Drive any PageBackend through the document, page by page."""
        for i, page in enumerate(document.pages):
            if i > 0:
                backend.new_page()
            for op in page.ops:
                if op.kind == "text":
                    backend.draw_text(op)
                elif op.kind == "rule":
                    backend.draw_rule(op)
                # "gap" ops only moved the cursor; nothing to draw
        return backend.finish()
