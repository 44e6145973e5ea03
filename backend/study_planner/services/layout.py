"""
Layout / pagination engine — turns classified outline lines into pages.

This is the heart of the PDF export. It walks the outline top to bottom
with a RenderCursor (page index + vertical position), and for each line:

1. Works out how much vertical space the line needs (wrapped lines count)
2. Starts a new page if that space doesn't fit above the bottom margin
3. Emits positioned draw operations using the role's style
4. Advances the cursor

The engine is a pure function of (subject, outline text, style): no I/O,
no shared state. Two runs with the same inputs produce equal Documents.

Units are millimetres on an A4 page with a top-left origin, matching the
way the plan was originally laid out. The PDF writer converts to points.

Style table:
    SectionHeader  bold 14, dark cyan, gap before/after
    TimeEstimate   italic 9, muted gray, slightly indented
    Topic          bold title + normal description, wrapped
    PlainText      normal 10, wrapped
    Blank          small vertical gap, nothing drawn
"""

from dataclasses import dataclass, field

from study_planner.models import (
    ClassifiedLine,
    Document,
    DrawOp,
    LineRole,
    Page,
    RenderCursor,
)
from study_planner.services.outline_parser import classify_outline
from study_planner.services.text_metrics import TextMeasurer

DOCUMENT_TITLE = "Plano de Estudo Expert"

# --- Palette ---
TEXT_DEFAULT = "#000000"
ACCENT_CYAN = "#006980"      # Section headers
MUTED_GRAY = "#787878"       # Time estimates
SUBJECT_GRAY = "#505050"
RULE_GRAY = "#C8C8C8"


@dataclass(frozen=True)
class PageGeometry:
    """A4 in millimetres."""
    width: float = 210.0
    height: float = 297.0
    margin: float = 15.0

    @property
    def bottom_limit(self) -> float:
        return self.height - self.margin


@dataclass(frozen=True)
class TextStyle:
    font: str
    size: float
    color: str = TEXT_DEFAULT


@dataclass(frozen=True)
class PlanStyle:
    """Every tunable of the layout in one place."""
    geometry: PageGeometry = field(default_factory=PageGeometry)

    # Preamble
    title: TextStyle = TextStyle("Helvetica-Bold", 22)
    subject: TextStyle = TextStyle("Helvetica", 16, SUBJECT_GRAY)
    rule_color: str = RULE_GRAY
    title_advance: float = 10.0
    subject_advance: float = 12.0
    rule_advance: float = 10.0

    # Section headers
    section_header: TextStyle = TextStyle("Helvetica-Bold", 14, ACCENT_CYAN)
    header_gap_before: float = 6.0
    header_keep_space: float = 15.0
    header_advance: float = 8.0

    # Time estimates
    time_estimate: TextStyle = TextStyle("Helvetica-Oblique", 9, MUTED_GRAY)
    time_estimate_indent: float = 2.0
    time_estimate_space: float = 10.0
    time_estimate_advance: float = 8.0

    # Topics with descriptions
    topic_title: TextStyle = TextStyle("Helvetica-Bold", 10)
    topic_description: TextStyle = TextStyle("Helvetica", 10)
    topic_min_space: float = 12.0
    topic_line_height: float = 4.0
    description_gap: float = 2.0
    min_description_width: float = 30.0

    # Everything else
    plain_text: TextStyle = TextStyle("Helvetica", 10)
    plain_line_height: float = 5.0
    indent_scale: float = 1.5
    blank_gap: float = 3.0


class PlanLayoutEngine:
    """Lays out a study plan into a paginated Document.

    Usage:
        engine = PlanLayoutEngine(ReportLabTextMeasurer())
        document = engine.layout("Física Quântica", outline_text)
        for page in document.pages:
            for op in page.ops:
                ...
    """

    def __init__(self, measurer: TextMeasurer, style: PlanStyle | None = None):
        self.measurer = measurer
        self.style = style or PlanStyle()

    # ------------------------------------------------------------------
    # PUBLIC API
    # ------------------------------------------------------------------

    def layout(self, subject: str, outline_text: str) -> Document:
        """Classify the outline and lay it out, preamble first."""
        return self.layout_lines(subject, classify_outline(outline_text))

    def layout_lines(self, subject: str, lines: list[ClassifiedLine]) -> Document:
        geometry = self.style.geometry
        document = Document(
            title=DOCUMENT_TITLE,
            subject=subject,
            page_width=geometry.width,
            page_height=geometry.height,
            pages=[Page(number=1)],
        )
        run = _LayoutRun(document, self.measurer, self.style)
        run.preamble()
        for line in lines:
            run.place(line)
        return document


class _LayoutRun:
    """State for a single layout pass. Never shared between documents."""

    def __init__(self, document: Document, measurer: TextMeasurer, style: PlanStyle):
        self.document = document
        self.measurer = measurer
        self.style = style
        self.geometry = style.geometry
        self.cursor = RenderCursor(page_index=0, y=self.geometry.margin)

    # --- Cursor and pages ---

    def new_page(self) -> None:
        self.document.pages.append(Page(number=len(self.document.pages) + 1))
        self.cursor.page_index += 1
        self.cursor.y = self.geometry.margin

    def ensure_space(self, needed: float) -> None:
        """Break the page if `needed` doesn't fit above the bottom margin.

        Already at the top of a page, a break can't gain any room.
        """
        at_top = self.cursor.y <= self.geometry.margin
        if self.cursor.y + needed > self.geometry.bottom_limit and not at_top:
            self.new_page()

    def emit(self, op: DrawOp) -> None:
        self.document.pages[self.cursor.page_index].ops.append(op)

    def text(self, text: str, x: float, style: TextStyle, line: ClassifiedLine | None = None,
             align: str = "left") -> None:
        self.emit(DrawOp(
            kind="text",
            x=x,
            y=self.cursor.y,
            text=text,
            font=style.font,
            size=style.size,
            color=style.color,
            align=align,
            role=line.role if line is not None else None,
            line=line.index if line is not None else None,
        ))

    def segments(self, segments: list[str], x: float, style: TextStyle,
                 line_height: float, line: ClassifiedLine) -> None:
        """Emit wrapped segments one per line height.

        Blocks taller than a whole page continue on the next page rather
        than running past the bottom margin.
        """
        for segment in segments:
            self.ensure_space(line_height)
            self.emit(DrawOp(
                kind="text", x=x, y=self.cursor.y, text=segment,
                font=style.font, size=style.size, color=style.color,
                role=line.role, line=line.index,
            ))
            self.cursor.y += line_height

    def left_offset(self, line: ClassifiedLine) -> float:
        return self.geometry.margin + line.raw_indent * self.style.indent_scale

    # --- Preamble ---

    def preamble(self) -> None:
        """Title, subject and a horizontal rule, top of page 1 only."""
        s = self.style
        center = self.geometry.width / 2

        self.text(self.document.title, center, s.title, align="center")
        self.cursor.y += s.title_advance

        self.text(self.document.subject, center, s.subject, align="center")
        self.cursor.y += s.subject_advance

        self.emit(DrawOp(
            kind="rule",
            x=self.geometry.margin,
            x_end=self.geometry.width - self.geometry.margin,
            y=self.cursor.y,
            color=s.rule_color,
        ))
        self.cursor.y += s.rule_advance

    # --- Per-role placement ---

    def place(self, line: ClassifiedLine) -> None:
        placer = {
            LineRole.BLANK: self.place_blank,
            LineRole.SECTION_HEADER: self.place_section_header,
            LineRole.TIME_ESTIMATE: self.place_time_estimate,
            LineRole.TOPIC_WITH_DESCRIPTION: self.place_topic,
            LineRole.PLAIN_TEXT: self.place_plain_text,
        }[line.role]
        placer(line)

    def place_blank(self, line: ClassifiedLine) -> None:
        gap = self.style.blank_gap
        self.emit(DrawOp(
            kind="gap", x=self.geometry.margin, y=self.cursor.y,
            height=gap, role=line.role, line=line.index,
        ))
        self.cursor.y += gap
        self.ensure_space(0)

    def place_section_header(self, line: ClassifiedLine) -> None:
        s = self.style
        self.cursor.y += s.header_gap_before
        # Ask for more than the header itself so it isn't stranded
        # at the bottom of a page (best effort only).
        self.ensure_space(s.header_keep_space)
        self.text(line.trimmed, self.geometry.margin, s.section_header, line)
        self.cursor.y += s.header_advance

    def place_time_estimate(self, line: ClassifiedLine) -> None:
        s = self.style
        self.ensure_space(s.time_estimate_space)
        self.text(
            line.trimmed,
            self.geometry.margin + s.time_estimate_indent,
            s.time_estimate,
            line,
        )
        self.cursor.y += s.time_estimate_advance

    def place_topic(self, line: ClassifiedLine) -> None:
        s = self.style
        x = self.left_offset(line)
        title = line.topic_title
        description = line.topic_description

        if not description:
            self.ensure_space(s.topic_min_space)
            self.text(title, x, s.topic_title, line)
            self.cursor.y += s.topic_line_height
            return

        title_width = self.measurer.measure(title, s.topic_title.font, s.topic_title.size)
        description_x = x + title_width + s.description_gap
        available = self.geometry.width - description_x - self.geometry.margin
        wrapped = self.measurer.wrap_to_width(
            description,
            s.topic_description.font,
            s.topic_description.size,
            max(available, s.min_description_width),
        )

        self.ensure_space(max(s.topic_min_space, len(wrapped) * s.topic_line_height))
        self.text(title, x, s.topic_title, line)
        self.segments(wrapped, description_x, s.topic_description, s.topic_line_height, line)

    def place_plain_text(self, line: ClassifiedLine) -> None:
        s = self.style
        x = self.left_offset(line)
        wrapped = self.measurer.wrap_to_width(
            line.trimmed,
            s.plain_text.font,
            s.plain_text.size,
            max(self.geometry.width - x - self.geometry.margin, s.min_description_width),
        )
        self.ensure_space(len(wrapped) * s.plain_line_height)
        self.segments(wrapped, x, s.plain_text, s.plain_line_height, line)
