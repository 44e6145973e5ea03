"""
Paginated document model produced by the layout engine.

Coordinates are in millimetres with a top-left origin; `y` is the text
baseline. The PDF writer converts to points when it replays the document.
"""

from dataclasses import asdict, dataclass, field
from typing import Optional

from study_planner.models.outline import LineRole


@dataclass(frozen=True)
class DrawOp:
    """A single positioned operation on a page.

    kind is one of:
    - "text": draw `text` at (x, y) with font/size/color
    - "rule": horizontal line from x to x_end at y
    - "gap":  vertical advance only, nothing drawn (blank outline lines)
    """
    kind: str
    x: float
    y: float
    text: str = ""
    font: Optional[str] = None
    size: Optional[float] = None
    color: Optional[str] = None
    align: str = "left"
    role: Optional[LineRole] = None
    line: Optional[int] = None          # Source outline line index
    x_end: Optional[float] = None
    height: float = 0.0


@dataclass
class Page:
    number: int
    ops: list[DrawOp] = field(default_factory=list)


@dataclass
class Document:
    """Ordered pages ready for byte-level output."""
    title: str
    subject: str
    page_width: float
    page_height: float
    pages: list[Page] = field(default_factory=list)

    def ops_for_line(self, line_index: int) -> list[DrawOp]:
        """All operations emitted for one outline line, across pages."""
        return [
            op for page in self.pages for op in page.ops
            if op.line == line_index
        ]

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class RenderCursor:
    """Current page and vertical position during one layout run."""
    page_index: int = 0
    y: float = 0.0
