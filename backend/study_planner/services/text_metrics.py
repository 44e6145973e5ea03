"""
Text measurement and word wrapping.

The layout engine needs two things from a text backend:
- measure(): how wide is this string in this font/size?
- wrap_to_width(): split this string into lines that fit a width.

Both are behind the TextMeasurer protocol so the engine doesn't care
whether widths come from ReportLab's font metrics or from a fake in
the test suite. All widths are in millimetres, the layout unit.
"""

from typing import Callable, Protocol

from reportlab.lib.units import mm
from reportlab.pdfbase.pdfmetrics import stringWidth


class TextMeasurer(Protocol):
    def measure(self, text: str, font: str, size: float) -> float: ...

    def wrap_to_width(
        self, text: str, font: str, size: float, max_width: float,
    ) -> list[str]: ...


def wrap_words(text: str, max_width: float, width_of: Callable[[str], float]) -> list[str]:
    """Greedy word wrap.

    Words are never split. A word wider than max_width on its own is
    placed alone on its own line. Whitespace-only input returns [].
    """
    words = text.split()
    if not words:
        return []

    lines: list[str] = []
    current: list[str] = []

    for word in words:
        candidate = " ".join(current + [word])
        if width_of(candidate) <= max_width:
            current.append(word)
            continue

        if current:
            lines.append(" ".join(current))
            # Oversized words still get a line to themselves
            if width_of(word) > max_width:
                lines.append(word)
                current = []
            else:
                current = [word]
        else:
            lines.append(word)

    if current:
        lines.append(" ".join(current))

    return lines


class ReportLabTextMeasurer:
    """Measures text with the standard PDF font metrics bundled in ReportLab.

    Usage:
        measurer = ReportLabTextMeasurer()
        measurer.measure("1.1.1. Variáveis:", "Helvetica-Bold", 10)   # mm
        measurer.wrap_to_width(long_text, "Helvetica", 10, 120)
    """

    def measure(self, text: str, font: str, size: float) -> float:
        return stringWidth(text, font, size) / mm

    def wrap_to_width(
        self, text: str, font: str, size: float, max_width: float,
    ) -> list[str]:
        return wrap_words(text, max_width, lambda s: self.measure(s, font, size))
