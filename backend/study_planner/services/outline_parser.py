"""
Outline line classifier.

The generated plan is "semi-structured": the prompt asks for a numbered
outline, but nothing guarantees the model follows it. So instead of
parsing a grammar we classify each line on its own, using an ordered
table of (predicate, role) rules. The first rule that matches wins.

Precedence matters:
    "Tempo Estimado: 40-60 horas" contains a colon, but must render as a
    time estimate, so TIME_ESTIMATE is checked before TOPIC_WITH_DESCRIPTION.

The last rule always matches, so every line gets exactly one role and
there is no "unparseable line" failure mode.
"""

import re
from typing import Callable

from study_planner.models import ClassifiedLine, LineRole

TIME_ESTIMATE_MARKER = "tempo estimado"

_SECTION_HEADER = re.compile(r"^\d\.\s")
_SUB_NUMBERED = re.compile(r"^\d\.\d")


def _is_blank(trimmed: str) -> bool:
    return not trimmed


def _is_section_header(trimmed: str) -> bool:
    """Single digit, period, space ("1. Fundamentos"), but never "1.1"."""
    return bool(_SECTION_HEADER.match(trimmed)) and not _SUB_NUMBERED.match(trimmed)


def _is_time_estimate(trimmed: str) -> bool:
    return trimmed.lower().startswith(TIME_ESTIMATE_MARKER)


def _has_description(trimmed: str) -> bool:
    return ":" in trimmed


# Evaluated top to bottom, first match wins.
CLASSIFICATION_RULES: tuple[tuple[Callable[[str], bool], LineRole], ...] = (
    (_is_blank, LineRole.BLANK),
    (_is_section_header, LineRole.SECTION_HEADER),
    (_is_time_estimate, LineRole.TIME_ESTIMATE),
    (_has_description, LineRole.TOPIC_WITH_DESCRIPTION),
    (lambda trimmed: True, LineRole.PLAIN_TEXT),
)


def classify_role(trimmed: str) -> LineRole:
    """Return the role of an already-trimmed line."""
    for predicate, role in CLASSIFICATION_RULES:
        if predicate(trimmed):
            return role
    return LineRole.PLAIN_TEXT


def classify_line(raw: str, index: int = 0) -> ClassifiedLine:
    """Classify a single untrimmed line."""
    trimmed = raw.strip()
    raw_indent = len(raw) - len(raw.lstrip())
    return ClassifiedLine(
        index=index,
        raw=raw,
        raw_indent=raw_indent,
        trimmed=trimmed,
        role=classify_role(trimmed),
    )


def classify_outline(outline_text: str) -> list[ClassifiedLine]:
    """Split outline text on newlines and classify every line.

    An empty string yields a single BLANK line, so even an empty plan
    produces a (mostly empty) document rather than nothing.
    """
    return [
        classify_line(raw, index)
        for index, raw in enumerate(outline_text.split("\n"))
    ]
