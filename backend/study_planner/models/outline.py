"""
Outline line model.

A study plan arrives as plain text, one outline entry per line. Each line
is classified into exactly one LineRole; the classification plus the few
attributes the layout engine needs live on ClassifiedLine.
"""

from dataclasses import dataclass
from enum import Enum


class LineRole(str, Enum):
    """Structural role of a single outline line."""
    BLANK = "blank"
    SECTION_HEADER = "section_header"
    TIME_ESTIMATE = "time_estimate"
    TOPIC_WITH_DESCRIPTION = "topic_with_description"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class ClassifiedLine:
    """One newline-delimited outline line with its derived attributes."""
    index: int                  # 0-based position in the outline
    raw: str                    # Untrimmed line as received
    raw_indent: int             # Leading whitespace characters
    trimmed: str
    role: LineRole

    @property
    def topic_title(self) -> str:
        """Text up to and including the first colon."""
        if self.role is not LineRole.TOPIC_WITH_DESCRIPTION:
            return ""
        return self.trimmed.split(":")[0] + ":"

    @property
    def topic_description(self) -> str:
        """Everything after the first colon, colons preserved, trimmed."""
        if self.role is not LineRole.TOPIC_WITH_DESCRIPTION:
            return ""
        return ":".join(self.trimmed.split(":")[1:]).strip()
