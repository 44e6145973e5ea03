"""
Client screen state — Idle, Loading, Result — as plain values.

The browser client shows exactly one of three screens:
    Idle     → the subject form
    Loading  → the progress indicator while the plan is generated
    Result   → the plan text, with "Gerar PDF" and "Novo Plano" buttons

Instead of juggling separate plan/subject/isLoading flags, the state is
one of three immutable variants and every transition is a pure function
that returns the next state. Invalid transitions return the state as-is.

The PDF renderer never reads or writes this state: exporting is a side
operation, and a failed export leaves the Result screen unchanged.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Union
from urllib.parse import quote

from study_planner.models import PlanOutcome


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    subject: str


@dataclass(frozen=True)
class Result:
    subject: str
    outcome: PlanOutcome

    @property
    def outline_text(self) -> str:
        return self.outcome.text


PlanState = Union[Idle, Loading, Result]


def submit(state: PlanState, subject: str) -> PlanState:
    """User submits the form. Ignored while loading or for blank subjects."""
    subject = subject.strip()
    if isinstance(state, Loading) or not subject:
        return state
    return Loading(subject=subject)


def complete(state: PlanState, outcome: PlanOutcome) -> PlanState:
    """Generation settled (Ok or Fallback). Only meaningful while loading."""
    if not isinstance(state, Loading):
        return state
    return Result(subject=state.subject, outcome=outcome)


def reset(state: PlanState) -> PlanState:
    """'Novo Plano' — back to the empty form."""
    return Idle()


def can_export(state: PlanState) -> bool:
    return isinstance(state, Result)


# --- Export file name ---

def export_basename(subject: str) -> str:
    """Lowercased subject with whitespace runs replaced by hyphens."""
    return re.sub(r"\s+", "-", subject.strip().lower())


def export_filename(subject: str) -> str:
    return f"plano-de-estudo-{export_basename(subject)}.pdf"


def content_disposition(subject: str) -> str:
    """Attachment header with an ASCII fallback plus the UTF-8 name."""
    filename = export_filename(subject)
    ascii_name = (
        unicodedata.normalize("NFKD", filename)
        .encode("ascii", "ignore")
        .decode("ascii")
        .replace('"', "")
    )
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
