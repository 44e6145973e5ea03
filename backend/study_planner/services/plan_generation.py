"""
Study plan generation service — asks Claude for an outline on a subject.

This service:
1. Builds the study plan prompt (from prompts.py)
2. Sends it to Claude via the Anthropic API (ONE attempt, no retry)
3. Extracts the single fenced code block holding the outline
4. Falls back to a fixed Portuguese sentence if anything goes wrong

It never raises. Callers always get a PlanOutcome:
- Ok(text): a real outline, ready for the PDF layout
- Fallback(reason): the API failed, or the response had no code block
"""

import re
import traceback

import anthropic

from study_planner.config import settings
from study_planner.models import FallbackReason, PlanOutcome
from study_planner.services.prompts import SYSTEM_PROMPT, build_study_plan_prompt

# ```lang\n ... ```, the optional language tag line is dropped
_FENCED_BLOCK = re.compile(r"```(?:[A-Za-z][\w+-]*[ \t]*\n)?(.*?)```", re.DOTALL)


def extract_outline(response_text: str) -> str | None:
    """Return the trimmed contents of the first fenced block, or None."""
    match = _FENCED_BLOCK.search(response_text or "")
    if not match:
        return None
    outline = match.group(1).strip()
    return outline or None


class PlanGenerationService:
    """Generates study plan outlines with Claude.

    Usage:
        service = PlanGenerationService()
        outcome = service.generate("Física Quântica")
        if outcome.is_fallback:
            print(outcome.reason)
        print(outcome.text)
    """

    def __init__(self, client=None, model: str | None = None):
        self.client = client or anthropic.Anthropic(api_key=settings.ANTHROPIC_API_KEY)
        self.model = model or settings.ANTHROPIC_MODEL

    def generate(self, subject: str) -> PlanOutcome:
        """Generate a study plan outline for `subject`.

        This is a BLOCKING call. From async code, run it in a thread
        pool via asyncio.to_thread().
        """
        print(f"🧠 Generating study plan for: {subject}")

        try:
            message = self.client.messages.create(
                model=self.model,
                max_tokens=settings.PLAN_MAX_TOKENS,
                temperature=settings.PLAN_TEMPERATURE,
                system=SYSTEM_PROMPT,
                messages=[
                    {"role": "user", "content": build_study_plan_prompt(subject)}
                ],
            )
            response_text = message.content[0].text
        except Exception as e:
            print(f"❌ Study plan generation failed: {str(e)}")
            traceback.print_exc()
            return PlanOutcome.fallback(FallbackReason.GENERATION_ERROR, model=self.model)

        api_usage = getattr(message, "usage", None)
        usage = {
            "input_tokens": getattr(api_usage, "input_tokens", 0),
            "output_tokens": getattr(api_usage, "output_tokens", 0),
            "model": self.model,
        }

        outline = extract_outline(response_text)
        if outline is None:
            print(f"⚠️ No outline code block in response for: {subject}")
            return PlanOutcome.fallback(FallbackReason.NO_OUTLINE, **usage)

        print(f"✅ Study plan ready: {len(outline.splitlines())} lines")
        return PlanOutcome.ok(outline, **usage)


def get_plan_generation_service() -> PlanGenerationService:
    """FastAPI dependency — one service per request."""
    return PlanGenerationService()
