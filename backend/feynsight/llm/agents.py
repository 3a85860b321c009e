"""The three model-backed agents: intent router, theorist and teacher.

Every agent degrades instead of failing: without a key, on quota errors, or on
unusable output each one returns a deterministic local answer.
"""

from __future__ import annotations

import logging

from feynsight.llm.client import LLMNotConfiguredError, invoke_model, is_configured
from feynsight.llm.local_theorist import run_local_theorist
from feynsight.llm.parsing import ModelOutputError, parse_task, parse_theorist_output
from feynsight.llm.prompts import get_prompt_template
from feynsight.llm.retry import QuotaExceededError
from feynsight.models.diagram import PropagatorKind, TheoristResult, Topology, VisualData

logger = logging.getLogger(__name__)

PLAN_TOPOLOGY = "PLAN_TOPOLOGY"
ANALYZE_THEORY = "ANALYZE_THEORY"
CHAT = "CHAT"


async def classify_intent(query: str) -> str:
    """ANALYZE_THEORY, PLAN_TOPOLOGY or CHAT. Falls back to PLAN_TOPOLOGY."""
    if not is_configured():
        return PLAN_TOPOLOGY
    try:
        answer = await invoke_model("intent", get_prompt_template("intent").format(), query)
    except QuotaExceededError:
        logger.warning("Intent router quota exceeded, defaulting to %s", PLAN_TOPOLOGY)
        return PLAN_TOPOLOGY
    except Exception as e:
        logger.error("Intent router error: %s", e)
        return PLAN_TOPOLOGY
    return parse_task(answer)


def _chat_passthrough(query: str) -> TheoristResult:
    return TheoristResult(
        status="valid",
        physics_description=f"USER_QUESTION: {query}",
        visual_data=VisualData(
            topology=Topology.UNKNOWN.value,
            propagator_kind=PropagatorKind.STRAIGHT.value,
        ),
    )


async def describe_process(query: str, task: str) -> TheoristResult:
    """Validate the process and describe its diagram."""
    if not is_configured():
        return run_local_theorist(query)
    if task == CHAT:
        # Conversational turns skip the physics model entirely.
        return _chat_passthrough(query)

    system = get_prompt_template("theorist").format(task=task)
    try:
        answer = await invoke_model("theorist", system, query)
        return parse_theorist_output(answer)
    except QuotaExceededError:
        logger.warning("Theorist quota exceeded, switching to local fallback")
    except ModelOutputError as e:
        logger.warning("Theorist output unusable, switching to local fallback: %s", e)
    except Exception as e:
        logger.error("Theorist error: %s", e)
    return run_local_theorist(query)


async def explain(description: str, context: str | None = None) -> str:
    """Short prose explanation; echoes the description when the model is unavailable."""
    system = get_prompt_template("teacher").format(context=context or "None")
    try:
        return await invoke_model("teacher", system, description) or description
    except LLMNotConfiguredError:
        return description
    except QuotaExceededError:
        return f"[Offline Mode] {description}"
    except Exception as e:
        logger.error("Teacher error: %s", e)
        return description
