"""Task → model selection. Cheap models for routing and prose, frontier for physics."""

from __future__ import annotations

from feynsight.config import settings

_TASK_MODEL_MAP = {
    "intent": "cheap",
    "theorist": "frontier",
    "teacher": "cheap",
}


def get_model_for_task(task: str) -> str:
    tier = _TASK_MODEL_MAP.get(task, "cheap")
    if tier == "frontier":
        return settings.model_frontier
    return settings.model_cheap
