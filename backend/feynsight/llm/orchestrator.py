"""Query workflow: route, describe, then explain and draw side by side."""

from __future__ import annotations

import asyncio
import logging
import time

from feynsight.engine.renderer import render
from feynsight.llm.agents import PLAN_TOPOLOGY, classify_intent, describe_process, explain
from feynsight.models.diagram import Topology, VisualData
from feynsight.models.responses import QueryResponse

logger = logging.getLogger(__name__)


async def _draw(task: str, data: VisualData) -> str | None:
    if task != PLAN_TOPOLOGY or data.topology == Topology.UNKNOWN.value:
        logger.info("Illustrator: no diagram required (task %s, topology %s)", task, data.topology)
        return None
    # Rendering is pure CPU work; keep the event loop free.
    return await asyncio.to_thread(render, data)


async def run_query(query: str, context: str | None = None) -> QueryResponse:
    """Answer one user turn."""
    start = time.perf_counter()

    task = await classify_intent(query)
    logger.info("Orchestrator: task %s", task)

    result = await describe_process(query, task)
    logger.info("Theorist: status %s, topology %s", result.status, result.visual_data.topology)

    if result.status == "invalid":
        return QueryResponse(
            task=task,
            status=result.status,
            physics_description=result.physics_description,
            visual_data=result.visual_data,
        )

    explanation, svg = await asyncio.gather(
        explain(result.physics_description, context),
        _draw(task, result.visual_data),
    )

    logger.info("Query answered in %.0fms", (time.perf_counter() - start) * 1000)
    return QueryResponse(
        task=task,
        status=result.status,
        physics_description=result.physics_description,
        explanation=explanation,
        visual_data=result.visual_data,
        svg=svg,
    )
