"""POST /api/query: one chat turn: route, describe, explain, draw."""

from __future__ import annotations

from fastapi import APIRouter

from feynsight.llm.orchestrator import run_query
from feynsight.models.requests import QueryRequest
from feynsight.models.responses import QueryResponse

router = APIRouter()


@router.post("/query", response_model=QueryResponse)
async def query(req: QueryRequest) -> QueryResponse:
    return await run_query(req.query, req.context)
