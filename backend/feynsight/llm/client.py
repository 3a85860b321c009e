"""LangChain ChatAnthropic wrapper."""

from __future__ import annotations

from feynsight.config import settings
from feynsight.llm.model_router import get_model_for_task
from feynsight.llm.retry import with_retry


class LLMNotConfiguredError(RuntimeError):
    """No API key is set; callers fall back to their local behaviour."""


def is_configured() -> bool:
    return bool(settings.anthropic_api_key)


async def invoke_model(task: str, system: str, question: str) -> str:
    """Single-turn model call with the shared retry policy."""
    if not is_configured():
        raise LLMNotConfiguredError("set ANTHROPIC_API_KEY in .env")

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage, SystemMessage

    llm = ChatAnthropic(
        model=get_model_for_task(task),
        api_key=settings.anthropic_api_key,
        max_tokens=settings.llm_max_tokens,
        max_retries=0,  # retries handled by with_retry
    )
    messages = [SystemMessage(content=system), HumanMessage(content=question)]

    async def _call() -> str:
        response = await llm.ainvoke(messages)
        return str(response.content)

    return await with_retry(
        _call,
        retries=settings.llm_max_retries,
        base_delay=settings.llm_backoff_base_s,
    )
