"""Tests for task → model routing."""

from __future__ import annotations

from feynsight.config import settings
from feynsight.llm.model_router import get_model_for_task


def test_theorist_uses_frontier_model(monkeypatch):
    monkeypatch.setattr(settings, "model_frontier", "frontier-model")
    monkeypatch.setattr(settings, "model_cheap", "cheap-model")
    assert get_model_for_task("theorist") == "frontier-model"
    assert get_model_for_task("intent") == "cheap-model"
    assert get_model_for_task("teacher") == "cheap-model"


def test_unknown_task_uses_cheap_model(monkeypatch):
    monkeypatch.setattr(settings, "model_cheap", "cheap-model")
    assert get_model_for_task("summarize") == "cheap-model"
    assert not hasattr(settings, "model_mid")
