"""Pydantic models shared by the engine and the API."""
