"""Pydantic response schemas (API contracts)."""
