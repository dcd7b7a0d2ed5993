"""Pydantic models for each service's request bodies."""
