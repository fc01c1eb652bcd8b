"""Pydantic models for the days counter."""

from dayscounter.models.event import EventRecord

__all__ = [
    "EventRecord",
]
