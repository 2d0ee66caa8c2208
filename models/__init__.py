"""Typed data models for the letter export toolkit."""

from .document import (
    Orientation,
    PageSize,
    OutputMode,
    RenderRequest,
    RenderResult,
)

__all__ = [
    "Orientation",
    "PageSize",
    "OutputMode",
    "RenderRequest",
    "RenderResult",
]
