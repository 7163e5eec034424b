"""
Chat context pipeline.

Gateway reads collections, the aggregator bundles them, formatters render
HTML sections and the prompt module builds the model request.
"""

from backend.core.context.aggregator import ContextAggregator, ContextBundle
from backend.core.context.formatters import (
    format_directory,
    format_events,
    format_fundraising,
    format_internships,
    format_mentorship,
    format_notifications,
)
from backend.core.context.gateway import FetchResult, RecordStoreGateway
from backend.core.context.prompt import SYSTEM_PROMPT, build_context, build_messages

__all__ = [
    "ContextAggregator",
    "ContextBundle",
    "FetchResult",
    "RecordStoreGateway",
    "SYSTEM_PROMPT",
    "build_context",
    "build_messages",
    "format_directory",
    "format_events",
    "format_fundraising",
    "format_internships",
    "format_mentorship",
    "format_notifications",
]
