"""Pydantic data models."""

from archor.models.config import ArchorConfig, LoggingConfig, ValidationConfig
from archor.models.rss import (
    Category,
    Channel,
    Cloud,
    Document,
    Enclosure,
    Guid,
    Image,
    Item,
    RSSElement,
    SkipDays,
    SkipHours,
    Source,
    TextInput,
)

__all__ = [
    # RSS
    "RSSElement",
    "Document",
    "Channel",
    "Category",
    "Cloud",
    "Image",
    "TextInput",
    "SkipHours",
    "SkipDays",
    "Item",
    "Source",
    "Enclosure",
    "Guid",
    # Config
    "ArchorConfig",
    "LoggingConfig",
    "ValidationConfig",
]
