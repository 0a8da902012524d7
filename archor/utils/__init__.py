"""Utility functions and helpers."""

from archor.utils.config_loader import load_archor_config, load_yaml_config
from archor.utils.logging import get_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_logger",
    "load_yaml_config",
    "load_archor_config",
]
