"""
Core module providing foundational components.

This module contains the configuration loader, centralized logging setup,
the exception hierarchy and user-facing notices. It has no internal dependencies.
"""

from .config_loader import get_config, reload_config, Config
from .logger import get_logger
from .exceptions import (
    PDFlyzerError,
    ConfigurationError,
    ExtractionError,
    SearchError,
    RenderError,
    ExportError
)
from .notifications import (
    Notice,
    NoticeKind,
    success_notice,
    validation_notice,
    error_notice,
    empty_search_notice,
    no_matches_notice
)

__all__ = [
    "get_config",
    "reload_config",
    "Config",
    "get_logger",
    "PDFlyzerError",
    "ConfigurationError",
    "ExtractionError",
    "SearchError",
    "RenderError",
    "ExportError",
    "Notice",
    "NoticeKind",
    "success_notice",
    "validation_notice",
    "error_notice",
    "empty_search_notice",
    "no_matches_notice"
]
