"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import TextIO

from loguru import logger

from vellum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, phase: str = "load", console: TextIO = None) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        phase: Phase name for provenance ("load" or "ingest")
        console: Stream for console output (defaults to stdout)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
        console=console,
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_catalog_loaded(catalog_path: Path, template_ids: list) -> None:
    """Log the result of loading the template catalog."""
    _log_info(f"Loaded {len(template_ids)} templates from {catalog_path}")
    for template_id in template_ids:
        _log_debug(f"  - {template_id}")


def log_ingestion_summary(name: str, section_count: int, unrecognized: list) -> None:
    """Log a one-line summary of content ingestion plus any unrecognized titles."""
    _log_debug(f"Ingested content for {name!r}: {section_count} sections")
    if unrecognized:
        _log_debug(f"  Unrecognized section titles (will not render): {unrecognized}")
