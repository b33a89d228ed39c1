"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional, TextIO

from loguru import logger

from vellum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path, template_id: Optional[str] = None, console: TextIO = None
) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        template_id: Template being rendered (recorded in the provenance header)
        console: Stream for console output (defaults to stdout)

    Returns:
        Path to log file

    Example:
        from vellum.contexts.rendering.logger import setup_rendering_logger

        log_file = setup_rendering_logger(log_dir, template_id="modern")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Template": template_id or "-"},
        console=console,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(resume_name: str, template_id: str, layout_name: str, variant_index) -> None:
    """Log start of a render with context."""
    _log_info(f"Rendering {resume_name!r} with template {template_id!r}")
    _log_debug(f"  Layout: {layout_name}")
    _log_debug(f"  Variant: {variant_index!r}")


def log_render_result(document, skipped: list) -> None:
    """
    Log the outcome of a render.

    Args:
        document: Document returned by render()
        skipped: Titles of sections that produced no block
    """
    counts = ", ".join(f"{region.name}={len(region.blocks)}" for region in document.regions)
    _log_success(f"Rendered {document.template_id}: {counts}")
    for title in skipped:
        _log_debug(f"  Skipped section: {title!r}")
