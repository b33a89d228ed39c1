"""Unit tests for session logging setup."""

import io
from datetime import datetime

import pytest
from loguru import logger

from vellum import __version__
from vellum.contexts.rendering.logger import _log_warning, setup_rendering_logger
from vellum.utils.logger import session_log_dir, setup_logger


@pytest.mark.unit
def test_session_log_dir_is_timestamped(tmp_path):
    started = datetime(2025, 11, 14, 12, 34, 56)
    assert session_log_dir(tmp_path, "render", started) == tmp_path / "render_20251114_123456"


@pytest.mark.unit
def test_setup_logger_writes_provenance_to_file_only(tmp_path, reset_logger):
    console = io.StringIO()
    log_file = setup_logger(
        "render", tmp_path / "session", extra_provenance={"Template": "modern"}, console=console, console_level="INFO"
    )
    logger.info("status line")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert log_file == tmp_path / "session" / "render.log"
    assert f"VELLUM: {__version__}" in text
    assert "Template: modern" in text
    assert "status line" in text

    assert "status line" in console.getvalue()
    assert "VELLUM:" not in console.getvalue()


@pytest.mark.unit
def test_context_logger_prefixes_messages(tmp_path, reset_logger):
    log_file = setup_rendering_logger(tmp_path, template_id="classic", console=io.StringIO())
    _log_warning("palette missing")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "Template: classic" in text
    assert "[render] palette missing" in text
