"""
Session logging for VELLUM commands.

Every CLI invocation gets its own timestamped directory under the logs root,
holding one DEBUG log file per context. The console sink is a separate stream
so that documents written to stdout stay clean.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, TextIO

from dotenv import load_dotenv
from loguru import logger

from vellum import __version__

load_dotenv()
CONSOLE_LOG_LEVEL = os.getenv("VELLUM_CONSOLE_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def session_log_dir(logs_root: Path, command: str, started: Optional[datetime] = None) -> Path:
    """
    Directory for one command's logs, e.g. outs/logs/render_20251114_123456.

    Args:
        logs_root: Root directory for all session logs
        command: CLI command name
        started: Session start time (defaults to now)
    """
    started = started or datetime.now()
    return Path(logs_root) / f"{command}_{started.strftime('%Y%m%d_%H%M%S')}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    console: TextIO = None,
    console_level: Optional[str] = None,
) -> Path:
    """
    Replace all loguru sinks with a session file sink and a console sink.

    Args:
        context_name: Context identifier, used as the log file name ("render", "template")
        log_dir: Session directory (see session_log_dir)
        extra_provenance: Additional key-value pairs for the provenance header
        console: Stream for the console sink (defaults to sys.stdout)
        console_level: Minimum console level (defaults to VELLUM_CONSOLE_LOG_LEVEL)

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="render",
            log_dir=session_log_dir(Path("outs/logs"), "render"),
            extra_provenance={"Template": "modern"},
            console=sys.stderr,
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(
        console or sys.stdout,
        format=CONSOLE_FORMAT,
        level=console_level or CONSOLE_LOG_LEVEL,
        colorize=True,
    )

    log_provenance(extra_provenance)
    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """
    Write the session header: VELLUM version, command line, working directory
    and Python version, then any extra context.

    Logged at DEBUG, so it lands in the session file and stays off an INFO console.
    """
    lines = [
        f"VELLUM: {__version__}",
        f"Command: {' '.join(sys.argv)}",
        f"Working directory: {Path.cwd()}",
        f"Python: {sys.version.split()[0]}",
    ]
    lines.extend(f"{key}: {value}" for key, value in (extra_context or {}).items())

    logger.debug("=" * 80)
    for line in lines:
        logger.debug(line)
    logger.debug("=" * 80)
