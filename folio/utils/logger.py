"""
Logging setup shared by the folio contexts.

Each CLI session gets its own timestamped directory under LOGS_PATH holding a
full DEBUG log, while the console only shows FOLIO_LOG_LEVEL and above.
Context-specific wrappers (prefixes, phase records) live in
contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from loguru import logger

from folio import __version__
from folio.utils.timestamp import now

load_dotenv()

CONSOLE_LEVEL = os.getenv("FOLIO_LOG_LEVEL", "INFO")

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[context]: <8} | {message}"
CONSOLE_FORMAT = "<dim>{time:HH:mm:ss}</dim> | <level>{level: <7}</level> | <level>{message}</level>"

RULE = "-" * 72


def session_log_dir(logs_root: Path, session_name: str) -> Path:
    """Timestamped directory for one session, e.g. outs/logs/render_20251114_123456."""
    return Path(logs_root) / f"{session_name}_{now()}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, object]] = None,
    console_level: Optional[str] = None,
) -> Path:
    """
    Point loguru at a session directory and the console.

    Replaces any existing sinks. The file sink records every level and tags
    each line with the context name; the console sink is filtered by
    console_level (FOLIO_LOG_LEVEL when omitted).

    Args:
        context_name: Context identifier ("render", "template"), also the log file stem
        log_dir: Session directory, created if needed
        extra_provenance: Extra header entries such as the template id
        console_level: Minimum level echoed to stdout

    Returns:
        Path to the session log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.configure(extra={"context": context_name})
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(
        sys.stdout,
        format=CONSOLE_FORMAT,
        level=console_level or CONSOLE_LEVEL,
        colorize=True,
    )

    for line in provenance_lines(extra_provenance):
        logger.info(line)

    return log_file


def provenance_lines(extra: Optional[Dict[str, object]] = None) -> List[str]:
    """Header lines recording how this session was started."""
    lines = [
        RULE,
        f"folio {__version__} (Python {sys.version.split()[0]})",
        f"Command: {' '.join(sys.argv)}",
        f"Working directory: {Path.cwd()}",
    ]
    lines.extend(f"{key}: {value}" for key, value in (extra or {}).items())
    lines.append(RULE)
    return lines
