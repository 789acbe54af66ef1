"""
Logging setup for the discount batch job

Console output always; when LOG_FILE is set every record is also appended
to that file so a run leaves an audit trail.

Author: TM3
Date: 2025-11-20
"""
import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure root logging

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
        log_file: Optional path of an audit file to append to
    """
    handlers = [logging.StreamHandler()]

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
