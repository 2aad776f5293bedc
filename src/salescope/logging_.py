"""
Logging helpers for salescope.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers themselves. The Streamlit app and the CLI script call
``setup_logger`` once to route the "salescope" tree to stderr and, for long
sessions, to a log file as well.
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _handlers_for(log_file: Optional[Union[str, Path]]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def setup_logger(name: str = "salescope", log_file: Optional[Union[str, Path]] = None, level: int = logging.INFO) -> logging.Logger:
    """
    Configure ``name`` for an entry point and return it.

    Handlers are attached on the first call only; a Streamlit rerun calls
    this again on every interaction and must not duplicate output lines.
    Later calls just update the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in _handlers_for(log_file):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    # records stop here instead of reaching whatever the host configured on root
    logger.propagate = False
    return logger
