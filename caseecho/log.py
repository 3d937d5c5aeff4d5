from typing import Optional
import logging
import logging.handlers
import os

LOG_ENV = "CASEECHO_LOG"
LEVEL_ENV = "CASEECHO_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)-18s - %(message)s"


def setup_logging(path: Optional[str] = None, level: Optional[str] = None) -> Optional[logging.Handler]:
    """
    Sends caseecho's log records to a rotating file.

    `path` falls back to $CASEECHO_LOG and `level` to $CASEECHO_LOG_LEVEL (default DEBUG).
    Without a path this is a no-op. Calling it again replaces the previous file handler.
    Returns the handler that was attached, if any.
    """
    path = path or os.environ.get(LOG_ENV)
    if not path:
        return None

    level_name = (level or os.environ.get(LEVEL_ENV) or "DEBUG").upper()
    log_level = getattr(logging, level_name, logging.DEBUG)

    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    root = logging.getLogger("caseecho")
    for h in list(root.handlers):
        if isinstance(h, logging.handlers.RotatingFileHandler):
            root.removeHandler(h)
            h.close()

    handler = logging.handlers.RotatingFileHandler(path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(log_level)
    root.addHandler(handler)
    root.setLevel(log_level)
    return handler
