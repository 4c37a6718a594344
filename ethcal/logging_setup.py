"""
Logging setup
=============

Called once from the CLI entry point. Library modules never configure
logging; they only do `log = logging.getLogger(__name__)`.

Log records go to stderr (so they never mix with calendar output on stdout)
and, when `--log-file` is given, to a small rotating file.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
LOG_DATEFMT = "%H:%M:%S"


class TruncateLongMsgs(logging.Filter):
    """Shortens console messages longer than `max_len` characters."""

    def __init__(self, max_len: int = 300):
        super().__init__()
        self.max_len = max_len

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            # bad format args: leave the record alone, the handler reports it
            return True
        if len(msg) > self.max_len:
            record.msg = msg[: self.max_len] + " …(truncated)"
            record.args = ()
        return True


_configured = False


def setup_logging(*, level: int = logging.WARNING, log_file: Optional[str] = None,
                  console: bool = True, max_len: int = 300) -> None:
    """Configure the root logger once; later calls are ignored."""
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if console:
        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        ch.addFilter(TruncateLongMsgs(max_len))
        root.addHandler(ch)

    if log_file:
        # full messages in the file, no truncation
        fh = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    # openpyxl is chatty at DEBUG while writing/reading sheets
    logging.getLogger("openpyxl").setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).debug("Logging initialised (level=%s)", logging.getLevelName(level))
