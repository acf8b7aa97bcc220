"""Console formatter: bare progress lines, structured diagnostics."""

import logging

from onecode_linux.constants import LOG_COLORS


class HybridConsoleFormatter(logging.Formatter):
    """Print INFO records as the bare message, everything else in full.

    Progress output such as ``"✅ 1Code v0.0.24 installed"`` reads like
    plain terminal output, while warnings and errors keep the time, logger
    name and a colored level name:

        12:30:45 - onecode_linux.core.git - WARNING - ...
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format record according to its level."""
        if record.levelno == logging.INFO:
            return record.getMessage()

        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        levelname = record.levelname
        record.levelname = f"{color}{levelname}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname
