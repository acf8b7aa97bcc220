"""Process-wide logging state."""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass(slots=True)
class LoggerState:
    """Listener and queue behind the ``onecode_linux`` root logger.

    ``queue_listener`` is None until the first ``get_logger`` call and
    again after ``clear_logger_state``.
    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None

    @property
    def initialized(self) -> bool:
        return self.queue_listener is not None


_state = LoggerState()


def get_state() -> LoggerState:
    """Return the shared logging state."""
    return _state
