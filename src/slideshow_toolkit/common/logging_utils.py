"""
Logging setup for the command line and for input worker processes.
"""
from __future__ import annotations

import logging
import multiprocessing
import threading
from logging.handlers import QueueHandler
from queue import Empty
from typing import Optional

LOG_FORMAT = "%(message)s"
VERBOSE_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Configure root logging for a command line run.

    Args:
        verbose: DEBUG level with timestamps and logger names instead of
                 plain INFO messages.
    """
    # basicConfig is a no-op when the root logger already has handlers
    logging.basicConfig(format=VERBOSE_LOG_FORMAT if verbose else LOG_FORMAT)
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)


# =============================================================================
# Multiprocessing Logging Support
# =============================================================================

def configure_worker_logging(mp_log_queue: multiprocessing.Queue, level: int = logging.INFO) -> None:
    """
    Configure logging in a child process to send records to a queue.

    Call this as the initializer for ProcessPoolExecutor so records from
    input workers reach the parent's handlers.

    Args:
        mp_log_queue: Multiprocessing queue to send log records to.
        level: Root level inside the worker.

    Example:
        >>> with ProcessPoolExecutor(
        ...     max_workers=4,
        ...     initializer=configure_worker_logging,
        ...     initargs=(mp_log_queue,),
        ... ) as executor:
        ...     # workers will send logs to mp_log_queue
    """
    root = logging.getLogger()
    root.handlers = []
    root.addHandler(QueueHandler(mp_log_queue))
    root.setLevel(level)


def start_log_listener(
    mp_log_queue: multiprocessing.Queue,
    stop_event: threading.Event,
    target: Optional[logging.Logger] = None,
) -> threading.Thread:
    """
    Start a thread that replays worker records through local handlers.

    Args:
        mp_log_queue: Queue that workers write to.
        stop_event: Set to stop the listener.
        target: Logger whose handlers receive the records. None = the
                logger each record was emitted on.

    Returns:
        The listener thread (already started).

    Example:
        >>> stop_event = threading.Event()
        >>> listener = start_log_listener(mp_queue, stop_event)
        >>> # ... run workers ...
        >>> stop_event.set()
        >>> listener.join()
    """
    def _listener() -> None:
        while True:
            try:
                record = mp_log_queue.get(timeout=0.1)
            except Empty:
                if stop_event.is_set():
                    break
                continue
            if record is None:  # Sentinel value
                break
            logger = target or logging.getLogger(record.name)
            logger.handle(record)

    thread = threading.Thread(target=_listener, daemon=True)
    thread.start()
    return thread
