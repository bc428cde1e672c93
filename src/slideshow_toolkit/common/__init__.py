"""
Shared utilities for the arranger: locked report files, phase timing and
logging setup.
"""

from .file_locking import locked_file, locked_append_jsonl, locked_read_modify_write_json
from .timing import TimingLog, timed_phase
from .logging_utils import configure_logging, configure_worker_logging, start_log_listener

__all__ = [
    "locked_file",
    "locked_append_jsonl",
    "locked_read_modify_write_json",
    "TimingLog",
    "timed_phase",
    "configure_logging",
    "configure_worker_logging",
    "start_log_listener",
]
