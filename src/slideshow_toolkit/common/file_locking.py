"""
Module: common.file_locking

Purpose:
    Locked writes to report files shared by concurrently running inputs.
    Uses portalocker so the same code works on Mac, Windows and Linux.

Key Functions:
    - locked_file: Context manager holding a lock on an open file
    - locked_append_jsonl: Append one JSON record per line
    - locked_read_modify_write_json: Update a JSON document in place

Dependencies:
    - portalocker: Cross-platform file locking

Used By:
    - arranger.controller: Score ledger (scores.jsonl)
    - common.timing: Timing report merging (timing.json)
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any, Callable, Dict, Iterator

import portalocker

logger = logging.getLogger(__name__)


@contextmanager
def locked_file(
    path: Path,
    mode: str = "a",
    lock_type: int = portalocker.LOCK_EX,
) -> Iterator[IO[str]]:
    """
    Open a file and hold a lock on it for the duration of the block.

    Args:
        path: File to open; parent directories are created.
        mode: File open mode.
        lock_type: LOCK_EX (exclusive) or LOCK_SH (shared).

    Yields:
        Open text file handle.

    Example:
        >>> with locked_file(ledger, "a") as f:
        ...     f.write("line\\n")
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if "r" in mode and not path.exists():
        path.touch()

    with open(path, mode, encoding="utf-8") as f:
        portalocker.lock(f, lock_type)
        try:
            yield f
        finally:
            portalocker.unlock(f)


def locked_append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    """
    Append a record as one JSON line under an exclusive lock.

    Args:
        path: JSONL file.
        record: JSON-serialisable mapping.
    """
    with locked_file(path, "a") as f:
        f.write(json.dumps(record, sort_keys=True) + "\n")

    logger.debug(f"Appended record to {path.name}")


def locked_read_modify_write_json(
    path: Path,
    modifier: Callable[[Dict[str, Any]], Dict[str, Any]],
    default: Callable[[], Dict[str, Any]] = dict,
) -> Dict[str, Any]:
    """
    Read a JSON document, transform it and write it back under one lock.

    Args:
        path: JSON file; created from default() when missing or empty.
        modifier: Receives the current document, returns the new one.
        default: Factory for the initial document.

    Returns:
        The document that was written.
    """
    with locked_file(path, "r+") as f:
        content = f.read()
        current = json.loads(content) if content.strip() else default()

        updated = modifier(current)

        f.seek(0)
        f.truncate()
        json.dump(updated, f, indent=2, sort_keys=True)

    return updated
