"""Logging utilities for the extraction pipeline."""

import os
import sys
from typing import Iterable, List, Optional

import orjson


def log(stage: str, msg: str):
    """Print a progress message; stdout carries sentences, so this goes to stderr."""
    print(f"[{stage}] {msg}", file=sys.stderr)


def ensure_logdir(path: Optional[str]):
    """Ensure the log directory exists.

    Args:
        path: Directory path to create; nothing happens when empty
    """
    if path:
        os.makedirs(path, exist_ok=True)


def reset_log(log_dir: Optional[str], filename: str) -> Optional[str]:
    """Reset (delete) a log file if it exists.

    Args:
        log_dir: Log directory, or None when logging is disabled
        filename: Name of the log file to reset

    Returns:
        Full path to the log file, or None if log_dir is not set
    """
    if not log_dir:
        return None
    path = os.path.join(log_dir, filename)
    if os.path.exists(path):
        os.remove(path)
    return path


def append_jsonl(path: str, records: Iterable[dict]):
    """Append records to a JSONL file.

    Args:
        path: Path to JSONL file
        records: Dictionary records to append
    """
    ensure_logdir(os.path.dirname(path) or ".")
    with open(path, "ab") as f:
        for rec in records:
            f.write(orjson.dumps(rec))
            f.write(b"\n")


def read_jsonl(path: str) -> List[dict]:
    """Read JSONL file and return list of dicts.

    Args:
        path: Path to JSONL file

    Returns:
        List of dictionary records (empty if the file does not exist)
    """
    if not os.path.exists(path):
        return []
    records = []
    with open(path, "rb") as f:
        for line in f:
            if line.strip():
                records.append(orjson.loads(line))
    return records


def write_json(path: str, record: dict):
    """Write a single record as indented JSON."""
    ensure_logdir(os.path.dirname(path) or ".")
    with open(path, "wb") as f:
        f.write(orjson.dumps(record, option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS))
