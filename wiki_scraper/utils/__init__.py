"""Utility functions for logging and I/O."""

from .logging import log, append_jsonl, read_jsonl, reset_log, ensure_logdir, write_json
from .io_utils import (
    Article,
    emit_sentences,
    ensure_output_dir,
    iter_articles,
    iter_text_articles,
    list_input_files,
)

__all__ = [
    "log",
    "append_jsonl",
    "read_jsonl",
    "reset_log",
    "ensure_logdir",
    "write_json",
    "Article",
    "emit_sentences",
    "ensure_output_dir",
    "iter_articles",
    "iter_text_articles",
    "list_input_files",
]
