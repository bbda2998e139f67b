"""Analysis utilities for extraction runs."""

import os
from typing import Optional

import pandas as pd

from ..config import DEFAULT_REPORT_LIMIT, REJECTIONS_LOG
from ..utils.logging import read_jsonl


def load_rejections(log_dir: str) -> pd.DataFrame:
    """Load the rejection log of a run into a DataFrame.

    Args:
        log_dir: Directory the extract stage wrote its logs to

    Returns:
        DataFrame with one row per rejected candidate (empty if no log exists)
    """
    records = read_jsonl(os.path.join(log_dir, REJECTIONS_LOG))
    columns = ["stage", "source", "title", "position", "sentence", "filter_reason"]
    return pd.DataFrame.from_records(records, columns=columns)


def summarize_rejections(df: pd.DataFrame) -> pd.DataFrame:
    """Count rejections per reason, most frequent first."""
    if df.empty:
        return pd.DataFrame({"count": [], "share": []})
    counts = df["filter_reason"].value_counts()
    return pd.DataFrame({"count": counts, "share": counts / counts.sum()})


def analyze_rejections(log_dir: str, reason: Optional[str] = None, limit: int = DEFAULT_REPORT_LIMIT) -> pd.DataFrame:
    """Print a rejection summary and sample rejected sentences.

    Args:
        log_dir: Directory containing the rejection log
        reason: Only show samples rejected for this reason
        limit: Number of sample sentences to show

    Returns:
        The (optionally filtered) rejection records
    """
    df = load_rejections(log_dir)
    if df.empty:
        print(f"[report] No rejections found in {os.path.join(log_dir, REJECTIONS_LOG)}")
        return df

    summary = summarize_rejections(df)
    print(f"[report] {len(df):,} rejected candidates")
    for name, row in summary.iterrows():
        marker = " <- viewing" if name == reason else ""
        print(f"[report]   {name}: {int(row['count']):,} ({row['share'] * 100:.1f}%){marker}")

    if reason:
        df = df[df["filter_reason"] == reason]
    print(f"[report] Sample rejected sentences{f' ({reason})' if reason else ''}:")
    for i, rec in enumerate(df.head(limit).itertuples(index=False), start=1):
        title = rec.title or "(no title)"
        print(f"[report]   {i}. [{rec.filter_reason}] {title[:60]}: {rec.sentence[:120]}")
    return df
