"""Blacklist stage - derive rare-word lists from an unfiltered (no_check) harvest."""

import os
from typing import Iterable, List

import pandas as pd

from ..config import DEFAULT_MAX_FREQUENCY, INPUT_ENCODING
from ..rules import RuleSet
from ..utils.io_utils import ensure_output_dir
from ..utils.logging import log

# Same token normalization the validator applies to disallowed_words
_normalize = RuleSet().normalize_word


def word_frequencies(sentences: Iterable[str]) -> pd.Series:
    """Count normalized word frequencies over sentences.

    Tokens are whitespace-delimited, stripped of non-letters at both ends and
    lower-cased; tokens with no letters are dropped.

    Returns:
        Series of counts indexed by word, most frequent first
    """
    words = [w for s in sentences for w in (_normalize(t) for t in s.split()) if w]
    return pd.Series(words, dtype="object").value_counts()


def build_blacklist(sentences: Iterable[str], max_frequency: int = DEFAULT_MAX_FREQUENCY) -> List[str]:
    """Words occurring at most ``max_frequency`` times, sorted alphabetically."""
    freqs = word_frequencies(sentences)
    return sorted(freqs[freqs <= max_frequency].index)


def run_stage_blacklist(args) -> List[str]:
    """Run the blacklist stage.

    Args:
        args: Argument namespace with ``input``, ``max_frequency`` and ``output``

    Returns:
        The blacklisted words
    """
    if not os.path.exists(args.input):
        raise FileNotFoundError(f"Harvest not found at {args.input}. Run 'extract --no_check' first.")

    log("blacklist", f"Counting words in {args.input}")
    with open(args.input, encoding=INPUT_ENCODING) as f:
        words = build_blacklist(f, args.max_frequency)
    log("blacklist", f"{len(words):,} words occur at most {args.max_frequency} time(s)")

    if args.output:
        ensure_output_dir(os.path.dirname(os.path.abspath(args.output)))
        with open(args.output, "w", encoding="utf-8") as f:
            for w in words:
                f.write(w + "\n")
        log("blacklist", f"Saved {args.output}")
    else:
        for w in words:
            print(w)
    return words
