"""Literal text replacements applied to candidates before validation."""

from typing import Sequence, Tuple

from .splitter import Candidate


def replace_all(text: str, replacements: Sequence[Tuple[str, str]]) -> str:
    """Apply ``(search, replacement)`` pairs in order, each as a literal replace-all.

    A later pair sees the output of the earlier ones; an empty replacement
    deletes every occurrence of its search string.
    """
    for search, replacement in replacements:
        text = text.replace(search, replacement)
    return text


def apply_replacements(candidate: Candidate, replacements: Sequence[Tuple[str, str]]) -> Candidate:
    """Return a new candidate with the replacements applied; the input is left untouched."""
    if not replacements:
        return candidate
    return Candidate(replace_all(candidate.text, replacements), candidate.position)
