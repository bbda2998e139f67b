"""Text processing: boundary splitting, replacements and sentence validation."""

from .splitter import Candidate, split_candidates
from .replacements import apply_replacements, replace_all
from .validation import CHECKS, ValidationOutcome, validate

__all__ = [
    "Candidate",
    "split_candidates",
    "apply_replacements",
    "replace_all",
    "CHECKS",
    "ValidationOutcome",
    "validate",
]
